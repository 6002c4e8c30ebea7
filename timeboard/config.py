"""
Configuration management for TimeBoard.
Handles persistent dashboard settings and the Clockify credentials read from
the environment (or a ``.env`` file).
"""

import json
import logging
import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Default configuration values
DEFAULT_CONFIG = {
    'default_period': 'week',  # 'today', '3days', 'week', 'month', 'year'
    'api_base_url': 'https://api.clockify.me/api/v1',
    'page_size': 1000,
    'request_timeout': 15,  # seconds
    'error_banner_ms': 3000,
    'pie_max_slices': 6,
}

CONFIG_FILE = 'config.json'

API_KEY_VAR = 'CLOCKIFY_API_KEY'
WORKSPACE_VAR = 'WORKSPACE_ID'
USER_VAR = 'USER_ID'


class Config:
    """Configuration manager with file persistence."""

    def __init__(self, config_dir=None):
        """Initialize config manager.

        Args:
            config_dir: Directory to store config file. Defaults to app directory.
        """
        if config_dir is None:
            if getattr(sys, 'frozen', False):
                # Running as compiled executable
                config_dir = os.path.dirname(sys.executable)
            else:
                config_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

        self.config_dir = config_dir
        self.config_path = os.path.join(config_dir, CONFIG_FILE)
        self._config = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        """Load configuration from file."""
        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    saved_config = json.load(f)
                    # Merge with defaults (in case new options were added)
                    self._config.update(saved_config)
        except (OSError, ValueError) as e:
            logger.warning("Could not load config: %s", e)

    def save(self):
        """Save configuration to file."""
        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            logger.warning("Could not save config: %s", e)

    @property
    def default_period(self):
        return self._config.get('default_period', 'week')

    @default_period.setter
    def default_period(self, value):
        self._config['default_period'] = value
        self.save()

    @property
    def api_base_url(self):
        return self._config.get('api_base_url', DEFAULT_CONFIG['api_base_url'])

    @property
    def page_size(self):
        return int(self._config.get('page_size', 1000))

    @property
    def request_timeout(self):
        return float(self._config.get('request_timeout', 15))

    @property
    def error_banner_ms(self):
        return int(self._config.get('error_banner_ms', 3000))

    @property
    def pie_max_slices(self):
        return int(self._config.get('pie_max_slices', 6))


@dataclass(frozen=True)
class Credentials:
    """The fixed user/workspace pair the dashboard reads for."""
    api_key: str
    workspace_id: str
    user_id: str

    @classmethod
    def from_env(cls, dotenv_path=None):
        """Read credentials from the environment after loading ``.env``.

        Missing values are not rejected here; requests made with them will
        simply fail authentication.
        """
        load_dotenv(dotenv_path)
        return cls(
            api_key=os.environ.get(API_KEY_VAR, ''),
            workspace_id=os.environ.get(WORKSPACE_VAR, ''),
            user_id=os.environ.get(USER_VAR, ''),
        )

    def missing(self):
        """Names of the environment variables that were not set."""
        names = []
        if not self.api_key:
            names.append(API_KEY_VAR)
        if not self.workspace_id:
            names.append(WORKSPACE_VAR)
        if not self.user_id:
            names.append(USER_VAR)
        return names
