"""Thin client for the two Clockify endpoints the dashboard reads."""

from __future__ import annotations

import datetime
import logging

import requests

from .models import MalformedEntryError, Project, TimeEntry

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.clockify.me/api/v1"


class ClockifyError(Exception):
    """Base class for errors talking to Clockify."""


class NetworkOrAuthFailure(ClockifyError):
    """The request was rejected or the server could not be reached."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def format_instant(moment: datetime.datetime) -> str:
    """UTC instant with a single trailing Z, as Clockify expects."""
    return moment.astimezone(datetime.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ClockifyClient:
    def __init__(self, api_key, base_url=DEFAULT_BASE_URL, timeout=15.0, page_size=1000):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size
        self.headers = {
            "X-Api-Key": api_key or "",
            "Content-Type": "application/json",
        }

    def _get(self, path, params=None):
        url = f"{self.base_url}{path}"
        try:
            response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkOrAuthFailure(f"Could not reach Clockify: {e}") from e

        if not response.ok:
            raise NetworkOrAuthFailure(
                f"Clockify returned {response.status_code} for {path}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise NetworkOrAuthFailure(f"Clockify sent an unreadable response for {path}") from e

    def get_time_entries(self, workspace_id, user_id, start, end) -> list[TimeEntry]:
        """Entries of one user started within ``[start, end)``.

        Only the first page is read; records that cannot be parsed are
        logged and skipped.
        """
        data = self._get(
            f"/workspaces/{workspace_id}/user/{user_id}/time-entries",
            params={
                "start": format_instant(start),
                "end": format_instant(end),
                "page": 1,
                "page-size": self.page_size,
            },
        )
        entries = []
        for record in data or []:
            try:
                entries.append(TimeEntry.from_api(record))
            except MalformedEntryError as e:
                logger.warning("Skipping malformed entry: %s", e)
        logger.debug("Fetched %d entries for %s - %s", len(entries), start, end)
        return entries

    def get_projects(self, workspace_id) -> list[Project]:
        data = self._get(f"/workspaces/{workspace_id}/projects")
        return [Project.from_api(record) for record in data or [] if "id" in record]
