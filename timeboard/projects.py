"""Project id -> display name lookup, fetched once per session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

from .clockify import ClockifyClient, ClockifyError

logger = logging.getLogger(__name__)

NO_PROJECT = "No Project"


@dataclass(frozen=True)
class DirectoryLoaded:
    projects: Mapping[str, str]


@dataclass(frozen=True)
class DirectoryUnavailable:
    cause: str


DirectoryResult = Union[DirectoryLoaded, DirectoryUnavailable]


@dataclass
class ProjectDirectory:
    """Resolves project ids to names.

    The load result is kept so callers can tell a genuinely empty workspace
    apart from a directory that could not be fetched.
    """
    result: DirectoryResult = field(default_factory=lambda: DirectoryLoaded({}))

    @classmethod
    def load(cls, client: ClockifyClient, workspace_id: str) -> "ProjectDirectory":
        try:
            projects = client.get_projects(workspace_id)
        except ClockifyError as e:
            logger.warning("Project directory unavailable: %s", e)
            return cls(DirectoryUnavailable(str(e)))
        names = {project.id: project.name for project in projects}
        logger.info("Loaded %d projects", len(names))
        return cls(DirectoryLoaded(names))

    @property
    def available(self) -> bool:
        return isinstance(self.result, DirectoryLoaded)

    def resolve(self, project_id: Optional[str]) -> str:
        if not project_id or not isinstance(self.result, DirectoryLoaded):
            return NO_PROJECT
        return self.result.projects.get(project_id) or NO_PROJECT
