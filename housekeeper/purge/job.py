"""A purge job bound to a directory and a configuration."""

from __future__ import annotations

from dataclasses import dataclass

from housekeeper.purge.model import Change, Config
from housekeeper.purge.preview import preview_changes


@dataclass
class Job:
    """A directory cleanup task."""

    dir: str
    cfg: Config

    def plan(self) -> list[Change]:
        """Return every change the job would make, without making any."""
        return preview_changes(self.dir, self.cfg)