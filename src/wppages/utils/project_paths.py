#!filepath: src/wppages/utils/project_paths.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional


@dataclass(frozen=True, slots=True)
class ProjectPaths:
    """Resolved project paths.

    Local files used by the command line (sample HTML, logs) are resolved
    against the project root rather than the current working directory.

    Args:
        root: Project root directory.
    """

    root: Path

    @property
    def data_dir(self) -> Path:
        """Return the data directory."""
        return (self.root / "data").resolve()

    @classmethod
    def discover(cls, start: Optional[Path] = None) -> ProjectPaths:
        """Discover the project root by locating a marker file.

        Args:
            start: Optional starting path.

        Returns:
            ProjectPaths: Resolved project paths.
        """
        root = _find_upwards(
            start=start or Path(__file__).resolve(),
            markers=("pyproject.toml",),
        )
        return cls(root=root)


def _find_upwards(start: Path, markers: Iterable[str]) -> Path:
    start = start.resolve()
    for parent in (start,) + tuple(start.parents):
        for marker in markers:
            if (parent / marker).exists():
                return parent
    return Path.cwd().resolve()
