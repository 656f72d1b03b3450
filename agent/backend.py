# =============================================================================
# agent/backend.py : Filesystem Backend for Skill Loading
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Gives the agent factory access to skill documents on disk.  A skill is a
#   directory holding a SKILL.md; a skill path handed to the factory may
#   point either at one such directory or at a folder of them (the project's
#   skills/ directory).
#
#   Relative skill paths are resolved against the backend's root directory.
# =============================================================================

import logging
from pathlib import Path
from typing import Iterable, Union

from google.adk.skills import load_skill_from_dir

SKILL_FILE = "SKILL.md"


class FilesystemBackend:
    """Resolves and loads skill directories below ``root_dir``."""

    def __init__(self, root_dir: Union[str, Path]):
        self.root_dir = Path(root_dir)
        self.loaded_skills: list[str] = []

    def resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.root_dir / path

    def find_skill_dirs(self, path: Union[str, Path]) -> list[Path]:
        """Skill directories at ``path``: itself, or its children with SKILL.md."""
        resolved = self.resolve(path)
        if not resolved.is_dir():
            logging.warning(f"[Backend] Skill path not found: {resolved}")
            return []
        if (resolved / SKILL_FILE).is_file():
            return [resolved]
        return sorted(
            child for child in resolved.iterdir()
            if child.is_dir() and (child / SKILL_FILE).is_file()
        )

    def load_skills(self, paths: Iterable[Union[str, Path]]) -> list:
        skills = []
        for path in paths:
            for skill_dir in self.find_skill_dirs(path):
                skills.append(load_skill_from_dir(skill_dir))
                self.loaded_skills.append(skill_dir.name)
                logging.info(f"[Backend] Loaded skill: {skill_dir.name}")
        return skills


def create_tracked_backend(root_dir: Union[str, Path]) -> FilesystemBackend:
    """Backend rooted at ``root_dir`` that records which skills it loaded."""
    backend = FilesystemBackend(root_dir)
    logging.info(f"[Backend] Filesystem backend rooted at {backend.root_dir}")
    return backend
