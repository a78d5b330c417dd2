"""Environment helper utilities.

Loads a `.env` file from the project root so that the ``ZEPTO_*`` settings
(input CSV paths, rescale policy, chart directory) defined there become
available via ``os.getenv``. Uses `python-dotenv`.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

__all__ = ["load_project_dotenv", "project_dotenv_path"]


def _find_project_root(start: Path | None = None) -> Path:
    """Traverse upwards until we find a directory that contains `pyproject.toml`."""
    current = start or Path(__file__).resolve().parent
    for _ in range(10):
        if (current / "pyproject.toml").exists():
            return current
        if current.parent == current:
            break
        current = current.parent
    return Path(__file__).resolve().parent


def project_dotenv_path() -> Path:
    """Location of the project-level `.env`, whether or not it exists."""
    return _find_project_root() / ".env"


def load_project_dotenv() -> bool:
    """Load variables from the project `.env` without overriding the environment.

    Returns True when a file was found and loaded.
    """
    dotenv_path = project_dotenv_path()
    if not dotenv_path.exists():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return True
