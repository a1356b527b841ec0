"""
Exposes the version of geodetics
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _read_version_file() -> str | None:
    """Source-tree fallback, for when the distribution is not installed"""
    if not _VERSION_FILE.is_file():
        return None

    return _VERSION_FILE.read_text(encoding='utf-8').strip()


try:
    __version__ = version('geodetics')
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
