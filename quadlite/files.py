"""Loading of asset files, optionally relative to an assets folder."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class FileError(Exception):
    """Raised when a file cannot be loaded."""

    def __init__(self, kind: OSError, path: str) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"Couldn't load file {path}: {kind}")


@dataclass
class _AssetSettings:
    pc_assets_folder: str | None = None


_settings = _AssetSettings()


def set_pc_assets_folder(path: str | None) -> None:
    """Make later loads resolve paths inside ``path``; None turns this off."""
    _settings.pc_assets_folder = path


def _resolve(path: str) -> str:
    if _settings.pc_assets_folder is not None:
        return f"{_settings.pc_assets_folder}/{path}"
    return path


def load_file(path: str) -> bytes:
    """Read the whole file, honouring the assets folder."""
    full_path = _resolve(path)
    try:
        return Path(full_path).read_bytes()
    except OSError as error:
        raise FileError(error, full_path) from error


def load_string(path: str) -> str:
    """Read a file as text, replacing invalid UTF-8 sequences."""
    return load_file(path).decode("utf-8", errors="replace")