# File: classfinder/core/config/settings.py

import os
from importlib.metadata import PackageNotFoundError, version


def _installed_version() -> str:
    try:
        return version("classfinder")
    except PackageNotFoundError:
        # Running from a source checkout
        return "0+unknown"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Settings:
    # --- Release ---
    VERSION: str = _installed_version()

    # --- Diagnostics ---
    # Diagnostics always go to stderr; stdout is reserved for match lines.
    LOG_LEVEL: str = os.getenv("CLASSFINDER_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv("CLASSFINDER_LOG_FORMAT", "%(levelname)s: %(message)s")

    # --- Discovery ---
    FOLLOW_SYMLINKS: bool = _env_flag("CLASSFINDER_FOLLOW_SYMLINKS", "true")

    # Compared case-insensitively against file names
    ARCHIVE_EXTENSIONS: tuple = (".jar", ".war", ".ear", ".rar")
    CLASS_EXTENSION: str = ".class"

    # --- Archive layout ---
    # Zip entries always use a forward slash, whatever the host OS
    ENTRY_SEPARATOR: str = "/"
    PACKAGE_SEPARATOR: str = "."


settings = Settings()
