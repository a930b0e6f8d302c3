from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union
import logging
import threading

from patternkit.core.exceptions import (
    SettingKeyNotFoundError,
    SettingsFileNotFoundError,
    SettingsNotLoadedError,
)


PathLike = Union[str, Path]

DEFAULT_SETTINGS: Dict[str, str] = {
    "app.name": "MyApplication",
    "app.version": "1.0.0",
    "app.theme": "light",
    "app.language": "kk",
    "max.users": "100",
    "timeout": "30",
}

# Fixed output of the external source stub.
SOURCE_SETTINGS: Dict[str, str] = {
    "db.host": "localhost",
    "db.port": "5432",
    "db.name": "mydb",
    "db.user": "admin",
}


def parse_settings_lines(lines: List[str]) -> Dict[str, str]:
    """Parse `key = value` lines, splitting on the first '=' and skipping lines without one."""
    parsed: Dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        if not sep:
            continue
        parsed[key.strip()] = value.strip()
    return parsed


def _mask_identifier(identifier: str) -> str:
    if "@" not in identifier:
        return identifier
    return f"***@{identifier.rsplit('@', 1)[1]}"


class SettingsStore:
    """
    Key/value configuration holder.

    One store is meant to live for the whole process. It is created through
    an `InitOnce` guard owned by the `ServiceManager`, and callers receive
    the store as a reference instead of looking it up globally. Every
    mutating operation runs under a single lock.
    """

    def __init__(self):
        self._settings: Dict[str, str] = {}
        self._loaded = False
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._settings)

    def __contains__(self, key: object) -> bool:
        return key in self._settings

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._settings))

    def load_defaults(self):
        """Replace all entries with the built-in defaults."""
        with self._lock:
            self._settings.clear()
            self._settings.update(DEFAULT_SETTINGS)
            self._loaded = True
        self._logger.info("Settings loaded with default values")

    def load_from_source(self, identifier: str):
        """
        Load connection settings from an external source.

        This is a stand-in for a real database client: the identifier is
        only logged and the same fixed keys are always merged into the
        store. It cannot fail.

        Args:
            identifier: Opaque connection descriptor
        """
        with self._lock:
            self._settings.update(SOURCE_SETTINGS)
            self._loaded = True
        self._logger.info(f"Settings loaded from source: {_mask_identifier(identifier)}")

    def load_from_file(self, path: PathLike):
        """
        Replace all entries with the contents of a `key = value` file.

        The file is read completely before the store is touched, so a failed
        read leaves the current entries in place.

        Args:
            path: File to read

        Raises:
            SettingsFileNotFoundError: If the path does not exist
        """
        path = Path(path)
        if not path.exists():
            self._logger.error(f"Settings file not found: {path}")
            raise SettingsFileNotFoundError(path)

        parsed = parse_settings_lines(path.read_text(encoding="utf-8").splitlines())
        with self._lock:
            self._settings.clear()
            self._settings.update(parsed)
            self._loaded = True
        self._logger.info(f"Settings loaded from file: {path} ({len(parsed)} entries)")

    def get(self, key: str) -> str:
        """
        Get a setting value.

        Raises:
            SettingsNotLoadedError: If nothing has been loaded yet
            SettingKeyNotFoundError: If the key is not defined
        """
        if not self._loaded:
            raise SettingsNotLoadedError()
        try:
            return self._settings[key]
        except KeyError:
            raise SettingKeyNotFoundError(key) from None

    def get_or_default(self, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """Get a setting value, or `fallback` when unloaded or undefined."""
        if not self._loaded:
            return fallback
        return self._settings.get(key, fallback)

    def set(self, key: str, value: str):
        """Set a value, loading the defaults first if nothing was loaded yet."""
        with self._lock:
            if not self._loaded:
                self.load_defaults()
            self._settings[key] = value
        self._logger.debug(f"Setting '{key}' updated")

    def save_to_file(self, path: PathLike):
        """Write every entry as a `key = value` line, in insertion order."""
        path = Path(path)
        with self._lock:
            lines = [f"{key} = {value}\n" for key, value in self._settings.items()]
        path.write_text("".join(lines), encoding="utf-8")
        self._logger.info(f"Settings saved to file: {path}")

    def as_dict(self) -> Dict[str, str]:
        """Get a snapshot copy of all entries."""
        with self._lock:
            return dict(self._settings)

    def dump(self) -> str:
        """Get a human readable listing of all entries."""
        lines = ["=== All settings ==="]
        lines.extend(f"{key} = {value}" for key, value in self.as_dict().items())
        lines.append("====================")
        return "\n".join(lines)
