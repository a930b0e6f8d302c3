"""Exceptions raised by the settings store."""


class SettingsError(Exception):
    """Base class for settings store failures."""


class SettingsFileNotFoundError(SettingsError, FileNotFoundError):
    """The settings file to load does not exist."""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Settings file not found: {self.path}")


class SettingsNotLoadedError(SettingsError, RuntimeError):
    """A strict read happened before any load."""

    def __init__(self):
        super().__init__("Settings have not been loaded")


class SettingKeyNotFoundError(SettingsError, KeyError):
    """A strict read asked for a key the store does not hold."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Setting not defined: {self.key}"
