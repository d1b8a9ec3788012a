"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings that cannot be turned into working components."""

    def __init__(self, message: str, setting: str | None = None):
        self.setting = setting
        super().__init__(f"{setting}: {message}" if setting else message)
