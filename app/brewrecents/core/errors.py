"""Exceptions raised by the brew-recents pipeline."""


class RecentsError(Exception):
    """Base exception for brew-recents errors."""


class PrerequisiteMissingError(RecentsError):
    """Raised when a required tool (brew, git) is not on the PATH."""


class RetrievalError(RecentsError):
    """Raised when the change list of a catalog cannot be retrieved."""


class ConfigError(RecentsError):
    """Raised when the configuration file content is invalid."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""
