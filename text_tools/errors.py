class TextToolsError(Exception):
    """Base exception for text-tools adapters."""


class OptionsError(TextToolsError, ValueError):
    """Raised when a user-facing option name cannot be resolved."""


class InputError(TextToolsError):
    """Raised when raw input cannot be read or is rejected."""


class ConfigurationError(TextToolsError):
    """Raised when an environment setting is malformed."""
