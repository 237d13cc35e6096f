"""Domain-specific exceptions for outlay."""


class OutlayError(Exception):
    """Base class for outlay errors."""


class ConfigurationError(OutlayError):
    """Raised when shared state is requested before a session was started.

    This signals a wiring defect in the caller, not a user-facing condition.
    """


class SeedError(OutlayError):
    """Raised when a seed file exists but cannot be parsed or validated."""


class PreferenceError(OutlayError):
    """Raised when the preference store cannot be written."""


__all__ = [
    "OutlayError",
    "ConfigurationError",
    "SeedError",
    "PreferenceError",
]
