class LitcalError(Exception):
    """Base error."""

class ConfigurationError(LitcalError):
    """Raised when catalog input or a jurisdiction reference is malformed."""
