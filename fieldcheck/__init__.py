"""fieldcheck — declarative field and model validation with pluggable i18n messages."""

from fieldcheck.errors import (
    ConfigurationError,
    InvalidValueForConstraintError,
    RequiredOptionMissingError,
    UnknownConstraintError,
)
from fieldcheck.validators import *  # noqa: F401,F403
from fieldcheck.validators import __all__ as _validators_all

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "UnknownConstraintError",
    "RequiredOptionMissingError",
    "InvalidValueForConstraintError",
    *_validators_all,
]
