"""Configuration errors — raised when the validation API is misused.

Validation failures are never raised: they come back as plain strings.
Everything in this module signals a programmer error and aborts the whole
validation call.
"""


class ConfigurationError(ValueError):
    """Base class for all misuse of the validation API."""


class UnknownConstraintError(ConfigurationError):
    """Gets raised when a constraint name is not recognised."""


class RequiredOptionMissingError(ConfigurationError):
    """Gets raised when a mandatory constraint option is absent or ill-typed."""


class InvalidValueForConstraintError(ConfigurationError):
    """Gets raised when a value cannot be constrained because of its shape.

    For instance `length` on a value without a length measure, or `email`
    on something that is not a string.
    """
