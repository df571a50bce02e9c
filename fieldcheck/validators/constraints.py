"""Constraint validators — one function per constraint kind.

Every validator has the signature `(model, field, value, options, settings=None)`
and returns None when the constraint holds, or the resolved error message when
it fails. `settings` only feeds message resolution.
Values of the wrong shape raise `InvalidValueForConstraintError` instead of
failing silently.
"""

from typing import Any, Optional

from fieldcheck.config import Settings
from fieldcheck.errors import InvalidValueForConstraintError
from fieldcheck.validators.base import contains_strictly, has_length, is_none, read_field, strictly_equal, type_of
from fieldcheck.validators.formats import is_email_valid, is_uuid_valid
from fieldcheck.validators.messages import message_for_error
from fieldcheck.validators.models import (
    AbsenceOptions,
    ConfirmationOptions,
    CustomOptions,
    EmailOptions,
    ExclusionOptions,
    FormatOptions,
    InclusionOptions,
    InstanceOptions,
    LengthOptions,
    PresenceOptions,
    TypeOptions,
    UUIDOptions,
)


def _require_string(value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidValueForConstraintError("Must be a string")


def validate_presence(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` is present: neither None nor MISSING."""
    options = PresenceOptions.coerce(options)
    if is_none(value):
        return message_for_error(model, field, value, "presence", "Must be present", options, settings=settings)
    return None


def validate_absence(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` is absent: either None or MISSING."""
    options = AbsenceOptions.coerce(options)
    if not is_none(value):
        return message_for_error(model, field, value, "absence", "Must not be present", options, settings=settings)
    return None


def validate_type(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `type_of(value)` is the tag given in `options.type`."""
    options = TypeOptions.coerce(options)
    if type_of(value) != options.type:
        return message_for_error(model, field, value, "type", f"Must be a {options.type}", options, settings=settings)
    return None


def validate_instance(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` is an instance of `options.Constructor`."""
    options = InstanceOptions.coerce(options)
    if not isinstance(value, options.constructor):
        default_message = f"Must be an instance of {options.constructor.__name__}"
        return message_for_error(model, field, value, "instance", default_message, options, settings=settings)
    return None


def validate_length(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `len(value)` lies between `minimum` and `maximum`, inclusive.

    Both bounds are optional; with neither, every sized value passes. An
    absent value (None or MISSING) measures zero.

    Raises:
        InvalidValueForConstraintError: If `value` has no length.
    """
    options = LengthOptions.coerce(options)
    if not (is_none(value) or has_length(value)):
        raise InvalidValueForConstraintError("Constrained field should have a length")

    length = 0 if is_none(value) else len(value)
    minimum, maximum = options.minimum, options.maximum

    if minimum is not None and maximum is not None:
        if length < minimum or length > maximum:
            default_message = f"Length must be between {minimum} and {maximum}"
            return message_for_error(model, field, value, "length.interval", default_message, options, settings=settings)
    elif minimum is not None:
        if length < minimum:
            default_message = f"Length must be greater than {minimum}"
            return message_for_error(model, field, value, "length.minimum", default_message, options, settings=settings)
    elif maximum is not None:
        if length > maximum:
            default_message = f"Length must be less than {maximum}"
            return message_for_error(model, field, value, "length.maximum", default_message, options, settings=settings)

    return None


def validate_email(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` contains a valid e-mail address.

    Raises:
        InvalidValueForConstraintError: If `value` is not a string.
    """
    options = EmailOptions.coerce(options)
    _require_string(value)
    if not is_email_valid(value):
        return message_for_error(model, field, value, "email", "Must be a valid email address", options, settings=settings)
    return None


def validate_format(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` matches `options.pattern` anywhere in the string.

    Raises:
        InvalidValueForConstraintError: If `value` is not a string.
    """
    options = FormatOptions.coerce(options)
    _require_string(value)
    if options.pattern.search(value) is None:
        return message_for_error(model, field, value, "format", "Must have a valid format", options, settings=settings)
    return None


def validate_confirmation(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` is identical to the model's `options.on` field."""
    options = ConfirmationOptions.coerce(options)
    if not strictly_equal(value, read_field(model, options.on)):
        default_message = f"Must match '{options.on}'"
        return message_for_error(model, field, value, "confirmation", default_message, options, settings=settings)
    return None


def validate_inclusion(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` is one of `options.in`."""
    options = InclusionOptions.coerce(options)
    if not contains_strictly(options.in_, value):
        return message_for_error(model, field, value, "inclusion", "Must be an allowed value", options, settings=settings)
    return None


def validate_exclusion(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` is none of `options.from`."""
    options = ExclusionOptions.coerce(options)
    if contains_strictly(options.from_, value):
        return message_for_error(model, field, value, "exclusion", "Must not be a disallowed value", options, settings=settings)
    return None


def validate_uuid(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Optional[str]:
    """Validates whether `value` contains a valid UUID.

    Hyphens, periods and whitespace are ignored.

    Raises:
        InvalidValueForConstraintError: If `value` is not a string.
    """
    options = UUIDOptions.coerce(options)
    _require_string(value)
    if not is_uuid_valid(value):
        return message_for_error(model, field, value, "uuid", "Must contain a valid UUID", options, settings=settings)
    return None


def validate_custom(
    model: Any, field: Any, value: Any, options: Any, settings: Optional[Settings] = None
) -> Any:
    """Delegates to `options.with(model, field, value, options)`.

    The callable's result is returned untouched and may be awaitable.
    """
    options = CustomOptions.coerce(options)
    return options.with_(model, field, value, options)
