"""Field Validator — declarative constraint checks for models.

Usage:
    from fieldcheck.validators import validate

    errors = await validate(model, {"name": {"presence": True}})
    if errors:
        # errors maps each failing field to its messages
"""

from fieldcheck.validators.constraints import (
    validate_absence,
    validate_confirmation,
    validate_custom,
    validate_email,
    validate_exclusion,
    validate_format,
    validate_inclusion,
    validate_instance,
    validate_length,
    validate_presence,
    validate_type,
    validate_uuid,
)
from fieldcheck.validators.dispatcher import validate_constraint
from fieldcheck.validators.engine import ValidationEngine, validate, validate_field, validation_engine
from fieldcheck.validators.formats import is_email_valid, is_uuid_valid
from fieldcheck.validators.messages import message_for_error
from fieldcheck.validators.models import (
    MISSING,
    AbsenceOptions,
    ConditionPredicate,
    ConfirmationOptions,
    Constraint,
    ConstraintOptions,
    CustomOptions,
    CustomValidator,
    EmailOptions,
    ExclusionOptions,
    FormatOptions,
    HaltBy,
    I18nHandler,
    I18nOptions,
    InclusionOptions,
    InstanceOptions,
    LengthOptions,
    PresenceOptions,
    Symbol,
    TypeOptions,
    UUIDOptions,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate",
    "validate_field",
    "validate_constraint",
    "message_for_error",
    "is_email_valid",
    "is_uuid_valid",
    "validate_presence",
    "validate_absence",
    "validate_type",
    "validate_instance",
    "validate_length",
    "validate_email",
    "validate_format",
    "validate_confirmation",
    "validate_inclusion",
    "validate_exclusion",
    "validate_uuid",
    "validate_custom",
    "MISSING",
    "Symbol",
    "Constraint",
    "HaltBy",
    "I18nHandler",
    "I18nOptions",
    "ConditionPredicate",
    "CustomValidator",
    "ConstraintOptions",
    "PresenceOptions",
    "AbsenceOptions",
    "TypeOptions",
    "InstanceOptions",
    "LengthOptions",
    "EmailOptions",
    "FormatOptions",
    "ConfirmationOptions",
    "InclusionOptions",
    "ExclusionOptions",
    "UUIDOptions",
    "CustomOptions",
]
