"""Constraint dispatcher — maps a constraint name and its options to a validator run."""

import inspect
from collections.abc import Mapping
from typing import Any, Callable, Optional

import structlog

from fieldcheck.config import Settings
from fieldcheck.errors import UnknownConstraintError
from fieldcheck.validators.base import read_field
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
from fieldcheck.validators.models import (
    AbsenceOptions,
    ConditionPredicate,
    ConfirmationOptions,
    Constraint,
    ConstraintOptions,
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

logger = structlog.get_logger()

ValidatorFunction = Callable[..., Any]

VALIDATORS: dict[Constraint, tuple[ValidatorFunction, type[ConstraintOptions]]] = {
    Constraint.PRESENCE: (validate_presence, PresenceOptions),
    Constraint.ABSENCE: (validate_absence, AbsenceOptions),
    Constraint.TYPE: (validate_type, TypeOptions),
    Constraint.INSTANCE: (validate_instance, InstanceOptions),
    Constraint.LENGTH: (validate_length, LengthOptions),
    Constraint.EMAIL: (validate_email, EmailOptions),
    Constraint.FORMAT: (validate_format, FormatOptions),
    Constraint.CONFIRMATION: (validate_confirmation, ConfirmationOptions),
    Constraint.INCLUSION: (validate_inclusion, InclusionOptions),
    Constraint.EXCLUSION: (validate_exclusion, ExclusionOptions),
    Constraint.UUID: (validate_uuid, UUIDOptions),
    Constraint.CUSTOM: (validate_custom, CustomOptions),
}

_unmapped = set(Constraint) - set(VALIDATORS)
if _unmapped:
    raise RuntimeError(f"No validator registered for: {', '.join(sorted(c.value for c in _unmapped))}")


def resolve_constraint(name: Any) -> Constraint:
    """Turn a constraint name into its `Constraint` member.

    Raises:
        UnknownConstraintError: If the name is not a known constraint.
    """
    if isinstance(name, Constraint):
        return name
    try:
        return Constraint(name)
    except ValueError:
        logger.warning("unknown_constraint", constraint=name)
        raise UnknownConstraintError(f"Unknown constraint {name}") from None


def _condition_of(options: Any) -> Optional[ConditionPredicate]:
    """Extract the `if` predicate from raw or typed options, if it is callable."""
    if isinstance(options, ConstraintOptions):
        condition = options.if_
    elif isinstance(options, Mapping):
        condition = options.get("if", options.get("if_"))
    else:
        return None
    return condition if callable(condition) else None


async def _settle(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


async def validate_constraint(
    model: Any,
    field: Any,
    constraint: Any,
    options: Any = True,
    settings: Optional[Settings] = None,
) -> Optional[str]:
    """Run a single named constraint against `model[field]`.

    Args:
        model: The object whose field is validated
        field: The key (or attribute name) of the field
        constraint: A constraint name such as 'presence' or a `Constraint`
        options: The constraint's options, or True to use its defaults
        settings: Settings for message resolution. Defaults to `get_settings()`.

    Returns:
        The error message if the constraint failed, else None. Constraints
        whose `if` predicate returns a falsy value are skipped; an `if` that
        is not callable is ignored.

    Raises:
        UnknownConstraintError: If `constraint` is not recognised.
        RequiredOptionMissingError: If the constraint's options are malformed.
        InvalidValueForConstraintError: If the value cannot be constrained.
    """
    if options is True or options is None:
        options = {}

    value = read_field(model, field)

    condition = _condition_of(options)
    if condition is not None and not await _settle(condition(value, model, field)):
        logger.debug("constraint_skipped", field=field, constraint=constraint)
        return None

    kind = resolve_constraint(constraint)
    validator, options_model = VALIDATORS[kind]
    typed_options = options_model.coerce(options)

    return await _settle(validator(model, field, value, typed_options, settings=settings))
