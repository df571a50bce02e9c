"""Validation Engine — runs constraints over fields and fields over models.

This is the main entry point for model validation. Constraints and fields
run strictly in declaration order; halt policies decide how early to stop.

Usage:
    errors = await validate(
        {"email": "not-an-email", "password": "secret"},
        {
            "email": {"presence": True, "email": True},
            "password": {"length": {"minimum": 8}},
        },
        halt_by="first-field-error",
    )
    # {"email": ["Must be a valid email address"],
    #  "password": ["Length must be greater than 8"]}
"""

import time
from collections.abc import Mapping
from typing import Any, Optional, Union

import structlog

from fieldcheck.config import Settings, get_settings
from fieldcheck.errors import ConfigurationError
from fieldcheck.validators.dispatcher import resolve_constraint, validate_constraint
from fieldcheck.validators.models import HaltBy

logger = structlog.get_logger()

FieldConstraints = Mapping[Any, Any]
ModelConstraints = Mapping[Any, FieldConstraints]


def _parse_halt_by(halt_by: Union[HaltBy, str], allowed: tuple[HaltBy, ...]) -> HaltBy:
    try:
        policy = HaltBy(halt_by)
    except ValueError:
        policy = None
    if policy not in allowed:
        raise ConfigurationError(
            f"Unsupported halt policy '{halt_by}', expected one of: {', '.join(p.value for p in allowed)}"
        )
    return policy


class ValidationEngine:
    """Runs field and model validation.

    The engine holds no per-call state; one instance can serve any number of
    concurrent validations.
    """

    FIELD_POLICIES = (HaltBy.NEVER, HaltBy.FIRST_ERROR)
    MODEL_POLICIES = (HaltBy.NEVER, HaltBy.FIRST_ERROR, HaltBy.FIRST_FIELD_ERROR)

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize with explicit settings or the process-wide ones.

        Args:
            settings: Optional settings. If None, `get_settings()` is read on each call.
        """
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def _default_field_policy(self) -> HaltBy:
        default = _parse_halt_by(self.settings.DEFAULT_HALT_BY, self.MODEL_POLICIES)
        return HaltBy.NEVER if default is HaltBy.NEVER else HaltBy.FIRST_ERROR

    async def validate_field(
        self,
        model: Any,
        field: Any,
        constraints: Optional[FieldConstraints],
        halt_by: Union[HaltBy, str, None] = None,
    ) -> list[str]:
        """Validate one field of the model against an ordered set of constraints.

        Args:
            model: The object whose field should be validated
            field: The key (or attribute name) of the field
            constraints: Ordered mapping of constraint name to its options, or
                True to use the constraint's default options
            halt_by: 'never' runs every constraint, 'first-error' stops after
                the first failing one. Defaults to the configured policy.

        Returns:
            Error messages in constraint order; empty if every constraint passed.

        Raises:
            UnknownConstraintError: If any constraint name is unknown. Raised
                before any constraint of the field is evaluated.
        """
        if halt_by is None:
            policy = self._default_field_policy()
        else:
            policy = _parse_halt_by(halt_by, self.FIELD_POLICIES)

        plan = [(resolve_constraint(name), options) for name, options in (constraints or {}).items()]

        errors: list[str] = []
        for constraint, options in plan:
            error = await validate_constraint(model, field, constraint, options, settings=self._settings)
            if error:
                errors.append(error)
                if policy is HaltBy.FIRST_ERROR:
                    break

        logger.debug(
            "field_validated",
            field=field,
            constraints=len(plan),
            errors=len(errors),
            halt_by=policy.value,
        )

        return errors

    async def validate(
        self,
        model: Any,
        model_constraints: Optional[ModelConstraints],
        halt_by: Union[HaltBy, str, None] = None,
    ) -> dict[Any, list[str]]:
        """Validate a model against per-field constraint sets.

        Args:
            model: The object to be validated
            model_constraints: Ordered mapping of field to its constraints
            halt_by: When to halt validation. Defaults to the configured policy.
                1. 'never': never halts
                2. 'first-error': halts after any constraint fails in any
                   field; later fields are not validated
                3. 'first-field-error': halts each field after its first
                   failing constraint; all fields are validated

        Returns:
            Mapping of field to its error messages. Fields without errors are omitted.
        """
        start_time = time.perf_counter()

        policy = _parse_halt_by(self.settings.DEFAULT_HALT_BY if halt_by is None else halt_by, self.MODEL_POLICIES)
        field_policy = HaltBy.NEVER if policy is HaltBy.NEVER else HaltBy.FIRST_ERROR

        result: dict[Any, list[str]] = {}
        fields_visited = 0

        for field, constraints in (model_constraints or {}).items():
            fields_visited += 1
            errors = await self.validate_field(model, field, constraints, halt_by=field_policy)

            if errors:
                result[field] = errors
                if policy is HaltBy.FIRST_ERROR:
                    break

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            halt_by=policy.value,
            fields_visited=fields_visited,
            fields_failed=len(result),
            total_errors=sum(len(errors) for errors in result.values()),
            duration_ms=round(total_duration, 2),
        )

        return result


# Module-level singleton
validation_engine = ValidationEngine()


async def validate_field(
    model: Any,
    field: Any,
    constraints: Optional[FieldConstraints],
    halt_by: Union[HaltBy, str, None] = None,
) -> list[str]:
    """Validate one field with the default engine. See `ValidationEngine.validate_field`."""
    return await validation_engine.validate_field(model, field, constraints, halt_by=halt_by)


async def validate(
    model: Any,
    model_constraints: Optional[ModelConstraints],
    halt_by: Union[HaltBy, str, None] = None,
) -> dict[Any, list[str]]:
    """Validate a model with the default engine. See `ValidationEngine.validate`."""
    return await validation_engine.validate(model, model_constraints, halt_by=halt_by)
