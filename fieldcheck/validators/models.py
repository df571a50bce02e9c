"""Validation models — constraint names, halt policies and typed option records.

Callers describe constraints with plain dicts; every dict is coerced into the
typed record of its constraint before the validator runs, so malformed
configuration is caught once, at the dispatch boundary.
"""

from collections.abc import Mapping
from enum import Enum
from re import Pattern
from typing import Annotated, Any, Awaitable, Callable, ClassVar, Literal, Optional, Protocol, Union, runtime_checkable

import structlog
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError, field_validator

from fieldcheck.errors import RequiredOptionMissingError

logger = structlog.get_logger()


class Constraint(str, Enum):
    """The closed set of constraint names understood by the dispatcher."""

    PRESENCE = "presence"
    ABSENCE = "absence"
    TYPE = "type"
    INSTANCE = "instance"
    LENGTH = "length"
    EMAIL = "email"
    FORMAT = "format"
    CONFIRMATION = "confirmation"
    INCLUSION = "inclusion"
    EXCLUSION = "exclusion"
    UUID = "uuid"
    CUSTOM = "custom"


class HaltBy(str, Enum):
    """When to stop evaluating constraints."""

    NEVER = "never"                          # Evaluate everything
    FIRST_ERROR = "first-error"              # Stop at the first failing constraint
    FIRST_FIELD_ERROR = "first-field-error"  # Model level only: one error per field, all fields


class _Missing:
    """Marker for a field the model does not have at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class Symbol:
    """Opaque field identifier, equal only to itself."""

    __slots__ = ("description",)

    def __init__(self, description: Optional[str] = None):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description!r})"

    def __str__(self) -> str:
        return f"Symbol({self.description or ''})"


LengthBound = Union[Annotated[StrictInt, Field(ge=0)], Annotated[StrictFloat, Field(ge=0)]]

TypeTag = Literal["bigint", "boolean", "function", "number", "object", "string", "symbol", "undefined"]


@runtime_checkable
class I18nHandler(Protocol):
    """Minimal translation engine interface."""

    def exists(self, key: str) -> bool:
        """Whether a translation is registered under `key`."""
        ...

    def translate(self, key: str, params: dict[str, Any]) -> str:
        """Render the translation registered under `key` with `params`."""
        ...


class ConditionPredicate(Protocol):
    """The `if` option: decides whether a constraint runs at all."""

    def __call__(self, value: Any, model: Any, field: Any) -> Union[bool, Awaitable[bool]]:
        ...


class CustomValidator(Protocol):
    """The `with` option of the `custom` constraint."""

    def __call__(
        self, model: Any, field: Any, value: Any, options: "CustomOptions"
    ) -> Union[Optional[str], Awaitable[Optional[str]]]:
        ...


class I18nOptions(BaseModel):
    """Stores the translation engine and an optional explicit lookup key."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    handler: Optional[Any] = None
    key: Optional[StrictStr] = None

    @field_validator("handler")
    @classmethod
    def _check_handler(cls, handler: Any) -> Any:
        if handler is not None and not isinstance(handler, I18nHandler):
            raise ValueError("i18n handler must implement exists() and translate()")
        return handler


class ConstraintOptions(BaseModel):
    """Options common to every constraint.

    Unknown keys are kept: they are forwarded to the i18n handler so
    translations can interpolate them.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    constraint: ClassVar[Optional[str]] = None

    message: Optional[str] = None
    i18n: Optional[I18nOptions] = None
    # Only a callable `if` is evaluated; anything else is ignored.
    if_: Optional[Any] = Field(default=None, alias="if")

    @classmethod
    def coerce(cls, options: Any) -> "ConstraintOptions":
        """Build the typed record for this constraint from caller options.

        Accepts `True`/`None` (use defaults), a mapping, or an options record.

        Raises:
            RequiredOptionMissingError: If required options are absent or ill-typed.
        """
        if isinstance(options, cls):
            return options
        if options is True or options is None:
            options = {}
        elif isinstance(options, ConstraintOptions):
            options = options.as_dict()

        if not isinstance(options, Mapping):
            logger.warning("invalid_constraint_options", constraint=cls.constraint, options_type=type(options).__name__)
            raise RequiredOptionMissingError(
                f"Options for '{cls.constraint}' constraint must be a mapping, got {type(options).__name__}"
            )

        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            keys = sorted({str(err["loc"][0]) if err["loc"] else "<root>" for err in exc.errors()})
            logger.warning("invalid_constraint_options", constraint=cls.constraint, keys=keys)
            raise RequiredOptionMissingError(
                f"A valid {', '.join(repr(k) for k in keys)} was not provided for {cls.constraint} validation"
            ) from exc

    def as_dict(self) -> dict[str, Any]:
        """Caller-supplied options under their original key names."""
        result: dict[str, Any] = {}
        for name, info in type(self).model_fields.items():
            if name in self.model_fields_set:
                result[info.alias or name] = getattr(self, name)
        result.update(self.model_extra or {})
        return result

    def interpolation_params(self) -> dict[str, Any]:
        """Options handed to the i18n handler, minus `message` and `i18n`."""
        params = self.as_dict()
        params.pop("message", None)
        params.pop("i18n", None)
        return params


class PresenceOptions(ConstraintOptions):
    constraint: ClassVar[Optional[str]] = "presence"


class AbsenceOptions(ConstraintOptions):
    constraint: ClassVar[Optional[str]] = "absence"


class TypeOptions(ConstraintOptions):
    """Contains a type tag to be checked against `type_of(value)`."""

    constraint: ClassVar[Optional[str]] = "type"

    type: TypeTag


class InstanceOptions(ConstraintOptions):
    """Contains a class against which values will be tested."""

    constraint: ClassVar[Optional[str]] = "instance"

    constructor: type[Any] = Field(alias="Constructor")


class LengthOptions(ConstraintOptions):
    """Optional inclusive bounds for a value's length.

    Bounds are non-negative numbers; floats such as `2.0` are accepted, booleans
    and numeric strings are not.
    """

    constraint: ClassVar[Optional[str]] = "length"

    minimum: Optional[LengthBound] = None
    maximum: Optional[LengthBound] = None


class EmailOptions(ConstraintOptions):
    constraint: ClassVar[Optional[str]] = "email"


class FormatOptions(ConstraintOptions):
    """Contains a regular expression the value must match.

    Pattern strings are compiled on coercion.
    """

    constraint: ClassVar[Optional[str]] = "format"

    pattern: Pattern[str]


class ConfirmationOptions(ConstraintOptions):
    """Names the field whose value must be identical to the validated one."""

    constraint: ClassVar[Optional[str]] = "confirmation"

    on: Union[StrictStr, Symbol]


class InclusionOptions(ConstraintOptions):
    constraint: ClassVar[Optional[str]] = "inclusion"

    in_: list[Any] = Field(alias="in")


class ExclusionOptions(ConstraintOptions):
    constraint: ClassVar[Optional[str]] = "exclusion"

    from_: list[Any] = Field(alias="from")


class UUIDOptions(ConstraintOptions):
    constraint: ClassVar[Optional[str]] = "uuid"


class CustomOptions(ConstraintOptions):
    """Contains a user-provided validator function."""

    constraint: ClassVar[Optional[str]] = "custom"

    with_: Callable[..., Any] = Field(alias="with")
