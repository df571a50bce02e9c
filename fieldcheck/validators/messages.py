"""Message resolution — picks the user-facing text for a failed constraint."""

from typing import Any, Optional

from fieldcheck.config import Settings, get_settings
from fieldcheck.validators.models import ConstraintOptions


def _is_present(message: Any) -> bool:
    return message is not None and not (isinstance(message, str) and not message.strip())


def message_for_error(
    model: Any,
    field: Any,
    value: Any,
    constraint: str,
    default_message: str,
    options: Any,
    settings: Optional[Settings] = None,
) -> str:
    """Get the most appropriate error message for a failed constraint.

    Args:
        model: The model being validated
        field: The name of the model's field being validated
        value: The value of the field that failed the constraint
        constraint: The constraint key, e.g. 'presence' or 'length.minimum'
        default_message: Returned when nothing more specific applies
        options: The constraint options provided by the caller
        settings: Settings supplying the i18n key prefix. Defaults to `get_settings()`.

    Returns:
        One of the following, in this order:
            1. `options.message` if it is set and not blank
            2. `options.i18n.handler.translate(...)` when the handler knows
               `options.i18n.key`, or else `<I18N_KEY_PREFIX>.<constraint>`
            3. `default_message`
    """
    options = ConstraintOptions.coerce(options)

    if _is_present(options.message):
        return options.message

    i18n = options.i18n
    if i18n is not None and i18n.handler is not None:
        prefix = (settings or get_settings()).I18N_KEY_PREFIX
        key = i18n.key or f"{prefix}.{constraint}"
        if i18n.handler.exists(key):
            params = {
                "constraint": constraint,
                "model": model,
                "field": field,
                "value": value,
                **options.interpolation_params(),
            }
            return i18n.handler.translate(key, params)

    return default_message
