"""Format predicates — pure string checks used by the email and uuid constraints."""

import re

_EMAIL_PATTERN = re.compile(
    r"[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?",
    re.IGNORECASE | re.ASCII,
)

# 32 hex digits: version nibble 1-5, RFC 4122 variant nibble 8-b
_UUID_PATTERN = re.compile(
    r"[0-9a-f]{12}[1-5][0-9a-f]{3}[89ab][0-9a-f]{15}",
    re.IGNORECASE | re.ASCII,
)

_UUID_SEPARATORS = re.compile(r"[\s\-.]")


def is_email_valid(value: str) -> bool:
    """Check whether a string contains a valid e-mail address."""
    return _EMAIL_PATTERN.fullmatch(value) is not None


def is_uuid_valid(value: str) -> bool:
    """Check whether a string contains a valid UUID.

    Whitespace, hyphens and periods are stripped before matching, so
    `"f47ac10b.58cc.4372.a567.0e02b2c3d479"` is accepted too.
    """
    return _UUID_PATTERN.fullmatch(_UUID_SEPARATORS.sub("", value)) is not None
