"""Item validation.

The unsafe-content check is a coarse denylist for script/iframe tags and
``javascript:`` URIs. It is not a sanitizer; clients must still encode
items when rendering them.
"""

import re

from youpick.spaces.errors import ItemValidationError, ValidationReason

MAX_ITEM_LENGTH = 500

_UNSAFE_PATTERN = re.compile(r"<script|<iframe|javascript:", re.IGNORECASE)


def validate_item(raw: object) -> str:
    """Return the trimmed item, or raise ItemValidationError.

    Raises:
        ItemValidationError: reason NOT_STRING, EMPTY, TOO_LONG or UNSAFE_CONTENT.
    """
    if raw is None:
        raw = ""
    if not isinstance(raw, str):
        raise ItemValidationError(ValidationReason.NOT_STRING)
    trimmed = raw.strip()
    if not trimmed:
        raise ItemValidationError(ValidationReason.EMPTY)
    if len(trimmed) > MAX_ITEM_LENGTH:
        raise ItemValidationError(ValidationReason.TOO_LONG)
    if _UNSAFE_PATTERN.search(trimmed):
        raise ItemValidationError(ValidationReason.UNSAFE_CONTENT)
    return trimmed
