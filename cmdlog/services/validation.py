"""
Request validation for log writes.

Checks run before any store call so a doomed write never reaches the
database.
"""

from collections.abc import Mapping
from typing import Any

import pydantic

from cmdlog.core.exceptions import ValidationError
from cmdlog.schemas.log import LogCreate, LogUpdate

CREATE_FIELDS_REQUIRED = "command and message are required"
UPDATE_FIELD_REQUIRED = "At least command or message is required"
FIELDS_MUST_BE_STRINGS = "command and message must be strings"

UPDATABLE_FIELDS = ("command", "message")


def validate_create(fields: Mapping[str, Any]) -> LogCreate:
    """Require both ``command`` and ``message`` to be present and non-empty."""
    command = fields.get("command")
    message = fields.get("message")
    if not command or not message:
        raise ValidationError(CREATE_FIELDS_REQUIRED)

    try:
        return LogCreate.model_validate({"command": command, "message": message})
    except pydantic.ValidationError as e:
        raise ValidationError(FIELDS_MUST_BE_STRINGS) from e


def validate_update(fields: Mapping[str, Any]) -> LogUpdate:
    """Require at least one updatable key to be present.

    Presence is what counts: ``{"message": ""}`` is a valid update that
    clears the message. ``null`` is rejected since every stored field is
    non-null.
    """
    supplied = {name: fields[name] for name in UPDATABLE_FIELDS if name in fields}
    if not supplied:
        raise ValidationError(UPDATE_FIELD_REQUIRED)

    if any(value is None for value in supplied.values()):
        raise ValidationError(FIELDS_MUST_BE_STRINGS)

    try:
        return LogUpdate.model_validate(supplied)
    except pydantic.ValidationError as e:
        raise ValidationError(FIELDS_MUST_BE_STRINGS) from e
