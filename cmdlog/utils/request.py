"""Request utility functions."""

import json
import re
from typing import Any

from fastapi import Request

from cmdlog.core.config import settings
from cmdlog.core.exceptions import PayloadTooLargeError

_LOG_ID_PATTERN = re.compile(r"[0-9]+")

# ids are positive INTEGER primary keys
MAX_LOG_ID = 2**31 - 1


async def read_json_object(request: Request, max_size: int | None = None) -> dict[str, Any]:
    """
    Decode the request body as a JSON object.

    A missing, malformed or non-object body decodes to ``{}`` so it fails the
    field rules like any other body without the required keys. The body is
    read in chunks and cut off past ``max_size`` bytes, which also covers
    chunked uploads that carry no Content-Length.
    """
    if max_size is None:
        max_size = settings.MAX_REQUEST_SIZE

    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > max_size:
            raise PayloadTooLargeError(max_size)
        chunks.append(chunk)

    body = b"".join(chunks)
    if not body:
        return {}

    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        # RecursionError: nesting too deep for the decoder
        return {}

    return payload if isinstance(payload, dict) else {}


def parse_log_id(raw: str) -> int | None:
    """Parse a path identifier; None when it cannot name a stored log."""
    raw = raw.strip()
    if not _LOG_ID_PATTERN.fullmatch(raw):
        return None

    log_id = int(raw)
    if log_id < 1 or log_id > MAX_LOG_ID:
        return None
    return log_id
