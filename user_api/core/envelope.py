"""Response Envelope: success wrapper shared by every user operation.

Failure envelopes come from UserApiError.to_response() (core/errors.py).
"""

from typing import Any


def success_envelope(
    data: Any = None, *, message: str | None = None, count: int | None = None,
) -> dict:
    """Build {success: true, [count], [message], [data]}: absent keys are omitted."""
    body: dict[str, Any] = {"success": True}
    if count is not None:
        body["count"] = count
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body
