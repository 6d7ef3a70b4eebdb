from typing import Optional
import uuid

from fastapi import Header, Response

SESSION_RESPONSE_HEADER = "X-Session-Id"


async def cart_session(
        response: Response,
        session_id: Optional[str] = Header(None, alias="session-id", max_length=128),
        x_session_id: Optional[str] = Header(None, alias="X-Session-Id", max_length=128),
) -> str:
    """
    Resolve the cart partition key for this request.

    Reads the `session-id` header (or `X-Session-Id`), generating a fresh id
    when neither is sent, and echoes it back so the client can keep it.
    """
    resolved = (session_id or x_session_id or "").strip() or uuid.uuid4().hex
    response.headers[SESSION_RESPONSE_HEADER] = resolved
    return resolved
