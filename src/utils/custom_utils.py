from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import ORJSONResponse


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def generate_response(
    status_code: int,
    response_message: str,
    customer_message: str,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> ORJSONResponse:
    """
    Build the standard API response envelope.

    Args:
        status_code: HTTP status code
        response_message: Message aimed at developers / logs
        customer_message: Message safe to show to end users
        body: Response payload (pydantic models are serialized by alias)
        headers: Optional extra response headers

    Returns:
        ORJSONResponse: The enveloped response
    """
    content = {
        "status_code": status_code,
        "response_message": response_message,
        "customer_message": customer_message,
        "body": jsonable_encoder(body, by_alias=True),
    }
    return ORJSONResponse(status_code=status_code, content=content, headers=headers)
