"""Optional shared-key guard for the /tracker routes.

The sync endpoints replace the whole goal list, so a deployment reachable
from outside sets TRACKER_API_KEY; read-only projections sit behind the
same key.
"""

from fastapi import HTTPException, Header

from app.config import settings


def _presented_key(x_api_key: str | None, authorization: str | None) -> str | None:
    if x_api_key is not None:
        return x_api_key
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip()
    return None


async def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> str:
    """Open when TRACKER_API_KEY is unset; otherwise the key must match (401)."""
    expected = settings.tracker_api_key
    if expected is None:
        return ""

    key = _presented_key(x_api_key, authorization)
    if key != expected:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return key
