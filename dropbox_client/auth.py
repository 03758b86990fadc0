import logging
from fastapi import HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from .client import Client
from .errors import DropboxError, HTTPStatusError, InvalidTokenError

logger = logging.getLogger(__name__)

security = HTTPBearer()

async def get_dropbox_client(creds: HTTPAuthorizationCredentials = Security(security)):
    """
    Build a Dropbox client from the caller's bearer token.
    The client lives for one request and is closed afterwards.
    """
    # One pool per request: the token is baked into the client's default
    # headers and closing an AsyncClient closes its transport, so pools
    # are not shared across callers.
    try:
        client = Client(creds.credentials)
    except InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")
    async with client:
        yield client


def to_http_exception(endpoint: str, exc: DropboxError) -> HTTPException:
    """
    Translate a client failure into the gateway's response.
    Upstream 4xx keep their status; everything else is a bad gateway.
    """
    logger.warning("Dropbox %s failed: %s", endpoint, exc)
    if isinstance(exc, HTTPStatusError):
        if 400 <= exc.status_code < 500:
            return HTTPException(status_code=exc.status_code, detail=f"Dropbox rejected the request ({exc.status_code})")
        return HTTPException(status_code=502, detail=f"Dropbox returned HTTP {exc.status_code}")
    return HTTPException(status_code=502, detail=f"Dropbox request failed ({exc.kind})")
