from typing import Optional


class DropboxError(Exception):
    """
    Single error kind for every client failure.
    The underlying cause (httpx or pydantic exception) is chained as __cause__.
    """
    kind = "error"


class InvalidTokenError(DropboxError):
    kind = "token"


class TransportError(DropboxError):
    kind = "transport"


class HTTPStatusError(DropboxError):
    kind = "status"

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"Dropbox returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(DropboxError):
    kind = "decode"
