from .client import Client
from .errors import DecodeError, DropboxError, HTTPStatusError, InvalidTokenError, TransportError
from .schemas import ListFolderArg, ListFolderResult, ListFoldersArgs, ListFoldersResult

__all__ = [
    "Client",
    "DropboxError",
    "InvalidTokenError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "ListFoldersArgs",
    "ListFoldersResult",
    "ListFolderArg",
    "ListFolderResult",
]
