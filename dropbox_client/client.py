import copy
import logging
import re
from typing import Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from .config import settings
from .errors import DecodeError, DropboxError, HTTPStatusError, InvalidTokenError, TransportError
from .metrics_registry import dropbox_requests_total, dropbox_request_errors_total
from .schemas import ListFolderArg, ListFolderResult, ListFoldersArgs, ListFoldersResult

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)

# visible ASCII, space and tab; must not end in whitespace
_HEADER_VALUE = re.compile(r"[\t\x20-\x7e]*[\x21-\x7e]")

# marks "take the timeout from settings"; None means no timeout
_DEFAULT = object()


class Client:
    """
    Async client for the Dropbox listing endpoints.

    Every request carries the bearer token and a JSON content type as default
    headers. The client holds no mutable state, so a single instance (or any
    of its clones) can be awaited concurrently.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: Optional[str] = None,
        timeout: Union[float, httpx.Timeout, None, object] = _DEFAULT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        authorization = f"Bearer {token}"
        if not _HEADER_VALUE.fullmatch(authorization):
            raise InvalidTokenError("Token cannot be sent as an HTTP header value")

        headers = {
            "Authorization": authorization,
            "Content-Type": "application/json",
        }
        if timeout is _DEFAULT:
            timeout = settings.DROPBOX_TIMEOUT

        self._token = token
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.DROPBOX_API_BASE,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @property
    def token(self) -> str:
        return self._token

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    def clone(self) -> "Client":
        """Return a client sharing this one's transport and token."""
        return copy.copy(self)

    async def aclose(self):
        # shared by every clone
        await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def sharing_list_folders(self, args: Optional[ListFoldersArgs] = None) -> ListFoldersResult:
        """List the shared folders the token's account has access to."""
        return await self._post("sharing/list_folders", args or ListFoldersArgs(), ListFoldersResult)

    async def list_folder(self, args: ListFolderArg) -> ListFolderResult:
        """List the contents of a folder. An empty path is the root folder."""
        return await self._post("files/list_folder", args, ListFolderResult)

    async def _post(self, endpoint: str, args: BaseModel, result_type: Type[ResultT]) -> ResultT:
        dropbox_requests_total.labels(endpoint=endpoint).inc()

        try:
            response = await self._http.post(endpoint, content=args.model_dump_json())
        except httpx.RequestError as exc:
            raise self._failed(endpoint, TransportError(f"{endpoint}: {exc!r}")) from exc

        logger.debug("POST %s -> %s", endpoint, response.status_code)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            # error payloads are not parsed
            raise self._failed(endpoint, HTTPStatusError(response.status_code, response.text)) from exc

        try:
            return result_type.model_validate_json(response.content)
        except ValidationError as exc:
            raise self._failed(endpoint, DecodeError(f"{endpoint}: unexpected response body")) from exc

    @staticmethod
    def _failed(endpoint: str, err: DropboxError) -> DropboxError:
        dropbox_request_errors_total.labels(endpoint=endpoint, kind=err.kind).inc()
        return err
