from typing import Optional
from fastapi import APIRouter, Body, Depends
from dropbox_client.auth import get_dropbox_client, to_http_exception
from dropbox_client.client import Client
from dropbox_client.errors import DropboxError
from dropbox_client.schemas import ListFolderArg, ListFolderResult, ListFoldersArgs, ListFoldersResult

router = APIRouter(prefix="/v1", tags=["folders"])

@router.post("/sharing/list_folders", response_model=ListFoldersResult, summary="List shared folders")
async def list_shared_folders(
    payload: Optional[ListFoldersArgs] = Body(None),
    client: Client = Depends(get_dropbox_client),
):
    """
    Forwards to Dropbox sharing/list_folders with the caller's token.
    The cursor is returned as-is; follow-up pages are the caller's job.
    """
    try:
        return await client.sharing_list_folders(payload)
    except DropboxError as exc:
        raise to_http_exception("sharing/list_folders", exc) from exc


@router.post("/files/list_folder", response_model=ListFolderResult, summary="List a folder")
async def list_folder(payload: ListFolderArg, client: Client = Depends(get_dropbox_client)):
    try:
        return await client.list_folder(payload)
    except DropboxError as exc:
        raise to_http_exception("files/list_folder", exc) from exc
