from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Any

class ListFoldersArgs(BaseModel):
    """Arguments for sharing/list_folders. Empty for now."""
    model_config = ConfigDict(frozen=True)

class ListFoldersResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    # present when more results exist upstream
    cursor: Optional[str] = None
    entries: List[Any]

class ListFolderArg(BaseModel):
    model_config = ConfigDict(frozen=True)

    # "" is the root folder
    path: str

class ListFolderResult(ListFoldersResult):
    """
    Result of files/list_folder.
    Subclasses ListFoldersResult so callers expecting the shared-folder
    shape keep working; has_more defaults to False when absent.
    """
    has_more: bool = False
