from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    DROPBOX_API_BASE: str = "https://api.dropboxapi.com/2/"
    # None disables the timeout; callers bound call duration themselves
    DROPBOX_TIMEOUT: Optional[float] = None

    ALLOWED_ORIGINS: list[str] = []
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_case_sensitive=False
    )

settings = Settings()
