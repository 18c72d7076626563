from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.sf_idgen.layout import MAX_DATA_CENTER_ID, MAX_WORKER_ID


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Default pair used by generate_id() when the caller passes none.
    # Must be unique per running process across the deployment.
    SNOWFLAKE_WORKER_ID: int = Field(default=0, ge=0, le=MAX_WORKER_ID)
    SNOWFLAKE_DATA_CENTER_ID: int = Field(default=0, ge=0, le=MAX_DATA_CENTER_ID)


settings = Settings()
