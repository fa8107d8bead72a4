from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    app_name: str = Field(default="Airport Lookup API")
    env: str = Field(default="development")
    log_level: str = Field(default="INFO")
    cors_allow_origins: List[str] = Field(default=["*"])

    # Dataset (None -> app/data/airports.csv)
    airports_csv_path: Optional[str] = None
    airports_id_column: str = Field(default="ident")
    airports_name_column: str = Field(default="name")

    # Search fan-out; workers=1 keeps the filter on the request thread.
    # More workers only help on free-threaded (no-GIL) interpreters.
    search_workers: int = Field(default=1, ge=1)
    search_parallel_threshold: int = Field(default=20_000, ge=0)

settings = Settings()
