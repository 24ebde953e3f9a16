import os
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
dotenv_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../.env'))


class Settings(BaseSettings):
    app_title: str = "Contact Book"
    debug: bool = False
    log_level: str = "INFO"

    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    default_ascending: bool = True
    max_image_bytes: int = 5 * 1024 * 1024

    model_config = SettingsConfigDict(env_file=dotenv_path, env_prefix="CONTACT_BOOK_", extra="ignore")

settings = Settings()
