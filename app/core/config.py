"""
Application settings loaded from environment variables.
"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./agrimarket.db"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # Reject roles other than buyer/farmer instead of falling back to farmer
    strict_roles: bool = False

    cors_origins: List[str] = [
        "http://localhost",
        "http://localhost:3000",
    ]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }


settings = Settings()
