"""
Application configuration using environment variables.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database settings
    sqlite_db: str = Field(default="meal_planner.db", alias="MEAL_PLANNER_DB")
    migrations_dir: Path = Field(
        default=Path("migrations"), alias="MIGRATIONS_DIR"
    )

    # Shopping list export
    shopping_list_encoding: str = Field(
        default="utf-8", alias="SHOPPING_LIST_ENCODING"
    )
    shopping_list_per_slot: bool = Field(
        default=False, alias="SHOPPING_LIST_PER_SLOT"
    )

    # FastAPI settings
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    api_reload: bool = Field(default=False, alias="API_RELOAD")

    # Development settings
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(
        default="meal_planner.log", alias="LOG_FILE"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def resolved_migrations_dir(self) -> Path:
        """Return the migrations directory, anchored at the project root."""
        if self.migrations_dir.is_absolute():
            return self.migrations_dir
        return PROJECT_ROOT / self.migrations_dir


# Global settings instance
settings = Settings()
