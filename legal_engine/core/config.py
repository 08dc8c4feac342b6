"""Application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

# Bundled rule pack shipped with the package
DEFAULT_PACK_DIR = Path(__file__).resolve().parent.parent / "legal_pack" / "data" / "v1_0_1"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API
    app_name: str = "Deal Flow Legal Engine"
    debug: bool = False
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    # Paths
    legal_pack_dir: str | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def pack_dir(self) -> Path:
        """Directory of the active legal pack."""
        if self.legal_pack_dir:
            return Path(self.legal_pack_dir)
        return DEFAULT_PACK_DIR


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
