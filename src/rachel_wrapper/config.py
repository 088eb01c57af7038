from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    module_root: str = "/var/modules"
    web_module_root: str = "/mods"
    index_filename: str = "rachel-index.html"
    asset_prefix: str = "/sample_assets"
    assets_dir: str | None = None
    allowed_modules: Annotated[list[str] | None, NoDecode] = None
    wrapper_host: str = "0.0.0.0"
    wrapper_port: int = 8080
    log_level: str = "info"

    class Config:
        env_prefix = ""
        case_sensitive = False

    @field_validator("allowed_modules", mode="before")
    @classmethod
    def _split_modules(cls, value):
        # ALLOWED_MODULES=foo,bar
        if isinstance(value, str):
            modules = [item.strip() for item in value.split(",") if item.strip()]
            return modules or None
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
