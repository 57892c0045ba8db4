"""Define configuration for the page cache."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


class Settings(BaseSettings):
    """Page cache configuration settings."""

    model_config = SettingsConfigDict(env_prefix="PAGECACHE_", extra="ignore")

    app_env: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Current application environment determining log output.",
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum level of log records written to the sink.",
    )

    default_items_per_page: int = Field(
        default=10,
        gt=0,
        description="Page size used when neither the caller nor the server sets one.",
    )

    render_stale_responses: bool = Field(
        default=False,
        description=(
            "Render fetch results for pages other than the latest requested one "
            "(last arrival wins) instead of only caching them."
        ),
    )

    fetch_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for HTTP page fetches.",
    )

    page_size_param: Literal["pagesize", "size"] = Field(
        default="pagesize",
        description="Query parameter carrying the page size on fetch requests.",
    )


settings = Settings()
