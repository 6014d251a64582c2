"""Configuration schema module.

This module defines the data structures used for configuration in modelsdev.
The schemas are designed to be minimal but extensible through Pydantic.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: str = "WARNING"

    # Allow arbitrary extension
    model_config = {"extra": "allow"}

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


class ModelsDevConfig(BaseModel):
    """Root configuration.

    Attributes:
        data_path: Catalog data file used when callers do not pass one.
        canonical_providers: Providers preferred when a bare model id is
            listed by several providers. ``None`` keeps the built-in list.
        base_url_fallbacks: Extra npm package -> API root entries merged over
            the built-in fallback table.
        logging: Logging preferences.
    """

    data_path: Optional[str] = None
    canonical_providers: Optional[List[str]] = None
    base_url_fallbacks: Dict[str, str] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Allow arbitrary extension
    model_config = {"extra": "allow"}

    @field_validator("data_path")
    @classmethod
    def _blank_path_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("canonical_providers", mode="before")
    @classmethod
    def _split_providers(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [str(item).strip() for item in value if str(item).strip()]
        return value

    @field_validator("base_url_fallbacks")
    @classmethod
    def _strip_fallback_urls(cls, value: Dict[str, str]) -> Dict[str, str]:
        return {package: url.rstrip("/") for package, url in value.items()}
