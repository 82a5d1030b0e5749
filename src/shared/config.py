import json
from pathlib import Path
from typing import Dict, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.const import (
    DEFAULT_BASE_URL, DEFAULT_POOL_SIZE, DEFAULT_REQUESTS_PER_CLIENT, DEFAULT_MAX_FAILURES_PER_CLIENT,
    DEFAULT_REQUEST_TIMEOUT, DEFAULT_MAX_KEEPALIVE_CONNECTIONS, DEFAULT_RETRY_ATTEMPTS, DEFAULT_RETRY_DELAY,
    DEFAULT_GEO_CLIENT_COOLDOWN, DEFAULT_IMAGE_CLIENT_COOLDOWN, DEFAULT_IMAGE_REQUEST_MULTIPLIER,
    DEFAULT_LOG_LEVEL, LIBRARY_LOG_LEVELS, ENV_PREFIX, CONFIG_FILE_NAME, DEFAULT_WORKLOADS,
    GEO_WORKLOAD, IMAGE_WORKLOAD,
)


class Config(BaseSettings):
    """Run configuration for the tile load generator."""

    base_url: str = DEFAULT_BASE_URL
    pool_size: int = Field(DEFAULT_POOL_SIZE, gt=0)
    requests_per_client: int = Field(DEFAULT_REQUESTS_PER_CLIENT, gt=0)
    max_failures_per_client: int = Field(DEFAULT_MAX_FAILURES_PER_CLIENT, ge=0)

    request_timeout: float = Field(DEFAULT_REQUEST_TIMEOUT, gt=0)
    max_keepalive_connections: int = Field(DEFAULT_MAX_KEEPALIVE_CONNECTIONS, ge=0)
    retry_attempts: int = Field(DEFAULT_RETRY_ATTEMPTS, ge=1)
    retry_delay: float = Field(DEFAULT_RETRY_DELAY, ge=0)
    geo_client_cooldown: float = Field(DEFAULT_GEO_CLIENT_COOLDOWN, ge=0)
    image_client_cooldown: float = Field(DEFAULT_IMAGE_CLIENT_COOLDOWN, ge=0)
    image_request_multiplier: int = Field(DEFAULT_IMAGE_REQUEST_MULTIPLIER, gt=0)

    # None accepts any 2xx status
    expected_status: Optional[int] = Field(None, ge=100, le=599)
    unexpected_status_fatal: bool = True

    random_seed: Optional[int] = None
    workloads: List[str] = list(DEFAULT_WORKLOADS)
    results_csv: Optional[Path] = None

    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        frozen=True,
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("workloads")
    @classmethod
    def check_workloads(cls, value: List[str]) -> List[str]:
        known = {GEO_WORKLOAD, IMAGE_WORKLOAD}
        unknown = [name for name in value if name not in known]
        if unknown:
            raise ValueError(f"Unknown workloads: {', '.join(unknown)}")
        if not value:
            raise ValueError("At least one workload must be selected")
        return value

    @property
    def failure_threshold(self) -> int:
        """Number of failed requests a batch tolerates before aborting."""
        return self.pool_size * self.max_failures_per_client

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from loadgen.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
