"""
Configuration for the MeiliSearch client.

Provides a Pydantic model describing how to reach an instance, with validation
and support for loading from YAML files or the environment.
"""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from .client import MeiliMelo

HOST_ENV = "MEILI_HOST"
API_KEY_ENV = "MEILI_API_KEY"
TIMEOUT_ENV = "MEILI_TIMEOUT"


class ClientConfig(BaseModel):
    """Connection settings for a MeiliSearch instance."""

    host: str = Field(
        default="http://localhost:7700", description="Scheme, hostname and port of the instance"
    )
    secret_key: str | None = Field(default=None, description="Secret key for X-Meili-API-Key")
    timeout: float | None = Field(default=None, gt=0, description="Request timeout in seconds")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )

    @field_validator("host")
    @classmethod
    def validate_host(cls, v):
        """Require an http(s) scheme and drop trailing slashes."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                f"host ({v}) must include the scheme, e.g. http://localhost:7700"
            )
        return v.rstrip("/")

    class Config:
        """Pydantic configuration."""

        validate_assignment = True
        extra = "forbid"

    def to_client(self) -> MeiliMelo:
        """Build the client descriptor for these settings."""
        return MeiliMelo(host=self.host, secret_key=self.secret_key, timeout=self.timeout)


def config_from_env(**overrides) -> ClientConfig:
    """Build a configuration from MEILI_* environment variables.

    Keyword overrides that are not None take precedence over the environment.
    """
    values = {}
    if os.environ.get(HOST_ENV):
        values["host"] = os.environ[HOST_ENV]
    if os.environ.get(API_KEY_ENV):
        values["secret_key"] = os.environ[API_KEY_ENV]
    if os.environ.get(TIMEOUT_ENV):
        values["timeout"] = os.environ[TIMEOUT_ENV]
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ClientConfig(**values)


def load_config_from_yaml(yaml_path: str | Path) -> ClientConfig:
    """Load configuration from a YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        Validated ClientConfig instance

    Example YAML:
        ```yaml
        host: https://search.example.com:7700
        secret_key: abcdef
        timeout: 10
        log_level: INFO
        ```
    """
    with open(yaml_path) as f:
        config_dict = yaml.safe_load(f) or {}

    return ClientConfig(**config_dict)


def save_config_to_yaml(config: ClientConfig, yaml_path: str | Path) -> None:
    """Save configuration to a YAML file.

    Args:
        config: ClientConfig instance to save
        yaml_path: Path to save YAML file
    """
    with open(yaml_path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
