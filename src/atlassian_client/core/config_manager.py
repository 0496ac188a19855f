"""Configuration Management for the Atlassian Client

Loads client settings from hierarchical YAML files with environment variable
overrides and validates them with pydantic. Nothing here is required: a
Client can be built from a ClientConfig created in code.
"""

import os
import threading
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from .error_handler import ConfigurationError


ENV_PREFIX = "ATLASSIAN_CLIENT_"


class AuthConfig(BaseModel):
    """Credential settings applied to a client's authenticator."""
    method: Optional[str] = Field(default=None, pattern="^(basic|bearer)$")
    username: Optional[str] = None
    password: Optional[SecretStr] = None
    token: Optional[SecretStr] = None


class ClientConfig(BaseModel):
    """Settings of the core request pipeline and its transport."""
    base_url: Optional[str] = None
    timeout: float = Field(default=30.0, gt=0, le=600)
    allow_redirects: bool = Field(default=True)
    max_redirects: int = Field(default=30, ge=0, le=100)
    verify_ssl: bool = Field(default=True)
    proxies: Dict[str, str] = Field(default_factory=dict)
    user_agent: Optional[str] = None
    auth: AuthConfig = Field(default_factory=AuthConfig)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Only absolute http(s) URLs are accepted"""
        if v is not None and not v.lower().startswith(('http://', 'https://')):
            raise ValueError("base_url must be an absolute http(s) URL")
        return v


class ConfigManager:
    """Hierarchical configuration loader.

    Files are read from ``config_path`` in this order, later ones winning:
    ``default_config.yaml``, ``<environment>.yaml``, ``local.yaml``.
    Environment variables named ``ATLASSIAN_CLIENT_<KEY>`` or
    ``ATLASSIAN_CLIENT_AUTH_<KEY>`` are applied last.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Directory holding the YAML files
            environment: Environment name selecting ``<environment>.yaml``
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv(f'{ENV_PREFIX}ENV', 'development')
        self._config: Optional[ClientConfig] = None
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        config_locations = [
            Path("config"),
            Path.home() / ".atlassian-client",
        ]

        for location in config_locations:
            if location.exists() and location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths for hierarchical loading."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml'
        }

    def load_config(self) -> ClientConfig:
        """Load and validate configuration.

        Returns:
            Validated client configuration

        Raises:
            ConfigurationError: If a file cannot be parsed or validation fails
        """
        with self._lock:
            if self._config is not None:
                return self._config

            config_data: Dict[str, Any] = {}

            for config_type, config_file in self.config_files.items():
                if config_file.exists():
                    self.logger.debug(f"Loading {config_type} config from {config_file}")
                    self._deep_merge(config_data, self._load_yaml_file(config_file))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.debug(f"Applying environment overrides: {sorted(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            try:
                self._config = ClientConfig(**config_data)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e

            return self._config

    def reload_config(self) -> ClientConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._config = None
        return self.load_config()

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Top level of {file_path} must be a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Example: ATLASSIAN_CLIENT_BASE_URL -> base_url,
        ATLASSIAN_CLIENT_AUTH_TOKEN -> auth.token
        """
        overrides: Dict[str, Any] = {}
        auth_fields = set(AuthConfig.model_fields)
        top_fields = set(ClientConfig.model_fields) - {'auth', 'proxies'}

        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue

            name = key[len(ENV_PREFIX):].lower()
            if name.startswith('auth_') and name[len('auth_'):] in auth_fields:
                overrides.setdefault('auth', {})[name[len('auth_'):]] = value
            elif name in top_fields:
                overrides[name] = value

        return overrides

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Deep merge update_dict into base_dict."""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value
