# Path: corpus_match/config_loader.py
"""
Configuration Loader for corpus_match

Loads configuration from a .env file and environment variables.
Singleton pattern ensures consistent configuration across all components.

Nothing here is required: every setting has a default, so the matcher
can be embedded in a pipeline without any configuration at all.
"""

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .constants import (
    ENGINE_STRUCTURAL,
    OUTPUT_TEXT,
    SUPPORTED_ENGINES,
    SUPPORTED_OUTPUT_FORMATS,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

ENV_PREFIX: str = 'CORPUS_MATCH_'

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Matching Defaults
DEFAULT_EVALUATION_ENGINE: str = ENGINE_STRUCTURAL

# Input Defaults
DEFAULT_ENCODING: str = 'utf-8'
DEFAULT_ENCODING_FALLBACKS: str = 'utf-8,latin-1,cp1252'

# Output Defaults
DEFAULT_OUTPUT_FORMAT: str = OUTPUT_TEXT


class ConfigLoader:
    """
    Singleton configuration loader for corpus_match.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        engine = config.get('evaluation_engine')  # 'structural'
        log_dir = config.get('log_dir')           # Path or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env from the
        working directory if present.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load and validate all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types

        Raises:
            ValueError: If the evaluation engine is not supported
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', 'development'),
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
            'log_console': self._get_bool('LOG_CONSOLE', True),

            # ================================================================
            # MATCHING CONFIGURATION
            # ================================================================
            'evaluation_engine': self._get_env(
                'EVALUATION_ENGINE', DEFAULT_EVALUATION_ENGINE
            ).lower(),

            # ================================================================
            # INPUT CONFIGURATION
            # ================================================================
            'default_encoding': self._get_env('DEFAULT_ENCODING', DEFAULT_ENCODING),
            'encoding_fallbacks': self._get_list(
                'ENCODING_FALLBACKS', DEFAULT_ENCODING_FALLBACKS
            ),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'output_format': self._get_env(
                'OUTPUT_FORMAT', DEFAULT_OUTPUT_FORMAT
            ).lower(),
        }

        if config['evaluation_engine'] not in SUPPORTED_ENGINES:
            raise ValueError(
                f"Unsupported {ENV_PREFIX}EVALUATION_ENGINE: "
                f"{config['evaluation_engine']}"
            )

        if config['output_format'] not in SUPPORTED_OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported {ENV_PREFIX}OUTPUT_FORMAT: "
                f"{config['output_format']}"
            )

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str) -> Optional[Path]:
        """Get path from environment variable (None when unset or blank)."""
        value = os.getenv(ENV_PREFIX + key)
        if not value:
            return None

        # Handle variable interpolation
        if '${' in value or '$' in value:
            value = os.path.expandvars(value)

        return Path(value).expanduser()

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_list(self, key: str, default: str) -> list[str]:
        """Get comma-separated environment variable as a list."""
        value = os.getenv(ENV_PREFIX + key, default)
        return [item.strip() for item in value.split(',') if item.strip()]

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"evaluation_engine={self._config.get('evaluation_engine')})"
        )


__all__ = ['ConfigLoader']
