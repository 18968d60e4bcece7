# okr_rollup/config.py
"""
Centralized Configuration Management

Version: 1.0.0
Features:
- Local (.env) configuration via python-dotenv
- Singleton pattern for efficiency
- Type-safe getters with defaults
- RAG threshold settings validated at load time
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from typing import Dict, Any

from .progress.constants import DEFAULT_GREEN_THRESHOLD, DEFAULT_AMBER_THRESHOLD
from .progress.status import RAGThresholds

# Initialize logger
logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return float(default)
    try:
        return float(raw)
    except ValueError:
        logger.error(f"Invalid numeric value for {name}: {raw!r}")
        raise ValueError(f"{name} must be numeric, got {raw!r}")


class Config:
    """
    Centralized configuration management

    Usage:
        from okr_rollup.config import config

        # Thresholds for the status classifier
        thresholds = config.get_rag_thresholds()

        # Get app settings
        level = config.get_app_setting("LOG_LEVEL", "INFO")
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._load_config()
        self._initialized = True

    def _load_config(self):
        """Load configuration from the environment"""
        self._load_local_env()
        self._load_app_config()
        self._log_config_status()

    def _load_local_env(self):
        """Load configuration from local .env file"""
        env_paths = [
            Path.cwd() / ".env",
            Path(__file__).parent.parent / ".env",
        ]

        for env_path in env_paths:
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded .env from: {env_path}")
                break

    def _load_app_config(self):
        """Load application-specific settings"""
        green = _read_float("RAG_GREEN_THRESHOLD", DEFAULT_GREEN_THRESHOLD)
        amber = _read_float("RAG_AMBER_THRESHOLD", DEFAULT_AMBER_THRESHOLD)

        # Validate threshold ordering
        if amber >= green:
            logger.error(f"RAG thresholds out of order: amber={amber}, green={green}")
            raise ValueError("RAG_AMBER_THRESHOLD must be lower than RAG_GREEN_THRESHOLD")

        self._app_config = {
            # Status classification
            "RAG_GREEN_THRESHOLD": green,
            "RAG_AMBER_THRESHOLD": amber,

            # Logging
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),

            # Feature flags
            "ENABLE_ROLLUP_DEBUG": os.getenv("ROLLUP_DEBUG", "false").lower() == "true",
        }

    def _log_config_status(self):
        """Log configuration status"""
        logger.info(
            f"✅ RAG thresholds: green>={self._app_config['RAG_GREEN_THRESHOLD']}, "
            f"amber>={self._app_config['RAG_AMBER_THRESHOLD']}"
        )
        logger.info(f"✅ Log level: {self._app_config['LOG_LEVEL']}")

    # ==================== PUBLIC GETTERS ====================

    def get_rag_thresholds(self) -> RAGThresholds:
        """Get status classification thresholds"""
        return RAGThresholds(
            green=self._app_config["RAG_GREEN_THRESHOLD"],
            amber=self._app_config["RAG_AMBER_THRESHOLD"],
        )

    def get_app_setting(self, key: str, default: Any = None) -> Any:
        """Get application setting with default"""
        return self._app_config.get(key, default)

    def is_feature_enabled(self, feature: str) -> bool:
        """Check if feature is enabled"""
        key = f"ENABLE_{feature.upper()}"
        return self._app_config.get(key, False)

    # ==================== PROPERTIES ====================

    @property
    def app_config(self) -> Dict[str, Any]:
        return self._app_config.copy()


def configure_logging(level: str = None) -> None:
    """Apply the application log format and level."""
    if level is None:
        level = config.get_app_setting("LOG_LEVEL", "INFO")
    if config.is_feature_enabled("ROLLUP_DEBUG"):
        level = "DEBUG"
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


# ==================== SINGLETON INSTANCE ====================

config = Config()

__all__ = [
    'config',
    'Config',
    'configure_logging',
    'LOG_FORMAT',
]
