"""Utility modules: config and logging."""
import os
import logging
import sys
from typing import Any, Dict

from dotenv import load_dotenv

# Load .env file for local development
load_dotenv()

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


# ============================================================================
# CONFIGURATION
# ============================================================================

class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


def validate_config() -> Dict[str, Any]:
    """
    Validate configuration values from environment variables.

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If any configuration value is invalid
    """
    optional_vars = {
        'catalog_path': ('EMOJI_CATALOG_PATH', ''),
        'log_level': ('EMOJI_LOG_LEVEL', 'INFO'),
        'log_structured': ('EMOJI_LOG_STRUCTURED', 'true'),
    }

    config = {}
    for key, (env_var, default) in optional_vars.items():
        config[key] = os.getenv(env_var, default).strip()

    problems = []

    if config['catalog_path'] and not os.path.isfile(config['catalog_path']):
        problems.append(f"EMOJI_CATALOG_PATH points to a missing file: {config['catalog_path']}")
    config['catalog_path'] = config['catalog_path'] or None

    config['log_level'] = config['log_level'].upper() or 'INFO'
    if config['log_level'] not in VALID_LOG_LEVELS:
        problems.append(f"EMOJI_LOG_LEVEL must be one of {list(VALID_LOG_LEVELS)}")

    config['log_structured'] = config['log_structured'].lower() in ('true', '1', 'yes')

    if problems:
        raise ConfigError(f"Invalid configuration: {problems}")

    logger.info("Configuration validated successfully")
    return config


# ============================================================================
# LOGGING
# ============================================================================

def setup_logging(level: str = "INFO", structured: bool = True) -> None:
    """Configure logging for the application."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    if structured:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "name": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger('apache_beam').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)

