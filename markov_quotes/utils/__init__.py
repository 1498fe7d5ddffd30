# markov_quotes/utils/__init__.py
# logging helpers and configuration

from .logger_utils import Log, configure_logging
from .config_manager import Config, ConfigError

__all__ = ["Log", "configure_logging", "Config", "ConfigError"]
