from .loader import ConfigError, load_config
from .models import AppConfig, LoggingConfig, StoreConfig

# Config exports are intentionally small.
__all__ = ["AppConfig", "ConfigError", "LoggingConfig", "StoreConfig", "load_config"]
