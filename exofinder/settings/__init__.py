from .config import Settings, settings, get_settings
from .log_config import configure_logging

__all__ = ["Settings", "settings", "get_settings", "configure_logging"]
