from .settings import (
    BasexConfig,
    TempFilesConfig,
    LoggingConfig,
    Settings,
    load_settings,
    DEFAULT_CONFIG_PATH,
)

__all__ = [
    "BasexConfig",
    "TempFilesConfig",
    "LoggingConfig",
    "Settings",
    "load_settings",
    "DEFAULT_CONFIG_PATH",
]
