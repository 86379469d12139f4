from .config import Settings, get_settings
from .security import hash_password, verify_password
from .logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "hash_password",
    "verify_password",
    "configure_logging",
]
