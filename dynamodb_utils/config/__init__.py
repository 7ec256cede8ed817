from .config import (
    MAX_BATCH_GET_KEYS,
    MAX_BATCH_WRITE_ITEMS,
    UtilsConfig,
    configure_logging,
)

__all__ = [
    "MAX_BATCH_GET_KEYS",
    "MAX_BATCH_WRITE_ITEMS",
    "UtilsConfig",
    "configure_logging",
]
