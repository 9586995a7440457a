from .logger import get_logger, set_log_level
from .config_loader import load_config, load_percolation_config

__all__ = [
    "get_logger",
    "set_log_level",
    "load_config",
    "load_percolation_config",
]
