from .logger import setup_logger
from .viewer import open_in_viewer

__all__ = [
    "setup_logger",
    "open_in_viewer",
]
