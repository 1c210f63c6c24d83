# file: undoredo/utils/__init__.py

from undoredo.utils.config_loader import ConfigLoader
from undoredo.utils.logger import MemoryLogFilter, setup_logging

__all__ = ["ConfigLoader", "MemoryLogFilter", "setup_logging"]
