"""Null-safe chaining over arbitrary values."""

from maybe.core.chain import Maybe, maybe
from maybe.core.config import ChainPolicy

__version__ = "0.1.0"

__all__ = ["ChainPolicy", "Maybe", "maybe", "__version__"]
