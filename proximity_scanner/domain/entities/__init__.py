"""Domain entities."""

from .actor import Actor

__all__ = ["Actor"]
