"""Domain value objects."""

from .position import Position
from .scan_settings import EffectiveSettings, FilterConfig, Tier

__all__ = ["EffectiveSettings", "FilterConfig", "Position", "Tier"]
