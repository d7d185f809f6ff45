"""
Domain services for the proximity scanner.

Pure functions for tier resolution, filtering and scanning, plus the one
stateful piece of the domain, the per-actor cooldown tracker.
"""

from .cooldown_tracker import CooldownTracker
from .filter_pipeline import passes_filters
from .scan_engine import ScanResult, scan
from .tier_resolver import resolve_settings

__all__ = ["CooldownTracker", "ScanResult", "passes_filters", "resolve_settings", "scan"]
