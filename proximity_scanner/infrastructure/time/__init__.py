"""
Infrastructure time services module.

Concrete clock implementations for the domain Clock interface.
"""

from .monotonic_clock import MonotonicClock

__all__ = ["MonotonicClock"]
