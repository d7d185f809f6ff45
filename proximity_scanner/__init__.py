"""On-demand proximity scanning for live game sessions."""

__version__ = "2.3.0"
