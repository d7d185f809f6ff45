"""
Infrastructure Layer - Host-facing implementations

Clocks, schedulers, in-memory actor directories, scan log sinks and the
process logging setup.
"""
