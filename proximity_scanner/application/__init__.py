"""
Application Layer - Command orchestration

Configuration, reply messages and the use cases behind the ``scan`` and
``scan.for`` commands. Depends on the domain layer only.
"""
