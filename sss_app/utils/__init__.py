"""
Utility functions module.

Time Semantics:
- Trade timestamps are timezone-aware UTC datetimes
- Operations that depend on "now" accept an explicit current time so
  trailing-window behaviour is reproducible
"""
