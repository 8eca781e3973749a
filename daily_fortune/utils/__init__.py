"""
Utility functions module.

Time Semantics:
- Fortune timestamps are stored as UTC ISO-8601 strings
- Calendar days are computed in the configured time zone (device-local
  when none is configured) and formatted as YYYY-MM-DD
- "Today" always comes from an injectable clock so tests can pin it
"""
