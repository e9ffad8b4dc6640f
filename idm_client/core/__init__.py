"""Core client logic: validation and Management API sub-clients."""
