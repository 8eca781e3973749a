"""
Configuration module.

Frozen defaults, YAML overrides and validation for storage, provider,
time zone and logging settings.
"""
