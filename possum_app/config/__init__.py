"""
Configuration module.

Defaults, YAML overrides and validation for service-binding names,
state table access and logging.
"""
