"""
Configuration module.

Frozen default parameters, YAML per-market overrides and validation.
"""
