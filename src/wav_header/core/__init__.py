"""
wav-header core infrastructure.

Components:
    - config.py: YAML settings, defaults and validation
    - logging/: numeric-level structured logging
"""
