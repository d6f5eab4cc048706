"""Configuration module for grm.

This module handles application settings and paths:
- SettingsManager: JSON-based settings persistence
- AppSettings: Settings dataclass
- Paths: tag marker layout and app data directories
"""
