"""Utility module for grm.

This module provides cross-cutting utilities:
- Logging: Configured logging with URL secret redaction
"""
