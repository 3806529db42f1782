"""Utility helpers for plainnote.

Provides:
- logger: get_logger for namespaced logging
"""

from plainnote.utils.logger import get_logger

__all__ = ["get_logger"]
