"""Logger lookup for plainnote.

All loggers live under the ``plainnote`` namespace so applications can tune
the whole package with a single ``logging.getLogger("plainnote")`` call.

Example:
    >>> from plainnote.utils.logger import get_logger
    >>> logger = get_logger("lexer")
    >>> logger.name
    'plainnote.lexer'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the standard library logger for ``name`` under ``plainnote.``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "plainnote" or name.startswith("plainnote.")):
        name = f"plainnote.{name}"
    return logging.getLogger(name)
