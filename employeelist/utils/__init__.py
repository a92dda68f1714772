"""
Utilities package.
Provides helper functions and dependencies.
"""
from .logger import setup_logging
from .normalize_fields import coerce_salary, text_or_empty

__all__ = [
    "setup_logging",
    "coerce_salary",
    "text_or_empty",
]
