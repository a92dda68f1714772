"""
Employee list service: CRUD API over MongoDB plus frontend hosting.
"""

__version__ = "1.0.0"
