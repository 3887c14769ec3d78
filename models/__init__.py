"""
models/ - Domain Models
=======================
Plain data objects returned by the database layer.
"""

from models.row import Row, ValueKind

__all__ = ["Row", "ValueKind"]
