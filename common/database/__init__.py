"""Async MongoDB connection management."""

from common.database.mongodb import MongoDB

__all__ = ["MongoDB"]
