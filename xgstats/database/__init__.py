"""
Database Module
SQLAlchemy Schema und Database Manager
"""

from .manager import DatabaseManager
from .schema import Base, XGStatFixture, XGStatShot

__all__ = [
    "DatabaseManager",
    "Base",
    "XGStatFixture",
    "XGStatShot",
]
