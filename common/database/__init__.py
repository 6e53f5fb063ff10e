"""
Database module - Async Cloud Firestore client management.
"""

from common.database.firestore import Firestore

__all__ = ["Firestore"]
