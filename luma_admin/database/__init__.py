"""
Firestore layout for the admin API.
"""

from luma_admin.database import collections

__all__ = ["collections"]
