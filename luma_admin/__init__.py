"""
Luma Events admin API.

Administrative endpoints for the events/vendor marketplace, backed by
Cloud Firestore and Firebase Authentication.
"""

__version__ = "1.0.0"
