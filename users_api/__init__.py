"""
Users API.

REST service for managing user records (create, read, search, update,
password update, delete) backed by MongoDB.
"""

__version__ = "1.0.0"
