"""
Database module - MongoDB connection.
"""
from applicant_tracker.db.mongodb import get_collection, get_mongo_db, test_mongo_connection

__all__ = [
    "get_collection",
    "get_mongo_db",
    "test_mongo_connection"
]
