"""
MongoDB Connection Utility

MongoDB stores one document per applicant in a single collection,
with comments embedded as a sub-array:

    {"id": 1718000000000, "fullName": "...", "dateAdded": "6/10/2024",
     "comments": [{"person": "...", "text": "...", "date": "..."}]}
"""
import logging
from typing import Dict

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from applicant_tracker.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# One client per URI (connection pooling handled internally by pymongo)
_clients: Dict[str, MongoClient] = {}


def get_mongo_client(settings: Settings = None) -> MongoClient:
    """Get or create the MongoDB client for settings.mongodb_uri (singleton per URI)"""
    uri = (settings or get_settings()).mongodb_uri
    if uri not in _clients:
        _clients[uri] = MongoClient(uri)
    return _clients[uri]


def get_mongo_db(settings: Settings = None) -> Database:
    """Get the configured application database"""
    settings = settings or get_settings()
    return get_mongo_client(settings)[settings.mongodb_db]


def get_collection(settings: Settings = None, name: str = None) -> Collection:
    """
    Get a specific collection.
    Defaults to the applicants collection from settings.
    """
    settings = settings or get_settings()
    return get_mongo_db(settings)[name or settings.mongodb_collection]


def test_mongo_connection(client: MongoClient = None) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = client if client is not None else get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(collection: Collection = None):
    """
    Create indexes for applicant lookups.
    Call this once during app startup.
    """
    collection = collection if collection is not None else get_collection()

    # Every update/delete/comment addresses an applicant by its numeric id
    collection.create_index("id", unique=True)

    logger.info("MongoDB indexes created on %s", collection.name)
