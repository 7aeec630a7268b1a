import logging
import os

from dotenv import load_dotenv
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

_client: MongoClient | None = None

USERS = "users"
PROFILES = "profiles"


def _get_client() -> MongoClient:
    global _client
    if _client is None:
        load_dotenv()
        mongo_uri = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
        _client = MongoClient(mongo_uri, tz_aware=True)
    return _client


def set_client(client: MongoClient | None) -> None:
    global _client
    _client = client


def get_db() -> Database:
    load_dotenv()
    db_name = os.getenv("MONGODB_DB", "devconnector")
    return _get_client()[db_name]


def get_collection(name: str):
    return get_db()[name]


def ensure_indexes() -> None:
    """Create the unique indexes that back the one-user-per-email and
    one-profile-per-user invariants."""
    get_collection(USERS).create_index([("email", ASCENDING)], unique=True)
    get_collection(PROFILES).create_index([("user", ASCENDING)], unique=True)
    logger.info("MongoDB indexes ensured for collections=%s,%s", USERS, PROFILES)
