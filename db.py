"""
MongoDB Access Module.

This module sets up the connection to the MongoDB database holding the
band documents, and wraps the bands collection in a small store object.

Attributes:
    MONGO_USERNAME (str): An environment variable having MongoDB username.
                          Defaults to "username".
    MONGO_PASSWORD (str): An environment variable having MongoDB password.
                          Defaults to "password".
    MONGO_HOST (str): MongoDB host. Defaults to "mongo".
    MONGO_PORT (str): MongoDB port. Defaults to "27017".
    MONGO_URI (str): MongoDB URI.
    MONGO_DATABASE (str): MongoDB database name.
    MONGO_TIMEOUT_MS (str): Server selection timeout in milliseconds,
                            parsed when a client is opened. Defaults to "5000".
    BANDS_COLLECTION (str): Name of the collection holding band documents.
"""

from contextlib import contextmanager
from os import getenv
from typing import Any, Dict, Iterator, List

from pymongo import MongoClient

# get mongodb URI and database name from environment variale
MONGO_URI = "mongodb://{}:{}@{}:{}/".format(
    getenv("MONGO_USERNAME", default="username"),
    getenv("MONGO_PASSWORD", default="password"),
    getenv("MONGO_HOST", default="mongo"),
    getenv("MONGO_PORT", default="27017"),
)
MONGO_DATABASE = getenv("MONGO_DATABASE", default="default")
MONGO_TIMEOUT_MS = getenv("MONGO_TIMEOUT_MS", default="5000")

BANDS_COLLECTION = "bands"


class BandNotFound(Exception):
    """Raised when a partial update matches no band document"""

    def __init__(self, band_id):
        super().__init__(f"No band document with id {band_id}")
        self.band_id = band_id


def open_client(uri: str = MONGO_URI) -> MongoClient:
    """
    Opens a MongoDB client and checks that the server answers

    Args:
        uri (str): MongoDB URI. Defaults to MONGO_URI.

    Returns:
        MongoClient: A connected client.

    Raises:
        ValueError: If MONGO_TIMEOUT_MS is not an integer.
        PyMongoError: If the server cannot be reached or refuses the credentials.
    """

    timeout_ms = int(MONGO_TIMEOUT_MS)
    client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    return client


class BandStore:
    """
    Read and partial-update access to the bands collection

    Args:
        collection (Collection): The bands collection.
    """

    def __init__(self, collection):
        self.collection = collection

    def list_bands(self) -> List[Dict[str, Any]]:
        """
        Fetches every band document as a snapshot

        Returns:
            List[dict]: All band documents, read once.
        """

        return list(self.collection.find({}))

    def update_fields(self, band_id, fields: Dict[str, Any]) -> None:
        """
        Sets only the given fields on one band document

        Args:
            band_id (Any): The _id of the band document.
            fields (dict): Field names and the values to write.

        Raises:
            BandNotFound: No document has this _id anymore.
            PyMongoError: The write was rejected.
        """

        result = self.collection.update_one({"_id": band_id}, {"$set": fields})
        if result.matched_count == 0:
            raise BandNotFound(band_id)


@contextmanager
def band_store(
    uri: str = MONGO_URI, database: str = MONGO_DATABASE
) -> Iterator[BandStore]:
    """
    Yields a BandStore and closes the client on every exit path

    Args:
        uri (str): MongoDB URI. Defaults to MONGO_URI.
        database (str): Database name. Defaults to MONGO_DATABASE.
    """

    client = open_client(uri)
    try:
        yield BandStore(client[database][BANDS_COLLECTION])
    finally:
        client.close()
