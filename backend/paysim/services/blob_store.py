"""
Blob Store — Durable named slots for whole serialized documents.
Writes overwrite; there is no partial update.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import sessionmaker

from paysim.models.storage import StorageBlob


class BlobStore:
    """Key/value blob storage on top of the ``storage_blobs`` table.

    SQLAlchemy errors are left to the caller, which decides whether a
    storage fault is fatal.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        with self._session_factory() as db:
            blob = db.get(StorageBlob, key)
            return blob.value if blob else None

    def put(self, key: str, value: str) -> None:
        with self._session_factory() as db:
            blob = db.get(StorageBlob, key)
            if blob is None:
                db.add(StorageBlob(key=key, value=value))
            else:
                blob.value = value
                blob.updated_at = datetime.now(timezone.utc)
            db.commit()

    def delete(self, key: str) -> None:
        with self._session_factory() as db:
            blob = db.get(StorageBlob, key)
            if blob is not None:
                db.delete(blob)
                db.commit()
