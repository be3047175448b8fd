"""
Storage Blob Model — Named key/value slots holding serialized documents.
The payment ledger lives in a single row, overwritten on every append.
"""
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime

from paysim.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class StorageBlob(Base):
    __tablename__ = "storage_blobs"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)  # JSON document, replaced wholesale

    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)
