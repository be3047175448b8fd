from paysim.models.storage import StorageBlob

__all__ = ["StorageBlob"]
