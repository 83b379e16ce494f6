from .json_collection import CollectionStore, JsonCollectionStore
from .locks import collection_lock_for

__all__ = ["CollectionStore", "JsonCollectionStore", "collection_lock_for"]
