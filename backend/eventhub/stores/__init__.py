from eventhub.stores.interfaces import Collection, DirectoryStore
from eventhub.stores.memory import InMemoryDirectoryStore

__all__ = ["Collection", "DirectoryStore", "InMemoryDirectoryStore"]
