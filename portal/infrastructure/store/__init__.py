"""In-memory entity store and its JSON seed loader."""

from portal.infrastructure.store.memory_store import InMemoryEntityStore, load_entity_store

__all__ = ["InMemoryEntityStore", "load_entity_store"]
