"""In-memory entity store.

Holds the user and content collections as tuples of frozen entities, so
every reader sees the same immutable snapshot. Built once from a JSON
seed document (packaged seed_data.json unless SEED_DATA_PATH is set).
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from portal.domain.entities import ContentItemEntity, UserEntity
from portal.domain.exceptions import SeedDataException, ValidationException
from portal.infrastructure.store.seed_schema import SeedDocument
from portal.shared.utils import ensure_utc

logger = logging.getLogger(__name__)

PACKAGED_SEED = "seed_data.json"


class InMemoryEntityStore:
    """Read-only store over resident collections (implements IEntityStore)."""

    def __init__(
        self,
        users: tuple[UserEntity, ...] | list[UserEntity],
        content: tuple[ContentItemEntity, ...] | list[ContentItemEntity],
    ) -> None:
        self._users = tuple(users)
        self._content = tuple(content)

    def list_users(self) -> tuple[UserEntity, ...]:
        return self._users

    def list_content(self) -> tuple[ContentItemEntity, ...]:
        return self._content

    @classmethod
    def from_document(cls, document: SeedDocument, source: str = "<memory>") -> InMemoryEntityStore:
        """Build entities from a validated seed document.

        Raises:
            SeedDataException: duplicate ids, unknown authorId, or an entity
                that fails domain validation.
        """
        users_by_id: dict[str, UserEntity] = {}
        try:
            for record in document.users:
                if record.id in users_by_id:
                    raise SeedDataException(f"Duplicate user id: {record.id}", source)
                users_by_id[record.id] = UserEntity(
                    id=record.id,
                    name=record.name,
                    email=record.email,
                    department=record.department,
                    avatar=record.avatar,
                )

            content: list[ContentItemEntity] = []
            seen: set[str] = set()
            for record in document.content:
                if record.id in seen:
                    raise SeedDataException(f"Duplicate content id: {record.id}", source)
                seen.add(record.id)
                author = users_by_id.get(record.author_id)
                if author is None:
                    raise SeedDataException(
                        f"Content {record.id} references unknown authorId: {record.author_id}",
                        source,
                    )
                content.append(
                    ContentItemEntity(
                        id=record.id,
                        title=record.title,
                        content=record.content,
                        author=author,
                        created_at=ensure_utc(record.created_at),
                        updated_at=ensure_utc(record.updated_at),
                        tags=tuple(record.tags),
                        type=record.type,
                    )
                )
        except ValidationException as exc:
            raise SeedDataException(f"Invalid seed entity: {exc.message}", source) from exc

        return cls(tuple(users_by_id.values()), tuple(content))

    @classmethod
    def from_json(cls, raw: str | bytes, source: str = "<memory>") -> InMemoryEntityStore:
        """Parse and validate a JSON seed document.

        Raises:
            SeedDataException: malformed JSON or schema violation.
        """
        try:
            document = SeedDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise SeedDataException(
                f"Seed document failed validation: {exc.error_count()} error(s)", source
            ) from exc
        return cls.from_document(document, source)


def load_entity_store(seed_path: str | None = None) -> InMemoryEntityStore:
    """Load the store from seed_path, or from the packaged seed when None."""
    if seed_path:
        path = Path(seed_path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise SeedDataException(f"Cannot read seed file: {exc}", str(path)) from exc
        source = str(path)
    else:
        raw = resources.files(__package__).joinpath(PACKAGED_SEED).read_bytes()
        source = PACKAGED_SEED
    store = InMemoryEntityStore.from_json(raw, source)
    logger.info(
        "Entity store loaded from %s: users=%d content=%d",
        source,
        len(store.list_users()),
        len(store.list_content()),
    )
    return store
