"""Named key/value blob stores: in-memory and SQLModel-backed implementations"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from sqlmodel import Session, select

from pagesmith.core.utils.hashing import etag
from pagesmith.crud.models import Blob, BlobEntry


class BlobStore(ABC):
    """String values addressed by string keys. Single-key writes, last writer wins."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str, metadata: Optional[dict[str, Any]] = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def list(self, prefix: str = "") -> list[BlobEntry]:
        """Return entries whose key starts with prefix, sorted by key."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key; absent keys are ignored."""
        raise NotImplementedError

    @abstractmethod
    def get_metadata(self, key: str) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def get_json(self, key: str) -> Any:
        value = self.get(key)
        return None if value is None else json.loads(value)

    def set_json(self, key: str, obj: Any) -> None:
        self.set(key, json.dumps(obj, ensure_ascii=False))


@dataclass
class MemoryBlobStore(BlobStore):
    _values: dict[str, str] = field(default_factory=dict)
    _meta: dict[str, Optional[dict[str, Any]]] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str, metadata: Optional[dict[str, Any]] = None) -> None:
        self._values[key] = value
        self._meta[key] = metadata

    def list(self, prefix: str = "") -> list[BlobEntry]:
        return [
            BlobEntry(key=k, etag=etag(v))
            for k, v in sorted(self._values.items())
            if k.startswith(prefix)
        ]

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
        self._meta.pop(key, None)

    def get_metadata(self, key: str) -> Optional[dict[str, Any]]:
        return self._meta.get(key)


class SQLBlobStore(BlobStore):
    """Blob store persisted in the `blobs` table; each call runs in its own session."""

    def __init__(self, engine, name: str):
        self.engine = engine
        self.name = name

    def _row(self, session: Session, key: str) -> Optional[Blob]:
        return session.get(Blob, (self.name, key))

    def get(self, key: str) -> Optional[str]:
        with Session(self.engine) as session:
            row = self._row(session, key)
            return row.value if row else None

    def get_metadata(self, key: str) -> Optional[dict[str, Any]]:
        with Session(self.engine) as session:
            row = self._row(session, key)
            return row.meta if row else None

    def set(self, key: str, value: str, metadata: Optional[dict[str, Any]] = None) -> None:
        with Session(self.engine) as session:
            row = self._row(session, key) or Blob(store=self.name, key=key, value=value, etag=etag(value))
            row.value = value
            row.etag = etag(value)
            row.meta = metadata
            row.updated_at = datetime.now()
            session.add(row)
            session.commit()

    def list(self, prefix: str = "") -> list[BlobEntry]:
        with Session(self.engine) as session:
            query = select(Blob).where(Blob.store == self.name)
            if prefix:
                query = query.where(Blob.key.startswith(prefix, autoescape=True))
            rows = session.exec(query.order_by(Blob.key)).all()
            return [BlobEntry(key=r.key, etag=r.etag) for r in rows]

    def delete(self, key: str) -> None:
        with Session(self.engine) as session:
            row = self._row(session, key)
            if row is not None:
                session.delete(row)
                session.commit()
