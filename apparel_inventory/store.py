# store.py
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from apparel_inventory.errors import InventoryStoreError
from apparel_inventory.models import Apparel

LOG = logging.getLogger("inventory.store")

DOCUMENT_FIELD = "inventory"


def _to_document(catalog: List[Apparel]) -> dict:
    return {DOCUMENT_FIELD: [apparel.model_dump() for apparel in catalog]}


def _from_document(doc, source) -> List[Apparel]:
    if not isinstance(doc, dict):
        raise InventoryStoreError(f"{source}: expected a JSON object with an '{DOCUMENT_FIELD}' field")
    try:
        return [Apparel.model_validate(record) for record in doc.get(DOCUMENT_FIELD) or []]
    except (ValidationError, TypeError) as exc:
        raise InventoryStoreError(f"{source}: malformed apparel record: {exc}") from exc


class InventoryStore(ABC):
    """Whole-catalog persistence: every save replaces everything saved before."""

    @abstractmethod
    def load(self) -> List[Apparel]:
        ...

    @abstractmethod
    def save(self, catalog: List[Apparel]) -> None:
        ...


class JsonFileInventoryStore(InventoryStore):
    """
    Keeps the catalog as one JSON document: {"inventory": [{code, sizes: [...]}, ...]}.
    A missing file reads as an empty catalog. With create_if_missing the
    first load writes that empty document out.
    """

    def __init__(self, path, create_if_missing: bool = True):
        self.path = Path(path)
        self.create_if_missing = create_if_missing

    def load(self) -> List[Apparel]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            if self.create_if_missing:
                LOG.info("Inventory file %s not found, creating an empty catalog", self.path)
                self.save([])
            return []
        except OSError as exc:
            raise InventoryStoreError(f"cannot read {self.path}: {exc}") from exc

        try:
            doc = json.loads(raw)
        except ValueError as exc:
            raise InventoryStoreError(f"{self.path} is not valid JSON: {exc}") from exc
        return _from_document(doc, self.path)

    def save(self, catalog: List[Apparel]) -> None:
        payload = json.dumps(_to_document(catalog), indent=2)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # write next to the target and swap it in, so readers never see half a document
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent,
                prefix=f".{self.path.name}.", suffix=".tmp", delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            LOG.error("Error writing inventory data to %s: %s", self.path, exc)
            raise InventoryStoreError(f"cannot write {self.path}: {exc}") from exc
        LOG.debug("Saved %d apparel records to %s", len(catalog), self.path)


class MongoInventoryStore(InventoryStore):
    """Same document shape as the file store, kept as a single MongoDB document."""

    def __init__(self, collection, document_id: str = DOCUMENT_FIELD):
        self.collection = collection
        self.document_id = document_id

    @classmethod
    def from_url(cls, mongo_url: str, db_name: str, coll_name: str):
        client = MongoClient(mongo_url)
        return cls(client[db_name][coll_name])

    def load(self) -> List[Apparel]:
        try:
            doc = self.collection.find_one({"_id": self.document_id})
        except PyMongoError as exc:
            raise InventoryStoreError(f"cannot read inventory document: {exc}") from exc
        if doc is None:
            return []
        return _from_document(doc, f"document {self.document_id!r}")

    def save(self, catalog: List[Apparel]) -> None:
        doc = {"_id": self.document_id, **_to_document(catalog)}
        try:
            self.collection.replace_one({"_id": self.document_id}, doc, upsert=True)
        except PyMongoError as exc:
            raise InventoryStoreError(f"cannot write inventory document: {exc}") from exc
        LOG.debug("Saved %d apparel records to document %s", len(catalog), self.document_id)


class InMemoryInventoryStore(InventoryStore):

    def __init__(self, initial: List[Apparel] | None = None):
        self._catalog = [a.model_copy(deep=True) for a in initial or []]
        self.save_count = 0

    def load(self) -> List[Apparel]:
        return [a.model_copy(deep=True) for a in self._catalog]

    def save(self, catalog: List[Apparel]) -> None:
        self._catalog = [a.model_copy(deep=True) for a in catalog]
        self.save_count += 1
