from __future__ import annotations

from typing import Sequence

from ..core.constants import FIELD_CHECKOUT
from ..database.connection import FirestoreConnection
from ..database.firestore_base import snapshot_to_dict, store_call
from .model import StudentRecord
from .repository import StudentRepository


class FirestoreStudentRepository(StudentRepository):
    def __init__(self, conn_factory: FirestoreConnection):
        self._conn_factory = conn_factory

    def _collection(self):
        return self._conn_factory.client().collection(self._conn_factory.collection_name)

    def list_all(self) -> Sequence[StudentRecord]:
        with store_call("Fetching students"):
            snapshots = self._collection().get()
            return [StudentRecord.from_document(s.id, snapshot_to_dict(s)) for s in snapshots]

    def set_checkout(self, record_id: str, checkout: str) -> None:
        with store_call("Checkout"):
            self._collection().document(record_id).update({FIELD_CHECKOUT: checkout})
