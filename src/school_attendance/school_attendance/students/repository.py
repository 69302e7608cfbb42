from __future__ import annotations

from typing import Protocol, Sequence

from .model import StudentRecord


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[StudentRecord]:
        raise NotImplementedError

    def set_checkout(self, record_id: str, checkout: str) -> None:
        """Write the checkout field of one record.

        Raises RecordNotFoundError when the document does not exist.
        """

        raise NotImplementedError
