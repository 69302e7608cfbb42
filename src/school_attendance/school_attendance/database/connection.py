from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import firebase_admin
from firebase_admin import credentials, firestore

from ..core.constants import STUDENTS_COLLECTION
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass
class FirestoreConfig:
    project_id: Optional[str]
    credentials_path: Optional[str]
    collection: str = STUDENTS_COLLECTION
    app_name: str = "school-attendance"


class FirestoreConnection:
    """Singleton-like Firestore client factory.

    Note: The Firebase app is initialised on first use so that building the
    container never touches the network or the credentials file.
    """

    _instance: Optional["FirestoreConnection"] = None

    def __init__(self, config: FirestoreConfig):
        self._config = config
        self._client: Any = None

    @classmethod
    def get_instance(cls, config: FirestoreConfig) -> "FirestoreConnection":
        if cls._instance is None:
            cls._instance = FirestoreConnection(config)
        return cls._instance

    @property
    def collection_name(self) -> str:
        return self._config.collection

    def client(self):
        if self._client is None:
            app = self._get_or_init_app()
            try:
                self._client = firestore.client(app=app)
            except ValueError as e:
                # e.g. no project id could be determined from the credentials
                raise StoreError(f"Cannot open Firestore client: {e}") from e
        return self._client

    def _get_or_init_app(self):
        try:
            return firebase_admin.get_app(self._config.app_name)
        except ValueError:
            pass

        try:
            if self._config.credentials_path:
                cred = credentials.Certificate(self._config.credentials_path)
            else:
                cred = credentials.ApplicationDefault()
        except (ValueError, OSError) as e:
            raise StoreError(f"Cannot load Firebase credentials: {e}") from e

        options = {"projectId": self._config.project_id} if self._config.project_id else None
        logger.info(
            "Initialising Firebase app %r (project=%s)",
            self._config.app_name,
            self._config.project_id or "<from credentials>",
        )
        return firebase_admin.initialize_app(cred, options, name=self._config.app_name)
