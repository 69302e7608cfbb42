from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator

from firebase_admin.exceptions import FirebaseError
from google.api_core import exceptions as google_exceptions
from google.auth.exceptions import GoogleAuthError

from ..core.exceptions import RecordNotFoundError, StoreError


@contextmanager
def store_call(operation: str) -> Iterator[None]:
    """Translate SDK failures raised inside the block into StoreError."""
    try:
        yield
    except google_exceptions.NotFound as e:
        raise RecordNotFoundError(_message(e)) from e
    except (google_exceptions.GoogleAPIError, GoogleAuthError, FirebaseError) as e:
        raise StoreError(f"{operation} failed: {_message(e)}") from e


def snapshot_to_dict(snapshot) -> Dict[str, Any]:
    data = snapshot.to_dict()
    return dict(data or {})


def _message(error: Exception) -> str:
    # GoogleAPICallError keeps the server text in .message
    return str(getattr(error, "message", None) or error)
