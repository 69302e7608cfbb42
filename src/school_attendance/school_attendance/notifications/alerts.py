from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional, Protocol

from flask import session

from ..core.enums import AlertColor

SESSION_KEY = "alert_box"


@dataclass(frozen=True)
class AlertBox:
    title: str
    message: str
    color: AlertColor
    show: bool = True

    def as_dict(self) -> dict:
        data = asdict(self)
        data["color"] = self.color.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AlertBox":
        return cls(
            title=str(data.get("title", "")),
            message=str(data.get("message", "")),
            color=AlertColor(data.get("color", AlertColor.TEAL.value)),
            show=bool(data.get("show", True)),
        )


class AlertChannel(Protocol):
    def raise_alert(self, alert: AlertBox) -> None:
        raise NotImplementedError


class SessionAlertChannel(AlertChannel):
    """Keeps the pending alert in the Flask session until it is shown once."""

    def raise_alert(self, alert: AlertBox) -> None:
        session[SESSION_KEY] = alert.as_dict()

    def pop_alert(self) -> Optional[AlertBox]:
        data = session.pop(SESSION_KEY, None)
        if not data:
            return None
        alert = AlertBox.from_dict(data)
        return alert if alert.show else None

    def dismiss(self) -> None:
        data = session.get(SESSION_KEY)
        if data:
            session[SESSION_KEY] = {**data, "show": False}
