from __future__ import annotations

import csv
import io

import pytest

from src.school_attendance.school_attendance.container import build_container_with_repository
from src.school_attendance.school_attendance.core.exceptions import RecordNotFoundError, StoreError
from src.school_attendance.school_attendance.main import create_app
from src.school_attendance.school_attendance.notifications.alerts import SESSION_KEY
from src.school_attendance.school_attendance.students.model import StudentRecord


class InMemoryStudents:
    def __init__(self, records):
        self._records = {r.record_id: r for r in records}
        self.list_calls = 0
        self.fail_list = None

    def list_all(self):
        self.list_calls += 1
        if self.fail_list:
            raise self.fail_list
        return list(self._records.values())

    def set_checkout(self, record_id: str, checkout: str) -> None:
        if record_id not in self._records:
            raise RecordNotFoundError(f"No document to update: {record_id}")
        r = self._records[record_id]
        self._records[record_id] = StudentRecord(r.record_id, r.roll_number, r.name, r.checkin, checkout)


@pytest.fixture
def repo():
    return InMemoryStudents(
        [
            StudentRecord("s2", "102", "Sara Khan", "10/19/2026, 8:55:00 AM"),
            StudentRecord("s1", "101", "Aarav Sharma", "10/18/2026, 8:00:00 AM", "03:00:00 PM"),
            StudentRecord("s3", "101", "Aarav Sharma", "10/19/2026, 8:10:00 AM"),
        ]
    )


@pytest.fixture
def client(monkeypatch, repo):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_container_with_repository(repo, checkout_time_format="%H:%M:%S"))
    return app.test_client()


def test_page_lists_students_sorted_with_attendance(client, repo):
    resp = client.get("/students")
    html = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert repo.list_calls == 1
    assert "Present Students In School" in html
    assert html.index("student-s1") < html.index("student-s3") < html.index("student-s2")
    assert "2.22%" in html
    assert "1.11%" in html
    assert html.count("Leave School") == 2


def test_index_is_the_same_view(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert "Present Students In School" in resp.get_data(as_text=True)


def test_page_renders_previous_roster_when_fetch_fails(client, repo):
    client.get("/students")
    repo.fail_list = StoreError("offline")

    resp = client.get("/students")

    assert resp.status_code == 200
    assert "Sara Khan" in resp.get_data(as_text=True)


def test_checkout_form_sets_alert_and_redirects(client, repo):
    resp = client.post("/students/s2/checkout", data={"name": "Sara Khan"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/students")
    assert repo.list_calls == 1

    page = client.get("/students").get_data(as_text=True)
    assert "Successfully Checked-Out" in page
    assert "Sara Khan checked-out" in page

    # shown once only
    again = client.get("/students").get_data(as_text=True)
    assert "Successfully Checked-Out" not in again


def test_checkout_of_missing_record_shows_error_alert(client):
    client.post("/students/nope/checkout", data={"name": "Ghost"})

    page = client.get("/students").get_data(as_text=True)

    assert "Error!" in page
    assert "No document to update: nope" in page


def test_dismiss_hides_pending_alert(client):
    client.post("/students/s2/checkout", data={"name": "Sara Khan"})

    resp = client.post("/alerts/dismiss")
    with client.session_transaction() as sess:
        assert sess[SESSION_KEY]["show"] is False

    page = client.get("/students").get_data(as_text=True)
    assert resp.status_code == 302
    assert "Successfully Checked-Out" not in page


def test_api_lists_students_and_tally(client):
    data = client.get("/api/students").get_json()

    assert [s["id"] for s in data["students"]] == ["s1", "s3", "s2"]
    assert data["students"][0]["sr_no"] == 1
    assert data["tally"] == {"101": 2, "102": 1}


def test_api_checkout_success(client):
    resp = client.post("/api/students/s2/checkout", json={"name": "Sara Khan"})
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["success"] is True
    assert data["alert"]["color"] == "teal"
    sara = next(s for s in data["students"] if s["id"] == "s2")
    assert sara["checkout"]


def test_api_checkout_failure(client, repo):
    resp = client.post("/api/students/missing/checkout", json={"name": "X"})
    data = resp.get_json()

    assert resp.status_code == 400
    assert data["success"] is False
    assert data["alert"]["title"] == "Error!"
    assert repo.list_calls == 1


def test_export_csv_uses_loaded_rows(client, repo):
    client.get("/students")

    resp = client.get("/students/export.csv")
    text = resp.get_data().decode("utf-8-sig")
    rows = list(csv.DictReader(io.StringIO(text)))

    assert resp.mimetype == "text/csv"
    assert repo.list_calls == 1
    assert [r["id"] for r in rows] == ["s1", "s3", "s2"]
    assert rows[0]["days_attended"] == "2"
    assert rows[2]["percentage"] == "1.11"


def test_page_survives_unexpected_fetch_error(client, repo):
    client.get("/")
    repo.fail_list = ValueError("Project ID is required to access Firestore")

    resp = client.get("/")

    assert resp.status_code == 200
    assert "Sara Khan" in resp.get_data(as_text=True)


def test_page_explains_missing_list_when_first_fetch_fails(client, repo):
    repo.fail_list = StoreError("offline")

    html = client.get("/students").get_data(as_text=True)

    assert "The student list is not available right now." in html


def test_page_shows_empty_state(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_container_with_repository(InMemoryStudents([])))

    html = app.test_client().get("/students").get_data(as_text=True)

    assert "No students have checked in." in html


def test_api_checkout_leaves_no_alert_for_the_page(client):
    client.post("/api/students/s2/checkout", json={"name": "Sara Khan"})

    with client.session_transaction() as sess:
        assert SESSION_KEY not in sess
    page = client.get("/students").get_data(as_text=True)
    assert "Successfully Checked-Out" not in page
