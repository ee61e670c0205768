from datetime import datetime, timedelta, timezone

from creditportal.models.credit_progress import CreditProgress

from tests.conftest import auth_headers


BASE = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _record(db, user_id, bureau, score, days):
    db.add(
        CreditProgress(
            user_id=user_id,
            bureau=bureau,
            score=score,
            previous_score=score - 20,
            items_removed=2,
            disputes_active=1,
            recorded_at=BASE + timedelta(days=days),
        )
    )
    db.commit()


def test_progress_requires_authentication(client):
    assert client.get("/api/credit/progress").status_code == 401


def test_latest_snapshot_per_bureau_for_the_member(client, db_session):
    _record(db_session, "member-1", "experian", 600, days=0)
    _record(db_session, "member-1", "experian", 640, days=30)
    _record(db_session, "member-1", "equifax", 610, days=10)
    _record(db_session, "member-1", "transunion", 615, days=20)
    _record(db_session, "member-2", "experian", 700, days=40)

    response = client.get("/api/credit/progress", headers=auth_headers("member-1"))

    assert response.status_code == 200
    rows = response.json()
    assert [(r["bureau"], r["score"]) for r in rows] == [
        ("experian", 640),
        ("transunion", 615),
        ("equifax", 610),
    ]
    assert rows[0]["previousScore"] == 620
    assert rows[0]["userId"] == "member-1"


def test_progress_history_lists_every_snapshot(client, db_session):
    _record(db_session, "member-1", "experian", 600, days=0)
    _record(db_session, "member-1", "experian", 640, days=30)

    rows = client.get("/api/credit/progress/history", headers=auth_headers("member-1")).json()

    assert [r["score"] for r in rows] == [640, 600]


def test_member_without_snapshots_gets_empty_list(client):
    response = client.get("/api/credit/progress", headers=auth_headers("new-member"))

    assert response.status_code == 200
    assert response.json() == []
