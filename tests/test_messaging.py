import re

import pytest

from studentdesk.app.core.exceptions import NotFound, ValidationError
from studentdesk.app.db.base import Base
from studentdesk.app.db.session import SessionLocal, engine
from studentdesk.app.models.message import Message
from studentdesk.app.schemas.student import StudentCreate
from studentdesk.app.services import messaging
from studentdesk.app.services.messaging import list_messages, send_message
from studentdesk.app.services.records import create_student_record

ISO_UTC = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z")


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    create_student_record(session, student_in=StudentCreate(rollno="S100", name="Arun"))
    try:
        yield session
    finally:
        session.close()


def test_send_message_defaults(db):
    sent = send_message(db, rollno="S100", fromid="T1", toid="S100", content="Homework due Friday")
    assert sent.status == "delivered"
    assert sent.phonenumber == ""
    assert ISO_UTC.fullmatch(sent.timestamp)

    stored = db.get(Message, sent.id)
    assert stored.content == "Homework due Friday"
    assert stored.timestamp == sent.timestamp


def test_send_message_stringifies_values(db):
    sent = send_message(db, rollno="S100", fromid=7, toid=8, content=12345, phonenumber=9876543210)
    assert (sent.fromid, sent.toid, sent.content, sent.phonenumber) == ("7", "8", "12345", "9876543210")


def test_messages_listed_in_send_order(db):
    first = send_message(db, rollno="S100", fromid="T1", toid="S100", content="first")
    second = send_message(db, rollno="S100", fromid="S100", toid="T1", content="second")

    messages = list_messages(db, rollno="S100")
    assert [m.content for m in messages] == ["first", "second"]
    assert [m.id for m in messages] == [first.id, second.id]
    assert messages[0].timestamp <= messages[1].timestamp


def test_timestamps_stay_non_decreasing_when_clock_steps_back(db, monkeypatch):
    first = send_message(db, rollno="S100", fromid="T1", toid="S100", content="first")
    monkeypatch.setattr(messaging, "utc_timestamp", lambda: "2000-01-01T00:00:00.000Z")
    second = send_message(db, rollno="S100", fromid="T1", toid="S100", content="second")

    assert second.timestamp == first.timestamp
    assert [m.content for m in list_messages(db, rollno="S100")] == ["first", "second"]


def test_equal_timestamps_keep_insert_order(db, monkeypatch):
    monkeypatch.setattr(messaging, "utc_timestamp", lambda: "2030-01-01T00:00:00.000Z")
    for content in ("a", "b", "c"):
        send_message(db, rollno="S100", fromid="T1", toid="S100", content=content)
    assert [m.content for m in list_messages(db, rollno="S100")] == ["a", "b", "c"]


@pytest.mark.parametrize(
    "payload",
    [
        {"rollno": "", "fromid": "T1", "toid": "S100", "content": "x"},
        {"rollno": "S100", "fromid": None, "toid": "S100", "content": "x"},
        {"rollno": "S100", "fromid": "T1", "toid": "", "content": "x"},
        {"rollno": "S100", "fromid": "T1", "toid": "S100", "content": "  "},
    ],
)
def test_send_message_requires_fields(db, payload):
    with pytest.raises(ValidationError):
        send_message(db, **payload)
    assert db.query(Message).count() == 0


def test_send_message_unknown_student(db):
    with pytest.raises(NotFound):
        send_message(db, rollno="S404", fromid="T1", toid="S404", content="hello")
    assert db.query(Message).count() == 0


def test_list_messages_requires_rollno(db):
    with pytest.raises(ValidationError):
        list_messages(db, rollno=None)


def test_list_messages_unknown_rollno_is_empty(db):
    assert list_messages(db, rollno="S404") == []


def test_list_messages_scoped_to_student(db):
    create_student_record(db, student_in=StudentCreate(rollno="S200", name="Priya"))
    send_message(db, rollno="S100", fromid="T1", toid="S100", content="for arun")
    send_message(db, rollno="S200", fromid="T1", toid="S200", content="for priya")
    assert [m.content for m in list_messages(db, rollno="S200")] == ["for priya"]
