import pytest
from fastapi.testclient import TestClient

from studentdesk.app.db.base import Base
from studentdesk.app.db.session import engine
from studentdesk.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_student(client: TestClient, rollno="S100", name="Arun Kumar", **extra):
    payload = {"rollno": rollno, "name": name, **extra}
    return client.post("/api/students", json=payload)


def test_create_and_get_student():
    client = TestClient(app)
    resp = create_student(client, **{"class": "10", "section": "A", "DOB": "2010-05-12", "handlingfaculty": "Mrs. Lakshmi"})
    assert resp.status_code == 201
    assert resp.json() == {"ok": True}

    resp = client.get("/api/students/S100")
    assert resp.status_code == 200
    data = resp.json()
    assert data["student"] == {
        "rollno": "S100",
        "name": "Arun Kumar",
        "class": "10",
        "section": "A",
        "DOB": "2010-05-12",
        "handlingfaculty": "Mrs. Lakshmi",
    }
    assert data["marks"]["avg"] == 0.0
    assert data["marks"]["grade"] == "C"
    assert data["parents"] is None


def test_create_student_with_parents():
    client = TestClient(app)
    resp = create_student(client, parents={"parentsname": "Kumar Family", "phonenumber": 9876543210})
    assert resp.status_code == 201
    parents = client.get("/api/students/S100").json()["parents"]
    assert parents == {
        "rollno": "S100",
        "parentsname": "Kumar Family",
        "phonenumber": "9876543210",
        "emailid": "",
        "address": "",
    }


def test_create_student_missing_name_400():
    client = TestClient(app)
    resp = client.post("/api/students", json={"rollno": "S100"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "name is required"}
    assert client.get("/api/students").json() == []


def test_create_student_missing_rollno_400():
    client = TestClient(app)
    resp = client.post("/api/students", json={"name": "Nobody"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "rollno is required"}


def test_create_duplicate_student_409():
    client = TestClient(app)
    assert create_student(client).status_code == 201
    resp = create_student(client, name="Other")
    assert resp.status_code == 409
    assert resp.json() == {"error": "Student already exists"}
    assert client.get("/api/students/S100").json()["student"]["name"] == "Arun Kumar"


def test_get_unknown_student_404():
    client = TestClient(app)
    resp = client.get("/api/students/S404")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Student not found"}


def test_list_students_ordered_with_marks():
    client = TestClient(app)
    create_student(client, rollno="S002", name="Priya Sharma")
    create_student(client, rollno="S001", name="Arun Kumar")
    client.post("/api/marks", json={"rollno": "S002", "tamil": 95, "english": 91, "maths": 93, "science": 89, "social": 94})

    resp = client.get("/api/students")
    assert resp.status_code == 200
    data = resp.json()
    assert [row["rollno"] for row in data] == ["S001", "S002"]
    assert data[0]["grade"] == "C"
    assert data[1]["avg"] == 92.4
    assert data[1]["grade"] == "A+"
    assert data[1]["class"] == ""


def test_partial_update_student():
    client = TestClient(app)
    create_student(client, **{"class": "10", "section": "A", "DOB": "2010-05-12", "handlingfaculty": "Mrs. Lakshmi"})
    resp = client.put("/api/students/S100", json={"section": "B"})
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}

    student = client.get("/api/students/S100").json()["student"]
    assert student["section"] == "B"
    assert student["name"] == "Arun Kumar"
    assert student["class"] == "10"
    assert student["DOB"] == "2010-05-12"
    assert student["handlingfaculty"] == "Mrs. Lakshmi"


def test_update_student_replaces_parents():
    client = TestClient(app)
    create_student(client, parents={"parentsname": "Old", "emailid": "old@example.com"})
    resp = client.put("/api/students/S100", json={"parents": {"parentsname": "New", "address": "12 Gandhi St"}})
    assert resp.status_code == 200
    parents = client.get("/api/students/S100").json()["parents"]
    assert parents["parentsname"] == "New"
    assert parents["address"] == "12 Gandhi St"
    assert parents["emailid"] == ""


def test_update_unknown_student_404():
    client = TestClient(app)
    resp = client.put("/api/students/S404", json={"name": "Ghost"})
    assert resp.status_code == 404


def test_delete_student_cascades():
    client = TestClient(app)
    create_student(client, parents={"parentsname": "P"})
    client.post("/api/messages", json={"rollno": "S100", "fromid": "T1", "toid": "S100", "content": "Hi"})

    resp = client.delete("/api/students/S100")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}

    assert client.get("/api/students/S100").status_code == 404
    assert client.get("/api/messages", params={"rollno": "S100"}).json() == []
    assert client.get("/api/marks").json() == []


def test_delete_unknown_student_404():
    client = TestClient(app)
    resp = client.delete("/api/students/S404")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Student not found"}
