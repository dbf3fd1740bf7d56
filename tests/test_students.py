"""API tests for the student endpoints."""

import pytest

ADA = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "studentId": "S1",
    "birthDate": "1815-12-10",
    "gender": "F",
}


def _create(client, auth, **overrides):
    return client.post("/api/v1/student", json={**ADA, **overrides}, headers=auth)


class TestCreateStudent:
    """POST /api/v1/student."""

    def test_creates_and_returns_row(self, client, auth, store):
        response = _create(client, auth)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["students"] == {"id": 1, **ADA}
        assert len(store.students.rows) == 1

    def test_datetime_birth_date_is_normalized(self, client, auth):
        response = _create(client, auth, birthDate="1815-12-10T00:00:00Z")
        assert response.status_code == 201
        assert response.json()["students"]["birthDate"] == "1815-12-10"

    @pytest.mark.parametrize("field", ["firstName", "lastName", "studentId", "birthDate", "gender"])
    def test_missing_field(self, client, auth, store, field):
        payload = {k: v for k, v in ADA.items() if k != field}
        response = client.post("/api/v1/student", json=payload, headers=auth)

        assert response.status_code == 400
        assert response.json() == {"error": f"{field} is required"}
        assert store.students.rows == []

    @pytest.mark.parametrize("field", ["firstName", "lastName", "studentId", "gender"])
    def test_blank_field(self, client, auth, store, field):
        response = _create(client, auth, **{field: "   "})
        assert response.status_code == 400
        assert field in response.json()["error"]
        assert store.students.rows == []

    def test_unparseable_birth_date(self, client, auth, store):
        response = _create(client, auth, birthDate="someday")
        assert response.status_code == 400
        assert response.json() == {"error": "birthDate must be a valid date"}
        assert store.students.rows == []

    def test_first_invalid_field_is_reported(self, client, auth):
        response = client.post("/api/v1/student", json={"gender": "F"}, headers=auth)
        assert response.json() == {"error": "firstName is required"}

    def test_invalid_json_body(self, client, auth, store):
        response = client.post(
            "/api/v1/student",
            content=b"{not json",
            headers={**auth, "Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}
        assert store.students.rows == []

    def test_non_object_body(self, client, auth):
        response = client.post("/api/v1/student", json=[ADA], headers=auth)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}


class TestReadStudents:
    """GET /api/v1/student and /api/v1/student/{studentId}."""

    def test_get_created_student(self, client, auth):
        created = _create(client, auth).json()["students"]

        response = client.get("/api/v1/student/S1", headers=auth)

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_student(self, client, auth):
        response = client.get("/api/v1/student/nope", headers=auth)
        assert response.status_code == 404
        assert response.json() == {"error": "Student not found"}

    def test_list_students(self, client, auth):
        _create(client, auth)
        _create(client, auth, studentId="S2", firstName="Charles", lastName="Babbage")

        response = client.get("/api/v1/student")

        assert response.status_code == 200
        assert [row["studentId"] for row in response.json()] == ["S1", "S2"]


class TestUpdateStudent:
    """PATCH /api/v1/student/{studentId}."""

    def test_partial_update(self, client, auth):
        _create(client, auth)

        response = client.patch("/api/v1/student/S1", json={"lastName": "King"}, headers=auth)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["student"] == {"id": 1, **ADA, "lastName": "King"}

    def test_invalid_strings_are_skipped(self, client, auth):
        _create(client, auth)

        response = client.patch(
            "/api/v1/student/S1",
            json={"lastName": "", "firstName": 7, "gender": "M"},
            headers=auth,
        )

        assert response.status_code == 200
        student = response.json()["student"]
        assert student["lastName"] == "Lovelace"
        assert student["firstName"] == "Ada"
        assert student["gender"] == "M"

    def test_birth_date_update_is_normalized(self, client, auth):
        _create(client, auth)
        response = client.patch("/api/v1/student/S1", json={"birthDate": "1816-01-02T12:00:00"}, headers=auth)
        assert response.status_code == 200
        assert response.json()["student"]["birthDate"] == "1816-01-02"

    def test_unparseable_birth_date_is_an_error(self, client, auth, store):
        _create(client, auth)

        response = client.patch(
            "/api/v1/student/S1",
            json={"birthDate": "soon", "gender": "M"},
            headers=auth,
        )

        assert response.status_code == 400
        assert response.json() == {"error": "birthDate must be a valid date"}
        assert store.students.rows[0]["gender"] == "F"

    @pytest.mark.parametrize("payload", [{}, {"lastName": "  "}, {"unknown": "x"}])
    def test_no_valid_fields(self, client, auth, payload):
        _create(client, auth)
        response = client.patch("/api/v1/student/S1", json=payload, headers=auth)
        assert response.status_code == 400
        assert response.json() == {"error": "No valid fields to update"}

    def test_unknown_student(self, client, auth, store):
        _create(client, auth)

        response = client.patch("/api/v1/student/S9", json={"lastName": "King"}, headers=auth)

        assert response.status_code == 404
        assert response.json() == {"error": "Student not found"}
        assert store.students.rows[0]["lastName"] == "Lovelace"


class TestDeleteStudent:
    """DELETE /api/v1/student/{studentId}."""

    def test_delete_twice(self, client, auth, store):
        created = _create(client, auth).json()["students"]

        first = client.delete("/api/v1/student/S1", headers=auth)
        second = client.delete("/api/v1/student/S1", headers=auth)

        assert first.status_code == 200
        assert first.json() == {"success": True, "students": created}
        assert second.status_code == 404
        assert second.json() == {"error": "Student not found"}
        assert store.students.rows == []
