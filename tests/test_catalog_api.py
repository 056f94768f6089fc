from models.users import UserType


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"
    assert "X-Latency-Ms" in client.get("/health").headers


def test_list_and_read_courses(client, course):
    listed = client.get("/api/courses").json()["data"]
    assert [c["code"] for c in listed] == ["CS 3340"]
    assert client.get(f"/api/courses/{course}").json()["data"]["name"] == "Analysis of Algorithms"


def test_missing_course_is_404(client):
    res = client.get("/api/courses/404")
    assert res.status_code == 404
    assert res.json()["error"] == {"code": "NOT_FOUND", "message": "Course not found."}


def test_students_cannot_manage_courses(client, session_user, users):
    session_user.login(users["alice"], UserType.STUDENT)
    res = client.post("/api/courses", json={"code": "MATH 1600", "name": "Linear Algebra"})
    assert res.status_code == 403


def test_professor_creates_and_deletes_course(client, session_user, users):
    session_user.login(users["mary"], UserType.PROFESSOR)
    created = client.post(
        "/api/courses",
        json={"code": "MATH 1600", "name": "Linear Algebra", "professor_id": users["mary"]},
    ).json()["data"]
    assert created["rating"] == 0.0

    session_user.login(users["alice"])
    client.post("/api/ratings", json={"value": 4, "courseId": created["id"]})

    session_user.login(users["admin"], UserType.ADMIN)
    assert client.delete(f"/api/courses/{created['id']}").status_code == 200
    assert client.get(f"/api/courses/{created['id']}").status_code == 404
    assert client.get("/api/ratings", params={"courseId": created["id"]}).json()["averageRating"] == 0.0


def test_professor_pages(client, session_user, users, professor_page):
    listed = client.get("/api/professors").json()["data"]
    assert listed[0]["professor_name"] == "Mary Johnson"
    assert listed[0]["rating"] == 0.0

    session_user.login(users["mary"], UserType.PROFESSOR)
    res = client.put(f"/api/professors/{users['mary']}/page", json={"office_hours": "MWF 2-4PM"})
    assert res.status_code == 200
    assert res.json()["data"]["office_hours"] == "MWF 2-4PM"
    assert res.json()["data"]["bio"] == "PhD in Mathematics"


def test_professor_cannot_edit_another_page(client, session_user, users, professor_page):
    session_user.login(users["john"], UserType.PROFESSOR)
    res = client.put(f"/api/professors/{users['mary']}/page", json={"bio": "hacked"})
    assert res.status_code == 403


def test_page_rating_not_writable(client, session_user, users, professor_page):
    session_user.login(users["mary"], UserType.PROFESSOR)
    res = client.put(f"/api/professors/{users['mary']}/page", json={"rating": 5.0})
    assert res.status_code == 400
