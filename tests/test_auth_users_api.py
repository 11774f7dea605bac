from campusnet.models import RoleEnum

from conftest import PASSWORD


def test_register_login_and_me(client):
    response = client.post("/api/v1/auth/register", json={
        "email": "director@college.edu",
        "password": "admin123",
        "name": "Dr. Smith",
        "role": "OFFICIAL",
        "position": "Director",
        "branch": "CSE",
    })
    assert response.status_code == 201
    body = response.json()
    assert body["user"]["role"] == "OFFICIAL"
    # officials never carry a branch
    assert body["user"]["branch"] is None
    assert body["user"]["position"] == "Director"

    login = client.post("/api/v1/auth/login", json={"email": "director@college.edu", "password": "admin123"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "director@college.edu"


def test_register_duplicate_email(client, make_user):
    user = make_user()
    response = client.post("/api/v1/auth/register", json={
        "email": user.email, "password": "student123", "name": "Again", "role": "STUDENT", "branch": "IT",
    })
    assert response.status_code == 409


def test_login_wrong_password(client, make_user):
    user = make_user()
    assert client.post("/api/v1/auth/login", json={"email": user.email, "password": "wrong-pass"}).status_code == 401
    assert client.post("/api/v1/auth/login", json={"email": user.email, "password": PASSWORD}).status_code == 200


def test_register_rejects_unknown_role(client):
    response = client.post("/api/v1/auth/register", json={
        "email": "x@college.edu", "password": "secret1", "name": "X", "role": "ADMIN",
    })
    assert response.status_code == 422


def test_list_users_filters(client, make_user, auth_headers):
    official = make_user(RoleEnum.OFFICIAL)
    make_user(RoleEnum.TEACHER, "CSE")
    cse_student = make_user(RoleEnum.STUDENT, "CSE")
    make_user(RoleEnum.STUDENT, "IT")

    response = client.get(
        "/api/v1/users", params={"role": "STUDENT", "branch": "CSE"}, headers=auth_headers(official)
    )

    assert response.status_code == 200
    assert [u["user_id"] for u in response.json()] == [cse_student.user_id]


def test_branch_listing_is_scoped(client, make_user, auth_headers):
    official = make_user(RoleEnum.OFFICIAL)
    student = make_user(RoleEnum.STUDENT, "CSE")

    assert client.get("/api/v1/users/branch/CSE", headers=auth_headers(student)).status_code == 200
    assert client.get("/api/v1/users/branch/IT", headers=auth_headers(student)).status_code == 403
    assert client.get("/api/v1/users/branch/IT", headers=auth_headers(official)).status_code == 200


def test_update_user_rules(client, make_user, auth_headers):
    official = make_user(RoleEnum.OFFICIAL, position="Dean")
    student = make_user(RoleEnum.STUDENT, "CSE")
    other = make_user(RoleEnum.STUDENT, "IT")

    # role is not an updatable field and position is ignored for students
    response = client.put(
        f"/api/v1/users/{student.user_id}",
        json={"name": "Renamed", "branch": "IT", "position": "Boss", "role": "OFFICIAL"},
        headers=auth_headers(student),
    )
    assert response.status_code == 200
    body = response.json()
    assert (body["name"], body["branch"], body["position"], body["role"]) == ("Renamed", "IT", None, "STUDENT")

    assert client.put(
        f"/api/v1/users/{other.user_id}", json={"name": "Hacked"}, headers=auth_headers(student)
    ).status_code == 403

    response = client.put(
        f"/api/v1/users/{official.user_id}", json={"position": "Director", "branch": "CSE"},
        headers=auth_headers(official),
    )
    assert response.json()["position"] == "Director"
    assert response.json()["branch"] is None

    assert client.get("/api/v1/users/9999", headers=auth_headers(official)).status_code == 404
