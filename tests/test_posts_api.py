from campusnet.models import RoleEnum


def create_post(client, headers, content="Campus fest this weekend", **extra):
    return client.post("/api/v1/posts", json={"content": content, **extra}, headers=headers)


def test_create_list_and_get_post(client, make_user, auth_headers):
    author = make_user(RoleEnum.OFFICIAL)
    headers = auth_headers(author)

    created = create_post(client, headers, media_url="/uploads/poster.png", media_type="image")
    assert created.status_code == 201
    post = created.json()
    assert (post["likes"], post["liked_by"], post["comment_count"]) == (0, [], 0)

    for i in range(2):
        create_post(client, headers, content=f"post {i}")

    page = client.get("/api/v1/posts", params={"page": 1, "limit": 2}, headers=headers).json()
    assert len(page["posts"]) == 2
    assert page["pagination"] == {"page": 1, "limit": 2, "total": 3, "pages": 2}

    detail = client.get(f"/api/v1/posts/{post['post_id']}", headers=headers)
    assert detail.status_code == 200
    assert detail.json()["comments"] == []
    assert client.get("/api/v1/posts/999", headers=headers).status_code == 404


def test_invalid_post_payloads(client, make_user, auth_headers):
    headers = auth_headers(make_user())
    assert create_post(client, headers, content="").status_code == 422
    assert create_post(client, headers, content="  ").status_code == 422
    assert create_post(client, headers, media_type="audio").status_code == 422


def test_like_toggle_via_api(client, make_user, auth_headers):
    author = make_user(RoleEnum.TEACHER, "IT")
    fan = make_user(RoleEnum.STUDENT, "IT")
    post_id = create_post(client, auth_headers(author)).json()["post_id"]
    url = f"/api/v1/posts/{post_id}/like"

    first = client.post(url, headers=auth_headers(fan)).json()
    assert (first["liked"], first["likes"], first["message"]) == (True, 1, "Post liked")

    second = client.post(url, headers=auth_headers(fan)).json()
    assert (second["liked"], second["likes"], second["message"]) == (False, 0, "Post unliked")

    assert client.post("/api/v1/posts/999/like", headers=auth_headers(fan)).status_code == 404


def test_comment_lifecycle(client, make_user, auth_headers):
    author = make_user(RoleEnum.TEACHER, "IT")
    commenter = make_user(RoleEnum.STUDENT, "IT")
    stranger = make_user(RoleEnum.STUDENT, "CSE")
    post_id = create_post(client, auth_headers(author)).json()["post_id"]

    created = client.post(
        f"/api/v1/posts/{post_id}/comments", json={"content": "Count me in"}, headers=auth_headers(commenter)
    )
    assert created.status_code == 201
    comment_id = created.json()["comment_id"]

    detail = client.get(f"/api/v1/posts/{post_id}", headers=auth_headers(author)).json()
    assert detail["comment_count"] == 1
    assert [c["comment_id"] for c in detail["comments"]] == [comment_id]

    listing = client.get(f"/api/v1/posts/{post_id}/comments", headers=auth_headers(author)).json()
    assert listing["pagination"]["total"] == 1

    like = client.post(f"/api/v1/posts/comments/{comment_id}/like", headers=auth_headers(author)).json()
    assert (like["liked"], like["likes"], like["message"]) == (True, 1, "Comment liked")

    comment_url = f"/api/v1/posts/comments/{comment_id}"
    assert client.put(comment_url, json={"content": "edit"}, headers=auth_headers(stranger)).status_code == 403
    edited = client.put(comment_url, json={"content": "Count me in twice"}, headers=auth_headers(commenter))
    assert edited.json()["content"] == "Count me in twice"

    assert client.delete(comment_url, headers=auth_headers(stranger)).status_code == 403
    deleted = client.delete(comment_url, headers=auth_headers(commenter))
    assert deleted.status_code == 200
    assert deleted.json()["comment_count"] == 0

    assert client.post(
        "/api/v1/posts/999/comments", json={"content": "?"}, headers=auth_headers(commenter)
    ).status_code == 404


def test_only_author_edits_or_deletes_post(client, make_user, auth_headers):
    author = make_user(RoleEnum.STUDENT, "CSE")
    other = make_user(RoleEnum.STUDENT, "CSE")
    post_id = create_post(client, auth_headers(author)).json()["post_id"]
    url = f"/api/v1/posts/{post_id}"

    assert client.put(url, json={"content": "mine now"}, headers=auth_headers(other)).status_code == 403
    assert client.delete(url, headers=auth_headers(other)).status_code == 403

    updated = client.put(url, json={"content": "Fest moved indoors"}, headers=auth_headers(author))
    assert updated.json()["content"] == "Fest moved indoors"

    assert client.delete(url, headers=auth_headers(author)).status_code == 200
    assert client.get(url, headers=auth_headers(author)).status_code == 404
