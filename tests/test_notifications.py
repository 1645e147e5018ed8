"""Tests for reply/like notifications and their read state."""

from dtt_server.services.notifications import snippet


def post_comment(client, headers, content, parent_id=None):
    body = {"content": content}
    if parent_id is not None:
        body["parentId"] = parent_id
    r = client.post("/api/songs/song_2002_01/comment", headers=headers, json=body)
    assert r.status_code == 200, r.text
    return r.json()["data"]["commentId"]


def inbox(client, headers, **params):
    r = client.get("/api/notifications", headers=headers, params=params)
    assert r.status_code == 200, r.text
    return r.json()["data"]


def test_snippet_truncates_long_text():
    assert snippet("short") == "short"
    assert snippet("x" * 60) == "x" * 50 + "..."


def test_requires_login(client):
    assert client.get("/api/notifications").status_code == 401


def test_reply_notifies_target_author(client, alice, bob):
    root = post_comment(client, alice, "root")
    reply = post_comment(client, bob, "hello alice", parent_id=root)

    data = inbox(client, alice)
    assert data["unreadCount"] == 1
    n = data["notifications"][0]
    assert n["type"] == "reply"
    assert n["sender"] == "bob"
    assert n["senderNickname"] == "Bob"
    assert n["commentId"] == reply
    assert n["resourceType"] == "song"
    assert n["resourceId"] == "song_2002_01"
    assert n["content"] == "hello alice"
    assert n["isRead"] is False

    assert inbox(client, bob)["notifications"] == []


def test_reply_to_reply_notifies_reply_author_not_root_author(client, alice, bob, make_user):
    carol = make_user("carol")
    root = post_comment(client, alice, "root")
    reply = post_comment(client, bob, "bob here", parent_id=root)
    post_comment(client, carol, "hi bob", parent_id=reply)

    assert [n["sender"] for n in inbox(client, bob)["notifications"]] == ["carol"]
    assert [n["sender"] for n in inbox(client, alice)["notifications"]] == ["bob"]


def test_no_notification_for_own_actions(client, alice):
    root = post_comment(client, alice, "root")
    post_comment(client, alice, "talking to myself", parent_id=root)
    client.post(f"/api/comments/{root}/like", headers=alice)

    assert inbox(client, alice)["notifications"] == []


def test_like_notification_and_unlike_removes_it(client, alice, bob):
    root = post_comment(client, alice, "like me")
    client.post(f"/api/comments/{root}/like", headers=bob)

    data = inbox(client, alice)
    assert [(n["type"], n["sender"], n["commentId"]) for n in data["notifications"]] == [("like", "bob", root)]
    assert data["notifications"][0]["content"] == "like me"

    client.delete(f"/api/comments/{root}/like", headers=bob)
    assert inbox(client, alice)["notifications"] == []


def test_unlike_keeps_already_read_like_notification(client, alice, bob):
    root = post_comment(client, alice, "like me")
    client.post(f"/api/comments/{root}/like", headers=bob)
    client.put("/api/notifications/read-all", headers=alice)

    client.delete(f"/api/comments/{root}/like", headers=bob)
    assert len(inbox(client, alice)["notifications"]) == 1


def test_read_one_and_unread_count(client, alice, bob):
    root = post_comment(client, alice, "root")
    post_comment(client, bob, "r1", parent_id=root)
    post_comment(client, bob, "r2", parent_id=root)

    notifications = inbox(client, alice)["notifications"]
    assert [n["content"] for n in notifications] == ["r2", "r1"]

    r = client.put(f"/api/notifications/{notifications[0]['id']}/read", headers=alice)
    assert r.status_code == 200
    r = client.get("/api/notifications/unread-count", headers=alice)
    assert r.json()["data"] == {"unreadCount": 1}

    unread = inbox(client, alice, unreadOnly="true")
    assert [n["content"] for n in unread["notifications"]] == ["r1"]
    assert unread["pagination"]["total"] == 1


def test_read_all(client, alice, bob):
    root = post_comment(client, alice, "root")
    post_comment(client, bob, "r1", parent_id=root)
    client.post(f"/api/comments/{root}/like", headers=bob)

    r = client.put("/api/notifications/read-all", headers=alice)
    assert r.json()["data"] == {"updated": 2}
    assert inbox(client, alice)["unreadCount"] == 0
    assert client.put("/api/notifications/read-all", headers=alice).json()["data"] == {"updated": 0}


def test_cannot_touch_someone_elses_notification(client, alice, bob):
    root = post_comment(client, alice, "root")
    post_comment(client, bob, "r1", parent_id=root)
    nid = inbox(client, alice)["notifications"][0]["id"]

    assert client.put(f"/api/notifications/{nid}/read", headers=bob).status_code == 404
    assert client.delete(f"/api/notifications/{nid}", headers=bob).status_code == 404


def test_delete_notification(client, alice, bob):
    root = post_comment(client, alice, "root")
    post_comment(client, bob, "r1", parent_id=root)
    nid = inbox(client, alice)["notifications"][0]["id"]

    assert client.delete(f"/api/notifications/{nid}", headers=alice).status_code == 200
    assert inbox(client, alice)["notifications"] == []


def test_pagination(client, alice, bob):
    root = post_comment(client, alice, "root")
    for i in range(3):
        post_comment(client, bob, f"r{i}", parent_id=root)

    data = inbox(client, alice, page=2, pageSize=2)
    assert [n["content"] for n in data["notifications"]] == ["r0"]
    assert data["pagination"] == {"page": 2, "pageSize": 2, "total": 3, "totalPages": 2}
    assert data["unreadCount"] == 3
