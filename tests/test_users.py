"""Tests for registration, login, profile and token handling."""

from datetime import timedelta

import pytest

from dtt_server.services.security import (
    create_token, decode_token, hash_password, verify_password,
)
from dtt_server.errors import AuthError


class TestSecurity:
    def test_password_hash_roundtrip(self):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong-pass", hashed)

    def test_malformed_hash_is_rejected(self):
        assert not verify_password("secret123", "not-a-bcrypt-hash")

    def test_long_password_only_first_72_bytes_count(self):
        hashed = hash_password("a" * 72 + "tail")
        assert verify_password("a" * 72, hashed)
        assert not verify_password("a" * 71, hashed)

    def test_token_carries_username(self):
        assert decode_token(create_token("alice")) == "alice"

    def test_expired_token(self):
        token = create_token("alice", expires_delta=timedelta(seconds=-1))
        with pytest.raises(AuthError) as exc:
            decode_token(token)
        assert exc.value.message == "Token expired"

    def test_garbage_token(self):
        with pytest.raises(AuthError) as exc:
            decode_token("abc.def.ghi")
        assert exc.value.message == "Invalid token"


class TestRegisterLogin:
    def test_register_defaults_nickname_to_username(self, client):
        r = client.post("/api/user/register", json={"username": "carol", "password": "secret123"})
        assert r.status_code == 200
        assert r.json()["data"] == {"username": "carol", "nickname": "carol"}

    def test_register_duplicate(self, client, alice):
        r = client.post("/api/user/register", json={"username": "alice", "password": "secret123"})
        assert r.status_code == 409
        assert r.json()["msg"] == "Username already exists"

    @pytest.mark.parametrize("username,password,msg", [
        ("ab", "secret123", "Username must be at least 3 characters"),
        ("carol", "123", "Password must be at least 6 characters"),
        ("", "secret123", "Username and password are required"),
    ])
    def test_register_validation(self, client, username, password, msg):
        r = client.post("/api/user/register", json={"username": username, "password": password})
        assert r.status_code == 400
        assert r.json()["msg"] == msg

    def test_register_missing_field_is_400(self, client):
        r = client.post("/api/user/register", json={"username": "carol"})
        assert r.status_code == 400
        assert r.json()["code"] == 400

    def test_login_returns_token_and_profile(self, client, alice):
        r = client.post("/api/user/login", json={"username": "alice", "password": "secret123"})
        data = r.json()["data"]
        assert data["username"] == "alice"
        assert data["nickname"] == "Alice"
        assert decode_token(data["token"]) == "alice"

    def test_login_unknown_user(self, client):
        r = client.post("/api/user/login", json={"username": "ghost", "password": "secret123"})
        assert r.status_code == 400
        assert r.json()["msg"] == "Username does not exist"

    def test_login_wrong_password(self, client, alice):
        r = client.post("/api/user/login", json={"username": "alice", "password": "nope-nope"})
        assert r.status_code == 400
        assert r.json()["msg"] == "Wrong password"

    def test_login_ignores_surrounding_spaces(self, client):
        client.post("/api/user/register", json={"username": " dave ", "password": "secret123"})
        r = client.post("/api/user/login", json={"username": " dave ", "password": "secret123"})
        assert r.status_code == 200
        assert r.json()["data"]["username"] == "dave"

    def test_long_password(self, client):
        password = "p" * 80
        r = client.post("/api/user/register", json={"username": "erin", "password": password})
        assert r.status_code == 200
        r = client.post("/api/user/login", json={"username": "erin", "password": password})
        assert r.status_code == 200


class TestAuthenticatedUser:
    def test_info_requires_token(self, client):
        r = client.get("/api/user/info")
        assert r.status_code == 401
        assert r.json()["msg"] == "Not logged in"

    def test_info_rejects_bad_token(self, client):
        r = client.get("/api/user/info", headers={"Authorization": "Bearer garbage"})
        assert r.status_code == 401
        assert r.json()["msg"] == "Invalid token"

    def test_info_rejects_token_of_unknown_user(self, client):
        headers = {"Authorization": f"Bearer {create_token('ghost')}"}
        assert client.get("/api/user/info", headers=headers).status_code == 401

    def test_info(self, client, alice):
        r = client.get("/api/user/info", headers=alice)
        assert r.status_code == 200
        data = r.json()["data"]
        assert data["username"] == "alice"
        assert data["avatar"] == ""
        assert data["createdAt"]

    def test_update_profile(self, client, alice):
        r = client.put("/api/user/profile", headers=alice,
                       json={"nickname": "  Ali  ", "avatar": "https://img.example/a.png"})
        assert r.status_code == 200
        assert r.json()["data"]["nickname"] == "Ali"
        assert client.get("/api/user/info", headers=alice).json()["data"]["avatar"] == "https://img.example/a.png"

    def test_nickname_too_long(self, client, alice):
        r = client.put("/api/user/profile", headers=alice, json={"nickname": "x" * 31})
        assert r.status_code == 400

    def test_change_password(self, client, alice):
        r = client.put("/api/user/password", headers=alice,
                       json={"oldPassword": "secret123", "newPassword": "brand-new-1"})
        assert r.status_code == 200
        assert client.post("/api/user/login", json={"username": "alice", "password": "secret123"}).status_code == 400
        assert client.post("/api/user/login", json={"username": "alice", "password": "brand-new-1"}).status_code == 200

    def test_change_password_wrong_old(self, client, alice):
        r = client.put("/api/user/password", headers=alice,
                       json={"oldPassword": "bad-guess", "newPassword": "brand-new-1"})
        assert r.status_code == 400

    def test_change_to_long_password(self, client, alice):
        r = client.put("/api/user/password", headers=alice,
                       json={"oldPassword": "secret123", "newPassword": "密" * 40})
        assert r.status_code == 200
        assert client.post("/api/user/login", json={"username": "alice", "password": "密" * 40}).status_code == 200
