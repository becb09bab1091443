import pytest
from fastapi import HTTPException

import jobly.dependencies as deps


class _Creds:
    def __init__(self, token: str):
        self.credentials = token


def test_get_current_user_missing_credentials():
    with pytest.raises(HTTPException) as ex:
        deps.get_current_user(credentials=None)
    assert ex.value.status_code == 401


def test_get_current_user_invalid_token(monkeypatch):
    monkeypatch.setattr(deps, "decode_access_token", lambda token: None)
    with pytest.raises(HTTPException) as ex:
        deps.get_current_user(credentials=_Creds("bad"))
    assert ex.value.status_code == 401


def test_get_current_user_success(monkeypatch):
    monkeypatch.setattr(deps, "decode_access_token", lambda token: {"sub": "u1", "is_admin": False})
    out = deps.get_current_user(credentials=_Creds("tok"))
    assert out == deps.CurrentUser(username="u1", is_admin=False)


def test_get_current_user_missing_admin_claim_is_not_admin(monkeypatch):
    monkeypatch.setattr(deps, "decode_access_token", lambda token: {"sub": "u1"})
    assert deps.get_current_user(credentials=_Creds("tok")).is_admin is False


def test_get_current_admin_requires_admin():
    with pytest.raises(HTTPException) as ex:
        deps.get_current_admin(user=deps.CurrentUser(username="u1"))
    assert ex.value.status_code == 403


def test_get_current_admin_success():
    user = deps.CurrentUser(username="admin", is_admin=True)
    assert deps.get_current_admin(user=user) is user


def test_bearer_token_end_to_end(client):
    from jobly.core.security import create_access_token

    resp = client.delete("/jobs/1", headers={"Authorization": f"Bearer {create_access_token('u1')}"})
    assert resp.status_code == 403

    resp = client.delete("/jobs/1", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
