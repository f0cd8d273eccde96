import pytest

from QueryRepair.Exception.ApiError import UnauthorizedError
from QueryRepair.Utility.auth import Actor, check_current_user_is_site_admin, get_request_token, resolve_actor


def test_get_request_token():
    assert get_request_token({"Authorization": "token abc"}) == "abc"
    assert get_request_token({"Authorization": "Bearer abc"}) == "abc"
    assert get_request_token({"Authorization": "Basic abc"}) is None
    assert get_request_token({"Authorization": "token "}) is None
    assert get_request_token({}) is None


def test_resolve_actor_with_explicit_tokens():
    admin = resolve_actor({"Authorization": "token s3cret"}, admin_tokens=["s3cret"])
    user = resolve_actor({"Authorization": "token other"}, admin_tokens=["s3cret"])
    anonymous = resolve_actor({}, admin_tokens=["s3cret"])
    assert admin.site_admin and admin.is_authenticated
    assert not user.site_admin and user.is_authenticated
    assert not anonymous.site_admin and not anonymous.is_authenticated


def test_resolve_actor_reads_environment(monkeypatch):
    monkeypatch.setenv("SITE_ADMIN_TOKENS", " a1 , b2 ,")
    assert resolve_actor({"Authorization": "token b2"}).site_admin
    assert not resolve_actor({"Authorization": "token c3"}).site_admin


def test_check_current_user_is_site_admin():
    check_current_user_is_site_admin(Actor(uid="x", site_admin=True))
    with pytest.raises(UnauthorizedError) as exc:
        check_current_user_is_site_admin(Actor(uid="x"))
    assert exc.value.status_code == 401
