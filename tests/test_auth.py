import pytest

from ebobo.auth import Auth, AuthError, AuthErrorKind, authenticate
from ebobo.entities import Store
from ebobo.shared import AUTH_HEADER


@pytest.fixture
def store():
    with Store(":memory:") as opened:
        yield opened


def test_missing_fingerprint(store):
    with pytest.raises(AuthError) as info:
        authenticate({}, "127.0.0.1", store)
    assert info.value.kind is AuthErrorKind.MISSING_FINGERPRINT
    assert info.value.status == 401


def test_missing_fingerprint_checked_before_state():
    with pytest.raises(AuthError) as info:
        authenticate({}, None, None)
    assert info.value.kind is AuthErrorKind.MISSING_FINGERPRINT


def test_missing_state():
    with pytest.raises(AuthError) as info:
        authenticate({AUTH_HEADER: "fp"}, "127.0.0.1", None)
    assert info.value.kind is AuthErrorKind.INTERNAL_SERVER_ERROR
    assert info.value.status == 500
    assert info.value.message == "missing application state"


def test_missing_address(store):
    with pytest.raises(AuthError) as info:
        authenticate({AUTH_HEADER: "fp"}, None, store)
    assert info.value.kind is AuthErrorKind.MISSING_ADDRESS
    assert info.value.status == _unauthorized_status()


def _unauthorized_status():
    with pytest.raises(AuthError) as info:
        authenticate({}, None, None)
    return info.value.status


def test_unregistered_caller(store):
    auth = authenticate({AUTH_HEADER: "fp-a"}, "127.0.0.1", store)
    assert auth == Auth("fp-a", None)


def test_header_lookup_is_case_insensitive(store):
    auth = authenticate({AUTH_HEADER.lower(): "fp-a"}, "10.0.0.1", store)
    assert auth.fingerprint == "fp-a"


def test_registered_caller_carries_fighter(store):
    record = store.insert_fighter("fp-a", "🐱")
    auth = authenticate({AUTH_HEADER: "fp-a"}, "127.0.0.1", store)
    assert auth.fighter == record
    assert auth.require_fighter() == record


def test_require_fighter_without_fighter():
    with pytest.raises(AuthError) as info:
        Auth("fp-a").require_fighter()
    assert info.value.kind is AuthErrorKind.MISSING_FIGHTER


def test_store_failure_is_internal_error():
    store = Store(":memory:")
    store.close()
    with pytest.raises(AuthError) as info:
        authenticate({AUTH_HEADER: "fp-a"}, "127.0.0.1", store)
    assert info.value.kind is AuthErrorKind.INTERNAL_SERVER_ERROR