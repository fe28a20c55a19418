from crewhub.core.security import get_password_hash, verify_password


def test_hash_is_salted():
    first = get_password_hash("pw1")
    second = get_password_hash("pw1")
    assert first != second
    assert "pw1" not in first
    assert first.startswith("$pbkdf2-sha256$")


def test_verify_roundtrip():
    hashed = get_password_hash("pw1")
    assert verify_password("pw1", hashed) is True
    assert verify_password("pw2", hashed) is False


def test_missing_hash_never_verifies():
    assert verify_password("anything", None) is False
