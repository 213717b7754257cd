"""Password hasher tests: salting, verification, passwords past 72 bytes."""

from zenith.auth.password import hash_password, verify_password

ROUNDS = 4


def test_hash_is_salted():
    """Two digests of the same password differ."""
    a = hash_password("same_password", rounds=ROUNDS)
    b = hash_password("same_password", rounds=ROUNDS)
    assert a != b
    assert a.startswith("$2b$04$")


def test_verify_correct_password():
    digest = hash_password("correct horse", rounds=ROUNDS)
    assert verify_password("correct horse", digest) is True


def test_verify_wrong_password():
    digest = hash_password("correct horse", rounds=ROUNDS)
    assert verify_password("battery staple", digest) is False


def test_hash_never_contains_plaintext():
    digest = hash_password("visible_secret", rounds=ROUNDS)
    assert "visible_secret" not in digest


def test_verify_malformed_digest_is_false():
    """Garbage in the hash column must not raise."""
    assert verify_password("anything", "not-a-bcrypt-hash") is False
    assert verify_password("anything", "") is False


def test_unicode_password():
    digest = hash_password("pässwörd-🔑", rounds=ROUNDS)
    assert verify_password("pässwörd-🔑", digest) is True
    assert verify_password("passwort-🔑", digest) is False


def test_long_passwords_sharing_a_prefix_differ():
    """Bytes past 72 still count."""
    digest = hash_password("x" * 72 + "A", rounds=ROUNDS)
    assert verify_password("x" * 72 + "A", digest) is True
    assert verify_password("x" * 72 + "B", digest) is False
    assert verify_password("x" * 72, digest) is False
