from core.services.auth import AuthGate, hash_password, verify_password


def test_password_hash_round_trip():
    encoded = hash_password("segredo-123", iterations=1_000)

    assert encoded.startswith("pbkdf2_sha256$1000$")
    assert verify_password("segredo-123", encoded)
    assert not verify_password("segredo-124", encoded)


def test_hashes_are_salted():
    assert hash_password("abc", iterations=1_000) != hash_password("abc", iterations=1_000)


def test_malformed_hash_never_verifies():
    assert not verify_password("abc", "not-a-hash")
    assert not verify_password("abc", "md5$1$x$y")


def test_gate_accepts_configured_account_only():
    gate = AuthGate.from_plain("Admin@Obra.com", "ChangeMe123!", iterations=1_000)

    assert not gate.is_authenticated
    assert not gate.authenticate("admin@obra.com", "wrong")
    assert not gate.authenticate("", "ChangeMe123!")
    assert not gate.authenticate("outro@obra.com", "ChangeMe123!")

    assert gate.authenticate("  ADMIN@obra.com ", "ChangeMe123!")
    assert gate.is_authenticated

    gate.logout()
    assert not gate.is_authenticated


def test_failed_attempt_clears_previous_login():
    gate = AuthGate.from_plain("admin@obra.com", "pw", iterations=1_000)
    gate.authenticate("admin@obra.com", "pw")

    gate.authenticate("admin@obra.com", "nope")

    assert not gate.is_authenticated
