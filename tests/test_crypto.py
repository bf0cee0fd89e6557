from bureau.core.crypto import hash_password, verify_password


def test_hash_roundtrip():
    hashed = hash_password("s3cret!", rounds=4)

    assert hashed != "s3cret!"
    assert hashed.startswith("$2")
    assert verify_password("s3cret!", hashed)
    assert not verify_password("s3cret?", hashed)


def test_hashes_are_salted():
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_malformed_hash_does_not_verify():
    assert verify_password("anything", "not-a-bcrypt-hash") is False
