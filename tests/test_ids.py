import hashlib

from config.settings import settings
from utils.ids import hash_password, mint_bearer_token, new_id


def test_hash_password_is_deterministic_sha256():
    assert hash_password("secret") == hashlib.sha256(b"secret").hexdigest()
    assert hash_password("secret") == hash_password("secret")
    assert hash_password("secret") != hash_password("Secret")


def test_hash_password_uses_pepper_when_configured(monkeypatch):
    plain = hash_password("secret")
    monkeypatch.setattr(settings, "PASSWORD_PEPPER", "pepper")
    peppered = hash_password("secret")
    assert peppered != plain
    assert peppered == hash_password("secret")


def test_ids_and_tokens_are_unique():
    assert len({new_id() for _ in range(100)}) == 100
    assert mint_bearer_token() != mint_bearer_token()
