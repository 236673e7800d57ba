from src.app.services.session_tokens import generate_session_token, hash_session_token


def test_tokens_are_unique_and_opaque():
    tokens = {generate_session_token() for _ in range(100)}

    assert len(tokens) == 100
    assert all(len(token) >= 43 for token in tokens)


def test_hash_is_deterministic_per_secret():
    token = generate_session_token()

    assert hash_session_token(token, "secret") == hash_session_token(token, "secret")
    assert hash_session_token(token, "secret") != hash_session_token(token, "other")
    assert len(hash_session_token(token, "secret")) == 64
    assert hash_session_token(token, "secret") != token
