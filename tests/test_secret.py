import pytest

from radium226.identities import (
    Secret,
    SecretKind,
    SeedPhraseSecret,
    SecretKeySecret,
    KeychainSecret,
    parse_secret,
    format_secret,
    keychain_entry_name,
    InvalidSecretFormatError,
)

from conftest import SEED_PHRASE, SECRET_KEY



@pytest.fixture
def secret(request: pytest.FixtureRequest) -> Secret:
    match request.param:
        case "seed-phrase":
            return SeedPhraseSecret(seed_phrase=SEED_PHRASE)
        case "secret-key":
            return SecretKeySecret(secret_key=SECRET_KEY)
        case "keychain":
            return KeychainSecret(entry_name=keychain_entry_name("alice"))
        case _:
            raise ValueError(f"Unknown secret type: {request.param}")


@pytest.mark.parametrize(
    "secret",
    [
        "seed-phrase",
        "secret-key",
        "keychain",
    ],
    indirect=True,
)
def test_format_and_parse(secret: Secret) -> None:
    assert parse_secret(format_secret(secret)) == secret


def test_parse_recognizes_each_form() -> None:
    assert parse_secret(SEED_PHRASE).kind == SecretKind.SEED_PHRASE
    assert parse_secret(SECRET_KEY).kind == SecretKind.SECRET_KEY
    assert parse_secret("keychain:radium226.identities-alice").kind == SecretKind.KEYCHAIN


def test_parse_normalizes_seed_phrase_whitespace() -> None:
    text = "  " + SEED_PHRASE.replace(" ", "   ") + "\n"

    assert parse_secret(text) == SeedPhraseSecret(seed_phrase=SEED_PHRASE)


@pytest.mark.parametrize(
    "text",
    [
        "keychain:",
        "keychain:radium226.identities-",
        "keychain:org.example-alice",
        "keychain:radium226.identities-alice:bob",
        "keychain:radium226.identities-al ice",
    ],
)
def test_parse_rejects_foreign_keychain_entries(text: str) -> None:
    with pytest.raises(InvalidSecretFormatError):
        parse_secret(text)


@pytest.mark.parametrize("text", ["", "hello", "SBGWSG6BTNCKCOB3DIFBGCVMUPQ"])
def test_parse_rejects_garbage(text: str) -> None:
    with pytest.raises(InvalidSecretFormatError):
        parse_secret(text)


def test_keychain_entry_name() -> None:
    assert keychain_entry_name("alice") == "keychain:radium226.identities-alice"


def test_seed_phrase_secret_is_normalized() -> None:
    secret = SeedPhraseSecret(seed_phrase="  " + SEED_PHRASE.replace(" ", "  "))

    assert secret == SeedPhraseSecret(seed_phrase=SEED_PHRASE)
    assert parse_secret(format_secret(secret)) == secret
