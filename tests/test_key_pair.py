import pytest

from radium226.identities import (
    KeyPair,
    SeedPhraseSecret,
    SecretKeySecret,
    KeychainSecret,
    Keychain,
    derive_key_pair,
    derive_public_key,
    generate_seed_phrase,
    keychain_entry_name,
    key_pair_from_seed_phrase,
    DerivationFailedError,
    UnsupportedPathError,
    EntryNotFoundError,
)

from conftest import SEED_PHRASE, ADDRESS, SECRET_KEY



def test_derivation_follows_sep5() -> None:
    key_pair = key_pair_from_seed_phrase(SEED_PHRASE)

    assert key_pair.address == ADDRESS
    assert key_pair.secret == SECRET_KEY


def test_derivation_is_deterministic() -> None:
    seed = "0000000000000000"
    first_secret = SeedPhraseSecret(generate_seed_phrase(seed))
    second_secret = SeedPhraseSecret(generate_seed_phrase(seed))

    assert derive_key_pair(first_secret) == derive_key_pair(second_secret)
    assert derive_public_key(first_secret, 3) == derive_public_key(second_secret, 3)


def test_hd_path_selects_another_key_pair() -> None:
    secret = SeedPhraseSecret(SEED_PHRASE)

    assert derive_public_key(secret) == derive_public_key(secret, 0)
    assert derive_public_key(secret, 0) != derive_public_key(secret, 1)


@pytest.mark.parametrize("hd_path", [-1, 2**31])
def test_out_of_range_hd_path_is_rejected(hd_path: int) -> None:
    with pytest.raises(UnsupportedPathError):
        derive_key_pair(SeedPhraseSecret(SEED_PHRASE), hd_path)


def test_malformed_seed_phrase_fails() -> None:
    with pytest.raises(DerivationFailedError):
        derive_key_pair(SeedPhraseSecret("illness spike retreat truth genius clock brain pass fit cave bargain notaword"))


def test_secret_key_ignores_hd_path() -> None:
    secret = SecretKeySecret(SECRET_KEY)

    assert derive_public_key(secret) == ADDRESS
    assert derive_public_key(secret, 7) == ADDRESS


def test_invalid_secret_key_fails() -> None:
    with pytest.raises(DerivationFailedError):
        derive_key_pair(SecretKeySecret("SNOTAVALIDKEY"))


def test_keychain_secret_reads_the_keychain(keychain: Keychain) -> None:
    entry_name = keychain_entry_name("alice")
    key_pair = key_pair_from_seed_phrase(SEED_PHRASE)
    keychain.entry(entry_name).set_password(key_pair.to_bytes())

    assert derive_key_pair(KeychainSecret(entry_name), keychain=keychain) == key_pair
    assert derive_public_key(KeychainSecret(entry_name), 4, keychain=keychain) == ADDRESS


def test_keychain_secret_requires_an_entry(keychain: Keychain) -> None:
    secret = KeychainSecret(keychain_entry_name("bob"))

    with pytest.raises(EntryNotFoundError):
        derive_key_pair(secret, keychain=keychain)

    with pytest.raises(DerivationFailedError):
        derive_key_pair(secret)


def test_key_pair_bytes() -> None:
    key_pair = key_pair_from_seed_phrase(SEED_PHRASE)
    other_key_pair = key_pair_from_seed_phrase(SEED_PHRASE, 1)

    assert len(key_pair.to_bytes()) == 64
    assert KeyPair.from_bytes(key_pair.to_bytes()) == key_pair

    with pytest.raises(DerivationFailedError):
        KeyPair.from_bytes(key_pair.secret_key + other_key_pair.public_key)

    with pytest.raises(DerivationFailedError):
        KeyPair.from_bytes(key_pair.secret_key)


def test_seed_phrase_whitespace_does_not_change_the_key_pair() -> None:
    spaced_seed_phrase = "  " + SEED_PHRASE.replace(" ", "  ") + "\n"

    assert derive_public_key(SeedPhraseSecret(spaced_seed_phrase)) == ADDRESS
    assert key_pair_from_seed_phrase(spaced_seed_phrase).address == ADDRESS
