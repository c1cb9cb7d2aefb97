from re import Pattern
import re
from stellar_sdk import StrKey

from .types import (
    Secret,
    SeedPhraseSecret,
    SecretKeySecret,
    KeychainSecret,
    IdentityName,
    EntryName,
    InvalidSecretFormatError,
)
from .seed_phrase import is_valid_seed_phrase, normalize_seed_phrase



KEYCHAIN_ENTRY_PREFIX = "keychain:"


KEYCHAIN_ENTRY_SERVICE = "radium226.identities"


KEYCHAIN_ENTRY_PATTERN: Pattern = re.compile(
    r"^" + re.escape(KEYCHAIN_ENTRY_PREFIX + KEYCHAIN_ENTRY_SERVICE) + r"-(?P<identity_name>[A-Za-z0-9_-]{1,250})$"
)



def keychain_entry_name(identity_name: IdentityName) -> EntryName:
    return f"{KEYCHAIN_ENTRY_PREFIX}{KEYCHAIN_ENTRY_SERVICE}-{identity_name}"


def parse_secret(text: str) -> Secret:
    text = text.strip()

    if text.startswith(KEYCHAIN_ENTRY_PREFIX):
        if not KEYCHAIN_ENTRY_PATTERN.match(text):
            raise InvalidSecretFormatError(
                f"Keychain entry {text!r} must look like '{keychain_entry_name('<name>')}'"
            )
        return KeychainSecret(entry_name=text)

    if StrKey.is_valid_ed25519_secret_seed(text):
        return SecretKeySecret(secret_key=text)

    if is_valid_seed_phrase(text):
        return SeedPhraseSecret(seed_phrase=normalize_seed_phrase(text))

    raise InvalidSecretFormatError("Secret is neither a secret key, a seed phrase nor a keychain entry")


def format_secret(secret: Secret) -> str:
    match secret:
        case SeedPhraseSecret(seed_phrase=seed_phrase):
            return seed_phrase
        case SecretKeySecret(secret_key=secret_key):
            return secret_key
        case KeychainSecret(entry_name=entry_name):
            return entry_name
