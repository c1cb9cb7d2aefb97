from .app import app
from .types import (
    Address,
    SeedPhrase,
    IdentityName,
    KeyPair,
    Secret,
    SecretKind,
    SeedPhraseSecret,
    SecretKeySecret,
    KeychainSecret,
    IdentityError,
    InvalidSeedError,
    DerivationFailedError,
    UnsupportedPathError,
    InvalidSecretFormatError,
    IdentityNotFoundError,
    InvalidIdentityNameError,
    ConflictingOptionsError,
    KeychainError,
    EntryNotFoundError,
    KeychainWriteFailedError,
    NetworkError,
)
from .seed_phrase import generate_seed_phrase, test_seed_phrase
from .key_pair import derive_key_pair, derive_public_key, key_pair_from_seed_phrase
from .secret import parse_secret, format_secret, keychain_entry_name
from .locator import Locator, resolve_config_dir
from .keychain import Keychain, KeychainEntry, store_in_keychain
from .network import Network, get_network, fund_address
from .generate import GenerateOptions, GenerateResult, generate

from .spi import KeychainBackend


__all__ = [
    "app",
    "Address",
    "SeedPhrase",
    "IdentityName",
    "KeyPair",
    "Secret",
    "SecretKind",
    "SeedPhraseSecret",
    "SecretKeySecret",
    "KeychainSecret",
    "IdentityError",
    "InvalidSeedError",
    "DerivationFailedError",
    "UnsupportedPathError",
    "InvalidSecretFormatError",
    "IdentityNotFoundError",
    "InvalidIdentityNameError",
    "ConflictingOptionsError",
    "KeychainError",
    "EntryNotFoundError",
    "KeychainWriteFailedError",
    "NetworkError",
    "generate_seed_phrase",
    "test_seed_phrase",
    "derive_key_pair",
    "derive_public_key",
    "key_pair_from_seed_phrase",
    "parse_secret",
    "format_secret",
    "keychain_entry_name",
    "Locator",
    "resolve_config_dir",
    "Keychain",
    "KeychainEntry",
    "store_in_keychain",
    "Network",
    "get_network",
    "fund_address",
    "GenerateOptions",
    "GenerateResult",
    "generate",
    "KeychainBackend",
]
