from loguru import logger
from stellar_sdk import Keypair, StrKey

from .types import (
    Address,
    HDPath,
    KeyPair,
    Secret,
    SeedPhrase,
    SeedPhraseSecret,
    SecretKeySecret,
    KeychainSecret,
    DerivationFailedError,
    UnsupportedPathError,
)
from .seed_phrase import is_valid_seed_phrase, normalize_seed_phrase
from .keychain import Keychain



MAX_HD_PATH: HDPath = 2**31 - 1


DEFAULT_HD_PATH: HDPath = 0



def validate_hd_path(hd_path: HDPath) -> HDPath:
    if not 0 <= hd_path <= MAX_HD_PATH:
        raise UnsupportedPathError(hd_path)
    return hd_path


def key_pair_from_seed_phrase(seed_phrase: SeedPhrase, hd_path: HDPath | None = None) -> KeyPair:
    index = validate_hd_path(DEFAULT_HD_PATH if hd_path is None else hd_path)

    seed_phrase = normalize_seed_phrase(seed_phrase)
    if not is_valid_seed_phrase(seed_phrase):
        raise DerivationFailedError("Seed phrase is not a valid mnemonic")

    logger.debug("Deriving key pair at m/44'/148'/{index}'... ", index=index)
    try:
        keypair = Keypair.from_mnemonic_phrase(seed_phrase, passphrase="", index=index)
    except ValueError as e:
        raise DerivationFailedError(f"Unable to derive a key pair: {e}") from e
    return KeyPair.from_secret_key(keypair.raw_secret_key())


def key_pair_from_secret_key(secret_key: str) -> KeyPair:
    try:
        raw_secret_key = StrKey.decode_ed25519_secret_seed(secret_key)
    except ValueError as e:
        raise DerivationFailedError(f"Invalid secret key: {e}") from e
    return KeyPair.from_secret_key(raw_secret_key)


def derive_key_pair(secret: Secret, hd_path: HDPath | None = None, keychain: Keychain | None = None) -> KeyPair:
    match secret:
        case SeedPhraseSecret(seed_phrase=seed_phrase):
            return key_pair_from_seed_phrase(seed_phrase, hd_path)

        case SecretKeySecret(secret_key=secret_key):
            if hd_path is not None:
                logger.debug("Ignoring HD path {hd_path} for a secret key", hd_path=hd_path)
            return key_pair_from_secret_key(secret_key)

        case KeychainSecret(entry_name=entry_name):
            if keychain is None:
                raise DerivationFailedError(f"No keychain available to read {entry_name!r}")
            if hd_path is not None:
                logger.debug("Ignoring HD path {hd_path} for keychain entry {entry_name}", hd_path=hd_path, entry_name=entry_name)
            return keychain.entry(entry_name).get_key_pair()


def derive_public_key(secret: Secret, hd_path: HDPath | None = None, keychain: Keychain | None = None) -> Address:
    return derive_key_pair(secret, hd_path, keychain).address
