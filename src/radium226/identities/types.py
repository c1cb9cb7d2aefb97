from dataclasses import dataclass
from typing import TypeAlias
from enum import StrEnum, auto

from stellar_sdk import Keypair, StrKey



SeedPhrase: TypeAlias = str



Address: TypeAlias = str



IdentityName: TypeAlias = str



EntryName: TypeAlias = str



HDPath: TypeAlias = int



class SecretKind(StrEnum):
    SEED_PHRASE = auto()
    SECRET_KEY = auto()
    KEYCHAIN = auto()



@dataclass(frozen=True, eq=True)
class SeedPhraseSecret():
    seed_phrase: SeedPhrase

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed_phrase", " ".join(self.seed_phrase.split()))

    @property
    def kind(self) -> SecretKind:
        return SecretKind.SEED_PHRASE



@dataclass(frozen=True, eq=True)
class SecretKeySecret():
    secret_key: str

    @property
    def kind(self) -> SecretKind:
        return SecretKind.SECRET_KEY



@dataclass(frozen=True, eq=True)
class KeychainSecret():
    entry_name: EntryName

    @property
    def kind(self) -> SecretKind:
        return SecretKind.KEYCHAIN



Secret: TypeAlias = SeedPhraseSecret | SecretKeySecret | KeychainSecret



@dataclass(frozen=True, eq=True)
class KeyPair():
    secret_key: bytes
    public_key: bytes

    @classmethod
    def from_secret_key(cls, secret_key: bytes) -> "KeyPair":
        keypair = Keypair.from_raw_ed25519_seed(secret_key)
        return cls(secret_key=secret_key, public_key=keypair.raw_public_key())

    @classmethod
    def from_bytes(cls, data: bytes) -> "KeyPair":
        if len(data) != 64:
            raise DerivationFailedError(f"Expected 64 bytes of key pair, got {len(data)}")

        key_pair = cls.from_secret_key(data[:32])
        if key_pair.public_key != data[32:]:
            raise DerivationFailedError("Public key does not match the secret key")
        return key_pair

    def to_bytes(self) -> bytes:
        return self.secret_key + self.public_key

    @property
    def address(self) -> Address:
        return StrKey.encode_ed25519_public_key(self.public_key)

    @property
    def secret(self) -> str:
        return StrKey.encode_ed25519_secret_seed(self.secret_key)



class IdentityError(Exception):
    pass


class InvalidSeedError(IdentityError):
    pass


class DerivationFailedError(IdentityError):
    pass


class UnsupportedPathError(IdentityError):

    def __init__(self, hd_path: HDPath) -> None:
        super().__init__(f"HD path {hd_path} is out of range")
        self.hd_path = hd_path


class InvalidSecretFormatError(IdentityError):
    pass


class IdentityNotFoundError(IdentityError):

    def __init__(self, name: IdentityName) -> None:
        super().__init__(f"Identity {name!r} not found")
        self.name = name


class InvalidIdentityNameError(IdentityError):
    pass


class ConflictingOptionsError(IdentityError):
    pass


class KeychainError(IdentityError):
    pass


class EntryNotFoundError(KeychainError):

    def __init__(self, entry_name: EntryName) -> None:
        super().__init__(f"Keychain entry {entry_name!r} not found")
        self.entry_name = entry_name


class KeychainWriteFailedError(KeychainError):
    pass


class NetworkError(IdentityError):
    pass



@dataclass(frozen=True, eq=True)
class KeyValue():
    key: str
    value: str
