import pytest
from pathlib import Path
from typing import Generator
import keyring
from keyring.backend import KeyringBackend
from keyring.errors import PasswordDeleteError, PasswordSetError

from radium226.identities import Locator, Keychain
from radium226.identities.backends.memory import Memory



SEED_PHRASE = "illness spike retreat truth genius clock brain pass fit cave bargain toe"


ADDRESS = "GDRXE2BQUC3AZNPVFSCEZ76NJ3WWL25FYFK6RGZGIEKWE4SOOHSUJUJ6"


SECRET_KEY = "SBGWSG6BTNCKCOB3DIFBGCVMUPQFYPA2G4O34RMTB343OYPXU5DJDVMN"



class InMemoryKeyring(KeyringBackend):

    priority = 1  # type: ignore[assignment]

    def __init__(self) -> None:
        super().__init__()
        self.passwords: dict[tuple[str, str], str] = {}

    def get_password(self, service: str, username: str) -> str | None:
        return self.passwords.get((service, username))

    def set_password(self, service: str, username: str, password: str) -> None:
        self.passwords[(service, username)] = password

    def delete_password(self, service: str, username: str) -> None:
        if self.passwords.pop((service, username), None) is None:
            raise PasswordDeleteError(service)


class ReadOnlyKeyring(InMemoryKeyring):

    def set_password(self, service: str, username: str, password: str) -> None:
        raise PasswordSetError("The keychain is locked")


def _use_keyring(backend: KeyringBackend) -> Generator[KeyringBackend, None, None]:
    previous_backend = keyring.get_keyring()
    keyring.set_keyring(backend)
    try:
        yield backend
    finally:
        keyring.set_keyring(previous_backend)


@pytest.fixture
def in_memory_keyring() -> Generator[KeyringBackend, None, None]:
    yield from _use_keyring(InMemoryKeyring())


@pytest.fixture
def read_only_keyring() -> Generator[KeyringBackend, None, None]:
    yield from _use_keyring(ReadOnlyKeyring())


@pytest.fixture
def locator(tmp_path: Path) -> Locator:
    return Locator(tmp_path / "config")


@pytest.fixture
def keychain() -> Keychain:
    return Keychain(Memory())
