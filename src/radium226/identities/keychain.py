from loguru import logger

from .types import (
    Address,
    EntryName,
    KeyPair,
    EntryNotFoundError,
    KeychainWriteFailedError,
    KeychainError,
)
from .spi import KeychainBackend



class KeychainEntry():

    name: EntryName
    backend: KeychainBackend

    def __init__(self, backend: KeychainBackend, name: EntryName) -> None:
        self.backend = backend
        self.name = name

    def get_key_pair(self) -> KeyPair:
        password = self.backend.get_password(self.name)
        if password is None:
            raise EntryNotFoundError(self.name)
        return KeyPair.from_bytes(password)

    def get_public_key(self) -> Address:
        return self.get_key_pair().address

    def set_password(self, password: bytes) -> None:
        try:
            self.backend.set_password(self.name, password)
        except KeychainWriteFailedError:
            raise
        except KeychainError as e:
            raise KeychainWriteFailedError(str(e)) from e


class Keychain():

    backend: KeychainBackend

    def __init__(self, backend: KeychainBackend) -> None:
        self.backend = backend

    def entry(self, name: EntryName) -> KeychainEntry:
        return KeychainEntry(self.backend, name)



def store_in_keychain(entry: KeychainEntry, key_pair: KeyPair) -> Address | None:
    """
    Store the key pair under the entry unless one is already there.

    Returns:
        The address already stored in the keychain, or None when the key pair was written
    """
    try:
        existing_address = entry.get_public_key()
    except EntryNotFoundError:
        logger.info("Saving a new key to the keychain: {entry_name}", entry_name=entry.name)
        entry.set_password(key_pair.to_bytes())
        return None

    logger.warning("A key for {entry_name} already exists in the keychain: {address}", entry_name=entry.name, address=existing_address)
    return existing_address
