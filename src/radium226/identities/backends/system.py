from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator
from base64 import b64encode, b64decode
from binascii import Error as BinasciiError
from getpass import getuser
from loguru import logger
import keyring
from keyring.errors import KeyringError

from ..types import EntryName, KeychainError, KeychainWriteFailedError



@dataclass(frozen=True)
class Config():
    username: str


def parse_config(obj: dict[str, str]) -> Config:
    if "username" in obj:
        logger.info("Using keychain username {username!r}! ", username=obj["username"])
        return Config(username=obj["username"])
    return Config(username=getuser())


class System():

    config: Config

    def __init__(self, config: Config) -> None:
        self.config = config

    def get_password(self, entry_name: EntryName) -> bytes | None:
        logger.debug("Reading {entry_name!r} from the system keychain... ", entry_name=entry_name)
        try:
            encoded_password = keyring.get_password(entry_name, self.config.username)
        except KeyringError as e:
            raise KeychainError(f"Unable to read {entry_name!r} from the system keychain: {e}") from e

        if encoded_password is None:
            return None

        try:
            return b64decode(encoded_password.encode("utf-8"), validate=True)
        except BinasciiError as e:
            raise KeychainError(f"Keychain entry {entry_name!r} is not valid base64") from e

    def set_password(self, entry_name: EntryName, password: bytes) -> None:
        logger.debug("Writing {entry_name!r} to the system keychain... ", entry_name=entry_name)
        try:
            keyring.set_password(entry_name, self.config.username, b64encode(password).decode("utf-8"))
        except KeyringError as e:
            raise KeychainWriteFailedError(f"Unable to write {entry_name!r} to the system keychain: {e}") from e


@contextmanager
def create_backend(config: Config) -> Generator[System, None, None]:
    yield System(config)
