from contextlib import contextmanager
from typing import Generator

from ..types import EntryName


class Config():
    pass


def parse_config(config: dict[str, str]) -> Config:
    return Config()


class Memory():

    passwords: dict[EntryName, bytes]

    def __init__(self) -> None:
        self.passwords = {}

    def get_password(self, entry_name: EntryName) -> bytes | None:
        return self.passwords.get(entry_name)

    def set_password(self, entry_name: EntryName, password: bytes) -> None:
        self.passwords[entry_name] = password


@contextmanager
def create_backend(config: Config) -> Generator[Memory, None, None]:
    yield Memory()
