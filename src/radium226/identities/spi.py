from typing import Protocol, Callable, ContextManager, Any, cast, TypeAlias
from importlib.metadata import entry_points, EntryPoint
from importlib import import_module
from dataclasses import dataclass

from .types import EntryName



ENTRY_POINT_GROUP = "radium226.identities.keychain"


ParseConfig: TypeAlias = Callable[[dict[str, str]], Any]

CreateBackend: TypeAlias = Callable[[Any], ContextManager['KeychainBackend']]

Name: TypeAlias = str


class KeychainBackend(Protocol):

    def get_password(self, entry_name: EntryName) -> bytes | None:
        ...

    def set_password(self, entry_name: EntryName, password: bytes) -> None:
        ...


@dataclass
class Factory():

    name: Name
    parse_config: ParseConfig
    create_backend: CreateBackend


def _load_factory(entry_point: EntryPoint) -> Factory:
    module = import_module(entry_point.value)
    return Factory(
        name=entry_point.name,
        parse_config=cast(ParseConfig, getattr(module, "parse_config")),
        create_backend=cast(CreateBackend, getattr(module, "create_backend")),
    )


def find_factory(name: Name) -> Factory:
    factories = [_load_factory(ep) for ep in entry_points(group=ENTRY_POINT_GROUP)]
    factory = next((f for f in factories if f.name == name), None)
    if factory is None:
        raise LookupError(f"Keychain backend {name!r} not found. Available backends: {[f.name for f in factories]}")
    return factory
