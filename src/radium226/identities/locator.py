from pathlib import Path
from re import Pattern
from loguru import logger
from click import get_app_dir
import re
import os
import yaml

from .types import (
    Secret,
    SecretKind,
    IdentityName,
    IdentityNotFoundError,
    InvalidIdentityNameError,
    InvalidSecretFormatError,
)
from .secret import parse_secret, format_secret
from .files import write_text_atomically



APP_NAME = "radium226-identities"


CONFIG_HOME_ENV_VAR = "IDENTITIES_CONFIG_HOME"


LOCAL_CONFIG_DIR_NAME = ".identities"


IDENTITY_FOLDER_NAME = "identity"


IDENTITY_FILE_SUFFIX = ".yaml"


IDENTITY_NAME_PATTERN: Pattern = re.compile(r"^[A-Za-z0-9_-]{1,250}$")



def validate_identity_name(name: str) -> IdentityName:
    if not IDENTITY_NAME_PATTERN.match(name):
        raise InvalidIdentityNameError(
            f"Identity name {name!r} must be 1 to 250 characters among letters, digits, '-' and '_'"
        )
    return name


def global_config_dir() -> Path:
    if (config_home := os.getenv(CONFIG_HOME_ENV_VAR)) is not None:
        return Path(config_home)
    return Path(get_app_dir(APP_NAME))


def find_config_dir(folder_path: Path | None = None) -> Path | None:
    folder_path = folder_path or Path.cwd()
    while True:
        if (config_dir_path := folder_path / LOCAL_CONFIG_DIR_NAME).is_dir():
            return config_dir_path

        if (folder_path / ".git").exists():
            logger.debug("Reached the git root folder without finding a {name!r} folder.", name=LOCAL_CONFIG_DIR_NAME)
            break

        if folder_path.parent == folder_path:
            break

        folder_path = folder_path.parent

    return None


def resolve_config_dir(*, use_global: bool = False, config_dir: Path | None = None) -> Path:
    if config_dir is not None:
        return config_dir

    if not use_global and (local_config_dir := find_config_dir()) is not None:
        return local_config_dir

    return global_config_dir()



class Locator():

    root: Path

    def __init__(self, root: Path) -> None:
        self.root = root

    @property
    def identity_folder_path(self) -> Path:
        return self.root / IDENTITY_FOLDER_NAME

    def identity_file_path(self, name: IdentityName) -> Path:
        return self.identity_folder_path / f"{validate_identity_name(name)}{IDENTITY_FILE_SUFFIX}"

    def write_identity(self, name: IdentityName, secret: Secret) -> None:
        file_path = self.identity_file_path(name)
        obj = {
            secret.kind.value: format_secret(secret),
        }
        content = "---\n"
        content += yaml.safe_dump(obj, default_flow_style=False)
        write_text_atomically(file_path, content)
        logger.info("Identity {name!r} written to {file_path}", name=name, file_path=file_path)

    def read_identity(self, name: IdentityName) -> Secret:
        file_path = self.identity_file_path(name)
        if not file_path.is_file():
            raise IdentityNotFoundError(name)

        try:
            obj = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise InvalidSecretFormatError(f"Identity file {file_path} is not valid YAML") from e

        if not isinstance(obj, dict) or len(obj) != 1:
            raise InvalidSecretFormatError(f"Identity file {file_path} must hold exactly one secret")

        [(kind_str, text)] = obj.items()
        try:
            kind = SecretKind(kind_str)
        except ValueError as e:
            raise InvalidSecretFormatError(f"Unknown secret kind {kind_str!r} in {file_path}") from e

        secret = parse_secret(str(text))
        if secret.kind != kind:
            raise InvalidSecretFormatError(f"Identity file {file_path} declares a {kind} but holds a {secret.kind}")
        return secret

    def list_identities(self) -> list[IdentityName]:
        if not self.identity_folder_path.is_dir():
            return []

        return sorted(
            file_path.stem
            for file_path in self.identity_folder_path.glob(f"*{IDENTITY_FILE_SUFFIX}")
            if IDENTITY_NAME_PATTERN.match(file_path.stem)
        )

    def remove_identity(self, name: IdentityName) -> None:
        file_path = self.identity_file_path(name)
        if not file_path.is_file():
            raise IdentityNotFoundError(name)
        file_path.unlink()
        logger.info("Identity {name!r} removed", name=name)
