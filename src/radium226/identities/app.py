from click import option, Context, pass_context, argument, group, echo, ClickException, IntRange
from contextlib import contextmanager
from functools import partial
from loguru import logger
from typing import Generator, cast
from types import SimpleNamespace
from pathlib import Path
import asyncio
import sys

from .types import IdentityName, HDPath, Secret, KeychainSecret, IdentityError
from .click import (
    IDENTITY_NAME,
    KEY_VALUE,
    to_dict,
)
from .generate import GenerateOptions, generate as generate_identity
from .key_pair import derive_key_pair, MAX_HD_PATH
from .keychain import Keychain
from .locator import Locator, resolve_config_dir
from .network import fund_address, get_network, NETWORK_ENV_VAR
from .spi import find_factory



FUNDING_ADVISORY = (
    "Behavior of `generate` will change in the future, and it will no longer fund by default. "
    "If you want to fund please provide `--fund` flag. If you don't need to fund your keys in the future, "
    "ignore this warning. It can be suppressed with -q flag."
)



HD_PATH = IntRange(0, MAX_HD_PATH)



@contextmanager
def _raising_click_exceptions() -> Generator[None, None, None]:
    try:
        yield
    except (IdentityError, LookupError) as e:
        raise ClickException(str(e)) from e


def _keychain(context: Context) -> Keychain:
    factory = find_factory(context.obj.keychain_backend_name)
    config = factory.parse_config(context.obj.keychain_config)
    return Keychain(context.with_resource(factory.create_backend(config)))


def _keychain_for(context: Context, secret: Secret) -> Keychain | None:
    if isinstance(secret, KeychainSecret):
        return _keychain(context)
    return None



@group()
@option(
    "--config-dir",
    "config_dir",
    type=Path,
    required=False,
    default=None,
)
@option(
    "--global",
    "use_global",
    is_flag=True,
    default=False,
)
@option(
    "--quiet",
    "-q",
    "quiet",
    is_flag=True,
    default=False,
)
@option(
    "--keychain-backend",
    "-k",
    "keychain_backend_name",
    type=str,
    required=False,
    default="system",
    envvar="IDENTITIES_KEYCHAIN_BACKEND",
)
@option(
    "--keychain-config",
    "-c",
    "keychain_config",
    multiple=True,
    type=KEY_VALUE,
    callback=to_dict,
)
@pass_context
def app(
    context: Context,
    config_dir: Path | None,
    use_global: bool,
    quiet: bool,
    keychain_backend_name: str,
    keychain_config: dict[str, str],
) -> None:
    if quiet:
        logger.remove()
        logger.add(sys.stderr, level="ERROR")

    logger.debug("App started! ")
    context.obj = SimpleNamespace()
    context.obj.quiet = quiet
    context.obj.locator = Locator(resolve_config_dir(use_global=use_global, config_dir=config_dir))
    context.obj.keychain_backend_name = keychain_backend_name
    context.obj.keychain_config = keychain_config



@app.command()
@argument("name", type=IDENTITY_NAME, required=True)
@option(
    "--seed",
    "seed",
    type=str,
    required=False,
    help="Seed to use when generating the seed phrase. Random otherwise.",
)
@option(
    "--default-seed",
    "-d",
    "default_seed",
    is_flag=True,
    default=False,
    help="Generate the default seed phrase. Useful for testing.",
)
@option(
    "--as-secret",
    "-s",
    "as_secret",
    is_flag=True,
    default=False,
    help="Store the generated identity as a secret key.",
)
@option(
    "--keychain",
    "keychain",
    is_flag=True,
    default=False,
    help="Store the generated key pair in the keychain.",
)
@option(
    "--hd-path",
    "hd_path",
    type=HD_PATH,
    required=False,
)
@option(
    "--fund",
    "fund",
    is_flag=True,
    default=False,
)
@option(
    "--no-fund",
    "no_fund",
    is_flag=True,
    default=False,
)
@option(
    "--network",
    "network_name",
    type=str,
    default="testnet",
    envvar=NETWORK_ENV_VAR,
)
@option(
    "--friendbot-url",
    "friendbot_url",
    type=str,
    required=False,
)
@pass_context
def generate(
    context: Context,
    name: IdentityName,
    seed: str | None,
    default_seed: bool,
    as_secret: bool,
    keychain: bool,
    hd_path: HDPath | None,
    fund: bool,
    no_fund: bool,
    network_name: str,
    friendbot_url: str | None,
) -> None:
    locator = cast(Locator, context.obj.locator)

    if not fund and not context.obj.quiet:
        echo(f"Warning: {FUNDING_ADVISORY}", err=True)

    with _raising_click_exceptions():
        options = GenerateOptions(
            name=name,
            seed=seed,
            default_seed=default_seed,
            as_secret=as_secret,
            keychain=keychain,
            hd_path=hd_path,
            fund=fund,
            no_fund=no_fund,
        )
        funder = None if no_fund else partial(fund_address, get_network(network_name, friendbot_url))
        result = asyncio.run(generate_identity(
            options,
            locator,
            keychain=_keychain(context) if keychain else None,
            funder=funder,
        ))

    if result.existing_keychain_address is not None:
        echo(f"A key for {name} already exists in your keychain: {result.existing_keychain_address}")



@app.command()
@argument("name", type=IDENTITY_NAME, required=True)
@option(
    "--hd-path",
    "hd_path",
    type=HD_PATH,
    required=False,
)
@pass_context
def address(context: Context, name: IdentityName, hd_path: HDPath | None) -> None:
    locator = cast(Locator, context.obj.locator)

    with _raising_click_exceptions():
        secret = locator.read_identity(name)
        key_pair = derive_key_pair(secret, hd_path, _keychain_for(context, secret))

    echo(key_pair.address)



@app.command()
@argument("name", type=IDENTITY_NAME, required=True)
@option(
    "--hd-path",
    "hd_path",
    type=HD_PATH,
    required=False,
)
@pass_context
def show(context: Context, name: IdentityName, hd_path: HDPath | None) -> None:
    locator = cast(Locator, context.obj.locator)

    with _raising_click_exceptions():
        secret = locator.read_identity(name)
        key_pair = derive_key_pair(secret, hd_path, _keychain_for(context, secret))

    echo(key_pair.secret)



@app.command()
@pass_context
def ls(context: Context) -> None:
    locator = cast(Locator, context.obj.locator)

    for name in locator.list_identities():
        echo(name)



@app.command()
@argument("name", type=IDENTITY_NAME, required=True)
@pass_context
def rm(context: Context, name: IdentityName) -> None:
    locator = cast(Locator, context.obj.locator)

    with _raising_click_exceptions():
        locator.remove_identity(name)



@app.command()
@argument("name", type=IDENTITY_NAME, required=True)
@option(
    "--hd-path",
    "hd_path",
    type=HD_PATH,
    required=False,
)
@option(
    "--network",
    "network_name",
    type=str,
    default="testnet",
    envvar=NETWORK_ENV_VAR,
)
@option(
    "--friendbot-url",
    "friendbot_url",
    type=str,
    required=False,
)
@pass_context
def fund(
    context: Context,
    name: IdentityName,
    hd_path: HDPath | None,
    network_name: str,
    friendbot_url: str | None,
) -> None:
    locator = cast(Locator, context.obj.locator)

    with _raising_click_exceptions():
        network = get_network(network_name, friendbot_url)
        secret = locator.read_identity(name)
        key_pair = derive_key_pair(secret, hd_path, _keychain_for(context, secret))
        asyncio.run(fund_address(network, key_pair.address))
