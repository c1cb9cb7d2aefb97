from dataclasses import dataclass
from typing import Awaitable, Callable, TypeAlias
from loguru import logger

from .types import (
    Address,
    HDPath,
    IdentityName,
    Secret,
    SecretKeySecret,
    SeedPhrase,
    SeedPhraseSecret,
    KeychainSecret,
    ConflictingOptionsError,
    KeychainError,
    NetworkError,
)
from .seed_phrase import generate_seed_phrase, test_seed_phrase
from .secret import keychain_entry_name, parse_secret
from .key_pair import key_pair_from_seed_phrase, derive_public_key, validate_hd_path
from .keychain import Keychain, store_in_keychain
from .locator import Locator, validate_identity_name



Funder: TypeAlias = Callable[[Address], Awaitable[None]]



@dataclass(frozen=True)
class GenerateOptions():
    name: IdentityName
    seed: str | None = None
    default_seed: bool = False
    as_secret: bool = False
    keychain: bool = False
    hd_path: HDPath | None = None
    fund: bool = False
    no_fund: bool = False

    def __post_init__(self) -> None:
        validate_identity_name(self.name)

        if self.hd_path is not None:
            validate_hd_path(self.hd_path)

        if self.seed is not None and self.default_seed:
            raise ConflictingOptionsError("A seed and the default seed cannot be used together")

        if self.as_secret and self.keychain:
            raise ConflictingOptionsError("An identity cannot be both a secret key and a keychain entry")


@dataclass(frozen=True)
class GenerateResult():
    name: IdentityName
    secret: Secret
    address: Address | None = None
    funded: bool = False
    existing_keychain_address: Address | None = None
    funding_error: NetworkError | None = None



def _seed_phrase(options: GenerateOptions) -> SeedPhrase:
    if options.default_seed:
        return test_seed_phrase()
    return generate_seed_phrase(options.seed)


def _secret(options: GenerateOptions, seed_phrase: SeedPhrase) -> Secret:
    if options.as_secret:
        key_pair = key_pair_from_seed_phrase(seed_phrase, options.hd_path)
        return SecretKeySecret(secret_key=key_pair.secret)

    if options.keychain:
        # Parsing validates the entry name before anything reaches the keychain
        secret = parse_secret(keychain_entry_name(options.name))
        assert isinstance(secret, KeychainSecret)
        return secret

    return SeedPhraseSecret(seed_phrase=seed_phrase)


async def _try_fund(funder: Funder, address: Address) -> NetworkError | None:
    try:
        await funder(address)
    except NetworkError as e:
        return e
    return None


async def generate(
    options: GenerateOptions,
    locator: Locator,
    keychain: Keychain | None = None,
    funder: Funder | None = None,
) -> GenerateResult:
    seed_phrase = _seed_phrase(options)
    secret = _secret(options, seed_phrase)

    existing_keychain_address: Address | None = None
    if isinstance(secret, KeychainSecret):
        if keychain is None:
            raise KeychainError("Storing in the keychain requires a keychain backend")
        logger.info("Writing to keychain: {entry_name}", entry_name=secret.entry_name)
        key_pair = key_pair_from_seed_phrase(seed_phrase, options.hd_path)
        existing_keychain_address = store_in_keychain(keychain.entry(secret.entry_name), key_pair)

    locator.write_identity(options.name, secret)

    if options.no_fund or funder is None:
        return GenerateResult(
            name=options.name,
            secret=secret,
            existing_keychain_address=existing_keychain_address,
        )

    address = derive_public_key(secret, options.hd_path, keychain)
    funding_error = await _try_fund(funder, address)
    if funding_error is not None:
        logger.warning("Funding {address} failed: {error}", address=address, error=funding_error)

    return GenerateResult(
        name=options.name,
        secret=secret,
        address=address,
        funded=funding_error is None,
        existing_keychain_address=existing_keychain_address,
        funding_error=funding_error,
    )
