from secrets import token_bytes
from loguru import logger
from mnemonic import Mnemonic

from .types import SeedPhrase, InvalidSeedError



LANGUAGE = "english"


ENTROPY_LENGTHS = (16, 20, 24, 28, 32)


RANDOM_ENTROPY_LENGTH = 32


TEST_SEED = "0000000000000000"



def generate_seed_phrase(seed: str | None = None) -> SeedPhrase:
    if seed is None:
        logger.debug("Generating seed phrase from random entropy... ")
        entropy = token_bytes(RANDOM_ENTROPY_LENGTH)
    else:
        logger.debug("Generating seed phrase from the given seed... ")
        entropy = seed.encode("utf-8")

    if len(entropy) not in ENTROPY_LENGTHS:
        raise InvalidSeedError(
            f"Seed must be {', '.join(map(str, ENTROPY_LENGTHS))} bytes long, got {len(entropy)}"
        )

    return Mnemonic(LANGUAGE).to_mnemonic(entropy)


def test_seed_phrase() -> SeedPhrase:
    return generate_seed_phrase(TEST_SEED)


def is_valid_seed_phrase(text: str) -> bool:
    try:
        return Mnemonic(LANGUAGE).check(normalize_seed_phrase(text))
    except (ValueError, LookupError):
        return False


def normalize_seed_phrase(text: str) -> SeedPhrase:
    return " ".join(text.split())
