from dataclasses import dataclass, replace
from loguru import logger
import httpx

from .types import Address, NetworkError



FUNDING_TIMEOUT = 30.0


ALREADY_FUNDED_MARKER = "op_already_exists"


NETWORK_ENV_VAR = "IDENTITIES_NETWORK"



@dataclass(frozen=True, eq=True)
class Network():
    name: str
    rpc_url: str
    network_passphrase: str
    friendbot_url: str | None = None

    def with_friendbot_url(self, friendbot_url: str) -> "Network":
        return replace(self, friendbot_url=friendbot_url)



NETWORKS: dict[str, Network] = {
    network.name: network
    for network in [
        Network(
            name="testnet",
            rpc_url="https://soroban-testnet.stellar.org",
            network_passphrase="Test SDF Network ; September 2015",
            friendbot_url="https://friendbot.stellar.org/",
        ),
        Network(
            name="futurenet",
            rpc_url="https://rpc-futurenet.stellar.org",
            network_passphrase="Test SDF Future Network ; October 2022",
            friendbot_url="https://friendbot-futurenet.stellar.org/",
        ),
        Network(
            name="local",
            rpc_url="http://localhost:8000/rpc",
            network_passphrase="Standalone Network ; February 2017",
            friendbot_url="http://localhost:8000/friendbot",
        ),
        Network(
            name="mainnet",
            rpc_url="https://mainnet.sorobanrpc.com",
            network_passphrase="Public Global Stellar Network ; September 2015",
        ),
    ]
}



def get_network(name: str, friendbot_url: str | None = None) -> Network:
    network = NETWORKS.get(name)
    if network is None:
        raise NetworkError(f"Network {name!r} not found. Available networks: {list(NETWORKS)}")

    if friendbot_url is not None:
        network = network.with_friendbot_url(friendbot_url)
    return network


async def fund_address(network: Network, address: Address, client: httpx.AsyncClient | None = None) -> None:
    if network.friendbot_url is None:
        raise NetworkError(f"Network {network.name!r} has no friendbot to fund {address}")

    logger.debug("Funding {address} with {friendbot_url}... ", address=address, friendbot_url=network.friendbot_url)
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=FUNDING_TIMEOUT) as client:
                response = await client.get(network.friendbot_url, params={"addr": address})
        else:
            response = await client.get(network.friendbot_url, params={"addr": address})
    except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
        raise NetworkError(f"Unable to reach {network.friendbot_url}: {e}") from e

    if response.is_success:
        logger.info("Account {address} funded on {network}", address=address, network=network.name)
        return

    if ALREADY_FUNDED_MARKER in response.text:
        logger.info("Account {address} already exists on {network}", address=address, network=network.name)
        return

    raise NetworkError(f"Funding {address} failed with status {response.status_code}: {response.text}")
