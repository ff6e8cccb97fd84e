import click
import random
import functools

from blockchainreward.enumeration.chain import Chain


def evm_chain_options(func):
    @click.option(
        "-c",
        "--chain",
        default=Chain.ETHEREUM,
        show_default=True,
        type=click.Choice(Chain.ALL_ETHEREUM_FORKS),
        help="The chain network to connect to, decides the static block reward.",
    )
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


def pick_random_provider_uri(provider_uri: str) -> str:
    provider_uris = [uri.strip() for uri in provider_uri.split(",")]
    return random.choice(provider_uris)
