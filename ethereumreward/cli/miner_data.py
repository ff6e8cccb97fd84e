import sys
import logging

import click
import jsonlines

from blockchainreward import env
from blockchainreward.cli.utils import evm_chain_options, pick_random_provider_uri
from blockchainreward.enumeration.chain import Chain
from ethereumreward.json_rpc_requests import generate_json_rpc
from ethereumreward.methods.dispatcher import JsonRpcDispatcher
from ethereumreward.providers.auto import get_provider_from_uri
from ethereumreward.service.block_reward_calculator import (
    EthBlockRewardCalculator,
    MissingReceiptPolicy,
)
from ethereumreward.service.blockchain_queries import EthBlockchainQueries
from ethereumreward.service.miner_data_service import EthMinerDataService
from ethereumreward.service.protocol_schedule import protocol_schedule_for_chain


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@evm_chain_options
@click.option(
    "-p",
    "--provider-uri",
    type=str,
    required=True,
    envvar="BLOCKCHAIN_REWARD_PROVIDER_URI",
    show_default=True,
    help="The URI of the JSON-RPC's provider, "
    "a comma separated list picks one of them randomly.",
)
@click.option(
    "-H",
    "--block-hash",
    "block_hashes",
    type=str,
    multiple=True,
    help="The block hash to query, can be given multiple times.",
)
@click.option(
    "-n",
    "--block-number",
    "block_numbers",
    type=str,
    multiple=True,
    help="The block number or tag(latest, earliest...) to query, "
    "can be given multiple times.",
)
@click.option(
    "--reward-schedule",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="The yaml file of static block reward milestones, required by custom chain",
)
@click.option(
    "--missing-receipt-policy",
    type=click.Choice(MissingReceiptPolicy.ALL),
    default=env.MISSING_RECEIPT_POLICY,
    show_default=True,
    help="Count a transaction without receipt as zero gas used, or fail the block",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
    show_default=True,
    help="The JSON lines output file. If not specified stdout is used.",
)
def miner_data(
    chain,
    provider_uri,
    block_hashes,
    block_numbers,
    reward_schedule,
    missing_receipt_policy,
    output,
):
    """Decompose the block reward of blocks, one JSON-RPC response per line."""

    if len(block_hashes) == 0 and len(block_numbers) == 0:
        raise click.UsageError(
            "at least one --block-hash or --block-number is required"
        )
    if chain == Chain.CUSTOM and reward_schedule is None:
        raise click.BadOptionUsage(
            "--reward-schedule", "custom chain requires a reward schedule file"
        )

    provider_uri = pick_random_provider_uri(provider_uri)
    logging.info(
        f"Using provider: {provider_uri}, chain: {chain}({Chain.symbol(chain)})"
    )

    service = EthMinerDataService(
        EthBlockchainQueries(get_provider_from_uri(provider_uri)),
        protocol_schedule_for_chain(chain, reward_schedule),
        EthBlockRewardCalculator(missing_receipt_policy),
    )
    dispatcher = JsonRpcDispatcher.for_miner_data(service)

    requests = [
        generate_json_rpc("eth_getMinerDataByBlockHash", [h], request_id=idx)
        for idx, h in enumerate(block_hashes)
    ] + [
        generate_json_rpc(
            "eth_getMinerDataByBlockNumber", [n], request_id=len(block_hashes) + idx
        )
        for idx, n in enumerate(block_numbers)
    ]

    failed = 0
    fp = sys.stdout if output == "-" else open(output, "w")
    try:
        with jsonlines.Writer(fp, flush=True) as writer:
            for request in requests:
                response = dispatcher.handle(request)
                if "error" in response:
                    failed += 1
                    logging.error(
                        f"{request['method']}({request['params'][0]}) "
                        f"failed: {response['error']}"
                    )
                writer.write(response)
    finally:
        if fp is not sys.stdout:
            fp.close()

    logging.info(f"queried {len(requests)} blocks, {failed} failed")
