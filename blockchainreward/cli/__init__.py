import click

from blockchainreward.logging_utils import logging_basic_config

from ethereumreward.cli.miner_data import miner_data

logging_basic_config()


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(version="v0.1.0")
@click.pass_context
def cli(ctx):
    ctx = ctx
    pass


# Ethereum tasks
cli.add_command(miner_data, "eth.miner-data")
