#!/usr/bin/env python3
"""
eth-proxy CLI

- eth-proxy serve              : Start API server
- eth-proxy current-block-time : Query the upstream once and print the result
"""

import asyncio
import json
import sys
import click
from eth_proxy.core.setup import setup_logging, verbosity_from_level_name, logger


def _load_config():
    from eth_proxy.api.config import ConfigError, get_config

    try:
        return get_config()
    except ConfigError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option(
    "-v", "--verbosity",
    count=True,
    help="Increase logging verbosity (-v=INFO, -vv=DEBUG, -vvv=TRACE)"
)
@click.pass_context
def cli(ctx, verbosity):
    """
    eth-proxy - timestamp of the current Ethereum block.

    Without -v the level comes from LOG_LEVEL.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbosity"] = min(verbosity, 3) if verbosity else None


def _setup_logging(ctx, config):
    verbosity = ctx.obj.get("verbosity")
    if verbosity is None:
        verbosity = verbosity_from_level_name(config.LOG_LEVEL)
    setup_logging(verbosity)


@cli.command()
@click.pass_context
def serve(ctx):
    """Start API server."""
    import uvicorn

    config = _load_config()
    _setup_logging(ctx, config)
    logger.info(f"Listening on {config.address}")

    uvicorn.run(
        "eth_proxy.api.server:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


@cli.command("current-block-time")
@click.pass_context
def current_block_time_command(ctx):
    """Query the upstream once and print the current block time as JSON.

    Example:
        eth-proxy current-block-time
    """
    from eth_proxy.api.services.block_time import current_block_time
    from eth_proxy.core.types import InvocationFailure
    from eth_proxy.etherscan.client import EtherscanClient, create_session

    config = _load_config()
    _setup_logging(ctx, config)

    async def _run():
        async with create_session() as session:
            etherscan = EtherscanClient(config.ETHERSCAN_DOMAIN, config.ETHERSCAN_API_KEY, session)
            return await current_block_time(etherscan)

    try:
        result = asyncio.run(_run())
    except InvocationFailure as e:
        click.echo(json.dumps(e.to_dict()))
        sys.exit(1)

    click.echo(result.model_dump_json())


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
