"""Minimal live sanity checks against a Blockfrost network."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from blockfrost_http.blockfrost_api import BlockfrostHttp  # noqa: E402
from blockfrost_http.config import BlockfrostConfig  # noqa: E402
from blockfrost_http.errors import BlockfrostError  # noqa: E402
from blockfrost_http.log_setup import configure_logging  # noqa: E402
from blockfrost_http.metrics import default_metrics  # noqa: E402

# Override via env to match the configured network.
SAMPLE_ADDRESS = os.getenv("BLOCKFROST_SAMPLE_ADDRESS")
SAMPLE_STAKE_ADDRESS = os.getenv("BLOCKFROST_SAMPLE_STAKE_ADDRESS")
SAMPLE_EPOCH = int(os.getenv("BLOCKFROST_SAMPLE_EPOCH", "300"))


async def main() -> int:
    config = BlockfrostConfig.from_env()
    configure_logging(config)
    try:
        async with BlockfrostHttp.from_config(config, metrics=default_metrics) as client:
            genesis = await client.genesis()
            print("Genesis:", genesis)
            print(f"Protocol params (epoch {SAMPLE_EPOCH}):", await client.protocol_params(SAMPLE_EPOCH))
            if SAMPLE_ADDRESS:
                print("Address info:", await client.address_info(SAMPLE_ADDRESS))
                print("UTxOs (count 3):", await client.utxos(SAMPLE_ADDRESS, 3))
            if SAMPLE_STAKE_ADDRESS:
                print("Associated addresses:", await client.assoc_addresses(SAMPLE_STAKE_ADDRESS))
    except BlockfrostError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    finally:
        print("Metrics:", default_metrics.snapshot())
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
