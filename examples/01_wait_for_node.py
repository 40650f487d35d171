"""Wait for a dashd node to finish warming up and print its height."""

import logging
import os
import sys

from dotenv import load_dotenv

from dashd_rpc import ClientConfig, DashRpcClient, RemoteError

# Configure logging to see the warmup progress
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()


def on_connected(warning: RemoteError | None) -> None:
    if warning is not None:
        logger.info("Node finished warming up (last status: %s)", warning.message)
    logger.info("rpc client connected")


def main() -> int:
    if not os.getenv("DASHD_RPC_HOST"):
        print("[SKIP] missing 'DASHD_RPC_HOST'")
        return 0

    # http for local / private networking, https for remote
    config = ClientConfig.from_env(protocol="http", timeout=10.0, on_connected=on_connected)

    with DashRpcClient(config) as rpc:
        height = rpc.init()
        print(f"rpc server is ready. Height = {height}")
        print(f"best block: {rpc.getBestBlockHash()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
