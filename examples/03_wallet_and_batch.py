"""Wallet-scoped calls and JSON-RPC batches."""

import logging
import os
import sys

from dotenv import load_dotenv

from dashd_rpc import ClientConfig, DashRpcClient, RemoteError

logging.basicConfig(level=logging.INFO)

# Load environment variables from .env file
load_dotenv()


def main() -> int:
    if not os.getenv("DASHD_RPC_HOST"):
        print("[SKIP] missing 'DASHD_RPC_HOST'")
        return 0

    wallet = os.getenv("DASHD_RPC_WALLET", "")

    # Serialize calls so a busy node's work queue is not flooded
    config = ClientConfig.from_env(protocol="http", max_concurrent_calls=1)
    with DashRpcClient(config) as rpc:
        height = rpc.init()

        if wallet:
            balance = rpc.getBalance("*", 6, {"wallet": wallet})
            print(f"wallet {wallet!r} balance: {balance}")

        with rpc.batch() as batch:
            for offset in range(5):
                batch.getBlockHash(height - offset)

        for response in batch.responses:
            try:
                response.raise_for_error()
            except RemoteError as exc:
                print(f"error {exc.code}: {exc.message}")
                continue
            print(response.result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
