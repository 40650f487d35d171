"""Issue raw JSON-RPC requests, bypassing argument coercion."""

import logging
import os
import sys

from dotenv import load_dotenv

from dashd_rpc import ClientConfig, DashRpcClient

logging.basicConfig(level=logging.INFO)

# Load environment variables from .env file
load_dotenv()

RAW_TX = (
    "03000000012b35e8bd64852ae0277a7a4ab6d6293f477f27e859251d27a9a3ebcb5855307f000000006b48"
    "3045022100f88938da326af08203495a94b9a91b4bd11266df096cb67757a17eed1cb761b702205f90d94e"
    "ad2d68086ba9141959115961cc491d560ce422c1a56a6c165697897e012103755be68d084e7ead4d83e23f"
    "b37c3076b16ead432de1b0bdf249290400f263cbffffffff011e140000000000001976a9141e0a6ef6085b"
    "b8af443a9e7f8941e61deb09fb5488ac00000000"
)
TXID = "2dd7112a9cbeff5fc56b761bf8b375a37c7f9fe2fc180f41361c62f0e248d4a0"


def main() -> int:
    if not os.getenv("DASHD_RPC_HOST"):
        print("[SKIP] missing 'DASHD_RPC_HOST'")
        return 0

    with DashRpcClient(ClientConfig.from_env(protocol="http")) as rpc:
        rpc.init()

        decoded = rpc.request("/", {"method": "decoderawtransaction", "params": [RAW_TX]})
        if decoded.get("result", {}).get("txid") != TXID:
            print("FAIL: 'decoderawtransaction' returned an unexpected txid")
            return 1
        print("PASS: correctly decoded raw transaction")

        mn_list = rpc.request("/", {"method": "masternodelist", "params": []})
        entries = mn_list.get("result") or {}
        first = next(iter(entries.values()), None)
        if not isinstance(first, dict) or "proTxHash" not in first:
            print("FAIL: 'masternodelist' result missing 'proTxHash'")
            return 1
        print("PASS: fetched 'masternodelist'")

    return 0


if __name__ == "__main__":
    sys.exit(main())
