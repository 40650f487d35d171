"""Method signature table for the Dash Core RPC command set.

Each entry maps the canonical (camel-case) call name to a space separated
list of argument type tokens. The table is data: new node commands are added
here without touching the dispatcher.

For definitions of the RPC calls see the sources under
https://github.com/dashpay/dash/tree/master/src/rpc
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .types import TypeTag

_CALLSPEC: dict[str, str] = {
    "abandonTransaction": "str",
    "addMultiSigAddress": "int str str",
    "addNode": "str str",
    "backupWallet": "str",
    "clearBanned": "",
    "createMultiSig": "int str",
    "createRawTransaction": "str str int",
    "createWallet": "str bool bool str bool bool",
    "debug": "str",
    "decodeRawTransaction": "str",
    "decodeScript": "str",
    "disconnectNode": "str",
    "dumpPrivKey": "str",
    "dumpWallet": "str",
    "encryptWallet": "str",
    "estimateFee": "int",
    "estimatePriority": "int",
    "estimateSmartFee": "int",
    "estimateSmartPriority": "int",
    "fundRawTransaction": "str bool",
    "generate": "int",
    "generateToAddress": "int str",
    "getAccount": "str",
    "getAccountAddress": "str",
    "getAddressMempool": "obj",
    "getAddressUtxos": "obj",
    "getAddressBalance": "obj",
    "getAddressDeltas": "obj",
    "getAddressTxids": "obj",
    "getAddressesByAccount": "",
    "getAddedNodeInfo": "bool str",
    "getBalance": "str int bool",
    "getBestBlockHash": "",
    "getBestChainLock": "",
    "getBlock": "str bool",
    "getBlockchainInfo": "",
    "getBlockCount": "",
    "getBlockHashes": "int int",
    "getBlockHash": "int",
    "getBlockHeader": "str bool",
    "getBlockHeaders": "str int bool",
    "getBlockStats": "int_str obj",
    "getBlockTemplate": "",
    "getConnectionCount": "",
    "getChainTips": "int int",
    "getDifficulty": "",
    "getGenerate": "",
    "getGovernanceInfo": "",
    "getInfo": "",
    "getMemPoolInfo": "",
    "getMerkleBlocks": "str str int",
    "getMiningInfo": "",
    "getNewAddress": "",
    "getNetTotals": "",
    "getNetworkInfo": "",
    "getNetworkHashps": "int int",
    "getPeerInfo": "",
    "getPoolInfo": "",
    "getRawMemPool": "bool",
    "getRawChangeAddress": "",
    "getRawTransaction": "str bool",
    "getReceivedByAccount": "str int",
    "getReceivedByAddress": "str int",
    "getSpentInfo": "obj",
    "getSuperBlockBudget": "int",
    "getTransaction": "",
    "getTxOut": "str int bool",
    "getTxOutProof": "str str",
    "getTxOutSetInfo": "",
    "getWalletInfo": "",
    "help": "str",
    "importAddress": "str str bool",
    "instantSendToAddress": "str int str str bool",
    "gobject": "str str",
    "invalidateBlock": "str",
    "importPrivKey": "str str bool",
    "importPubKey": "str str bool",
    "importElectrumWallet": "str int",
    "importWallet": "str",
    "keyPoolRefill": "int",
    "listAccounts": "int bool",
    "listAddressGroupings": "",
    "listBanned": "",
    "listReceivedByAccount": "int bool",
    "listReceivedByAddress": "int bool",
    "listSinceBlock": "str int",
    "listTransactions": "str int int bool",
    "listUnspent": "int int str",
    "listLockUnspent": "bool",
    "lockUnspent": "bool obj",
    "masternode": "str",
    "masternodeBroadcast": "str",
    "masternodelist": "str str",
    "mnsync": "",
    "move": "str str float int str",
    "ping": "",
    "prioritiseTransaction": "str float int",
    "privateSend": "str",
    "protx": "str str str",
    "quorum": "str int str str str str int",
    "reconsiderBlock": "str",
    "resendWalletTransactions": "",
    "sendFrom": "str str float int str str",
    "sendMany": "str obj int str str bool bool",
    "sendRawTransaction": "str float bool",
    "sendToAddress": "str float str str",
    "sentinelPing": "str",
    "setAccount": "",
    "setBan": "str str int bool",
    "setGenerate": "bool int",
    "setTxFee": "float",
    "setMockTime": "int",
    "spork": "str",
    "sporkupdate": "str int",
    "signMessage": "str str",
    "signRawTransaction": "str str str str",
    "stop": "",
    "submitBlock": "str str",
    "validateAddress": "str",
    "verifyMessage": "str str str",
    "verifyChain": "int int",
    "verifyChainLock": "str str int",
    "verifyIsLock": "str str str int",
    "verifyTxOutProof": "str",
    "voteRaw": "str int",
    "waitForNewBlock": "int",
    "waitForBlockHeight": "int int",
    "walletLock": "",
    "walletPassPhrase": "str int bool",
    "walletPassphraseChange": "str str",
    "getUser": "str",
}


@dataclass(frozen=True)
class MethodSignature:
    """Canonical call name plus the ordered type tags of its positional arguments."""

    name: str
    arg_types: tuple[TypeTag, ...] = ()

    @classmethod
    def parse(cls, name: str, spec: str) -> MethodSignature:
        """Build from a token string such as ``"str int bool"``; ``""`` means no arguments."""
        return cls(name=name, arg_types=tuple(TypeTag.parse(token) for token in spec.split()))

    @property
    def wire_name(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return " ".join(tag.value for tag in self.arg_types)


METHOD_SIGNATURES: Mapping[str, MethodSignature] = MappingProxyType(
    {name: MethodSignature.parse(name, spec) for name, spec in _CALLSPEC.items()}
)


_BY_WIRE_NAME: Mapping[str, MethodSignature] = MappingProxyType(
    {signature.wire_name: signature for signature in METHOD_SIGNATURES.values()}
)


def find_signature(name: str) -> MethodSignature | None:
    """Look up a signature by canonical name or, failing that, case-insensitively."""
    signature = METHOD_SIGNATURES.get(name)
    if signature is not None:
        return signature
    return _BY_WIRE_NAME.get(name.lower())
