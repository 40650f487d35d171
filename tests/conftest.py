from __future__ import annotations

import pytest

from dashd_rpc.client import DashRpcClient

from ._rpc_helpers import DummySession


@pytest.fixture
def session() -> DummySession:
    return DummySession()


@pytest.fixture
def client(session: DummySession) -> DashRpcClient:
    return DashRpcClient(host="node.local", port=19898, protocol="http", session=session)
