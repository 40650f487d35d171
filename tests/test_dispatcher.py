"""Tests for request building and wallet routing."""

from __future__ import annotations

import pytest

from dashd_rpc.dispatcher import build_request, new_request_id, split_wallet_path
from dashd_rpc.signatures import METHOD_SIGNATURES, MethodSignature, find_signature
from dashd_rpc.types import TypeTag


def test_split_wallet_path_without_extras() -> None:
    assert split_wallet_path(["*", 6]) == ("/", ["*", 6])
    assert split_wallet_path([]) == ("/", [])


def test_split_wallet_path_removes_wallet_object() -> None:
    args = ["*", 6, {"wallet": "foo"}]
    path, remaining = split_wallet_path(args)

    assert path == "/wallet/foo"
    assert remaining == ["*", 6]
    assert args == ["*", 6, {"wallet": "foo"}]


def test_split_wallet_path_quotes_wallet_name() -> None:
    path, remaining = split_wallet_path(["*", {"wallet": "team #2/a?b%"}])

    assert path == "/wallet/team%20%232%2Fa%3Fb%25"
    assert remaining == ["*"]


def test_split_wallet_path_ignores_objects_without_wallet() -> None:
    path, remaining = split_wallet_path([{"addresses": ["XjR7"]}])
    assert path == "/"
    assert remaining == [{"addresses": ["XjR7"]}]


def test_split_wallet_path_only_checks_last_argument() -> None:
    path, remaining = split_wallet_path([{"wallet": "foo"}, 1])
    assert path == "/"
    assert remaining == [{"wallet": "foo"}, 1]


def test_build_request_for_wallet_call() -> None:
    request = build_request(METHOD_SIGNATURES["getBalance"], ["*", "6", "true", {"wallet": "foo"}])

    assert request.path == "/wallet/foo"
    assert request.method == "getbalance"
    assert request.params == ["*", 6, True]


def test_build_request_without_arguments() -> None:
    request = build_request(METHOD_SIGNATURES["getBlockCount"], [])

    assert request.path == "/"
    assert request.payload() == {"method": "getblockcount", "params": [], "id": request.id}
    assert "jsonrpc" not in request.payload()


def test_build_request_passes_extra_arguments_through() -> None:
    request = build_request(METHOD_SIGNATURES["getBlockHash"], ["10", "extra", 3])
    assert request.params == [10, "extra", 3]


def test_build_request_only_differs_by_id() -> None:
    signature = METHOD_SIGNATURES["sendToAddress"]
    first = build_request(signature, ["XjR7", "0.5", "memo"])
    second = build_request(signature, ["XjR7", "0.5", "memo"])

    assert (first.path, first.method, first.params) == (second.path, second.method, second.params)


def test_build_request_batch_tag() -> None:
    request = build_request(METHOD_SIGNATURES["getBestBlockHash"], [], jsonrpc="2.0")
    assert request.payload()["jsonrpc"] == "2.0"


def test_request_ids_in_range() -> None:
    ids = {new_request_id() for _ in range(500)}
    assert all(0 <= request_id < 100000 for request_id in ids)
    assert len(ids) > 1


class TestSignatures:
    """Test the method signature table."""

    def test_table_covers_node_commands(self):
        assert len(METHOD_SIGNATURES) > 120
        assert METHOD_SIGNATURES["getBlockCount"].arg_types == ()
        assert METHOD_SIGNATURES["getBlockStats"].arg_types == (TypeTag.INT_STR, TypeTag.OBJ)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            METHOD_SIGNATURES["custom"] = MethodSignature("custom")  # type: ignore[index]

    def test_parse_unknown_tokens_as_str(self):
        signature = MethodSignature.parse("future", "int hex bool")
        assert signature.arg_types == (TypeTag.INT, TypeTag.STR, TypeTag.BOOL)
        assert str(signature) == "int str bool"

    def test_find_signature_is_case_insensitive(self):
        assert find_signature("getblockcount") is METHOD_SIGNATURES["getBlockCount"]
        assert find_signature("GETBLOCKCOUNT") is METHOD_SIGNATURES["getBlockCount"]
        assert find_signature("nosuchcall") is None

    def test_lowercase_names_are_unique(self):
        wire_names = [signature.wire_name for signature in METHOD_SIGNATURES.values()]
        assert len(wire_names) == len(set(wire_names))
