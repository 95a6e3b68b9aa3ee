"""Unit tests for RPC preflight checks."""

import json

import pytest
import requests
import responses

from hook_indexer_config.exceptions import ConfigurationError
from hook_indexer_config.rpc import fetch_chain_id, verify_network
from hook_indexer_config.types import NetworkConfig

RPC_URL = "http://test-rpc.example.com"


class TestFetchChainId:
    """Test the fetch_chain_id function."""

    @responses.activate
    def test_parses_hex_chain_id(self):
        """Test that the hex result is decoded."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x82"},
            status=200,
        )

        assert fetch_chain_id(RPC_URL) == 130

    @responses.activate
    def test_rpc_request_format(self):
        """Test that RPC request has correct format."""

        def request_callback(request):
            body = json.loads(request.body)
            assert body["jsonrpc"] == "2.0"
            assert body["method"] == "eth_chainId"
            assert body["params"] == []

            return (
                200,
                {},
                json.dumps({"jsonrpc": "2.0", "id": body["id"], "result": "0x82"}),
            )

        responses.add_callback(
            responses.POST,
            RPC_URL,
            callback=request_callback,
            content_type="application/json",
        )

        fetch_chain_id(RPC_URL)
        assert len(responses.calls) == 1

    @responses.activate
    def test_handles_rpc_errors(self):
        """Test that an RPC error member raises ValueError."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "Method not found"}},
            status=200,
        )

        with pytest.raises(ValueError):
            fetch_chain_id(RPC_URL)

    @responses.activate
    @pytest.mark.parametrize(
        "body",
        [
            {"jsonrpc": "2.0", "id": 1},
            {"jsonrpc": "2.0", "id": 1, "result": None},
            {"jsonrpc": "2.0", "id": 1, "result": "chain"},
            ["0x82"],
            "0x82",
        ],
    )
    def test_malformed_response_raises_value_error(self, body):
        """Test that a 200 response without a usable chain ID raises ValueError."""
        responses.add(responses.POST, RPC_URL, json=body, status=200)

        with pytest.raises(ValueError):
            fetch_chain_id(RPC_URL)

    @responses.activate
    def test_non_json_body_raises_runtime_error(self):
        """Test that a 200 response that is not JSON raises RuntimeError."""
        responses.add(responses.POST, RPC_URL, body="<html>gateway</html>", status=200)

        with pytest.raises(RuntimeError):
            fetch_chain_id(RPC_URL)

    @responses.activate
    def test_http_error_raises_runtime_error(self):
        """Test that a non-200 status raises RuntimeError."""
        responses.add(responses.POST, RPC_URL, body="Network error", status=500)

        with pytest.raises(RuntimeError) as exc_info:
            fetch_chain_id(RPC_URL)

        assert "500" in str(exc_info.value)

    @responses.activate
    def test_connection_error_raises_runtime_error(self):
        """Test that transport failures are wrapped in RuntimeError."""
        responses.add(
            responses.POST,
            RPC_URL,
            body=requests.ConnectionError("connection refused"),
        )

        with pytest.raises(RuntimeError) as exc_info:
            fetch_chain_id(RPC_URL)

        assert isinstance(exc_info.value.__cause__, requests.RequestException)


class TestVerifyNetwork:
    """Test the verify_network function."""

    @responses.activate
    def test_matching_chain_passes(self):
        """Test that a matching endpoint is accepted."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x82"},
            status=200,
        )

        verify_network("unichain", NetworkConfig(chain_id=130, rpc_url=RPC_URL))

    @responses.activate
    def test_mismatched_chain_raises_configuration_error(self):
        """Test that an endpoint serving another chain is rejected."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x1"},
            status=200,
        )

        with pytest.raises(ConfigurationError) as exc_info:
            verify_network("unichain", NetworkConfig(chain_id=130, rpc_url=RPC_URL))

        assert "unichain" in str(exc_info.value)
        assert exc_info.value.field == "chainId"
