import json
import logging
from unittest import mock

import pytest
import structlog
from eth_utils import to_checksum_address

from payment_gateway.services.gateway.app import construct_gateway_service

NETWORK_ID = "5777"
CONTRACT_ADDRESS = to_checksum_address("0x" + "ab" * 20)
SENDER = to_checksum_address("0x" + "11" * 20)
RECEIVER = to_checksum_address("0x" + "22" * 20)
PRIVKEY = "0x" + "33" * 32
ENCODED_CALL = "0x2f9e6d9a" + "00" * 12 + "22" * 20

PAYMENT_ABI = [
    {
        "inputs": [{"internalType": "address payable", "name": "receiver", "type": "address"}],
        "name": "sendPayment",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    }
]


@pytest.fixture
def network_id():
    return NETWORK_ID


@pytest.fixture
def contract_address():
    return CONTRACT_ADDRESS


@pytest.fixture
def sender():
    return SENDER


@pytest.fixture
def receiver():
    return RECEIVER


@pytest.fixture
def privkey():
    return PRIVKEY


@pytest.fixture
def encoded_call():
    return ENCODED_CALL


@pytest.fixture
def artifact():
    """A minimal truffle build artifact with a single deployment on :data:`NETWORK_ID`."""
    return {
        "contractName": "Payment",
        "abi": PAYMENT_ABI,
        "networks": {NETWORK_ID: {"address": CONTRACT_ADDRESS.lower()}},
    }


@pytest.fixture
def artifact_path(tmp_path, artifact):
    path = tmp_path.joinpath("Payment.json")
    path.write_text(json.dumps(artifact))
    return path


@pytest.fixture
def chain_client():
    """A stand-in for the :class:`web3.Web3` instance of the gateway.

    It reports :data:`NETWORK_ID` as its network, and any contract created from
    it encodes calls to :data:`ENCODED_CALL`.
    """
    client = mock.MagicMock()
    client.net.version = NETWORK_ID
    client.eth.chain_id = 1337
    client.eth.contract.return_value.encode_abi.return_value = ENCODED_CALL
    return client


@pytest.fixture
def gateway_app(chain_client, artifact_path):
    app = construct_gateway_service(
        test_config={"TESTING": True, "CONTRACT_ARTIFACT": str(artifact_path)},
        chain_client=chain_client,
    )
    return app


@pytest.fixture
def gateway_client(gateway_app):
    return gateway_app.test_client()


@pytest.fixture
def restore_logging():
    """Undo logging configuration done by the code under test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()
