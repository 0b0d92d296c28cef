import json
from pathlib import Path
from typing import Union

import structlog
from eth_utils import to_checksum_address
from web3 import Web3
from web3.contract import Contract

from payment_gateway.exceptions import ArtifactError, ContractNotDeployed

log = structlog.get_logger(__name__)


def load_artifact(artifact_path: Union[str, Path]) -> dict:
    """Read the contract build artifact from disk.

    The artifact is expected to carry an `abi` list and a `networks` mapping of
    network ids to deployment records, as emitted by truffle.

    :raises ArtifactError: if the file is unreadable, not JSON, or lacks an `abi`.
    """
    path = Path(artifact_path)
    try:
        artifact = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        raise ArtifactError(f"Could not load contract artifact at {path}: {e}") from e

    if not isinstance(artifact, dict) or "abi" not in artifact:
        raise ArtifactError(f"Contract artifact at {path} has no 'abi'!")
    return artifact


def get_deployed_address(artifact: dict, network_id: Union[str, int]) -> str:
    """Return the checksum address the contract is deployed at on `network_id`.

    :raises ContractNotDeployed: if no deployment record exists for the network.
    """
    deployment = (artifact.get("networks") or {}).get(str(network_id)) or {}
    address = deployment.get("address")
    if not address:
        raise ContractNotDeployed(network_id)
    return to_checksum_address(address)


def get_contract(web3: Web3, artifact_path: Union[str, Path]) -> Contract:
    """Resolve the payment contract for the network `web3` is connected to.

    The artifact is re-read on every call.
    """
    artifact = load_artifact(artifact_path)
    network_id = web3.net.version
    address = get_deployed_address(artifact, network_id)
    log.debug("Resolved contract deployment", network_id=network_id, address=address)
    return web3.eth.contract(address=address, abi=artifact["abi"])
