from payment_gateway.exceptions.chain import (
    ArtifactError,
    ContractNotDeployed,
    GatewayError,
    InsufficientFunds,
)

__all__ = ["ArtifactError", "ContractNotDeployed", "GatewayError", "InsufficientFunds"]
