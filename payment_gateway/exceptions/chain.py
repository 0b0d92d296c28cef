from payment_gateway.constants import CONTRACT_NOT_DEPLOYED_MESSAGE, INSUFFICIENT_FUNDS_MESSAGE


class GatewayError(RuntimeError):
    """Generic error raised by the gateway itself, as opposed to errors of the chain client."""


class ArtifactError(GatewayError):
    """The contract build artifact could not be read or is missing required keys."""


class ContractNotDeployed(GatewayError):
    """The artifact holds no deployment record for the network the node reports."""

    def __init__(self, network_id=None):
        self.network_id = network_id
        super(ContractNotDeployed, self).__init__(CONTRACT_NOT_DEPLOYED_MESSAGE)


class InsufficientFunds(GatewayError):
    """The sender's balance does not cover the value plus the assumed fee margin.

    Raised before anything is signed or submitted.
    """

    def __init__(self, balance=None, required=None):
        self.balance, self.required = balance, required
        super(InsufficientFunds, self).__init__(INSUFFICIENT_FUNDS_MESSAGE)
