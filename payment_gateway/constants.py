#: Namespace used by :mod:`pluggy` for our hook specifications and implementations.
HOST_NAMESPACE = "payment_gateway"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_CHAIN_URL = "http://127.0.0.1:8545"
DEFAULT_CONTRACT_ARTIFACT = "build/contracts/Payment.json"

#: Name of the contract method invoked by `POST /sendPayment`.
PAYMENT_METHOD = "sendPayment"

#: Assumed gas price (in wei) used for the balance pre-check. This is not the fee paid.
GAS_PRICE_MARGIN = 2_000_000_000  # := 2 gwei
MAX_FEE_MULTIPLIER = 2
RECEIPT_TIMEOUT = 120  # seconds

#: EIP-1559 fee market transaction type.
DYNAMIC_FEE_TX_TYPE = 2

INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds to send transaction"
CONTRACT_NOT_DEPLOYED_MESSAGE = "Contract not deployed to the detected network."
TRANSACTION_NOT_FOUND_MESSAGE = "Transaction not found"
