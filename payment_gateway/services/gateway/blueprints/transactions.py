"""Read transactions from the chain via JSONRPC.

The following endpoints are supplied by this blueprint:

    * [GET] /transactions
        List all transactions of the chain, from the genesis block up to the
        current head. The scanned block range may be limited using the
        `fromBlock` and `toBlock` query parameters.

    * [GET] /transaction/<hash>
        Return the transaction with the given hash, along with its receipt. The
        receipt is `null` if the transaction has not been mined yet.

"""
from flask import Blueprint, current_app, jsonify, request
from structlog import get_logger
from web3.exceptions import TransactionNotFound

from payment_gateway.constants import TRANSACTION_NOT_FOUND_MESSAGE
from payment_gateway.services.common.metrics import REDMetricsTracker
from payment_gateway.services.gateway.schemas.transactions import TransactionRangeSchema
from payment_gateway.utils.contracts import get_contract
from payment_gateway.utils.normalize import normalize
from payment_gateway.utils.scanner import iter_transactions

log = get_logger(__name__)


transactions_blueprint = Blueprint("transactions_view", __name__)


transaction_range_schema = TransactionRangeSchema()


@transactions_blueprint.route("/transactions", methods=["GET"])
def transactions_route():
    """List the transactions of all blocks in the requested range.

    The whole range is scanned before responding; if fetching any of its blocks
    fails, no partial result is returned.
    ---
    get:
      description: "List all transactions on the chain."
      parameters:
      - name: fromBlock
        required: false
        in: query
        schema:
          type: integer

      - name: toBlock
        required: false
        in: query
        schema:
          type: integer

      responses:
        200:
          description: "All transactions, in block-ascending order."
        500:
          description: "The chain could not be scanned."
    """
    with REDMetricsTracker(request.method, "/transactions") as tracker:
        data = transaction_range_schema.validate_and_deserialize(request.args)
        web3 = current_app.config["chain-client"]

        try:
            transactions = list(iter_transactions(web3, data["from_block"], data["to_block"]))
        except Exception as e:
            log.error("Scanning for transactions failed", error=str(e), **data)
            tracker.report_error()
            return jsonify({"error": str(e)}), 500

        log.debug("Scanned chain for transactions", count=len(transactions), **data)
        return jsonify({"success": True, "data": normalize(transactions)})


@transactions_blueprint.route("/transaction/<tx_hash>", methods=["GET"])
def transaction_route(tx_hash):
    """Return the transaction with the given hash, and its receipt.
    ---
    get:
      description: "Fetch a transaction and its receipt by hash."
      parameters:
      - name: tx_hash
        required: true
        in: path
        schema:
          type: string

      responses:
        200:
          description: "The transaction and its receipt, if mined."
        404:
          description: "No transaction with the given hash is known to the node."
        500:
          description: "The transaction could not be fetched."
    """
    with REDMetricsTracker(request.method, "/transaction/<hash>") as tracker:
        web3 = current_app.config["chain-client"]

        try:
            # Fails if the contract is not deployed on the node's network.
            get_contract(web3, current_app.config["CONTRACT_ARTIFACT"])

            transaction = fetch_transaction(web3, tx_hash)
            receipt = fetch_receipt(web3, tx_hash)
        except Exception as e:
            log.error("Fetching transaction failed", tx_hash=tx_hash, error=str(e))
            tracker.report_error()
            return jsonify({"error": str(e)}), 500

        if not transaction:
            return jsonify({"error": TRANSACTION_NOT_FOUND_MESSAGE}), 404

        return jsonify(
            {
                "success": True,
                "data": {"transaction": normalize(transaction), "receipt": normalize(receipt)},
            }
        )


def fetch_transaction(web3, tx_hash):
    """Return the transaction with hash `tx_hash`, or `None` if the node does not know it."""
    try:
        return web3.eth.get_transaction(tx_hash)
    except TransactionNotFound:
        return None


def fetch_receipt(web3, tx_hash):
    """Return the receipt of the transaction `tx_hash`, or `None` if it is not mined yet."""
    try:
        return web3.eth.get_transaction_receipt(tx_hash)
    except TransactionNotFound:
        return None
