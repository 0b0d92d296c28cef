"""Sign and send a payment via the deployed payment contract.

The following endpoints are supplied by this blueprint:

    * [POST] /sendPayment
        Call the contract's `sendPayment(receiver)` method from `sender`,
        transferring `amount` ether. The transaction is signed locally with
        the given private key, and the request blocks until the node returns
        its receipt.

"""
import structlog
from eth_utils import encode_hex
from flask import Blueprint, current_app, jsonify, request
from web3 import Web3
from web3.contract import Contract

from payment_gateway.constants import DYNAMIC_FEE_TX_TYPE, PAYMENT_METHOD
from payment_gateway.exceptions import InsufficientFunds
from payment_gateway.services.common.metrics import REDMetricsTracker
from payment_gateway.services.gateway.schemas.payments import PaymentRequestSchema
from payment_gateway.utils.contracts import get_contract
from payment_gateway.utils.normalize import normalize

payments_blueprint = Blueprint("payments_view", __name__)

payment_request_schema = PaymentRequestSchema()

log = structlog.get_logger(__name__)


@payments_blueprint.route("/sendPayment", methods=["POST"])
def send_payment_route():
    """Send a payment and return the receipt of its transaction.

    Any error encountered while preparing, signing or sending the transaction
    is returned as `400 Bad Request`.
    ---
    post:
      description: "Sign and send a payment through the payment contract."
      parameters:
      - name: sender
        required: true
        in: body
        schema:
          type: string

      - name: privateKey
        required: true
        in: body
        schema:
          type: string

      - name: receiver
        required: true
        in: body
        schema:
          type: string

      - name: amount
        required: true
        in: body
        schema:
          type: string

      responses:
        200:
          description: "The receipt of the mined transaction."
        400:
          description: "The payment could not be sent."
    """
    with REDMetricsTracker(request.method, "/sendPayment") as tracker:
        payload = request.get_json(silent=True) or {}
        data = payment_request_schema.validate_and_deserialize(payload)
        web3 = current_app.config["chain-client"]

        try:
            contract = get_contract(web3, current_app.config["CONTRACT_ARTIFACT"])
            with current_app.config["sender-locks"][data["sender"]]:
                receipt = send_payment(web3, contract, data)
        except Exception as e:
            log.warning("Payment failed", sender=data["sender"], error=str(e))
            tracker.report_error()
            return jsonify({"error": str(e)}), 400

        return jsonify(normalize(receipt))


def send_payment(web3: Web3, contract: Contract, data: dict):
    """Build, price, sign and send the payment transaction described by `data`.

    The nonce is read from the node for every payment; callers must make sure
    that payments of the same sender do not run concurrently.

    :raises InsufficientFunds:
        if the sender's balance does not cover the value plus the estimated gas,
        priced at the configured `GAS_PRICE_MARGIN`. Nothing is sent in this case.
    """
    config = current_app.config
    sender, receiver = data["sender"], data["receiver"]

    call_data = contract.encode_abi(PAYMENT_METHOD, args=[receiver])
    log.debug("Encoded contract call", method=PAYMENT_METHOD, data=call_data)

    nonce = web3.eth.get_transaction_count(sender)
    log.debug("Fetched nonce", sender=sender, nonce=nonce)

    value = Web3.to_wei(data["amount"], "ether")

    gas_estimate = web3.eth.estimate_gas({"to": receiver, "data": call_data, "value": value})
    log.debug("Estimated gas", gas_estimate=gas_estimate)

    balance = web3.eth.get_balance(sender)
    required = value + gas_estimate * config["GAS_PRICE_MARGIN"]
    if balance < required:
        raise InsufficientFunds(balance, required)
    log.debug("Fetched sender balance", balance=Web3.from_wei(balance, "ether"))

    gas_price = web3.eth.gas_price
    max_priority_fee_per_gas = gas_price
    max_fee_per_gas = gas_price * config["MAX_FEE_MULTIPLIER"]
    log.debug(
        "Priced transaction",
        max_fee_per_gas=max_fee_per_gas,
        max_priority_fee_per_gas=max_priority_fee_per_gas,
    )

    transaction = {
        "from": sender,
        "to": receiver,
        "data": call_data,
        "value": value,
        "gas": gas_estimate,
        "maxFeePerGas": max_fee_per_gas,
        "maxPriorityFeePerGas": max_priority_fee_per_gas,
        "nonce": nonce,
        "chainId": web3.eth.chain_id,
        "type": DYNAMIC_FEE_TX_TYPE,
    }
    signed = web3.eth.account.sign_transaction(transaction, data["private_key"])

    tx_hash = web3.eth.send_raw_transaction(signed.raw_transaction)
    log.info(
        "Sent payment transaction", sender=sender, receiver=receiver, tx_hash=encode_hex(tx_hash)
    )

    return web3.eth.wait_for_transaction_receipt(tx_hash, timeout=config["RECEIPT_TIMEOUT"])
