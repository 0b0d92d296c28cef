"""The gateway service, relaying payments to and reading transactions from an Ethereum node.

The service holds a single :class:`web3.Web3` instance in its app config under
the `chain-client` key. It is constructed once, when the app is created, and
shared by all requests.

Payments of the same sender are serialized using the :class:`SenderLocks`
registry stored under the `sender-locks` key, as the nonce of a payment is read
from the node right before it is signed.
"""
