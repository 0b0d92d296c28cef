"""Payment Gateway.

HTTP gateway relaying payment transactions to an Ethereum JSON-RPC node.
"""

__version__ = "0.1.0"
