"""HTTP services of the payment gateway.

The gateway relays payment transactions to a single Ethereum JSON-RPC node and
reports on the transactions of its chain. It is a stateless relay; the only
process-wide state is the :class:`web3.Web3` instance handed to the app at
construction time.

Sending a payment looks like this::

    POST /sendPayment

        {
            "sender": <str>,
            "privateKey": <str>,
            "receiver": <str>,
            "amount": <str>,
        }

    200 OK

        <transaction receipt>

Listing all transactions on the chain, optionally limited to a block range::

    GET /transactions?fromBlock=<int>&toBlock=<int>

    200 OK

        {"success": true, "data": [<transaction>, ...]}

Fetching a single transaction and its receipt::

    GET /transaction/<hash>

    200 OK

        {"success": true, "data": {"transaction": <transaction>, "receipt": <receipt or null>}}

Any failure is reported as ``{"error": <str>}``.

.. Note::

    All integers exceeding the range a JSON consumer can represent exactly are
    returned as decimal strings.

"""
