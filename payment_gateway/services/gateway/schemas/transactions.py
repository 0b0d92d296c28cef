from marshmallow import ValidationError, validates_schema
from marshmallow.fields import Integer
from marshmallow.validate import Range

from payment_gateway.services.common.schemas import GatewaySchema


class TransactionRangeSchema(GatewaySchema):
    """GET /transactions

    load-only parameters:

        - fromBlock (int), first block to scan, inclusive. Defaults to `0`.
        - toBlock (int), last block to scan, inclusive. Defaults to the chain head.
    """

    from_block = Integer(
        load_only=True, data_key="fromBlock", load_default=0, validate=Range(min=0)
    )
    to_block = Integer(
        load_only=True, data_key="toBlock", load_default=None, validate=Range(min=0)
    )

    @validates_schema
    def validate_range(self, data, **kwargs):
        to_block = data.get("to_block")
        if to_block is not None and to_block < data.get("from_block", 0):
            raise ValidationError("'toBlock' must not be lower than 'fromBlock'!", "toBlock")
