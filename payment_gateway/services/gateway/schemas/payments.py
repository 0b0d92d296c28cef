from marshmallow.fields import String

from payment_gateway.services.common.schemas import AddressField, EtherAmount, GatewaySchema


class PaymentRequestSchema(GatewaySchema):
    """POST /sendPayment

    load-only parameters:

        - sender (:class:`AddressField`)
        - privateKey (str)
        - receiver (:class:`AddressField`)
        - amount (:class:`EtherAmount`), in ether
    """

    sender = AddressField(required=True, load_only=True)
    private_key = String(required=True, load_only=True, data_key="privateKey")
    receiver = AddressField(required=True, load_only=True)
    amount = EtherAmount(required=True, load_only=True)
