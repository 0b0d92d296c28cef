from decimal import Decimal, InvalidOperation

import flask
from eth_utils import is_address, to_checksum_address
from flask_marshmallow.schema import Schema
from marshmallow import EXCLUDE
from marshmallow.fields import Field, String


class GatewaySchema(Schema):
    """A :class:`.Schema` providing a convenience method for validation and deserialization.

    Unknown keys in the input are ignored.
    """

    class Meta:
        unknown = EXCLUDE

    def validate_and_deserialize(self, data_obj) -> dict:
        """Validate `data_obj` and deserialize its fields to native python objects.

        If validation fails, the request is aborted with a `400 Bad Request`
        response carrying the validation errors as ``{"error": <str>}``.

        :raises werkzeug.exceptions.HTTPException:
            if validating the `data_obj` did not succeed.
        """
        errors = self.validate(data_obj)
        if errors:
            flask.abort(flask.make_response(flask.jsonify({"error": str(errors)}), 400))
        return self.load(data_obj)


class AddressField(String):
    """A field for (de)serializing Ethereum addresses.

    Accepts any hex address, with or without a valid checksum, and loads it as
    its checksum representation.
    """

    default_error_messages = {
        "empty": "Must not be empty!",
        "not_address": "Must be a 20-byte hex encoded address!",
    }

    def _deserialize(self, value, attr, data, **kwargs) -> str:
        if not value:
            raise self.make_error("empty")

        deserialized_string = super(AddressField, self)._deserialize(value, attr, data, **kwargs)

        if not is_address(deserialized_string):
            raise self.make_error("not_address")
        return to_checksum_address(deserialized_string)


class EtherAmount(Field):
    """A field loading a decimal amount of ether from a :class:`str` or number.

    The amount is loaded as :class:`decimal.Decimal`, so that converting it to
    wei does not lose precision.
    """

    default_error_messages = {
        "invalid": "Must be a decimal number!",
        "negative": "Must not be negative!",
    }

    def _deserialize(self, value, attr, data, **kwargs) -> Decimal:
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            raise self.make_error("invalid")
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise self.make_error("invalid")
        if not amount.is_finite():
            raise self.make_error("invalid")
        if amount < 0:
            raise self.make_error("negative")
        return amount

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return str(value)
