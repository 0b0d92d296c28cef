import pluggy

from payment_gateway.constants import HOST_NAMESPACE
from payment_gateway.services.gateway.blueprints.payments import payments_blueprint
from payment_gateway.services.gateway.blueprints.transactions import transactions_blueprint

__all__ = ["payments_blueprint", "transactions_blueprint"]


HOOK_IMPL = pluggy.HookimplMarker(HOST_NAMESPACE)


@HOOK_IMPL
def register_blueprints(app):
    for bp in (payments_blueprint, transactions_blueprint):
        app.register_blueprint(bp)
