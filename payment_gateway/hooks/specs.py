import flask
import pluggy

from payment_gateway.constants import HOST_NAMESPACE

HOOK_SPEC = pluggy.HookspecMarker(HOST_NAMESPACE)


@HOOK_SPEC
def register_blueprints(app: flask.Flask) -> None:
    """Register a list of blueprints with the gateway's flask application."""
