from typing import Mapping

import flask

from payment_gateway.constants import (
    DEFAULT_CHAIN_URL,
    DEFAULT_CONTRACT_ARTIFACT,
    GAS_PRICE_MARGIN,
    MAX_FEE_MULTIPLIER,
    RECEIPT_TIMEOUT,
)
from payment_gateway.hooks import GW_PM

#: Settings every constructed app starts out with.
DEFAULT_CONFIG = {
    "CHAIN_URL": DEFAULT_CHAIN_URL,
    "CONTRACT_ARTIFACT": DEFAULT_CONTRACT_ARTIFACT,
    "GAS_PRICE_MARGIN": GAS_PRICE_MARGIN,
    "MAX_FEE_MULTIPLIER": MAX_FEE_MULTIPLIER,
    "RECEIPT_TIMEOUT": RECEIPT_TIMEOUT,
}


def construct_flask_app(
    test_config: Mapping = None,
    secret: str = "dev",
    config_file: str = "config.py",
    enable_plugins: bool = True,
) -> flask.Flask:
    """Construct a flask app with a set of default blueprints registered.

    The app's configuration is populated from :data:`DEFAULT_CONFIG` first. If
    `test_config` is given it is applied on top; otherwise the instance
    `config_file` is loaded, if it exists.

    By default all constructed apps register the blueprints supplied via the
    `register_blueprints` hook, and therefore have the following endpoints:

        `/metrics`
        Exposes prometheus compatible metrics.

        `/status`
        Returns 200 OK as long as the underlying flask app is responsive and running.

        `/sendPayment`, `/transactions`, `/transaction/<hash>`
        The gateway endpoints, see :mod:`payment_gateway.services`.

    Blueprints are not registered if `enable_plugins` is `False`.
    """
    # create and configure the app
    app = flask.Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(SECRET_KEY=secret, **DEFAULT_CONFIG)

    if test_config is None:
        # load the instance config, if it exists, when not testing
        app.config.from_pyfile(config_file, silent=True)
    else:
        # load the test config if passed in
        app.config.from_mapping(test_config)

    if enable_plugins:
        GW_PM.hook.register_blueprints(app=app)

    return app
