"""Construct and serve the gateway's flask application."""
import logging
from typing import Mapping, Optional

import flask
import structlog
import waitress
from web3 import Web3

from payment_gateway.services.gateway.utils import SenderLocks, create_chain_client
from payment_gateway.services.utils.factories import construct_flask_app

NAME = "Payment-Gateway"


def construct_gateway_service(
    test_config: Optional[Mapping] = None,
    chain_client: Optional[Web3] = None,
    settings: Optional[Mapping] = None,
    **kwargs,
) -> flask.Flask:
    """Create the gateway app, attaching its chain client and sender lock registry.

    Unless a `chain_client` is passed, one is created for the `CHAIN_URL` setting
    of the constructed app. `settings` are applied on top of the app's configuration,
    after any config file or `test_config` was loaded. Additional `kwargs` are passed on to
    :func:`construct_flask_app`.
    """
    app = construct_flask_app(test_config=test_config, **kwargs)
    app.config.update(settings or {})
    if chain_client is None:
        chain_client = create_chain_client(app.config["CHAIN_URL"])
    app.config["chain-client"] = chain_client
    app.config["sender-locks"] = SenderLocks()
    return app


def configure_logging(log_file: Optional[str] = None):
    """Route :mod:`structlog` events through the standard library's root logger.

    With a `log_file`, debug output is appended to it. Otherwise info output goes to stderr.
    Handlers installed on the root logger before are replaced.
    """
    if log_file:
        logging.basicConfig(
            filename=log_file, filemode="a+", level=logging.DEBUG, format="%(message)s", force=True
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s", force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def serve(host: str, port: int, log_file: Optional[str] = None, **settings):
    """Construct the gateway app and serve it using :mod:`waitress`.

    `settings` whose value is not `None` override the app's configuration.
    """
    from payment_gateway import __version__

    configure_logging(log_file)
    log = structlog.getLogger()

    log.info("Creating Gateway Flask App", version=__version__, name=NAME)
    overrides = {key: value for key, value in settings.items() if value is not None}
    app = construct_gateway_service(settings=overrides)

    log.info("Starting Gateway", host=host, port=port, chain_url=app.config["CHAIN_URL"])
    waitress.serve(app, host=host, port=port)
    return app
