import logging

import pluggy

from payment_gateway.constants import HOST_NAMESPACE
from payment_gateway.hooks import impl, specs

log = logging.getLogger(__name__)


def get_plugin_manager(namespace):
    """Fetch pluggy's plugin manager for our library."""
    pm = pluggy.PluginManager(namespace)
    log.info("Loading Hook Specifications..")
    pm.add_hookspecs(specs)

    log.info("Loading Hook Implementations from entry points..")
    pm.load_setuptools_entrypoints(namespace)

    log.info("Registering Hook Implementations in payment_gateway..")
    for module in impl.load_hook_modules():
        pm.register(module)
    return pm


GW_PM = get_plugin_manager(HOST_NAMESPACE)
