"""Hook Implementations collected from the :mod:`payment_gateway.services` sub-package.

Every service sub-package is expected to ship a `blueprints` module containing
functions decorated with :class:`HookimplMarker("payment_gateway")`. Sub-packages
without such a module are skipped.
"""
import importlib
import logging
import pkgutil
from types import ModuleType
from typing import List

from payment_gateway import services as services_subpackage

log = logging.getLogger(__name__)


def load_hook_modules() -> List[ModuleType]:
    modules = []
    for sub_module in pkgutil.iter_modules(path=services_subpackage.__path__):
        sub_module_name = sub_module.name

        if sub_module_name.startswith(("_", "utils")):
            continue

        blueprints_module_path = f"{services_subpackage.__name__}.{sub_module_name}.blueprints"

        try:
            module = importlib.import_module(blueprints_module_path)
        except ModuleNotFoundError as e:
            if e.name != blueprints_module_path:
                raise
            log.error(f"skipped {sub_module_name} service - no blueprints module found!")
            continue
        log.info(f"Loaded blueprints for {sub_module_name} service..")
        modules.append(module)
    return modules
