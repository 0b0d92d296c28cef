import threading
import weakref
from collections.abc import Mapping

import structlog
from eth_utils import to_checksum_address
from web3 import HTTPProvider, Web3

log = structlog.getLogger(__name__)


def create_chain_client(chain_url: str) -> Web3:
    """Create the :class:`Web3` instance shared by all requests of an app."""
    log.debug("Creating chain client", chain_url=chain_url)
    return Web3(HTTPProvider(chain_url))


class SenderLocks(Mapping):
    """Custom mapping, handing out one :class:`threading.Lock` per sender address.

    Locks are created on first access and dropped once no request references them
    anymore, so the registry only holds senders with payments in flight. Keys are
    normalized to their checksum representation, so differently cased spellings
    of an address share a lock. Assigning locks directly is not allowed.
    """

    def __init__(self):
        self.dict = weakref.WeakValueDictionary()
        self._guard = threading.Lock()

    def __getitem__(self, sender: str) -> threading.Lock:
        key = to_checksum_address(sender)
        with self._guard:
            lock = self.dict.get(key)
            if lock is None:
                log.debug("Creating sender lock", sender=key)
                lock = self.dict[key] = threading.Lock()
            return lock

    def __contains__(self, sender) -> bool:
        try:
            return to_checksum_address(sender) in self.dict
        except (TypeError, ValueError):
            return False

    def __len__(self):
        return len(self.dict)

    def __iter__(self):
        return iter(list(self.dict.keys()))
