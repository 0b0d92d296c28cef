from typing import Iterator, Optional

import structlog
from web3 import Web3

log = structlog.get_logger(__name__)


def iter_transactions(
    web3: Web3, start_block: int = 0, end_block: Optional[int] = None
) -> Iterator[dict]:
    """Lazily yield every transaction of the blocks `start_block` through `end_block`.

    Both bounds are inclusive. The chain head is read once, before the first
    block is fetched; `end_block` defaults to it and is capped by it. Blocks are
    fetched with full transaction objects and yielded in block-ascending order,
    keeping the order of transactions within each block.
    """
    head = web3.eth.block_number
    if end_block is None or end_block > head:
        end_block = head

    log.debug("Scanning blocks for transactions", start_block=start_block, end_block=end_block)
    for block_number in range(start_block, end_block + 1):
        block = web3.eth.get_block(block_number, full_transactions=True)
        yield from block["transactions"]
