import logging
from typing import Final, Hashable, Optional

import numpy as np

from table_settings import settings

logger = logging.getLogger(__name__)

WORD_SIZE: Final[int] = 64  # word size
# one lookup table per byte of the builtin hash
NUM_CHUNKS: Final[int] = WORD_SIZE // 8


class TabulationHash:
    """
    Simple tabulation hashing over the builtin ``hash`` of an item

    The 64-bit builtin hash is split into 8 bytes, each byte selects a random
    64-bit word from its own table and the words are XOR-ed together.
    ``gen`` must be invoked before the object can be used, the constructor does it.
    """

    __slots__ = ("_seed", "tables")

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self.tables = None
        self.gen()

    def gen(self):
        rng = np.random.default_rng(self._seed)
        self.tables = rng.integers(
            0,
            0xFFFFFFFFFFFFFFFF,
            size=(NUM_CHUNKS, 256),
            dtype=np.uint64,
            endpoint=True,
        )

    def __call__(self, item: Hashable) -> int:
        x = hash(item)
        h0 = x & 0xFF
        h1 = (x >> 8) & 0xFF
        h2 = (x >> 16) & 0xFF
        h3 = (x >> 24) & 0xFF
        h4 = (x >> 32) & 0xFF
        h5 = (x >> 40) & 0xFF
        h6 = (x >> 48) & 0xFF
        h7 = (x >> 56) & 0xFF
        t = self.tables
        return int(
            t[0][h0]
            ^ t[1][h1]
            ^ t[2][h2]
            ^ t[3][h3]
            ^ t[4][h4]
            ^ t[5][h5]
            ^ t[6][h6]
            ^ t[7][h7]
        )


_default_hash: Optional[TabulationHash] = None


def default_hash() -> TabulationHash:
    """
    The hash function shared by every table in this process

    Created on first use so that a key maps to the same digest for the whole run.
    """
    global _default_hash
    if _default_hash is None:
        _default_hash = TabulationHash(settings.SEED)
        logger.debug(
            "generated tabulation tables (seed=%s)",
            "random" if settings.SEED is None else settings.SEED,
        )
    return _default_hash
