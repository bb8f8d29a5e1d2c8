"""paritybits: fixed-width bit patterns by popcount parity.

Primary API:
    all_even(), all_odd() - Lazily enumerate every pattern of a width
    random_even(), random_odd() - Draw one pattern of an exact bit length
    Parity - EVEN / ODD

Example:
    import random
    from paritybits import all_even, random_odd

    list(all_even(3))                       # [0, 3, 5, 6]
    random_odd(16, random.Random(7))        # 16-bit value, odd popcount
"""

from __future__ import annotations

from paritybits import cli, logging
from paritybits._version import __version__
from paritybits.bitops import clear_lowest_set_bit, format_bits, popcount
from paritybits.config import PARITY_CONFIG, ParityConfig
from paritybits.enumerate import (
    all_even,
    all_odd,
    all_with_parity,
    count_with_parity,
)
from paritybits.jobs import load_jobs_yaml, run_jobs
from paritybits.sampler import (
    ByteSource,
    random_even,
    random_odd,
    random_with_parity,
)
from paritybits.seed_manager import SeedManager
from paritybits.types import BitPattern, Parity

__all__ = [
    # Version
    "__version__",
    # Types
    "BitPattern",
    "Parity",
    "ByteSource",
    # Enumeration
    "all_even",
    "all_odd",
    "all_with_parity",
    "count_with_parity",
    # Sampling
    "random_even",
    "random_odd",
    "random_with_parity",
    # Bit helpers
    "popcount",
    "clear_lowest_set_bit",
    "format_bits",
    # Configuration
    "ParityConfig",
    "PARITY_CONFIG",
    "SeedManager",
    # Batch jobs
    "load_jobs_yaml",
    "run_jobs",
    # Utilities
    "cli",
    "logging",
]
