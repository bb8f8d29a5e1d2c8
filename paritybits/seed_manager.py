"""Deterministic seed derivation to avoid global random.seed() order dependencies."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional


class SeedManager:
    """Derives per-component seeds from one master seed.

    Each sampling request gets its own ``random.Random`` whose seed comes from
    SHA-256 over the master seed and the component identifiers, so a batch of
    requests is reproducible regardless of the order it runs in. The returned
    generators double as byte sources for the samplers (``randbytes``).

    Usage:
        seed_mgr = SeedManager(42)
        source = seed_mgr.create_random_state("sample", "odd_keys")
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        """Initialize the seed manager.

        Args:
            master_seed: Master seed for deterministic operations. If None,
                        seed derivation will return None (non-deterministic).
        """
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Derive a deterministic seed from master seed and component identifiers.

        Args:
            *components: Identifiers (strings, integers, etc.) that uniquely
                        name the consumer of the seed.

        Returns:
            Derived seed as positive integer, or None if no master seed set.
        """
        if self.master_seed is None:
            return None

        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        hash_digest = hashlib.sha256(seed_input.encode()).digest()

        seed_value = int.from_bytes(hash_digest[:4], byteorder="big")
        return seed_value & 0x7FFFFFFF

    def create_random_state(self, *components: Any) -> random.Random:
        """Create a new Random instance with derived seed.

        Args:
            *components: Component identifiers for seed derivation.

        Returns:
            New Random instance seeded with derived seed, or unseeded if no master seed.
        """
        derived_seed = self.derive_seed(*components)
        rng = random.Random()
        if derived_seed is not None:
            rng.seed(derived_seed)
        return rng
