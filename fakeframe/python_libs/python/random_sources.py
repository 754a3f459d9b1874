"""Per-chunk random sources for column generation."""

from __future__ import annotations

import threading
from typing import Dict, Optional, Set

import numpy as np
from faker import Faker

from fakeframe.python_libs.common.constants import DEFAULT_LOCALE
from fakeframe.python_libs.python.faker_providers import TabularProvider

_thread_state = threading.local()


def thread_faker(locale: str = DEFAULT_LOCALE) -> Faker:
    """Return this thread's Faker instance for ``locale``, creating it on first use."""
    fakers: Optional[Dict[str, Faker]] = getattr(_thread_state, "fakers", None)
    if fakers is None:
        fakers = _thread_state.fakers = {}
    fake = fakers.get(locale)
    if fake is None:
        fake = Faker(locale)
        fake.add_provider(TabularProvider)
        fakers[locale] = fake
    return fake


class ChunkRandomSources:
    """
    Random sources owned by one row chunk.

    Numeric strategies draw from a numpy ``Generator``; text strategies use the
    executing thread's Faker instance, reseeded for this chunk the first time a
    locale is requested. Instances must be created and used on the thread
    running the chunk.
    """

    def __init__(self, seed_sequence: np.random.SeedSequence):
        numpy_sequence, faker_sequence = seed_sequence.spawn(2)
        self.rng = np.random.default_rng(numpy_sequence)
        self._faker_seed = int(faker_sequence.generate_state(1, dtype=np.uint64)[0])
        self._seeded_locales: Set[str] = set()

    def faker(self, locale: str = DEFAULT_LOCALE) -> Faker:
        fake = thread_faker(locale)
        if locale not in self._seeded_locales:
            fake.seed_instance(self._faker_seed)
            self._seeded_locales.add(locale)
        return fake
