"""
Bridge from reference generators to Hypothesis.

:func:`to_strategy` lets a property test draw catalog values with ``@given``:
Hypothesis controls both the size hint and the random source, so failing
examples replay and shrink.
"""

import logging
from random import Random
from typing import TypeVar

from hypothesis import strategies as st

from adt_fixtures.config import GenerationParameters
from adt_fixtures.gen import Gen


logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_strategy(
    generator: Gen[T], parameters: GenerationParameters = GenerationParameters()
) -> st.SearchStrategy[T]:
    return st.tuples(
        st.randoms(use_true_random=False),
        st.integers(min_value=parameters.min_size, max_value=parameters.max_size),
    ).map(lambda random_and_size: generator(*random_and_size))


def sample(generator: Gen[T], seed: int, size: int) -> T:
    """Generate one value, reproducibly, from an integer seed."""
    logger.debug("Sampling %r with seed %d at size %d", generator, seed, size)
    return generator(Random(seed), size)
