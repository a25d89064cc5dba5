"""Tests for the Hypothesis bridge and generation parameters."""

import logging

import pytest
from hypothesis import given

from adt_fixtures import gen
from adt_fixtures.config import GenerationParameters
from adt_fixtures.ilist import ilist_gen
from adt_fixtures.strategies import sample, to_strategy


class TestGenerationParameters:
    def test_defaults(self) -> None:
        parameters = GenerationParameters()
        assert (parameters.min_size, parameters.max_size) == (0, 100)

    def test_negative_min_size(self) -> None:
        with pytest.raises(ValueError):
            GenerationParameters(min_size=-1)

    def test_min_size_above_max_size(self) -> None:
        with pytest.raises(ValueError):
            GenerationParameters(min_size=5, max_size=4)


class TestToStrategy:
    @given(to_strategy(gen.sized(gen.constant), GenerationParameters(min_size=3, max_size=7)))
    def test_size_within_parameters(self, size: int) -> None:
        assert 3 <= size <= 7

    @given(to_strategy(ilist_gen(gen.integers), GenerationParameters(max_size=5)))
    def test_draws_catalog_values(self, values: object) -> None:
        assert len(values.to_list()) <= 5  # type: ignore[attr-defined]


class TestSample:
    def test_reproducible(self) -> None:
        generator = ilist_gen(gen.integers)
        assert sample(generator, seed=7, size=20) == sample(generator, seed=7, size=20)

    def test_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="adt_fixtures.strategies"):
            sample(gen.constant(1), seed=3, size=2)
        assert "seed 3 at size 2" in caplog.text
