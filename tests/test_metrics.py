"""Tests for uniformity metrics."""

from __future__ import annotations

import numpy as np
import pytest

import metrics
from halton import GenericSequence, SequenceParams, halton_sequence


def test_star_discrepancy_known_values() -> None:
    assert metrics.star_discrepancy(np.array([0.5])) == pytest.approx(0.5)
    assert metrics.star_discrepancy([0.75, 0.25, 0.5]) == pytest.approx(0.25)
    assert metrics.star_discrepancy(np.zeros(4)) == pytest.approx(1.0)


def test_star_discrepancy_halton_beats_random() -> None:
    rng = np.random.default_rng(seed=0)
    uniform = rng.uniform(size=1000)
    seq = halton_sequence(1000, 2)
    assert metrics.star_discrepancy(seq) < 0.01
    assert metrics.star_discrepancy(seq) < metrics.star_discrepancy(uniform)


def test_star_discrepancy_rejects_bad_shapes() -> None:
    with pytest.raises(ValueError):
        metrics.star_discrepancy(np.zeros((3, 2)))
    with pytest.raises(ValueError):
        metrics.star_discrepancy(np.array([]))


def test_moment_errors_of_full_sequence() -> None:
    # k / 8 for k = 1..7
    samples = np.array(list(GenericSequence(2, SequenceParams(digits=3))))
    assert metrics.mean_error(samples) == 0.0
    assert metrics.var_error(samples) == pytest.approx(1 / 12 - 1 / 16)
