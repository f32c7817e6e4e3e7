"""Tests for sequence configuration and presets."""

from __future__ import annotations

import numpy as np
import pytest

import params
from halton import GenericSequence, SequenceParams, number


def test_default_params_fill_index_dtype() -> None:
    par = SequenceParams()
    assert par.digits_for(2) == 32
    assert par.digits_for(10) == 9
    assert SequenceParams(index_dtype=np.uint64).digits_for(2) == 51
    assert SequenceParams(index_dtype=np.uint64).digits_for(3) == 32


def test_explicit_digits() -> None:
    assert SequenceParams(digits=5).digits_for(7) == 5


@pytest.mark.parametrize("digits", [0, -3])
def test_rejects_empty_budget(digits) -> None:
    with pytest.raises(ValueError):
        SequenceParams(digits=digits).digits_for(2)


def test_rejects_index_overflow() -> None:
    with pytest.raises(ValueError, match="overflow"):
        SequenceParams(digits=33).digits_for(2)
    with pytest.raises(ValueError, match="overflow"):
        GenericSequence(2**32 + 1)


def test_rejects_budget_beyond_float_precision() -> None:
    with pytest.raises(ValueError, match="precision"):
        SequenceParams(digits=64, index_dtype=np.uint64).digits_for(2)
    with pytest.raises(ValueError, match="precision"):
        SequenceParams(digits=16, index_dtype=np.uint16, float_dtype=np.float16).digits_for(2)
    with pytest.raises(ValueError, match="precision"):
        SequenceParams(float_dtype=np.float16).digits_for(1000)


def test_float_precision_caps_default_budget() -> None:
    assert SequenceParams(index_dtype=np.uint16, float_dtype=np.float16).digits_for(2) == 9
    assert SequenceParams(index_dtype=np.uint64, float_dtype=np.float32).digits_for(2) == 22


def test_budget_at_type_boundary() -> None:
    # 2**16 - 1 is exactly the largest uint16
    seq = GenericSequence(2, SequenceParams(index_dtype=np.uint16))
    assert seq.digits == 16
    assert seq.total == np.iinfo(np.uint16).max


def test_repr() -> None:
    assert repr(SequenceParams(digits=4)) == (
        "SequenceParams(digits=4, index_dtype=uint32, float_dtype=float64)"
    )


@pytest.mark.parametrize("name", params.presets)
def test_presets_build_sequences(name) -> None:
    par = params.get(name)
    assert isinstance(par, SequenceParams)
    seq = GenericSequence(2, par)
    assert next(seq) == 0.5


def test_preset_budgets() -> None:
    assert params.get("default").digits_for(3) == 20
    assert params.get("wide").digits_for(2) == 51
    assert params.get("wide").digits_for(3) == 32
    assert params.get("compact").digits_for(2) == 16
    assert params.get("compact").float_dtype == np.float32
    assert params.get("classic").digits_for(5) == 20
    with pytest.raises(ValueError):
        params.get("classic").digits_for(7)


def test_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown params"):
        params.get("huge")


@pytest.mark.parametrize("name", params.presets)
@pytest.mark.parametrize("base", [2, 3, 5, 7, 17, 251])
def test_preset_tail_stays_below_one(name, base) -> None:
    try:
        seq = GenericSequence(base, params.get(name))
    except ValueError:
        assert name == "classic" and base > 5
        return
    tail = list(seq.skip(seq.total - 3))
    assert len(tail) == 3
    assert all(0.0 <= v < 1.0 for v in tail)
    assert tail[-1] != tail[-2]
    assert tail[-1] == number(base, seq.total - 1, params.get(name).float_dtype)


def test_wide_sequence_has_length() -> None:
    seq = GenericSequence(2, params.get("wide"))
    assert len(seq) == 2**51 - 1
    assert len(seq) == seq.remaining
