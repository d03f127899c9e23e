import logging

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from cdf53 import (
    IP1, ISCALE, IU1, P1, SCALE, U1,
    InvalidLengthError, merge_bands, split_bands, validate_length,
)


def test_constants():
    assert P1 == -0.5 and IP1 == 0.5
    assert U1 == 0.25 and IU1 == -0.25
    assert SCALE == 1.4142135623730951
    assert ISCALE == 1 / SCALE


@pytest.mark.parametrize("n", [1, 2, 4, 1024])
def test_validate_accepts_powers_of_two(n):
    assert validate_length(np.zeros(n)) == n
    assert validate_length(n) == n


@pytest.mark.parametrize("n", [0, -1, -4, 3, 5, 6, 1000])
def test_validate_rejects(n):
    with pytest.raises(InvalidLengthError) as exc:
        validate_length(n)
    assert exc.value.n == n


def test_validate_rejects_empty_list():
    with pytest.raises(InvalidLengthError):
        validate_length([])


def test_invalid_length_is_value_error():
    assert issubclass(InvalidLengthError, ValueError)


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="cdf53.shared"):
        with pytest.raises(InvalidLengthError):
            validate_length(6)
    assert "6" in caplog.text


def test_split_bands_are_views():
    buf = np.arange(8, dtype=np.float64)
    s, d = split_bands(buf)
    assert_array_equal(s, [0, 1, 2, 3])
    assert_array_equal(d, [4, 5, 6, 7])
    s[0] = -1.0
    assert buf[0] == -1.0


def test_merge_bands():
    out = merge_bands([1, 2], [3, 4])
    assert out.dtype == np.float64
    assert_array_equal(out, [1, 2, 3, 4])


def test_merge_bands_bad_shapes():
    with pytest.raises(InvalidLengthError):
        merge_bands([1, 2], [3])
    with pytest.raises(InvalidLengthError):
        merge_bands([1, 2, 3], [4, 5, 6])


@pytest.mark.parametrize("flag", [True, False, np.bool_(True)])
def test_validate_rejects_bool(flag):
    with pytest.raises(TypeError):
        validate_length(flag)
