"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype handling, non-numeric rejection
    - check_finite: NaN/Inf detection
    - check_1d: dimensionality
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_integer: integral parameters
"""

import numpy as np
import pytest

from numericsplus.core.exceptions import DimensionError, ValidationError
from numericsplus.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_integer,
    check_min_samples,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_bool_promoted(self):
        assert check_array([True, False], "x").dtype == np.float64

    def test_float32_preserved(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "x").dtype == np.float32

    def test_explicit_dtype(self):
        assert check_array([1.0, 2.0], "x", dtype=np.float32).dtype == np.float32

    def test_explicit_integer_dtype_rejected(self):
        with pytest.raises(ValidationError, match="floating dtype"):
            check_array([1.0, 2.0], "x", dtype=np.int64)

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "x")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x: non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_object_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array(np.array([1.0, "a", None], dtype=object), "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1j, 2j], "x")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "x")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_1d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0, 0.0]), "x")

    def test_nan_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 0 Inf"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_counted(self):
        with pytest.raises(ValidationError, match=r"0 NaN, 2 Inf"):
            check_finite(np.array([np.inf, -np.inf]), "y")


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_fails(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_scalar_fails(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_1d(np.asarray(1.0), "x")


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length / check_min_samples / check_integer
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_mismatch_reports_lengths(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.ones(2), names=("x", "y"))

    def test_names_must_match_arrays(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("x",))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(3), names=("x",))


class TestCheckMinSamples:

    def test_enough(self):
        check_min_samples(np.zeros(3), 3, "x")

    def test_too_few(self):
        with pytest.raises(ValidationError, match="at least 4 samples, got 3"):
            check_min_samples(np.zeros(3), 4, "x")


class TestCheckInteger:

    def test_int(self):
        assert check_integer(3, "degree") == 3

    def test_numpy_int(self):
        assert check_integer(np.int32(2), "degree") == 2

    def test_float_rejected(self):
        with pytest.raises(TypeError, match="degree: expected an integer, got float"):
            check_integer(2.0, "degree")

    def test_bool_rejected(self):
        with pytest.raises(TypeError, match="got bool"):
            check_integer(False, "degree")
