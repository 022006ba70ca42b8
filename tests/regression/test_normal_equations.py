"""
Tests for the normal-equations kernels: construction, elimination with
partial pivoting, back-substitution, and the events each stage reports.
"""

import numpy as np
import pytest

from numericsplus.core.compute.tolerances import pivot_tolerance
from numericsplus.core.trace import (
    OVERFLOW_CLAMPED,
    PIVOT,
    SINGULAR_ROW,
    TraceRecorder,
    Tracer,
    UPDATE_DISCARDED,
    ZERO_DIAGONAL,
)
from numericsplus.regression._normal_equations import (
    back_substitute,
    build_normal_equations,
    eliminate,
    power_sums,
)

TOL = pivot_tolerance(np.float64)


@pytest.fixture
def recorder():
    return TraceRecorder()


@pytest.fixture
def tracer(recorder):
    return Tracer(recorder)


class TestPowerSums:

    def test_small(self):
        x = np.array([1.0, 2.0, 3.0])
        np.testing.assert_array_equal(power_sums(x, 3), [3.0, 6.0, 14.0, 36.0])

    def test_zero_to_the_zero_is_one(self):
        x = np.array([0.0, 0.0])
        np.testing.assert_array_equal(power_sums(x, 2), [2.0, 0.0, 0.0])

    def test_overflow_is_reported_as_inf(self):
        sums = power_sums(np.array([1e200]), 2)
        assert np.isinf(sums[2])


class TestBuild:

    def test_hankel_structure(self, tracer):
        x = np.arange(5, dtype=np.float64)
        y = 2.0 * x
        matrix, vector, n_clamped = build_normal_equations(x, y, 2, tracer)
        assert matrix.shape == (3, 3)
        expected = np.array([
            [5.0, 10.0, 30.0],
            [10.0, 30.0, 100.0],
            [30.0, 100.0, 354.0],
        ])
        np.testing.assert_array_equal(matrix, expected)
        np.testing.assert_array_equal(vector, [20.0, 60.0, 200.0])
        assert n_clamped == 0

    def test_matrix_is_symmetric(self, rng, tracer):
        x = rng.standard_normal(30)
        y = rng.standard_normal(30)
        matrix, _, _ = build_normal_equations(x, y, 4, tracer)
        np.testing.assert_array_equal(matrix, matrix.T)

    def test_clamps_overflow(self, tracer, recorder):
        x = np.array([1e200, 2e200, 3e200])
        y = np.array([1.0, 2.0, 3.0])
        matrix, vector, n_clamped = build_normal_equations(x, y, 1, tracer)
        assert np.all(np.isfinite(matrix))
        assert matrix[1, 1] == 0.0
        assert n_clamped == 1
        events = recorder.of_kind(OVERFLOW_CLAMPED)
        assert len(events) == 1
        assert events[0].data['target'] == 'matrix'
        assert (events[0].data['row'], events[0].data['col']) == (1, 1)

    def test_clamps_vector_overflow(self, tracer):
        x = np.array([1e200, 2e200])
        y = np.array([1e200, 1e200])
        _, vector, _ = build_normal_equations(x, y, 1, tracer)
        assert vector[1] == 0.0
        assert any('vector' in w for w in tracer.warnings)

    def test_dtype_preserved(self, tracer):
        x = np.arange(4, dtype=np.float32)
        matrix, vector, _ = build_normal_equations(x, x, 1, tracer)
        assert matrix.dtype == np.float32
        assert vector.dtype == np.float32


class TestEliminate:

    def test_partial_pivoting_swaps_largest_row_up(self, tracer, recorder):
        matrix = np.array([[1.0, 2.0], [4.0, 1.0]])
        vector = np.array([5.0, 6.0])
        eliminate(matrix, vector, TOL, tracer)
        np.testing.assert_array_equal(matrix[0], [4.0, 1.0])
        assert vector[0] == 6.0
        pivot = recorder.of_kind(PIVOT)[0]
        assert pivot.data['pivot_row'] == 1
        assert pivot.data['magnitude'] == 4.0

    def test_upper_triangular_after(self, rng, tracer):
        matrix = rng.standard_normal((4, 4))
        vector = rng.standard_normal(4)
        eliminate(matrix, vector, TOL, tracer)
        np.testing.assert_allclose(np.tril(matrix, -1), 0.0, atol=1e-12)

    def test_singular_row_zeroed_and_reported(self, tracer, recorder):
        matrix = np.array([
            [1.0, 1.0, 1.0],
            [1.0, 1.0, 1.0],
            [1.0, 1.0, 2.0],
        ])
        vector = np.array([1.0, 1.0, 2.0])
        singular = eliminate(matrix, vector, TOL, tracer)
        assert singular == [1]
        np.testing.assert_array_equal(matrix[1, 1:], [0.0, 0.0])
        assert vector[1] == 0.0
        event = recorder.of_kind(SINGULAR_ROW)[0]
        assert event.data['row'] == 1
        assert event.data['tolerance'] == TOL

    def test_non_finite_update_discarded(self, tracer, recorder):
        big = np.finfo(np.float64).max
        matrix = np.array([[1.0, big], [1.0, -big]])
        vector = np.array([1.0, 1.0])
        eliminate(matrix, vector, TOL, tracer)
        # -big - 1 * big overflows; the entry keeps its pre-update value
        assert matrix[1, 1] == -big
        assert np.all(np.isfinite(matrix))
        events = recorder.of_kind(UPDATE_DISCARDED)
        assert events[0].data['reason'] == 'matrix'

    def test_single_unknown_untouched(self, tracer):
        matrix = np.array([[3.0]])
        vector = np.array([6.0])
        assert eliminate(matrix, vector, TOL, tracer) == []
        assert matrix[0, 0] == 3.0


class TestBackSubstitute:

    def test_solves_triangular(self, tracer):
        matrix = np.array([[2.0, 1.0], [0.0, 4.0]])
        vector = np.array([4.0, 8.0])
        ans, zeroed = back_substitute(matrix, vector, TOL, tracer)
        np.testing.assert_allclose(ans, [1.0, 2.0])
        assert zeroed == []

    def test_small_diagonal_gives_zero(self, tracer, recorder):
        matrix = np.array([[2.0, 1.0], [0.0, 1e-12]])
        vector = np.array([4.0, 1.0])
        ans, zeroed = back_substitute(matrix, vector, TOL, tracer)
        np.testing.assert_array_equal(ans, [2.0, 0.0])
        assert zeroed == [1]
        assert recorder.of_kind(ZERO_DIAGONAL)[0].data['row'] == 1

    def test_non_finite_quotient_gives_zero(self, tracer):
        big = np.finfo(np.float64).max
        matrix = np.array([[1.0, 0.0], [0.0, 1e-3]])
        vector = np.array([1.0, big])
        ans, zeroed = back_substitute(matrix, vector, TOL, tracer)
        assert ans[1] == 0.0
        assert zeroed == [1]

    def test_end_to_end_matches_linalg_solve(self, rng, tracer):
        a = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
        b = rng.standard_normal(5)
        matrix, vector = a.copy(), b.copy()
        eliminate(matrix, vector, TOL, tracer)
        ans, _ = back_substitute(matrix, vector, TOL, tracer)
        np.testing.assert_allclose(ans, np.linalg.solve(a, b), rtol=1e-10)
