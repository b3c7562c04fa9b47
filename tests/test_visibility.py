import pytest

from satcom_sim.physics.visibility import compute_access_windows, in_range


class TestInRange:
    def test_inclusive_boundary(self):
        assert in_range((0.0, 0.0), (3.0, 4.0), 5.0) is True
        assert in_range((0.0, 0.0), (3.0, 4.0), 4.999) is False

    def test_symmetric(self):
        a, b = (1.0, -2.0), (-7.0, 4.0)
        assert in_range(a, b, 10.0) == in_range(b, a, 10.0)

    def test_zero_range_only_same_point(self):
        assert in_range((1.0, 1.0), (1.0, 1.0), 0.0) is True
        assert in_range((1.0, 1.0), (1.0, 1.5), 0.0) is False


class TestAccessWindows:
    def test_single_window(self):
        times = [0.0, 1.0, 2.0, 3.0, 4.0]
        flags = [False, True, True, False, False]
        assert compute_access_windows(times, flags) == [(1.0, 3.0)]

    def test_open_window_closes_at_last_sample(self):
        times = [0.0, 1.0, 2.0]
        flags = [False, True, True]
        assert compute_access_windows(times, flags) == [(1.0, 2.0)]

    def test_multiple_windows(self):
        times = [0.0, 1.0, 2.0, 3.0, 4.0]
        flags = [True, False, True, False, True]
        assert compute_access_windows(times, flags) == [(0.0, 1.0), (2.0, 3.0), (4.0, 4.0)]

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="same length"):
            compute_access_windows([0.0, 1.0], [True])
