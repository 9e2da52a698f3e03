"""
Response Source Tests
=====================
Tests for the simulated step response and CSV log loading.

Run with: python -m pytest tests/test_sources.py -v
"""

import sys
import numpy as np
import pandas as pd
import pytest
from pathlib import Path

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from response_analysis.errors import InvalidInputError
from response_analysis.sources import (
    build_second_order_system,
    simulate_step_response,
    load_response_csv,
)


class TestSimulation:

    def test_shape_and_time_axis(self):
        t, y = simulate_step_response(duration=2.0, n_samples=500)
        assert len(t) == len(y) == 500
        assert t[0] == 0.0
        assert t[-1] == pytest.approx(2.0)
        assert np.all(np.diff(t) > 0)

    def test_starts_at_zero_and_converges_to_gain(self):
        t, y = simulate_step_response(zeta=0.7, gain=2.0, duration=10.0)
        assert y[0] == pytest.approx(0.0, abs=1e-9)
        assert y[-1] == pytest.approx(2.0, abs=1e-3)

    def test_underdamped_overshoots(self):
        _, y = simulate_step_response(zeta=0.2, duration=5.0)
        # Mp = exp(-pi*zeta/sqrt(1-zeta^2)) ~ 52.7%
        assert np.max(y) == pytest.approx(1.527, abs=0.01)

    def test_transfer_function_coefficients(self):
        tf = build_second_order_system(wn=3.0, zeta=0.5, gain=1.0)
        np.testing.assert_allclose(tf.num, [9.0])
        np.testing.assert_allclose(tf.den, [1.0, 3.0, 9.0])

    @pytest.mark.parametrize("kwargs", [
        {'wn': 0.0},
        {'wn': -1.0},
        {'zeta': -0.1},
        {'duration': 0.0},
        {'n_samples': 1},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(InvalidInputError):
            simulate_step_response(**kwargs)


class TestLoadCsv:

    def test_default_columns(self, tmp_path):
        path = tmp_path / "log.csv"
        pd.DataFrame({'time': [0.0, 0.1, 0.2], 'y': [0.0, 0.7, 1.0]}).to_csv(path, index=False)

        t, y = load_response_csv(path)

        assert t.tolist() == [0.0, 0.1, 0.2]
        assert y.tolist() == [0.0, 0.7, 1.0]
        assert t.dtype == np.float64

    def test_custom_columns(self, tmp_path):
        path = tmp_path / "flight.csv"
        pd.DataFrame({
            'time_s': [0.0, 0.004, 0.008],
            'pitch': [0.0, 2.5, 4.0],
            'm1': [1100, 1200, 1300],
        }).to_csv(path, index=False)

        t, y = load_response_csv(path, time_col='time_s', signal_col='pitch')

        assert t.tolist() == [0.0, 0.004, 0.008]
        assert y.tolist() == [0.0, 2.5, 4.0]

    def test_non_numeric_rows_dropped(self, tmp_path):
        path = tmp_path / "log.csv"
        path.write_text("time,y\n0,0\n1,bad\n2,1.1\n,0.9\n4,1.0\n")

        t, y = load_response_csv(path)

        assert t.tolist() == [0.0, 2.0, 4.0]
        assert y.tolist() == [0.0, 1.1, 1.0]

    def test_missing_column(self, tmp_path):
        path = tmp_path / "log.csv"
        pd.DataFrame({'time': [0, 1], 'pitch': [0, 1]}).to_csv(path, index=False)

        with pytest.raises(InvalidInputError, match="not found"):
            load_response_csv(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_response_csv(tmp_path / "nope.csv")
