"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def rate_series():
    """25 daily exchange-rate observations used as the reference dataset."""
    return np.array([
        1.376749, 1.373969, 1.372195, 1.375233, 1.381031,
        1.371181, 1.360464, 1.360464, 1.363537, 1.367112,
        1.366347, 1.367112, 1.377001, 1.369402, 1.364815,
        1.371688, 1.371942, 1.381533, 1.381533, 1.373209,
        1.374475, 1.377001, 1.377758, 1.376244, 1.382788,
    ])


@pytest.fixture
def day_index():
    """x = 0..24, paired with the 25-point series."""
    return np.arange(25, dtype=np.float64)


@pytest.fixture
def log_price_series():
    """Upward-trending log prices."""
    return np.array([
        2.524848256880948, 2.524768183213131, 2.523245564014449,
        2.530198638979707, 2.5303579126919176, 2.5346487416828145,
        2.534331533115523, 2.529800343678309, 2.5282853730899455,
        2.529083012120829, 2.536154109791838, 2.5388422834536386,
        2.54733356806064, 2.552487413608947, 2.5532659873013435,
        2.560091422935765, 2.5612502163753343, 2.5535772471279947,
        2.5562966458746734, 2.554043955288302, 2.548194389023919,
        2.5467070506934473, 2.5549767186672407, 2.5618676909241285,
        2.5693243884259016,
    ])


@pytest.fixture
def flat_log_price_series():
    """Slowly declining log prices around 4.9."""
    return np.array([
        4.909119230903745, 4.909296310855805, 4.909436476915929,
        4.909547120455751, 4.909023299502002, 4.9087649768999215,
        4.907494535176743, 4.907110130186572, 4.906348276107643,
        4.90806347898857, 4.908144730258166, 4.908137344051906,
        4.907538880091496, 4.906607223672208, 4.905637675546271,
        4.905156252896036, 4.902597122641659, 4.901296505222535,
        4.903888632997388, 4.901541893960424, 4.90322081865463,
        4.905171069357125, 4.905141436215417, 4.905163661154021,
        4.905282185818402,
    ])
