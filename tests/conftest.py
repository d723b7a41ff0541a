"""Shared fixtures for the betafunc_vtx tests."""

import pytest

from betafunc_vtx import config, BeamSpotConditions, record_from_dict


@pytest.fixture(autouse=True)
def quiet():
    verbose = config.verbose
    config.verbose = False
    yield
    config.verbose = verbose


@pytest.fixture
def static_vertex_dict():
    return {'readDB': False,
            'X0': 0.1,          # [cm]
            'Y0': -0.2,         # [cm]
            'Z0': 0.5,          # [cm]
            'SigmaZ': 5.0,      # [cm]
            'BetaStar': 10.0,   # [cm]
            'Emittance': 5e-8,  # [cm]
            'Alpha': 0.0,       # [rad]
            'Phi': 142.5e-6,    # [rad]
            'TimeOffset': 1.0,  # [ns]
            }


def make_record_dict(**overrides):
    record = {'x': 0.05, 'y': 0.01, 'z': -0.3,
              'sigmaZ': 3.8, 'timeOffset': 0.0,
              'betaStar': 30.0, 'emittance': 1.67e-8,
              'alpha': 0.0, 'phi': 1.0e-4,
              'isGaussian': False}
    record.update(overrides)
    return record


@pytest.fixture
def record_dict():
    return make_record_dict()


@pytest.fixture
def conditions():
    """Three IOVs in run 1: lumi 1-4, lumi 5-9 (Gaussian), lumi 10 onwards."""
    return BeamSpotConditions([
        ((1, 1), record_from_dict(make_record_dict())),
        ((1, 5), record_from_dict(make_record_dict(isGaussian=True))),
        ((1, 10), record_from_dict(make_record_dict(betaStar=60.0, phi=2.0e-4))),
    ])


class RecordingEngine:
    """Gaussian source returning the mean and recording every (loc, scale) asked for."""

    def __init__(self):
        self.calls = []

    def normal(self, loc=0.0, scale=1.0, size=None):
        self.calls.append((loc, scale, size))
        return loc


@pytest.fixture
def recording_engine():
    return RecordingEngine()


@pytest.fixture
def make_record():
    return make_record_dict
