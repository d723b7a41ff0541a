"""
betafunc_vtx : vertex sampling tests
"""

import numpy as np
import pytest

from betafunc_vtx import (beam_parameters_from_config, vertex_shift, generate_vertices,
                          VertexSample, VERTEX_SCHEMA, C_LIGHT)


class CountingEngine:
    """Wraps a numpy generator and counts the Gaussian draws."""

    def __init__(self, seed):
        self.rng = np.random.default_rng(seed)
        self.draws = 0

    def normal(self, loc=0.0, scale=1.0, size=None):
        self.draws += 1
        return self.rng.normal(loc, scale, size)


@pytest.fixture
def params(static_vertex_dict):
    return beam_parameters_from_config(VERTEX_SCHEMA.validate(static_vertex_dict))


def test_draw_order_and_widths(params, recording_engine):
    "z is drawn first, the transverse widths follow the beta function at that z, t comes last."
    vtx = vertex_shift(params, recording_engine)

    waist = np.sqrt(params.emittance * params.betastar) / np.sqrt(2.0)
    scales = [scale for _, scale, _ in recording_engine.calls]
    assert len(scales) == 4
    assert scales[0] == params.sigma_z
    assert scales[1] == pytest.approx(waist, rel=1e-15)
    assert scales[2] == pytest.approx(waist, rel=1e-15)
    assert scales[3] == params.sigma_z

    assert isinstance(vtx, VertexSample)
    assert tuple(vtx) == pytest.approx((1.0, -2.0, 5.0, C_LIGHT))


def test_exactly_four_draws_per_vertex(params):
    engine = CountingEngine(3)
    for _ in range(25):
        vertex_shift(params, engine)
    assert engine.draws == 100


def test_deterministic_for_seeded_engine(params):
    rng1 = np.random.default_rng(2024)
    rng2 = np.random.default_rng(2024)
    first = [vertex_shift(params, rng1) for _ in range(50)]
    second = [vertex_shift(params, rng2) for _ in range(50)]
    assert first == second


def test_different_seeds_give_different_vertices(params):
    assert vertex_shift(params, np.random.default_rng(1)) != vertex_shift(params, np.random.default_rng(2))


def test_zero_sigma_z_pins_z_and_t(params):
    params = params._replace(sigma_z=0.0)
    vtx = vertex_shift(params, np.random.default_rng(5))
    assert vtx.z == params.z0
    assert vtx.t == params.time_offset


def test_luminous_region_statistics(params):
    "Check the rms sizes of a large vectorised sample."
    rng = np.random.default_rng(42)
    df = generate_vertices(params, rng, 200000)

    assert list(df.columns) == ['x', 'y', 'z', 't']
    assert len(df) == 200000

    # <sigma_x^2> averaged over the Gaussian z distribution
    sigma_x = np.sqrt(params.emittance / 2 * (params.betastar + params.sigma_z**2 / params.betastar))

    assert df['z'].mean() == pytest.approx(params.z0, abs=0.01 * params.sigma_z)
    assert df['z'].std() == pytest.approx(params.sigma_z, rel=0.01)
    assert df['t'].mean() == pytest.approx(params.time_offset, abs=0.01 * params.sigma_z)
    assert df['t'].std() == pytest.approx(params.sigma_z, rel=0.01)
    assert df['x'].mean() == pytest.approx(params.x0, abs=0.01 * sigma_x)
    assert df['y'].mean() == pytest.approx(params.y0, abs=0.01 * sigma_x)
    assert df['x'].std() == pytest.approx(sigma_x, rel=0.02)
    assert df['y'].std() == pytest.approx(sigma_x, rel=0.02)


def test_no_crossing_angle_shear(params):
    "x and y do not depend linearly on z, and z and t are independent."
    df = generate_vertices(params, np.random.default_rng(11), 200000)
    corr = df.corr()
    assert abs(corr.loc['x', 'z']) < 0.01
    assert abs(corr.loc['y', 'z']) < 0.01
    assert abs(corr.loc['z', 't']) < 0.01
    assert abs(corr.loc['x', 'y']) < 0.01


def test_transverse_size_grows_with_distance_from_waist(params):
    df = generate_vertices(params, np.random.default_rng(8), 200000)
    dz = np.abs(df['z'] - params.z0)
    near = df['x'][dz < 0.5 * params.sigma_z].std()
    far = df['x'][dz > 1.5 * params.sigma_z].std()
    assert far > near


def test_vectorised_and_single_vertex_agree_statistically(params):
    rng = np.random.default_rng(99)
    single = np.array([vertex_shift(params, rng) for _ in range(20000)])
    many = generate_vertices(params, rng, 20000)
    for i, coord in enumerate(('x', 'y', 'z', 't')):
        assert single[:, i].std() == pytest.approx(many[coord].std(), rel=0.05)
