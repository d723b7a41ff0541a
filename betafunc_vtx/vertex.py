"""
Vertex smearing according to the beta function on the transverse plane
and a Gaussian on the z axis.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""
# ===========================================
# 🔹 Required modules
# ===========================================
import numpy as np
import pandas as pd

from collections import namedtuple
from .config import VERTEX_COLUMNS
from .optics import beta_function

VertexSample = namedtuple("VertexSample", VERTEX_COLUMNS)

# ===========================================
# 🔹 Single vertex
# ===========================================
def vertex_shift(params, engine):
    """
    Draw one primary vertex (x, y, z, t) for the beam spot params.

    engine is any Gaussian source with a numpy-like normal(loc, scale),
    e.g. numpy.random.Generator. Exactly four draws are made, in the
    order z, x, y, t.
    """
    tmp_sigz = engine.normal(0., params.sigma_z)
    z = tmp_sigz + params.z0

    tmp_sigx = beta_function(z, params.z0, params.emittance, params.betastar)
    # need sqrt(2) for beamspot width relative to single beam width
    tmp_sigx /= np.sqrt(2.0)
    x = engine.normal(0., tmp_sigx) + params.x0

    tmp_sigy = beta_function(z, params.z0, params.emittance, params.betastar)
    # need sqrt(2) for beamspot width relative to single beam width
    tmp_sigy /= np.sqrt(2.0)
    y = engine.normal(0., tmp_sigy) + params.y0

    tmp_sigt = engine.normal(0., params.sigma_z)
    t = tmp_sigt + params.time_offset

    return VertexSample(float(x), float(y), float(z), float(t))

# ===========================================
# 🔹 Many vertices at once
# ===========================================
def generate_vertices(params, engine, num_vertices):
    """Vectorised vertex_shift, returns a DataFrame with columns x, y, z, t."""
    z = engine.normal(0., params.sigma_z, size=num_vertices) + params.z0

    sig_x = beta_function(z, params.z0, params.emittance, params.betastar) / np.sqrt(2.0)
    x = engine.normal(0., sig_x) + params.x0

    sig_y = beta_function(z, params.z0, params.emittance, params.betastar) / np.sqrt(2.0)
    y = engine.normal(0., sig_y) + params.y0

    t = engine.normal(0., params.sigma_z, size=num_vertices) + params.time_offset

    return pd.DataFrame({'x': x, 'y': y, 'z': z, 't': t}, columns=list(VERTEX_COLUMNS))
