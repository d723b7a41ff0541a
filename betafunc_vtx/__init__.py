"""
A package to smear primary vertices according to a beta-function beam spot,
with a crossing-angle Lorentz boost.

Authors:
    - Giacomo Broggi (giacomo.broggi@cern.ch)
    - Andrey Abramov

License: Apache 2.0
Version: 0.1.0
"""

__version__ = "0.1.0"

from .config import config, VERTEX_SCHEMA, VERTEX_SMEARING_CONF_SCHEMA, CM, NS, C_LIGHT
from .errors import BetafuncVtxError, ConfigurationError, ConfigurationMismatchError, DegenerateBoostError
from .utils import load_config, dump_dict_to_yaml, save_vertices, load_vertices, _luminous_region_moments
from .optics import beta_function, waist_size
from .boost import build_lorentz_boost, build_inverse_boost
from .beam import BeamParameters, beam_parameters_from_config, beam_parameters_from_record
from .vertex import VertexSample, vertex_shift, generate_vertices
from .conditions import SimBeamSpotRecord, BeamSpotConditions, record_from_dict
from .generator import BetafuncVtxGenerator, StaticBeamSource, DatabaseBeamSource

__all__ = [
    "config",
    "VERTEX_SCHEMA",
    "VERTEX_SMEARING_CONF_SCHEMA",
    "CM",
    "NS",
    "C_LIGHT",
    "BetafuncVtxError",
    "ConfigurationError",
    "ConfigurationMismatchError",
    "DegenerateBoostError",
    "load_config",
    "dump_dict_to_yaml",
    "save_vertices",
    "load_vertices",
    "_luminous_region_moments",
    "beta_function",
    "waist_size",
    "build_lorentz_boost",
    "build_inverse_boost",
    "BeamParameters",
    "beam_parameters_from_config",
    "beam_parameters_from_record",
    "VertexSample",
    "vertex_shift",
    "generate_vertices",
    "SimBeamSpotRecord",
    "BeamSpotConditions",
    "record_from_dict",
    "BetafuncVtxGenerator",
    "StaticBeamSource",
    "DatabaseBeamSource",
]
