"""
Beam spot parameters for the beta-function vertex generator.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""
# ===========================================
# 🔹 Required modules
# ===========================================
from collections import namedtuple

from .config import CM, NS, RADIAN, C_LIGHT
from .errors import ConfigurationError

# ===========================================
# 🔹 Parameter set
# ===========================================
# Lengths in mm, time_offset as a distance (c*t) in mm, angles in rad
BeamParameters = namedtuple("BeamParameters", ["x0", "y0", "z0", "sigma_z", "betastar",
                                               "emittance", "time_offset", "alpha", "phi"])

def _check_beam_parameters(params, context):
    if not params.sigma_z > 0:
        raise ConfigurationError(f'Error in {context}: Illegal resolution in Z (SigmaZ is negative)')
    if params.betastar == 0:
        raise ConfigurationError(f'Error in {context}: BetaStar must be non-zero')
    return params

def beam_parameters_from_config(vertex_dict):
    """Build the parameter set from a validated 'vertex' configuration block."""
    params = BeamParameters(x0=vertex_dict['X0'] * CM,
                            y0=vertex_dict['Y0'] * CM,
                            z0=vertex_dict['Z0'] * CM,
                            sigma_z=vertex_dict['SigmaZ'] * CM,
                            betastar=vertex_dict['BetaStar'] * CM,
                            emittance=vertex_dict['Emittance'] * CM,  # this is not the normalized emittance
                            time_offset=vertex_dict['TimeOffset'] * NS * C_LIGHT,
                            alpha=vertex_dict['Alpha'] * RADIAN,
                            phi=vertex_dict['Phi'] * RADIAN)
    return _check_beam_parameters(params, 'BetafuncVtxGenerator')

def beam_parameters_from_record(record):
    """Build the parameter set from a SimBeamSpotRecord (cm, ns, rad)."""
    params = BeamParameters(x0=record.x * CM,
                            y0=record.y * CM,
                            z0=record.z * CM,
                            sigma_z=record.sigma_z * CM,
                            betastar=record.beta_star * CM,
                            emittance=record.emittance * CM,
                            time_offset=record.time_offset * NS * C_LIGHT,
                            alpha=record.alpha * RADIAN,
                            phi=record.phi * RADIAN)
    return _check_beam_parameters(params, 'BetafuncVtxGenerator.begin_luminosity_block')
