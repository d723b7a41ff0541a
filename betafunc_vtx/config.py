"""
Configuration file for betafunc_vtx.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""
# ===========================================
# 🔹 Required modules
# ===========================================
import scipy.constants as SI
from schema import Schema, And, Or, Use, Optional

# ===========================================
# 🔹 Package Metadata
# ===========================================
__version__ = "0.1.0"
__author__ = "Giacomo Broggi, Andrey Abramov"
__email__ = "giacomo.broggi@cern.ch"
__license__ = "Apache-2.0"

# ===========================================
# 🔹 Helper Functions for Config Validation
# ===========================================
# Note that YAML has inconsitencies when parsing numbers in scientific notation
# To avoid numbers parsed as strings in some configurations, always cast to float / int
to_float = lambda x: float(x)
to_int = lambda x: int(float(x))
# Quoted YAML booleans ("false") must not become True through bool()
_is_bool_str = lambda s: s.strip().lower() in ("true", "false")
to_bool = lambda s: s.strip().lower() == "true"
BOOL = Or(bool, And(str, _is_bool_str, Use(to_bool)))

# ===========================================
# 🔹 Units
# ===========================================
# Vertices are produced in mm, times as a distance (c*t) in mm.
# Configuration and conditions are given in cm, ns and rad.
MM = 1.0
CM = 10.0 * MM
NS = 1.0
RADIAN = 1.0
C_LIGHT = SI.c * 1e3 / 1e9  # [mm/ns]

# ===========================================
# 🔹 Global constants & default values
# ===========================================
DEFAULT_OUTPUT_FILE = "vertices.parquet"
DEFAULT_SOURCE = "generator"

VERTEX_COLUMNS = ("x", "y", "z", "t")

# ===========================================
# 🔹 Schema definitions for config file validation
# ===========================================
# Defaults follow the parameter description of the vertex generator
VERTEX_SCHEMA = Schema({'readDB': BOOL,
                        Optional('X0', default=0.0): Use(to_float),  # [cm]
                        Optional('Y0', default=0.0): Use(to_float),  # [cm]
                        Optional('Z0', default=0.0): Use(to_float),  # [cm]
                        Optional('SigmaZ', default=0.0): Use(to_float),  # [cm]
                        Optional('BetaStar', default=0.0): Use(to_float),  # [cm]
                        Optional('Emittance', default=0.0): Use(to_float),  # [cm], not normalised
                        Optional('Alpha', default=0.0): Use(to_float),  # [rad]
                        Optional('Phi', default=0.0): Use(to_float),  # [rad]
                        Optional('TimeOffset', default=0.0): Use(to_float),  # [ns]
                        Optional('src', default=DEFAULT_SOURCE): Or(str, None),
                        })

BEAMSPOT_RECORD_SCHEMA = Schema({'x': Use(to_float),  # [cm]
                                 'y': Use(to_float),  # [cm]
                                 'z': Use(to_float),  # [cm]
                                 'sigmaZ': Use(to_float),  # [cm]
                                 'timeOffset': Use(to_float),  # [ns]
                                 'betaStar': Use(to_float),  # [cm]
                                 'emittance': Use(to_float),  # [cm]
                                 'alpha': Use(to_float),  # [rad]
                                 'phi': Use(to_float),  # [rad]
                                 'isGaussian': BOOL,
                                 Optional(object): object})  # Gaussian beam spots carry extra keys

BEAMSPOT_IOV_SCHEMA = Schema(And({'run': Use(to_int),
                                  'lumi': Use(to_int),
                                  Optional(object): object},
                                 lambda d: d['run'] >= 1 and d['lumi'] >= 1))

CONDITIONS_FILE_SCHEMA = Schema({'iovs': And([BEAMSPOT_IOV_SCHEMA], len),
                                 Optional(object): object})

# Relative paths are resolved against the directory of the driver config file
CONDITIONS_SCHEMA = Schema({'file': str})

RUN_SCHEMA = Schema({'seed': Use(to_int),
                     'run_number': Use(to_int),
                     'events_per_lumi': And(Use(to_int), lambda n: n > 0),
                     Optional('first_lumi', default=1): And(Use(to_int), lambda n: n >= 1),
                     Optional('lumi_blocks', default=1): And(Use(to_int), lambda n: n >= 1),
                     Optional('vectorized', default=False): BOOL,
                     Optional('outputfile', default=DEFAULT_OUTPUT_FILE): str,
                     })

VERTEX_SMEARING_CONF_SCHEMA = Schema({'vertex': VERTEX_SCHEMA,
                                      'run': RUN_SCHEMA,
                                      Optional('conditions'): CONDITIONS_SCHEMA,
                                      Optional(object): object})  # Allow input flexibility with extra keys

# ===========================================
# 🔹 Singleton class for shared configurations
# ===========================================
class Config:
    """ Singleton class to store global settings across the package."""
    verbose = True  # Print parameter updates and progress

config = Config()
