"""
Exceptions raised by betafunc_vtx.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""


class BetafuncVtxError(Exception):
    """Base class for all betafunc_vtx errors."""


class ConfigurationError(BetafuncVtxError, ValueError):
    """Illegal beam spot configuration (e.g. non-positive SigmaZ)."""


class ConfigurationMismatchError(ConfigurationError):
    """A Gaussian beam spot record was given to the beta-function generator."""


class DegenerateBoostError(BetafuncVtxError, ValueError):
    """The crossing-angle boost cannot be inverted."""
