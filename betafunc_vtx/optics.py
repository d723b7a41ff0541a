"""
Transverse beam size along the interaction region.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""
# ===========================================
# 🔹 Required modules
# ===========================================
import numpy as np


# ===========================================
# 🔹 Beta-function envelope
# ===========================================
def beta_function(z, z0, emittance, betastar):
    """
    Single beam rms size at longitudinal position z.

    The beta function around a waist at z0 is betastar + (z - z0)^2 / betastar,
    the beam size is sqrt(emittance * beta). Works element-wise on arrays.
    betastar must be non-zero.
    """
    return np.sqrt(emittance * (betastar + ((z - z0) * (z - z0)) / betastar))

def waist_size(emittance, betastar):
    """Beam size at the waist."""
    return np.sqrt(emittance * betastar)
