"""
Lorentz boost to the head-on collision frame for beams with a crossing angle.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""
# ===========================================
# 🔹 Required modules
# ===========================================
import numpy as np

from .errors import DegenerateBoostError

# Below this |cos(phi)| the boost entries overflow any sensible precision
COS_PHI_MIN = 1e-12


# ===========================================
# 🔹 Boost matrices
# ===========================================
def build_lorentz_boost(alpha, phi):
    """
    Lorentz boost to the frame where the collision is head-on.

    phi is the half crossing angle in the plane ZS,
    alpha is the angle to the S axis from the X axis in the XY plane.
    """
    ca, sa = np.cos(alpha), np.sin(alpha)
    cp, sp, tp = np.cos(phi), np.sin(phi), np.tan(phi)

    boost = np.zeros((4, 4))
    boost[0, 0] = 1. / cp
    boost[0, 1] = -ca * sp
    boost[0, 2] = -tp * sp
    boost[0, 3] = -sa * sp
    boost[1, 0] = -ca * tp
    boost[1, 1] = 1.
    boost[1, 2] = ca * tp
    boost[1, 3] = 0.
    boost[2, 0] = 0.
    boost[2, 1] = -ca * sp
    boost[2, 2] = cp
    boost[2, 3] = -sa * sp
    boost[3, 0] = -sa * tp
    boost[3, 1] = 0.
    boost[3, 2] = sa * tp
    boost[3, 3] = 1.
    return boost

def build_inverse_boost(alpha, phi):
    """
    Inverse of the head-on boost, i.e. from the head-on frame back to the lab.

    The returned array is read-only. Raises DegenerateBoostError for a
    half crossing angle of 90 degrees or any non-invertible matrix.
    """
    if not (np.isfinite(alpha) and np.isfinite(phi)):
        raise DegenerateBoostError(f'Crossing angles must be finite, got alpha={alpha}, phi={phi}')
    if abs(np.cos(phi)) < COS_PHI_MIN:
        raise DegenerateBoostError(f'Cannot build the crossing angle boost for phi={phi} rad: '
                                   'cos(phi) vanishes')

    boost = build_lorentz_boost(alpha, phi)
    try:
        inv_boost = np.linalg.inv(boost)
    except np.linalg.LinAlgError as err:
        raise DegenerateBoostError(f'Crossing angle boost for alpha={alpha}, phi={phi} is singular') from err

    if not np.all(np.isfinite(inv_boost)):
        raise DegenerateBoostError(f'Inverse crossing angle boost for alpha={alpha}, phi={phi} is not finite')

    inv_boost.flags.writeable = False
    return inv_boost
