"""
Beam spot conditions keyed on (run, luminosity block).

Each record is valid from its (run, lumi) until the start of the next one.
Lookups return a generation number (the 1-based index of the interval of
validity) together with the record, so that consumers can skip records
they have already applied.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""
# ===========================================
# 🔹 Required modules
# ===========================================
import bisect

from collections import namedtuple
from .config import BEAMSPOT_RECORD_SCHEMA, CONDITIONS_FILE_SCHEMA
from .utils import load_config

# ===========================================
# 🔹 Conditions record
# ===========================================
# Units: cm, ns, rad
SimBeamSpotRecord = namedtuple("SimBeamSpotRecord", ["x", "y", "z", "sigma_z", "time_offset", "beta_star",
                                                     "emittance", "alpha", "phi", "is_gaussian"])

def record_from_dict(record_dict):
    """Validate a conditions record given with the database key names."""
    rec = BEAMSPOT_RECORD_SCHEMA.validate(record_dict)
    return SimBeamSpotRecord(x=rec['x'], y=rec['y'], z=rec['z'],
                             sigma_z=rec['sigmaZ'],
                             time_offset=rec['timeOffset'],
                             beta_star=rec['betaStar'],
                             emittance=rec['emittance'],
                             alpha=rec['alpha'],
                             phi=rec['phi'],
                             is_gaussian=rec['isGaussian'])

# ===========================================
# 🔹 Intervals of validity
# ===========================================
class BeamSpotConditions:
    """In-memory beam spot conditions with run/lumi intervals of validity."""

    def __init__(self, iovs=()):
        self._starts = []
        self._records = []
        for (run, lumi), record in sorted(iovs, key=lambda iov: iov[0]):
            if self._starts and self._starts[-1] == (run, lumi):
                raise ValueError(f'Duplicate interval of validity starting at run {run}, lumi {lumi}')
            self._starts.append((run, lumi))
            self._records.append(record)

    @classmethod
    def from_dict(cls, conditions_dict):
        conditions_dict = CONDITIONS_FILE_SCHEMA.validate(conditions_dict)
        iovs = [((iov['run'], iov['lumi']), record_from_dict(iov))
                for iov in conditions_dict['iovs']]
        return cls(iovs)

    @classmethod
    def from_yaml(cls, conditions_file):
        return cls.from_dict(load_config(conditions_file))

    def __len__(self):
        return len(self._records)

    def lookup(self, run, lumi):
        """Return (generation, record) valid for the given luminosity block."""
        idx = bisect.bisect_right(self._starts, (run, lumi))
        if idx == 0:
            raise KeyError(f'No beam spot conditions for run {run}, lumi {lumi}')
        return idx, self._records[idx - 1]
