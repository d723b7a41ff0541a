"""
Common helper functions for betafunc_vtx.

This module provides utility functions for file handling and vertex distribution properties.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""
# ===========================================
# 🔹 Required modules
# ===========================================
import yaml
import numpy as np
import pandas as pd

from pathlib import Path

# ===========================================
# 🔹 File Handling Functions
# ===========================================
def load_config(config_file):
    """Load a YAML configuration file."""
    with open(config_file, 'r') as stream:
        config_dict = yaml.safe_load(stream)
    return config_dict

def dump_dict_to_yaml(dict_obj, file_path):
    with open(file_path, 'w') as yaml_file:
        yaml.dump(dict_obj, yaml_file,
                  default_flow_style=False, sort_keys=False)

def save_vertices(fpath, vertices):
    """Save sampled vertices to a parquet file."""
    fpath = Path(fpath)
    if fpath.suffix != '.parquet':
        fpath = fpath.with_suffix('.parquet')
    vertices.to_parquet(fpath, index=False)
    return fpath

def load_vertices(fpath):
    """Load sampled vertices from a parquet file."""
    return pd.read_parquet(fpath)

# ===========================================
# 🔹 Luminous region properties
# ===========================================
def _luminous_region_moments(vertices):
    """Mean and rms of the sampled vertex coordinates."""
    moments = {}
    for coord in ('x', 'y', 'z', 't'):
        values = np.asarray(vertices[coord])
        moments[f'mean_{coord}'] = np.mean(values)
        moments[f'sigma_{coord}'] = np.std(values)
    return moments
