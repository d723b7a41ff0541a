"""
Sample primary vertices with the beta-function vertex generator.
=============================================
Author(s): Giacomo Broggi, Andrey Abramov
Email:  giacomo.broggi@cern.ch
Date:   19-10-2026
"""
# ===========================================
# 🔹 Required modules
# ===========================================
import os
import sys
import time
import numpy as np
import pandas as pd

from pathlib import Path
from tqdm import tqdm
from warnings import warn
from betafunc_vtx import *

# ===========================================================================
# 🔹 Event loop
# ===========================================================================
def _sample_lumi_block(generator, rng, num_events, vectorized):
    if vectorized:
        return generator.generate_vertices(rng, num_events)

    tqdm_ncols = 100
    tqdm_miniters = 10
    vertices = [generator.vertex_shift(rng)
                for _ in tqdm(range(num_events), ncols=tqdm_ncols, miniters=tqdm_miniters,
                              disable=not config.verbose)]
    return pd.DataFrame(vertices, columns=list(VertexSample._fields))

# ===========================================================================
# 🔹 Run
# ===========================================================================
def run(config_file_path, config_dict):
    # ===========================================
    # 🔹 Validate the configuration
    # ===========================================
    config_dict = VERTEX_SMEARING_CONF_SCHEMA.validate(config_dict)

    # ===========================================
    # 🔹 Load variables from config_dict
    # ===========================================
    vertex_dict = config_dict['vertex']
    seed = config_dict['run']['seed']
    run_number = config_dict['run']['run_number']
    first_lumi = config_dict['run']['first_lumi']
    lumi_blocks = config_dict['run']['lumi_blocks']
    events_per_lumi = config_dict['run']['events_per_lumi']
    vectorized = config_dict['run']['vectorized']
    output_file = Path(config_dict['run']['outputfile'])

    # ===========================================
    # 🔹 Load beam spot conditions
    # ===========================================
    conditions = None
    if vertex_dict['readDB']:
        if 'conditions' not in config_dict:
            raise ConfigurationError('readDB is set but no conditions file is given in the configuration')
        # Relative to the config file, like the output file
        conditions_file = config_file_path.parent / config_dict['conditions']['file']
        if not conditions_file.exists():
            raise ConfigurationError(f'Beam spot conditions file not found: {conditions_file}')
        conditions = BeamSpotConditions.from_yaml(conditions_file)
        print(f"Loaded {len(conditions)} beam spot IOVs from {conditions_file}")
    elif 'conditions' in config_dict:
        warn('A conditions file is given but readDB is False, the static beam spot is used.')

    generator = BetafuncVtxGenerator(vertex_dict, conditions=conditions)

    # ===========================================
    # 🔹 Explicitly initialize the random number generator
    # ===========================================
    rng = np.random.default_rng(seed)

    # ===========================================
    # 🔹 Sample!
    # ===========================================
    t0 = time.time()

    lumi_dfs = []
    for lumi in range(first_lumi, first_lumi + lumi_blocks):
        print(f'\nStart run {run_number}, lumi {lumi}')
        generator.begin_luminosity_block(run_number, lumi)

        df = _sample_lumi_block(generator, rng, events_per_lumi, vectorized)
        df.insert(0, 'event', np.arange(events_per_lumi))
        df.insert(0, 'lumi', lumi)
        df.insert(0, 'run', run_number)
        lumi_dfs.append(df)

    vertices = pd.concat(lumi_dfs, ignore_index=True)

    print(f'\nSampling {len(vertices)} vertices done in: {time.time()-t0} s\n')
    print(f'Inverse Lorentz boost:\n{generator.inv_lorentz_boost}\n')
    for key, value in _luminous_region_moments(vertices).items():
        print(f'{key}: {value:.6g} mm')

    # ===========================================
    # 🔹 Setup output directory
    # ===========================================
    output_file = config_file_path.parent / output_file
    output_dir = output_file.parent
    if not os.path.exists(output_dir):
        # If the output directory does not exist, create it
        os.makedirs(output_dir)

    # ===========================================
    # 🔹 Save vertices
    # ===========================================
    return save_vertices(output_file, vertices)

def show_boost(config_dict):
    config_dict = VERTEX_SMEARING_CONF_SCHEMA.validate(config_dict)
    if config_dict['vertex']['readDB']:
        raise ValueError('The boost of a readDB configuration depends on the conditions, use --run instead')
    generator = BetafuncVtxGenerator(config_dict['vertex'])
    print(f'Inverse Lorentz boost:\n{generator.inv_lorentz_boost}')
    return generator.inv_lorentz_boost

# ===========================================================================
# 🔹 Entry point
# ===========================================================================
def main():
    if len(sys.argv) != 3:
        raise ValueError(
            'The script only takes two inputs: the mode and the config file')
    if sys.argv[1] == '--run':
        t0 = time.time()
        config_file = sys.argv[2]
        config_file_path = Path(config_file).resolve()
        config_dict = load_config(config_file)
        run(config_file_path, config_dict)
        print(f'Done! Time taken: {time.time()-t0} s')
    elif sys.argv[1] == '--boost':
        config_dict = load_config(sys.argv[2])
        show_boost(config_dict)
    else:
        raise ValueError('The mode must be one of --run, --boost')

# ===============================================================================
# 🔹 Script mode
# ===============================================================================
if __name__ == '__main__':
    main()
