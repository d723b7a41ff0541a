import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from generic_parser import EntryPointParameters, entrypoint

from betafunc_vtx.utils import load_vertices, _luminous_region_moments

######################################################
# Script arguments
######################################################
def get_params():
    params = EntryPointParameters()
    params.add_parameter(
        name="file",
        type=str,
        required=True,
        help="Path to the vertices file.",
    )
    params.add_parameter(
        name="output",
        type=str,
        help="Save the figure to this file instead of showing it.",
    )
    params.add_parameter(
        name="bins",
        type=int,
        default=100,
        help="Number of histogram bins.",
    )
    params.add_parameter(
        name="figsize",
        type=float,
        nargs=2,
        help="x-y size of the figure.",
    )
    params.add_parameter(
        name="fs_ax",
        type=float,
        default=12.,
        help="Font size of the axis labels.",
    )
    return params

######################################################
# Entrypoint
######################################################
@entrypoint(get_params(), strict=True)
def main(inp):
    vertices = load_vertices(inp.file)

    if inp.figsize is not None:
        figsize = (inp.figsize[0], inp.figsize[1])
    else:
        figsize = (12, 8)

    if inp.output is not None:
        matplotlib.use('Agg')

    fig = plot_vertices(vertices, figsize=figsize, bins=inp.bins, fontsize_ax=inp.fs_ax)

    if inp.output is not None:
        fig.savefig(inp.output, dpi=300)
    else:
        plt.show()
    return fig

######################################################
# Plotting function
######################################################
def plot_vertices(vertices, figsize=(12, 8), bins=100, fontsize_ax=12):
    moments = _luminous_region_moments(vertices)

    fig, axes = plt.subplots(2, 2, figsize=figsize)
    labels = {'x': r'$x~[\mathrm{mm}]$', 'y': r'$y~[\mathrm{mm}]$',
              'z': r'$z~[\mathrm{mm}]$', 't': r'$ct~[\mathrm{mm}]$'}

    for ax, coord in zip(axes.flat, ('x', 'y', 't')):
        ax.hist(vertices[coord], bins=bins, histtype='step', color='k')
        ax.set_xlabel(labels[coord], fontsize=fontsize_ax)
        ax.set_title(f"$\\sigma_{coord}$ = {moments[f'sigma_{coord}']:.3g} mm", fontsize=fontsize_ax)

    # Transverse size grows away from the waist
    ax = axes.flat[3]
    ax.hist2d(vertices['z'], vertices['x'], bins=bins, cmin=1)
    ax.set_xlabel(labels['z'], fontsize=fontsize_ax)
    ax.set_ylabel(labels['x'], fontsize=fontsize_ax)
    ax.set_ylim(np.percentile(vertices['x'], [0.5, 99.5]))

    fig.tight_layout()
    return fig

##############################################################
# Script mode
##############################################################
if __name__ == "__main__":
    main()
