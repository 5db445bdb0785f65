"""Visualization utilities for pdgclib.

Submodules
----------
matplotlib_3d : meshes, frames, paths and curvature compasses (matplotlib)
"""

from pdgclib.visualization.matplotlib_3d import (
    plot_mesh_3d,
    plot_frame_3d,
    plot_path_3d,
    plot_compass_3d,
    plot_curvature_compass,
)

__all__ = [
    'plot_mesh_3d',
    'plot_frame_3d',
    'plot_path_3d',
    'plot_compass_3d',
    'plot_curvature_compass',
]
