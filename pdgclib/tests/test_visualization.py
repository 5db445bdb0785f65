"""Tests for pdgclib.visualization package."""

import numpy as np
import pytest

# Use Agg backend to avoid display issues in CI/headless
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from pdgclib._frame import SurfaceFrame
from pdgclib.data import PathHistory
from pdgclib.operators import CurvatureSampler
from pdgclib.probes import CurvatureCompass, SurfaceWalker
from pdgclib.surfaces import Ellipsoid
from pdgclib.tessellation import Tessellator
from pdgclib.visualization import (
    plot_compass_3d,
    plot_curvature_compass,
    plot_frame_3d,
    plot_mesh_3d,
    plot_path_3d,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def ellipsoid():
    return Ellipsoid(2.0, 1.5, 1.0)


@pytest.fixture
def mesh(ellipsoid):
    return Tessellator(ellipsoid, 16, 8, 0.0, 2 * np.pi, 0.1,
                       np.pi - 0.1).tessellate()


@pytest.fixture(autouse=True)
def close_figs():
    """Close all figures after each test."""
    yield
    plt.close('all')


# ---------------------------------------------------------------------------
# 3D plots
# ---------------------------------------------------------------------------

class TestPlot3D:
    def test_mesh(self, mesh):
        fig, ax = plot_mesh_3d(mesh, title="ellipsoid")
        assert fig is not None
        assert ax.get_title() == "ellipsoid"

    def test_mesh_on_existing_axes(self, mesh):
        fig = plt.figure()
        ax = fig.add_subplot(111, projection='3d')
        fig2, ax2 = plot_mesh_3d(mesh, ax=ax)
        assert ax2 is ax
        assert fig2 is fig

    def test_frame(self, ellipsoid):
        frame = SurfaceFrame(ellipsoid, (0.3, 1.0))
        fig, ax = plot_frame_3d(frame, scale=0.5)
        assert fig is not None

    def test_path(self, ellipsoid):
        history = PathHistory()
        walker = SurfaceWalker(ellipsoid, (0.0, 1.0), history=history)
        for _ in range(10):
            walker.step(0.2, 1.0, dt=0.02)
        fig, ax = plot_path_3d(history)
        assert len(ax.lines) == 1

    def test_compass(self, ellipsoid, mesh):
        player = SurfaceFrame(ellipsoid, (0.3, 1.0))
        compass = CurvatureCompass(ellipsoid, player)
        compass.probe_point(ellipsoid.mapping((0.35, 1.05)))
        fig, ax = plot_compass_3d(compass)
        assert len(ax.lines) == compass.params.n_directions + 2


class TestCurvaturePolar:
    def test_polar(self, ellipsoid):
        frame = SurfaceFrame(ellipsoid, (0.3, 1.0))
        sampler = CurvatureSampler(ellipsoid, frame, 36)
        sampler.compute_curvatures()
        fig, ax = plot_curvature_compass(sampler, title="k_n")
        assert ax.name == 'polar'
        assert ax.get_title() == "k_n"
