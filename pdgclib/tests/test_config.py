"""Tests for pdgclib.config parameter dataclasses."""

import numpy as np
import pytest

from pdgclib.config import (
    CompassParams,
    PursuitParams,
    SurfaceParams,
    TessellationParams,
    WalkerParams,
)
from pdgclib.surfaces import Ellipsoid, OneSheetedHyperboloid
from pdgclib.tessellation import Tessellator


class TestSurfaceParams:
    def test_build(self):
        s = SurfaceParams("one-sheeted-hyperboloid", A=2.0, C=0.5).build()
        assert isinstance(s, OneSheetedHyperboloid)
        assert s.parameters == (2.0, 1.0, 0.5)

    def test_default_is_unit_ellipsoid(self):
        s = SurfaceParams().build()
        assert isinstance(s, Ellipsoid)
        assert s.parameters == (1.0, 1.0, 1.0)

    def test_apply(self):
        s = Ellipsoid()
        SurfaceParams(A=3.0, B=2.0, C=1.0).apply(s)
        assert s.parameters == (3.0, 2.0, 1.0)

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="Unknown surface"):
            SurfaceParams("cone").build()


class TestTessellationParams:
    def test_defaults_cover_ellipsoid_chart(self):
        p = TessellationParams()
        assert (p.u_min, p.u_max) == (0.0, 2 * np.pi)
        assert (p.v_min, p.v_max) == (0.0, np.pi)

    def test_build(self):
        s = Ellipsoid()
        t = TessellationParams(u_res=4, v_res=0, reverse_orientation=True).build(s)
        assert isinstance(t, Tessellator)
        assert t.surface is s
        assert (t.u_res, t.v_res) == (4, 1)
        assert t.reverse_orientation
        assert t.tessellate().n_triangles == 8


class TestProbeParams:
    def test_defaults(self):
        assert PursuitParams().max_iterations == 64
        w = WalkerParams()
        assert w.speed == 4.0
        assert w.use_player_coordinates
        c = CompassParams()
        assert c.n_directions == 32
        assert isinstance(c.pursuit, PursuitParams)

    def test_compass_params_do_not_share_pursuit(self):
        a, b = CompassParams(), CompassParams()
        a.pursuit.max_iterations = 3
        assert b.pursuit.max_iterations == 64
