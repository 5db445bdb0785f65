"""Tests for pdgclib.tessellation (Tessellator and MeshBuffers)."""

import warnings

import numpy as np
import numpy.testing as npt
import pytest

from pdgclib.surfaces import Ellipsoid, EllipticParaboloid
from pdgclib.tessellation import MeshBuffers, RaycastHit, Tessellator


@pytest.fixture
def sphere():
    return Ellipsoid(1.0, 1.0, 1.0)


@pytest.fixture
def sphere_mesh(sphere):
    return Tessellator(sphere, 64, 32, 0.0, 2 * np.pi, 0.0, np.pi).tessellate()


# ---------------------------------------------------------------------------
# Buffers
# ---------------------------------------------------------------------------

class TestTessellate:
    @pytest.mark.parametrize("u_res,v_res", [(1, 1), (3, 5), (8, 2)])
    def test_counts(self, sphere, u_res, v_res):
        mesh = Tessellator(sphere, u_res, v_res).tessellate()
        assert mesh.n_vertices == (u_res + 1) * (v_res + 1)
        assert mesh.n_triangles == 2 * u_res * v_res
        assert mesh.vertices.shape == (mesh.n_vertices, 3)
        assert mesh.uvs.shape == (mesh.n_vertices, 2)
        assert mesh.triangles.shape == (3 * mesh.n_triangles,)
        assert mesh.triangles.min() >= 0
        assert mesh.triangles.max() < mesh.n_vertices

    def test_vertices_are_exact_surface_points(self):
        s = Ellipsoid(2.0, 1.5, 1.0)
        t = Tessellator(s, 4, 3, 0.1, 2.0, 0.5, 2.5)
        mesh = t.tessellate()
        du = (2.0 - 0.1) / 4
        dv = (2.5 - 0.5) / 3
        for i in range(5):
            for j in range(4):
                expected = s.surface_point(0.1 + du * i, 0.5 + dv * j)
                npt.assert_array_equal(mesh.vertices[4 * i + j], expected)

    def test_uvs(self, sphere):
        mesh = Tessellator(sphere, 2, 4).tessellate()
        npt.assert_allclose(mesh.uvs[0], [0.0, 1.0])
        npt.assert_allclose(mesh.uvs[4], [0.0, 0.0])
        npt.assert_allclose(mesh.uvs[5], [0.5, 1.0])
        npt.assert_allclose(mesh.uvs[-1], [1.0, 0.0])

    def test_winding(self, sphere):
        t = Tessellator(sphere, 2, 2)
        mesh = t.tessellate()
        ll, ul, lr, ur = (t.triangle_index(c, 1, 0) for c in range(4))
        # cell (1, 0) is the third cell
        npt.assert_array_equal(mesh.faces[4], [ll, lr, ul])
        npt.assert_array_equal(mesh.faces[5], [ur, ul, lr])

    def test_reverse_orientation(self, sphere):
        forward = Tessellator(sphere, 3, 2).tessellate()
        reverse = Tessellator(sphere, 3, 2,
                              reverse_orientation=True).tessellate()
        npt.assert_array_equal(reverse.faces[:, 0], forward.faces[:, 0])
        npt.assert_array_equal(reverse.faces[:, 1], forward.faces[:, 2])
        npt.assert_array_equal(reverse.faces[:, 2], forward.faces[:, 1])

    @pytest.mark.parametrize("res", [0, -3])
    def test_nonpositive_resolution_clamped(self, sphere, res):
        t = Tessellator(sphere, res, res)
        assert t.u_res == 1
        assert t.v_res == 1
        mesh = t.tessellate()
        assert mesh.n_vertices == 4
        assert mesh.n_triangles == 2

    def test_resolution_setter(self, sphere):
        t = Tessellator(sphere, 4, 4)
        t.u_res = 0
        t.v_res = 7
        assert (t.u_res, t.v_res) == (1, 7)

    def test_pole_vertices_kept(self, sphere):
        mesh = Tessellator(sphere, 6, 3, 0.0, 2 * np.pi, 0.0, np.pi).tessellate()
        assert mesh.n_vertices == 7 * 4
        north = mesh.vertices[0::4]
        npt.assert_allclose(north, np.tile([0.0, 1.0, 0.0], (7, 1)), atol=1e-15)

    def test_rebuilds_fresh_buffers(self, sphere):
        t = Tessellator(sphere, 2, 2)
        first = t.tessellate()
        t.set_parameters(3, 1, 0.0, 1.0, 0.5, 1.0)
        second = t.tessellate()
        assert first.n_vertices == 9
        assert second.n_vertices == 8
        assert second.n_triangles == 6

    def test_empty_domain_warns(self, sphere):
        t = Tessellator(sphere, 2, 2, 0.0, 0.0, 0.5, 1.0)
        with pytest.warns(UserWarning, match="empty"):
            mesh = t.tessellate()
        assert mesh.n_vertices == 9

    def test_nonempty_domain_does_not_warn(self, sphere):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Tessellator(sphere, 2, 2).tessellate()


class TestTriangleIndex:
    def test_corners(self, sphere):
        t = Tessellator(sphere, 3, 4)
        assert t.triangle_index(0, 2, 1) == 5 * 2 + 1
        assert t.triangle_index(1, 2, 1) == 5 * 2 + 2
        assert t.triangle_index(2, 2, 1) == 5 * 3 + 1
        assert t.triangle_index(3, 2, 1) == 5 * 3 + 2

    @pytest.mark.parametrize("corner", [-1, 4])
    def test_invalid_corner(self, sphere, corner):
        t = Tessellator(sphere, 3, 4)
        with pytest.raises(ValueError, match="Corner"):
            t.triangle_index(corner, 0, 0)


# ---------------------------------------------------------------------------
# Mesh helpers
# ---------------------------------------------------------------------------

class TestVertexNormals:
    @pytest.mark.parametrize("reverse,sign", [(False, 1.0), (True, -1.0)])
    def test_sphere_normals_follow_winding(self, sphere, reverse, sign):
        mesh = Tessellator(sphere, 32, 16, 0.0, 2 * np.pi, 0.2, np.pi - 0.2,
                           reverse_orientation=reverse).tessellate()
        N = mesh.vertex_normals()
        npt.assert_allclose(np.linalg.norm(N, axis=1), 1.0, rtol=1e-12)
        radial = mesh.vertices / np.linalg.norm(mesh.vertices, axis=1)[:, None]
        assert np.all(sign * np.einsum('ij,ij->i', N, radial) > 0.9)


class TestRaycast:
    @pytest.fixture
    def direction(self, sphere):
        d = sphere.mapping((0.37, 1.23))
        return d / np.linalg.norm(d)

    def test_hit_from_inside(self, sphere_mesh, direction):
        hit = sphere_mesh.raycast((0.0, 0.0, 0.0), direction)
        assert isinstance(hit, RaycastHit)
        npt.assert_allclose(hit.distance, 1.0, atol=5e-3)
        npt.assert_allclose(hit.point, hit.distance * direction, atol=1e-12)
        assert 0 <= hit.triangle < sphere_mesh.n_triangles

    def test_closest_hit_from_outside(self, sphere_mesh, direction):
        hit = sphere_mesh.raycast(3 * direction, -direction)
        npt.assert_allclose(hit.distance, 2.0, atol=5e-3)
        npt.assert_allclose(hit.point, direction, atol=5e-3)

    def test_miss(self, sphere_mesh, direction):
        assert sphere_mesh.raycast(3 * direction, direction) is None

    def test_max_distance(self, sphere_mesh, direction):
        assert sphere_mesh.raycast(3 * direction, -direction, 1.5) is None

    def test_direction_need_not_be_unit(self, sphere_mesh, direction):
        hit = sphere_mesh.raycast(3 * direction, -10 * direction)
        npt.assert_allclose(hit.distance, 2.0, atol=5e-3)

    def test_invalid_arguments(self, sphere_mesh, direction):
        with pytest.raises(ValueError, match="max_distance"):
            sphere_mesh.raycast((0, 0, 0), direction, 0.0)
        with pytest.raises(ValueError, match="non-zero"):
            sphere_mesh.raycast((0, 0, 0), (0, 0, 0))

    def test_single_triangle(self):
        mesh = MeshBuffers([[0, 0, 0], [1, 0, 0], [0, 0, 1]],
                           np.zeros((3, 2)), [0, 1, 2])
        hit = mesh.raycast((0.25, 2.0, 0.25), (0, -1, 0))
        npt.assert_allclose(hit.point, [0.25, 0.0, 0.25], atol=1e-15)
        npt.assert_allclose(hit.distance, 2.0)
        assert hit.triangle == 0
        assert mesh.raycast((0.75, 2.0, 0.75), (0, -1, 0)) is None


class TestToComplex:
    def test_export_connectivity(self):
        pytest.importorskip("hyperct")
        s = EllipticParaboloid(1.0, 1.0)
        mesh = Tessellator(s, 2, 2, 0.5, 1.5, 0.0, 1.0).tessellate()
        HC = mesh.to_complex()
        verts = list(HC.V)
        assert len(verts) == 9

        by_coords = {tuple(v.x): v for v in verts}
        corner = by_coords[tuple(mesh.vertices[0])]
        # lower left corner: lr and ul neighbours, the cell diagonal is lr-ul
        assert len(list(corner.nn)) == 2
        centre = by_coords[tuple(mesh.vertices[4])]
        assert len(list(centre.nn)) == 6

    def test_pole_vertices_merge(self, sphere):
        pytest.importorskip("hyperct")
        mesh = Tessellator(sphere, 4, 2, 0.0, 2 * np.pi, 0.0, np.pi).tessellate()
        HC = mesh.to_complex()
        assert len(list(HC.V)) < mesh.n_vertices
