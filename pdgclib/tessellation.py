"""
Tessellation of parametric surfaces into triangle mesh buffers.

The rectangle [u_min, u_max] x [v_min, v_max] of local coordinates is divided
into u_res x v_res cells. Grid vertex (i, j) is the surface point at

    (u_min + i * du, v_min + j * dv),  du = (u_max - u_min) / u_res,
                                       dv = (v_max - v_min) / v_res

stored u-major (index (v_res + 1) * i + j). Each cell contributes two
triangles. Vertices where the chart is singular (e.g. ellipsoid poles) are
kept as coincident, distinct vertices; nothing is merged.

``MeshBuffers`` also carries the helpers a host mesh collaborator would
provide: per-vertex normals, ray casting against the triangles, and export
to a ``hyperct.Complex``.
"""

import logging
import warnings
from typing import NamedTuple, Optional

import numpy as np

from pdgclib._vectors import as_global, normalized

logger = logging.getLogger(__name__)


class RaycastHit(NamedTuple):
    point: np.ndarray
    distance: float
    triangle: int


class MeshBuffers:
    """Vertex, texture coordinate and triangle index buffers.

    Attributes
    ----------
    vertices : np.ndarray, shape (n_vertices, 3)
    uvs : np.ndarray, shape (n_vertices, 2)
    triangles : np.ndarray of int, shape (3 * n_triangles,)
    """

    def __init__(self, vertices, uvs, triangles):
        self.vertices = np.asarray(vertices, dtype=np.float64)
        self.uvs = np.asarray(uvs, dtype=np.float64)
        self.triangles = np.asarray(triangles, dtype=np.int64)

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_triangles(self) -> int:
        return len(self.triangles) // 3

    @property
    def faces(self) -> np.ndarray:
        """Triangle indices as an (n_triangles, 3) array."""
        return self.triangles.reshape(-1, 3)

    def vertex_normals(self) -> np.ndarray:
        """Area weighted unit vertex normals following the triangle winding.

        Vertices whose adjacent triangles are all degenerate get a zero normal.
        """
        faces = self.faces
        v0 = self.vertices[faces[:, 0]]
        v1 = self.vertices[faces[:, 1]]
        v2 = self.vertices[faces[:, 2]]
        face_normals = np.cross(v1 - v0, v2 - v0)

        normals = np.zeros_like(self.vertices)
        for k in range(3):
            np.add.at(normals, faces[:, k], face_normals)
        return normalized(normals, axis=1)

    def raycast(self, origin, direction,
                max_distance: float = np.inf) -> Optional[RaycastHit]:
        """Closest intersection of a ray with the (two sided) triangles.

        Uses the Moller-Trumbore test on all triangles at once. Returns
        ``None`` when nothing is hit within ``max_distance``.
        """
        if max_distance <= 0:
            raise ValueError("max_distance must be positive.")
        origin = as_global(origin)
        direction = normalized(as_global(direction))
        if not np.any(direction):
            raise ValueError("Ray direction must be non-zero.")

        eps = 1e-12
        faces = self.faces
        v0 = self.vertices[faces[:, 0]]
        e1 = self.vertices[faces[:, 1]] - v0
        e2 = self.vertices[faces[:, 2]] - v0

        p = np.cross(direction, e2)
        det = np.einsum('ij,ij->i', e1, p)
        valid = np.abs(det) > eps
        inv_det = np.zeros_like(det)
        inv_det[valid] = 1.0 / det[valid]

        s = origin - v0
        bu = np.einsum('ij,ij->i', s, p) * inv_det
        q = np.cross(s, e1)
        bv = (q @ direction) * inv_det
        t = np.einsum('ij,ij->i', e2, q) * inv_det

        hit = (valid & (bu >= 0.0) & (bv >= 0.0) & (bu + bv <= 1.0)
               & (t > eps) & (t <= max_distance))
        if not np.any(hit):
            return None

        candidates = np.flatnonzero(hit)
        k = candidates[np.argmin(t[candidates])]
        return RaycastHit(origin + t[k] * direction, float(t[k]), int(k))

    def to_complex(self):
        """Export to a ``hyperct.Complex`` connected along triangle edges.

        The complex keys vertices by coordinates, so coincident vertices (for
        example at a pole) become one vertex of the complex.
        """
        # Lazy import so hyperct is only needed for the export
        from hyperct import Complex

        HC = Complex(3)
        V = [HC.V[tuple(x)] for x in self.vertices]
        for a, b, c in self.faces:
            for i, j in ((a, b), (b, c), (c, a)):
                if V[i] is not V[j]:
                    V[i].connect(V[j])
        return HC


class Tessellator:
    """Triangulates a surface over a rectangle of local coordinates.

    Parameters
    ----------
    surface : RegularSurface
        Provides ``surface_point(u, v)``.
    u_res, v_res : int
        Number of subdivisions along u and v; values <= 0 become 1.
    u_min, u_max, v_min, v_max : float
        The local coordinate rectangle.
    reverse_orientation : bool
        Flip the winding of every triangle (used when mirroring a chart).
    """

    def __init__(self, surface, u_res=1, v_res=1, u_min=0.0, u_max=1.0,
                 v_min=0.0, v_max=1.0, reverse_orientation=False):
        self.surface = surface
        self.set_parameters(u_res, v_res, u_min, u_max, v_min, v_max,
                            reverse_orientation)

    @property
    def u_res(self) -> int:
        return self._u_res

    @u_res.setter
    def u_res(self, value):
        self._u_res = int(value) if value > 0 else 1

    @property
    def v_res(self) -> int:
        return self._v_res

    @v_res.setter
    def v_res(self, value):
        self._v_res = int(value) if value > 0 else 1

    def set_parameters(self, u_res, v_res, u_min, u_max, v_min, v_max,
                       reverse_orientation=False) -> None:
        self.u_res = u_res
        self.v_res = v_res
        self.u_min = float(u_min)
        self.u_max = float(u_max)
        self.v_min = float(v_min)
        self.v_max = float(v_max)
        self.reverse_orientation = bool(reverse_orientation)

    def triangle_index(self, corner: int, i: int, j: int) -> int:
        """Vertex index of a corner of cell (i, j).

        0: lower left, 1: upper left, 2: lower right, 3: upper right.
        """
        stride = self._v_res + 1
        if corner == 0:
            return stride * i + j
        elif corner == 1:
            return stride * i + (j + 1)
        elif corner == 2:
            return stride * (i + 1) + j
        elif corner == 3:
            return stride * (i + 1) + (j + 1)
        raise ValueError("Corner index must be between 0 and 3 inclusive.")

    def tessellate(self) -> MeshBuffers:
        """Build fresh mesh buffers for the current parameters.

        Produces (u_res + 1)(v_res + 1) vertices and 2 u_res v_res triangles.
        """
        u_res, v_res = self._u_res, self._v_res
        if self.u_min == self.u_max or self.v_min == self.v_max:
            warnings.warn("Tessellation domain is empty along one axis; all "
                          "triangles will be degenerate.")

        du = (self.u_max - self.u_min) / u_res
        dv = (self.v_max - self.v_min) / v_res
        # one surface_point call per vertex keeps every vertex bit-identical
        # to a direct evaluation at its (u, v)
        vertices = np.empty(((u_res + 1) * (v_res + 1), 3))
        uvs = np.empty(((u_res + 1) * (v_res + 1), 2))
        k = 0
        for i in range(u_res + 1):
            for j in range(v_res + 1):
                u = self.u_min + du * i
                v = self.v_min + dv * j
                vertices[k] = self.surface.surface_point(u, v)
                uvs[k] = (i / u_res, (v_res - j) / v_res)
                k += 1

        # corner indices of every cell, cells ordered u-major like vertices
        ci, cj = np.meshgrid(np.arange(u_res), np.arange(v_res), indexing='ij')
        ci, cj = ci.ravel(), cj.ravel()
        stride = v_res + 1
        ll = stride * ci + cj
        ul = stride * ci + (cj + 1)
        lr = stride * (ci + 1) + cj
        ur = stride * (ci + 1) + (cj + 1)
        if self.reverse_orientation:
            cells = [ll, ul, lr, ur, lr, ul]
        else:
            cells = [ll, lr, ul, ur, ul, lr]
        triangles = np.stack(cells, axis=-1).ravel()

        logger.debug("Tessellated %s: %d vertices, %d triangles",
                     self.surface, len(vertices), len(triangles) // 3)
        return MeshBuffers(vertices, uvs, triangles)
