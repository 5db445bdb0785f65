"""
Tracking a point on a parameterized regular surface.

A ``SurfaceFrame`` keeps a point in local coordinates and the image of that
point under the surface mapping: the global point, the pushforwards of the
canonical local tangents (1, 0) and (0, 1), and their cross product, the
(unnormalized) global normal. The global quantities are recomputed every time
the local point changes and cannot be set independently.

The frame also carries a global forward vector. After each move the previous
forward vector is projected onto the new tangent plane, a first order
approximation of parallel transport along the step. It is accurate for small
steps only; no geodesic transport is attempted.
"""

import numpy as np

from pdgclib._vectors import as_local, project_on_plane

LOCAL_U_TANGENT = np.array([1.0, 0.0])
LOCAL_V_TANGENT = np.array([0.0, 1.0])


class SurfaceFrame:
    """Local and global coordinates of a point on ``surface``.

    Parameters
    ----------
    surface : RegularSurface
        Provides mapping, pushforward and pullback.
    local_point : array_like, shape (2,)
        Initial local coordinate (default origin).
    """

    def __init__(self, surface, local_point=(0.0, 0.0)):
        self._surface = surface
        self._local_point = as_local(local_point).copy()
        self._global_forward = surface.pushforward(self._local_point,
                                                   LOCAL_V_TANGENT)
        self.recompute()

    @property
    def surface(self):
        return self._surface

    @property
    def local_point(self) -> np.ndarray:
        return self._local_point.copy()

    @property
    def local_u_tangent(self) -> np.ndarray:
        return LOCAL_U_TANGENT.copy()

    @property
    def local_v_tangent(self) -> np.ndarray:
        return LOCAL_V_TANGENT.copy()

    @property
    def global_point(self) -> np.ndarray:
        return self._global_point.copy()

    @property
    def global_u_tangent(self) -> np.ndarray:
        return self._global_u_tangent.copy()

    @property
    def global_v_tangent(self) -> np.ndarray:
        return self._global_v_tangent.copy()

    @property
    def global_normal(self) -> np.ndarray:
        return self._global_normal.copy()

    @property
    def global_forward(self) -> np.ndarray:
        return self._global_forward.copy()

    def recompute(self) -> None:
        """Re-evaluate the global coordinates and transport the forward vector."""
        s = self._surface
        p = self._local_point
        self._global_point = np.asarray(s.mapping(p), dtype=np.float64)
        self._global_u_tangent = s.pushforward(p, LOCAL_U_TANGENT)
        self._global_v_tangent = s.pushforward(p, LOCAL_V_TANGENT)
        self._global_normal = np.cross(self._global_u_tangent,
                                       self._global_v_tangent)
        self._global_forward = project_on_plane(self._global_forward,
                                                self._global_normal)

    def move_to(self, new_local_point) -> None:
        """Move to ``new_local_point`` and recompute.

        No singular region check is made here; callers consult
        ``surface.in_singular_region`` first.
        """
        self._local_point = as_local(new_local_point).copy()
        self.recompute()

    def copy(self) -> "SurfaceFrame":
        """A new, independent frame at the same local point.

        The forward vector of the copy starts afresh from the v tangent.
        """
        return SurfaceFrame(self._surface, self._local_point)

    def describe(self) -> str:
        """Multi-line summary of the local and global coordinate systems."""
        def unit(a):
            n = np.linalg.norm(a)
            return a / n if n > 0 else a

        s = self._surface
        p = self._local_point
        lines = [
            f"Local Point: {p}",
            f"Local U Tangent: {LOCAL_U_TANGENT}",
            f"Local V Tangent: {LOCAL_V_TANGENT}",
            "",
            f"Global Point: {self._global_point}",
            f"Global U Tangent: {unit(self._global_u_tangent)}",
            f"Global V Tangent: {unit(self._global_v_tangent)}",
            f"Global Normal: {unit(self._global_normal)}",
            f"Global Forward: {unit(self._global_forward)}",
            "",
            "Global U Tangent Pullback: "
            f"{unit(s.pullback(p, self._global_u_tangent))}",
            "Global V Tangent Pullback: "
            f"{unit(s.pullback(p, self._global_v_tangent))}",
        ]
        return "\n".join(lines)

    def __repr__(self):
        return (f"SurfaceFrame({self._surface!r}, "
                f"local_point={self._local_point.tolist()})")
