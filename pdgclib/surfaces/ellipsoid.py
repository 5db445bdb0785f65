"""
The ellipsoid x^2/A^2 + y^2/B^2 + z^2/C^2 = 1 as a regular surface.

    X(u, v) = (A cos u sin v, B sin u sin v, C cos v)

returned y-up as (x, z, y). See http://mathworld.wolfram.com/Ellipsoid.html
"""

import numpy as np

from pdgclib._vectors import as_local
from pdgclib.surfaces._base import RegularSurface


class Ellipsoid(RegularSurface):
    """Ellipsoid with semi-axes A (x), B (depth) and C (up).

    Parameters
    ----------
    A, B, C : float
        Semi-axis lengths. ``A == B == C == r`` is the sphere of radius r.
    singular_delta : float
        Angular radius of the polar caps reported as singular.
    """

    name = "ellipsoid"

    def __init__(self, A: float = 1.0, B: float = 1.0, C: float = 1.0,
                 singular_delta: float = 1e-5):
        super().__init__(A, B, C)
        self.singular_delta = singular_delta

    def surface_point(self, u, v):
        u, v = np.broadcast_arrays(np.asarray(u, dtype=np.float64),
                                   np.asarray(v, dtype=np.float64))
        x = self.A * np.cos(u) * np.sin(v)
        y = self.B * np.sin(u) * np.sin(v)
        z = self.C * np.cos(v)
        return np.stack([x, z, y], axis=-1)

    def jacobian(self, local_point):
        u, v = as_local(local_point)
        su, cu, sv, cv = np.sin(u), np.cos(u), np.sin(v), np.cos(v)
        A, B, C = self.A, self.B, self.C
        return np.array([
            [-A * su * sv, A * cu * cv],
            [0.0, -C * sv],
            [B * cu * sv, B * su * cv],
        ])

    def _form2_helper(self, u, v):
        A, B, C = self.A, self.B, self.C
        term1 = A * A * B * B * np.cos(v) ** 2
        term2 = A * A * C * C * np.sin(u) ** 2 * np.sin(v) ** 2
        term3 = B * B * C * C * np.cos(u) ** 2 * np.sin(v) ** 2
        with np.errstate(divide='ignore'):
            return (term1 + term2 + term3) ** -0.5

    def form2e(self, local_point):
        u, v = as_local(local_point)
        return float(self.A * self.B * self.C * np.sin(v) ** 2
                     * self._form2_helper(u, v))

    def form2f(self, local_point):
        return 0.0

    def form2g(self, local_point):
        u, v = as_local(local_point)
        return float(self.A * self.B * self.C * self._form2_helper(u, v))

    def in_singular_region(self, local_point):
        """The north and south poles, v = 0 and v = pi (mod pi).

        The meridian lines of singular points wrap around harmlessly; only the
        poles, where the local coordinates can fall through and reverse sign,
        need guarding. They are caps of angular radius ``singular_delta``.
        """
        v = np.mod(as_local(local_point)[1], np.pi)
        delta = self.singular_delta
        return bool(v < delta or v > np.pi - delta)
