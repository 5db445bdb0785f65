"""
The elliptic paraboloid z = x^2/A^2 + y^2/B^2 as a regular surface.

    X(u, v) = (A sqrt(u) cos v, B sqrt(u) sin v, u),   u > 0

returned y-up as (x, u, y). The height u is the up axis.
"""

import numpy as np

from pdgclib._vectors import as_local
from pdgclib.surfaces._base import RegularSurface


class EllipticParaboloid(RegularSurface):
    """Elliptic paraboloid with cross-section constants A and B.

    C is kept for a uniform interface and does not enter the mapping.
    """

    name = "elliptic-paraboloid"

    def __init__(self, A: float = 1.0, B: float = 1.0, C: float = 1.0,
                 singular_u: float = 1e-3):
        super().__init__(A, B, C)
        self.singular_u = singular_u

    def surface_point(self, u, v):
        u, v = np.broadcast_arrays(np.asarray(u, dtype=np.float64),
                                   np.asarray(v, dtype=np.float64))
        with np.errstate(invalid='ignore'):
            r = np.sqrt(u)
        x = self.A * r * np.cos(v)
        y = self.B * r * np.sin(v)
        return np.stack([x, u, y], axis=-1)

    def jacobian(self, local_point):
        u, v = as_local(local_point)
        A, B = self.A, self.B
        sv, cv = np.sin(v), np.cos(v)
        with np.errstate(divide='ignore', invalid='ignore'):
            r = np.sqrt(u)
            return np.array([
                [A * cv / (2 * r), -A * r * sv],
                [1.0, 0.0],
                [B * sv / (2 * r), B * r * cv],
            ])

    def _form2_helper(self, u, v):
        A, B = self.A, self.B
        with np.errstate(invalid='ignore'):
            return np.sqrt(A * A * B * B + 2 * u * (A * A + B * B)
                           + 2 * (B * B - A * A) * u * np.cos(2 * v))

    def form2e(self, local_point):
        u, v = as_local(local_point)
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(self.A * self.B / (2 * u * self._form2_helper(u, v)))

    def form2f(self, local_point):
        return 0.0

    def form2g(self, local_point):
        u, v = as_local(local_point)
        return float(2 * self.A * self.B * u / self._form2_helper(u, v))

    def in_singular_region(self, local_point):
        """The apex u = 0 and the half plane u < 0 outside the chart."""
        return bool(as_local(local_point)[0] < self.singular_u)
