"""
The one-sheeted hyperboloid x^2/A^2 + y^2/A^2 - z^2/C^2 = 1.

    X(u, v) = (A sqrt(1 + u^2) cos v, A sqrt(1 + u^2) sin v, C u)

returned y-up as (x, C u, y). See
http://mathworld.wolfram.com/One-SheetedHyperboloid.html
"""

import numpy as np

from pdgclib._vectors import as_local
from pdgclib.surfaces._base import RegularSurface


class OneSheetedHyperboloid(RegularSurface):
    """Circular one-sheeted hyperboloid with waist radius A and height scale C.

    B is unused by this parameterization.
    """

    name = "one-sheeted-hyperboloid"

    def surface_point(self, u, v):
        u, v = np.broadcast_arrays(np.asarray(u, dtype=np.float64),
                                   np.asarray(v, dtype=np.float64))
        s = np.sqrt(1 + u * u)
        x = self.A * s * np.cos(v)
        y = self.A * s * np.sin(v)
        z = self.C * u
        return np.stack([x, z, y], axis=-1)

    def jacobian(self, local_point):
        u, v = as_local(local_point)
        A, C = self.A, self.C
        s = np.sqrt(1 + u * u)
        sv, cv = np.sin(v), np.cos(v)
        return np.array([
            [A * u * cv / s, -A * s * sv],
            [C, 0.0],
            [A * u * sv / s, A * s * cv],
        ])

    def _form2_denominator(self, u):
        A, C = self.A, self.C
        return np.sqrt(u * u * (A * A + C * C) + C * C)

    def form2e(self, local_point):
        u = as_local(local_point)[0]
        return float(-self.A * self.C
                     / ((u * u + 1) * self._form2_denominator(u)))

    def form2f(self, local_point):
        return 0.0

    def form2g(self, local_point):
        u = as_local(local_point)[0]
        return float(self.A * self.C * (u * u + 1)
                     / self._form2_denominator(u))

    def in_singular_region(self, local_point):
        # TODO: establish the singular set of this chart (degenerate only for
        # A == 0 or C == 0?) before answering instead of raising.
        raise NotImplementedError(
            "Singular region test is not supported for the one-sheeted "
            "hyperboloid")
