"""
Abstract base for parameterized regular surfaces.

A regular surface is described by a mapping X(u, v) from a system of local
coordinates in R^2 into R^3. Concrete surfaces supply the mapping, its
Jacobian and the coefficients of the second fundamental form in closed form;
everything else (pushforward, pullback, first fundamental form, normal,
normal/Gaussian/mean curvature) is derived here.

Global coordinates are y-up: a surface written as (x, y, z) in the usual
mathematical orientation is returned as (x, z, y).

Caller contract
---------------
Near a singular region of the chart (see ``in_singular_region``) the pullback
divides by a vanishing determinant and returns inf/nan. This is not trapped;
callers check ``in_singular_region`` before moving a frame there.

References
----------
M. P. do Carmo, Differential Geometry of Curves and Surfaces.
Prentice-Hall, Inc., Englewood Cliffs N.J., 1976.
"""

from abc import ABC, abstractmethod

import numpy as np

from pdgclib._vectors import as_global, as_local, normalized


class RegularSurface(ABC):
    """Parameterized regular surface with shape constants A, B and C.

    Parameters
    ----------
    A, B, C : float
        Generic shape constants; their meaning depends on the surface.
    """

    #: Human readable surface name, set by subclasses.
    name = "regular-surface"

    def __init__(self, A: float = 1.0, B: float = 1.0, C: float = 1.0):
        self.set_parameters(A, B, C)

    def set_parameters(self, A: float, B: float, C: float) -> None:
        """Update the shape constants.

        Must not run concurrently with a frame recomputation on this surface.
        """
        self.A = float(A)
        self.B = float(B)
        self.C = float(C)

    @property
    def parameters(self) -> tuple:
        return self.A, self.B, self.C

    def __repr__(self):
        return (f"{type(self).__name__}(A={self.A!r}, B={self.B!r}, "
                f"C={self.C!r})")

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    @abstractmethod
    def surface_point(self, u, v) -> np.ndarray:
        """Point X(u, v) in global coordinates.

        ``u`` and ``v`` may be scalars or broadcastable arrays; the result has
        shape ``broadcast(u, v).shape + (3,)``.
        """

    def mapping(self, local_point) -> np.ndarray:
        """The parameterization X applied to a local point (u, v)."""
        u, v = as_local(local_point)
        return self.surface_point(u, v)

    @abstractmethod
    def jacobian(self, local_point) -> np.ndarray:
        """The (3, 2) matrix [X_u | X_v] of the differential at ``local_point``."""

    def pushforward(self, local_point, local_tangent) -> np.ndarray:
        """Push a local tangent vector forward into global coordinates."""
        return self.jacobian(local_point) @ as_local(local_tangent)

    def pullback(self, local_point, global_tangent) -> np.ndarray:
        """Pull a global tangent vector back into local coordinates.

        Applies the left inverse (J^T J)^-1 J^T of the Jacobian. The input is
        assumed to lie in the tangent plane; any normal component is
        discarded. Returns inf/nan near singular regions.
        """
        J = self.jacobian(local_point)
        w = as_global(global_tangent)
        a = J.T @ w
        E, F, G = J[:, 0] @ J[:, 0], J[:, 0] @ J[:, 1], J[:, 1] @ J[:, 1]
        with np.errstate(divide='ignore', invalid='ignore'):
            det = E * G - F * F
            ut = (G * a[0] - F * a[1]) / det
            vt = (E * a[1] - F * a[0]) / det
        return np.array([ut, vt])

    def global_normal(self, local_point) -> np.ndarray:
        """Unnormalized normal X_u x X_v in global coordinates."""
        J = self.jacobian(local_point)
        return np.cross(J[:, 0], J[:, 1])

    def unit_normal(self, local_point) -> np.ndarray:
        return normalized(self.global_normal(local_point))

    # ------------------------------------------------------------------
    # First fundamental form
    # ------------------------------------------------------------------

    def form1e(self, local_point) -> float:
        X_u = self.jacobian(local_point)[:, 0]
        return float(X_u @ X_u)

    def form1f(self, local_point) -> float:
        J = self.jacobian(local_point)
        return float(J[:, 0] @ J[:, 1])

    def form1g(self, local_point) -> float:
        X_v = self.jacobian(local_point)[:, 1]
        return float(X_v @ X_v)

    # ------------------------------------------------------------------
    # Second fundamental form
    # ------------------------------------------------------------------

    @abstractmethod
    def form2e(self, local_point) -> float:
        """Coefficient e of the second fundamental form."""

    @abstractmethod
    def form2f(self, local_point) -> float:
        """Coefficient f of the second fundamental form."""

    @abstractmethod
    def form2g(self, local_point) -> float:
        """Coefficient g of the second fundamental form."""

    def form2(self, local_point, global_tangent) -> float:
        """Second fundamental form applied to a global tangent vector.

        e ut^2 + 2 f ut vt + g vt^2 with (ut, vt) the pullback of
        ``global_tangent``.
        """
        ut, vt = self.pullback(local_point, global_tangent)
        e = self.form2e(local_point)
        f = self.form2f(local_point)
        g = self.form2g(local_point)
        return float(e * ut * ut + 2 * f * ut * vt + g * vt * vt)

    def normal_curvature(self, local_point, global_tangent) -> float:
        """Normal curvature in the direction of ``global_tangent``.

        The tangent is normalized first, normal curvature being a property of
        a direction.
        """
        return self.form2(local_point, normalized(as_global(global_tangent)))

    # ------------------------------------------------------------------
    # Analytic curvatures
    # ------------------------------------------------------------------

    def gaussian_curvature(self, local_point) -> float:
        """K = (eg - f^2) / (EG - F^2)."""
        e, f, g = (self.form2e(local_point), self.form2f(local_point),
                   self.form2g(local_point))
        E, F, G = (self.form1e(local_point), self.form1f(local_point),
                   self.form1g(local_point))
        return (e * g - f * f) / (E * G - F * F)

    def mean_curvature(self, local_point) -> float:
        """H = (eG - 2fF + gE) / (2 (EG - F^2))."""
        e, f, g = (self.form2e(local_point), self.form2f(local_point),
                   self.form2g(local_point))
        E, F, G = (self.form1e(local_point), self.form1f(local_point),
                   self.form1g(local_point))
        return (e * G - 2 * f * F + g * E) / (2 * (E * G - F * F))

    def principal_curvatures(self, local_point) -> tuple:
        """Return (k1, k2), k1 >= k2, from the mean and Gaussian curvature."""
        H = self.mean_curvature(local_point)
        K = self.gaussian_curvature(local_point)
        # Rounding can push H^2 - K slightly negative at umbilical points
        disc = np.sqrt(max(H * H - K, 0.0))
        return H + disc, H - disc

    # ------------------------------------------------------------------
    # Singularities
    # ------------------------------------------------------------------

    @abstractmethod
    def in_singular_region(self, local_point) -> bool:
        """Whether ``local_point`` lies where the chart breaks down.

        Surfaces that cannot decide this raise ``NotImplementedError`` rather
        than report a default.
        """
