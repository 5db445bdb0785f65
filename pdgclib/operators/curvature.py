"""
Sampled normal curvatures at a point of a regular surface.

The tangent plane at the frame's point is spanned by the orthonormal basis

    basis1 = normalize(X_u),  basis2 = normalize(N x basis1)

and ``n_directions`` unit directions are obtained by rotating basis1 about the
normal in steps of 360 / n_directions degrees. The normal curvature along each
direction is evaluated through the second fundamental form. The largest and
smallest sampled values approximate the principal curvatures; the true
extrema may fall between samples, so accuracy improves with n_directions.
"""

from typing import NamedTuple

import numpy as np

from pdgclib._vectors import normalized, rotate_about_axis


class Curvature(NamedTuple):
    """A (normal curvature, unit global direction) pair."""
    normal_curvature: float
    direction: np.ndarray


class CurvatureSampler:
    """Normal, principal and Gaussian curvature at a ``SurfaceFrame`` point.

    Parameters
    ----------
    surface : RegularSurface
        Surface whose second fundamental form is sampled.
    frame : SurfaceFrame
        Frame whose current point is sampled; it is read on every call to
        ``compute_curvatures`` so the sampler follows the frame as it moves.
    n_directions : int
        Number of sampled tangent directions (>= 1).
    """

    def __init__(self, surface, frame, n_directions: int):
        if int(n_directions) < 1:
            raise ValueError("n_directions must be at least 1.")
        self.surface = surface
        self.frame = frame
        self.n_directions = int(n_directions)

        self._curvatures: list[Curvature] = []
        self.principal_curvature1_index = 0  # max
        self.principal_curvature2_index = 0  # min
        self._update_basis()

    def _update_basis(self) -> None:
        self.tangent_basis1 = normalized(self.frame.global_u_tangent)
        self.tangent_basis2 = normalized(
            np.cross(self.frame.global_normal, self.tangent_basis1))

    @property
    def curvatures(self) -> list:
        return list(self._curvatures)

    def compute_curvatures(self) -> None:
        """Sample all directions and locate the principal curvatures.

        The extremal indices are seeded with sample 0 and replaced only on a
        strictly larger (smaller) value, so ties keep the first sample found.
        """
        self._update_basis()
        normal = self.frame.global_normal
        local_point = self.frame.local_point
        angle = 360.0 / self.n_directions

        curvatures = []
        i_max = i_min = 0
        k_max = k_min = 0.0
        for i in range(self.n_directions):
            direction = normalized(
                rotate_about_axis(self.tangent_basis1, i * angle, normal))
            k = self.surface.normal_curvature(local_point, direction)
            curvatures.append(Curvature(k, direction))

            if i == 0:
                k_max = k_min = k
            else:
                if k > k_max:
                    k_max = k
                    i_max = i
                if k < k_min:
                    k_min = k
                    i_min = i

        self._curvatures = curvatures
        self.principal_curvature1_index = i_max
        self.principal_curvature2_index = i_min

    def get_curvature(self, i: int) -> Curvature:
        if not 0 <= i < self.n_directions:
            raise IndexError(
                f"Curvature index {i} out of range for "
                f"{self.n_directions} directions")
        return self._curvatures[i]

    def principal_curvature1(self) -> Curvature:
        """Largest sampled normal curvature and its direction."""
        return self._curvatures[self.principal_curvature1_index]

    def principal_curvature2(self) -> Curvature:
        """Smallest sampled normal curvature and its direction."""
        return self._curvatures[self.principal_curvature2_index]

    def gaussian_curvature(self) -> float:
        """Product of the sampled principal curvatures."""
        return (self.principal_curvature1().normal_curvature
                * self.principal_curvature2().normal_curvature)

    def mean_curvature(self) -> float:
        return 0.5 * (self.principal_curvature1().normal_curvature
                      + self.principal_curvature2().normal_curvature)

    def umbilical_distance(self) -> float:
        """k1 - k2; zero at an umbilical point."""
        return (self.principal_curvature1().normal_curvature
                - self.principal_curvature2().normal_curvature)

    def normal_curvatures(self) -> np.ndarray:
        return np.array([c.normal_curvature for c in self._curvatures])

    def directions(self) -> np.ndarray:
        """Sampled unit directions, shape (n_directions, 3)."""
        return np.array([c.direction for c in self._curvatures])

    def angles(self) -> np.ndarray:
        """Sample angles in degrees."""
        return np.arange(self.n_directions) * (360.0 / self.n_directions)
