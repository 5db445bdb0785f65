"""
Tangent plane pursuit: recover the local coordinate of a global point.

Given a starting frame and a global destination (typically a ray/mesh hit
point), each iteration

1. takes the direction from the current global point to the destination,
2. projects it onto the tangent plane at the current point,
3. pulls the projection back into local coordinates and steps by it.

This is a fixed point iteration on the tangent plane linearization of the
surface. It behaves like a Newton step where the surface is nearly flat and
degrades near high curvature or across singular regions. There is no line
search, damping or divergence detection; running out of iterations is a
normal way to stop and callers judge success by ``destination_distance``.
"""

import logging

import numpy as np

from pdgclib._frame import SurfaceFrame
from pdgclib._vectors import as_global, project_on_plane

logger = logging.getLogger(__name__)


class TangentPlanePursuit:
    """Iteratively approximate the local point mapped onto a destination.

    Parameters
    ----------
    frame : SurfaceFrame
        Initial condition. Its surface and local point are copied into an
        internal frame; ``frame`` itself is never modified.
    global_destination : array_like, shape (3,)
        Point whose local coordinate is sought.
    """

    def __init__(self, frame: SurfaceFrame, global_destination):
        self.surface = frame.surface
        self._frame = SurfaceFrame(self.surface, frame.local_point)
        self.global_destination = as_global(global_destination).copy()
        self.iterations = 0

    @property
    def frame(self) -> SurfaceFrame:
        """The internal frame at the current approximation."""
        return self._frame

    @property
    def local_point_approximation(self) -> np.ndarray:
        return self._frame.local_point

    @property
    def destination_distance(self) -> float:
        """Residual distance from the current approximation to the destination."""
        return float(np.linalg.norm(self._frame.global_point
                                    - self.global_destination))

    def converged(self, distance_threshold: float) -> bool:
        return self.destination_distance <= distance_threshold

    def pursuit_iteration(self) -> np.ndarray:
        """Run one iteration and return the new local point."""
        f = self._frame
        direction = self.global_destination - f.global_point
        planar_direction = project_on_plane(direction, f.global_normal)

        local_point = f.local_point
        delta = self.surface.pullback(local_point, planar_direction)
        new_local_point = local_point + delta

        f.move_to(new_local_point)
        self.iterations += 1
        return new_local_point

    def pursuit(self, distance_threshold: float,
                max_iterations: int) -> np.ndarray:
        """Iterate until within ``distance_threshold`` or out of iterations.

        Returns the local point approximation reached. Never raises on
        non-convergence.
        """
        iteration = 0
        distance = self.destination_distance
        while distance > distance_threshold and iteration < max_iterations:
            self.pursuit_iteration()
            distance = self.destination_distance
            iteration += 1

        if distance > distance_threshold:
            logger.debug("Tangent plane pursuit stopped after %d iterations "
                         "with residual %g (threshold %g)",
                         iteration, distance, distance_threshold)
        else:
            logger.debug("Tangent plane pursuit reached residual %g in %d "
                         "iterations", distance, iteration)
        return self.local_point_approximation
