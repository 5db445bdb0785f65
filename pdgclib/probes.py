"""
Walking on a surface and probing its curvature.

``SurfaceWalker`` moves a frame across the surface from two axis inputs,
relative either to a view direction or to the coordinate lines, refusing
steps that land in a singular region.

``CurvatureCompass`` casts a ray at a tessellated surface, recovers the local
coordinate of the hit with tangent plane pursuit started from the walker's
frame, and samples the normal curvatures there. Everything it produces for
display (direction segments, the arc from the ray origin to the hit) is
returned as plain arrays.

``UmbilicalPointTracker`` collects distinct umbilical points found with a
compass.
"""

import logging
from typing import NamedTuple, Optional

import numpy as np

from pdgclib._frame import SurfaceFrame
from pdgclib._vectors import (
    as_global,
    cubic_bezier,
    magnitude,
    normalized,
    project_on_plane,
)
from pdgclib.config import CompassParams, WalkerParams
from pdgclib.operators.curvature import CurvatureSampler
from pdgclib.operators.pursuit import TangentPlanePursuit

logger = logging.getLogger(__name__)


def smooth_axis_input(value: float) -> float:
    """Sign preserving square of an axis input in [-1, 1]."""
    sign = 1.0 if value > 0 else -1.0
    return sign * value ** 2


class SurfaceWalker:
    """A player walking on ``surface``.

    Parameters
    ----------
    surface : RegularSurface
        Surface to walk on.
    initial_local_point : array_like, shape (2,)
        Starting local coordinate.
    params : WalkerParams or None
        Movement settings.
    history : PathHistory or None
        Receives a snapshot after every accepted step.
    """

    def __init__(self, surface, initial_local_point=(0.0, np.pi / 4),
                 params: Optional[WalkerParams] = None, history=None):
        self.surface = surface
        self.params = params if params is not None else WalkerParams()
        self.frame = SurfaceFrame(surface, initial_local_point)
        self.history = history
        self.n_steps = 0
        if self.history is not None:
            self.history.callback(self.n_steps, self.frame)

    def proposed_local_point(self, horizontal: float, vertical: float,
                             dt: float, view_forward=None) -> np.ndarray:
        """Local point a step with these inputs would move to."""
        s = self.surface
        f = self.frame
        local_point = f.local_point
        h = smooth_axis_input(horizontal)
        v = smooth_axis_input(vertical)

        if self.params.use_player_coordinates:
            view = f.global_forward if view_forward is None else as_global(view_forward)
            normal = f.global_normal
            forward_projection = project_on_plane(view, normal)
            right_projection = (-magnitude(forward_projection)
                                * normalized(np.cross(forward_projection, normal)))
            forward_pullback = s.pullback(local_point, forward_projection)
            right_pullback = s.pullback(local_point, right_projection)
        else:
            right_pullback = s.pullback(local_point, normalized(f.global_u_tangent))
            forward_pullback = s.pullback(local_point, normalized(f.global_v_tangent))

        return local_point + self.params.speed * dt * (h * right_pullback
                                                       + v * forward_pullback)

    def step(self, horizontal: float, vertical: float, dt: float,
             view_forward=None) -> bool:
        """Move by one time step; return False if the step was refused.

        Steps into the singular region are refused. Surfaces without a
        singular region test raise ``NotImplementedError`` here.
        """
        new_local_point = self.proposed_local_point(horizontal, vertical, dt,
                                                    view_forward)
        if self.surface.in_singular_region(new_local_point):
            logger.debug("Refused step into singular region at %s",
                         new_local_point)
            return False

        self.frame.move_to(new_local_point)
        self.n_steps += 1
        if self.history is not None:
            self.history.callback(self.n_steps, self.frame)
        return True


class CompassReading(NamedTuple):
    """Result of one successful compass probe."""
    local_point: np.ndarray
    global_point: np.ndarray
    hit_point: np.ndarray
    residual: float
    iterations: int
    curvatures: list
    principal_curvature1: object
    principal_curvature2: object
    gaussian_curvature: float

    @property
    def umbilical_distance(self) -> float:
        return (self.principal_curvature1.normal_curvature
                - self.principal_curvature2.normal_curvature)


class CurvatureCompass:
    """Probe the normal curvatures where a ray hits the surface mesh.

    Parameters
    ----------
    surface : RegularSurface
        Surface being probed.
    player_frame : SurfaceFrame
        The walker's frame; pursuit starts from its current local point.
    params : CompassParams or None
        Sampling, ray and pursuit settings.
    """

    def __init__(self, surface, player_frame: SurfaceFrame,
                 params: Optional[CompassParams] = None):
        self.surface = surface
        self.player_frame = player_frame
        self.params = params if params is not None else CompassParams()
        self.frame = SurfaceFrame(surface, player_frame.local_point)
        self.sampler = CurvatureSampler(surface, self.frame,
                                        self.params.n_directions)
        self.reading: Optional[CompassReading] = None

    def probe(self, mesh, origin, direction) -> Optional[CompassReading]:
        """Raycast ``mesh`` and probe at the hit; ``None`` on a miss."""
        hit = mesh.raycast(origin, direction, self.params.max_ray_distance)
        if hit is None:
            self.reading = None
            return None
        return self.probe_point(hit.point)

    def probe_point(self, global_point) -> CompassReading:
        """Probe at a global point on (or near) the surface."""
        p = self.params.pursuit
        pursuit = TangentPlanePursuit(self.player_frame, global_point)
        local_point = pursuit.pursuit(p.distance_threshold, p.max_iterations)
        self.frame.move_to(local_point)
        self.sampler.compute_curvatures()

        s = self.sampler
        self.reading = CompassReading(
            local_point=self.frame.local_point,
            global_point=self.frame.global_point,
            hit_point=as_global(global_point).copy(),
            residual=pursuit.destination_distance,
            iterations=pursuit.iterations,
            curvatures=s.curvatures,
            principal_curvature1=s.principal_curvature1(),
            principal_curvature2=s.principal_curvature2(),
            gaussian_curvature=s.gaussian_curvature(),
        )
        return self.reading

    def umbilical_distance(self) -> float:
        """k1 - k2 at the last probe, +inf when there is no reading."""
        if self.reading is None:
            return np.inf
        return self.reading.umbilical_distance

    def compass_directions(self) -> np.ndarray:
        """Segments for every sampled direction, shape (n_directions, 2, 3).

        Each segment starts at the probed point and has length
        ``compass_size * k_i / k_max``.
        """
        if self.reading is None:
            raise RuntimeError("No compass reading; call probe() first.")
        origin = self.reading.global_point
        k_max = self.reading.principal_curvature1.normal_curvature
        size = self.params.compass_size
        segments = []
        for c in self.reading.curvatures:
            end = origin + size * c.normal_curvature / k_max * c.direction
            segments.append((origin, end))
        return np.array(segments)

    def principal_directions(self) -> np.ndarray:
        """Two segments centred on the probed point, shape (2, 2, 3)."""
        if self.reading is None:
            raise RuntimeError("No compass reading; call probe() first.")
        origin = self.reading.global_point
        k_max = self.reading.principal_curvature1.normal_curvature
        size = self.params.compass_size
        m = self.params.principal_direction_multiplier
        segments = []
        for c in (self.reading.principal_curvature1,
                  self.reading.principal_curvature2):
            d = size * c.normal_curvature / k_max * c.direction
            segments.append((origin - m * d, origin + m * d))
        return np.array(segments)

    @staticmethod
    def compass_arc(point1, offset1, point2, offset2, offset_multiplier=0.5,
                    resolution=64) -> np.ndarray:
        """Cubic Bezier polyline from ``point1`` to ``point2``.

        The inner control points are the end points moved by
        ``offset_multiplier`` times their offsets.
        """
        point1, point2 = as_global(point1), as_global(point2)
        return cubic_bezier(point1,
                            point1 + offset_multiplier * as_global(offset1),
                            point2 + offset_multiplier * as_global(offset2),
                            point2, resolution)

    def arc(self, ray_origin, ray_direction, resolution=64) -> np.ndarray:
        """Arc from the ray origin to the probed point, or an idle arc."""
        ray_origin = as_global(ray_origin)
        ray_direction = as_global(ray_direction)
        if self.reading is None:
            return self.compass_arc(ray_origin, ray_direction,
                                    ray_origin + ray_direction, -ray_direction,
                                    0.25, resolution)
        return self.compass_arc(ray_origin, ray_direction,
                                self.frame.global_point,
                                normalized(self.frame.global_normal),
                                0.5, resolution)


class UmbilicalPointTracker:
    """Collect distinct umbilical points found by a compass.

    Parameters
    ----------
    distance_threshold : float
        A reading counts as umbilical when k1 - k2 is below this.
    separation : float
        Minimum global distance between two recorded points.
    total : int
        Number of points to find (4 on a generic tri-axial ellipsoid).
    """

    def __init__(self, distance_threshold: float = 1e-3,
                 separation: float = 10.0, total: int = 4):
        self.distance_threshold = distance_threshold
        self.separation = separation
        self.total = total
        self.points: list[np.ndarray] = []

    @property
    def complete(self) -> bool:
        return len(self.points) >= self.total

    def update(self, reading: Optional[CompassReading]) -> bool:
        """Record ``reading`` if it is a new umbilical point."""
        if reading is None or reading.umbilical_distance >= self.distance_threshold:
            return False
        candidate = reading.global_point
        for p in self.points:
            if np.linalg.norm(p - candidate) < self.separation:
                return False
        self.points.append(candidate)
        logger.info("Found umbilical point %d/%d at %s",
                    len(self.points), self.total, candidate)
        return True
