"""
Parameter bundles for surfaces, tessellation, pursuit, walking and probing.

Usage
-----
    from pdgclib.config import SurfaceParams, TessellationParams

    surface = SurfaceParams(name="ellipsoid", A=2.0).build()
    mesh = TessellationParams(u_res=64, v_res=32).build(surface).tessellate()
"""

from dataclasses import dataclass, field

import numpy as np


@dataclass
class SurfaceParams:
    """Which surface to build and its shape constants.

    Attributes
    ----------
    name : str
        Registered surface name ("ellipsoid", "elliptic-paraboloid",
        "one-sheeted-hyperboloid").
    A, B, C : float
        Shape constants.
    """
    name: str = "ellipsoid"
    A: float = 1.0
    B: float = 1.0
    C: float = 1.0

    def build(self):
        from pdgclib.surfaces import make_surface
        return make_surface(self.name, self.A, self.B, self.C)

    def apply(self, surface) -> None:
        """Copy the shape constants onto an existing surface."""
        surface.set_parameters(self.A, self.B, self.C)


@dataclass
class TessellationParams:
    """Resolution and local coordinate window of a tessellation.

    The default window covers the whole ellipsoid chart.
    """
    u_res: int = 32
    v_res: int = 32
    u_min: float = 0.0
    u_max: float = 2 * np.pi
    v_min: float = 0.0
    v_max: float = np.pi
    reverse_orientation: bool = False

    def build(self, surface):
        from pdgclib.tessellation import Tessellator
        return Tessellator(surface, self.u_res, self.v_res, self.u_min,
                           self.u_max, self.v_min, self.v_max,
                           self.reverse_orientation)


@dataclass
class PursuitParams:
    """Stopping criteria of the tangent plane pursuit."""
    distance_threshold: float = 0.1
    max_iterations: int = 64


@dataclass
class WalkerParams:
    """Movement settings of a ``SurfaceWalker``.

    Attributes
    ----------
    speed : float
        Scale of a full axis deflection, in local coordinate units per second
        along the pulled back unit directions.
    use_player_coordinates : bool
        Move relative to the view direction (True) or along the coordinate
        lines (False).
    """
    speed: float = 4.0
    use_player_coordinates: bool = True


@dataclass
class CompassParams:
    """Settings of a ``CurvatureCompass`` probe."""
    n_directions: int = 32
    max_ray_distance: float = 5.0
    pursuit: PursuitParams = field(default_factory=PursuitParams)
    compass_size: float = 1.0
    principal_direction_multiplier: float = 1.1
