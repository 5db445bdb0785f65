"""
pdgclib: differential geometry of parametric surfaces for walking and probing.

Modules:
  surfaces      - RegularSurface and the Ellipsoid, EllipticParaboloid,
                  OneSheetedHyperboloid variants
  _frame        - SurfaceFrame, a tracked point with its tangent frame
  operators     - CurvatureSampler, TangentPlanePursuit
  tessellation  - Tessellator and MeshBuffers
  probes        - SurfaceWalker, CurvatureCompass, UmbilicalPointTracker
  data          - PathHistory
  config        - parameter dataclasses
  visualization - matplotlib plotting helpers (imported on demand)

Usage:
  from pdgclib import Ellipsoid, SurfaceFrame, CurvatureSampler
"""
__version__ = "0.1.0"

from pdgclib.surfaces import (
    RegularSurface,
    Ellipsoid,
    EllipticParaboloid,
    OneSheetedHyperboloid,
    make_surface,
    surface_registry,
)
from pdgclib._frame import SurfaceFrame
from pdgclib.operators import Curvature, CurvatureSampler, TangentPlanePursuit
from pdgclib.tessellation import MeshBuffers, RaycastHit, Tessellator
from pdgclib.probes import (
    CompassReading,
    CurvatureCompass,
    SurfaceWalker,
    UmbilicalPointTracker,
)
from pdgclib.data import PathHistory
from pdgclib.config import (
    CompassParams,
    PursuitParams,
    SurfaceParams,
    TessellationParams,
    WalkerParams,
)

__all__ = [
    "RegularSurface", "Ellipsoid", "EllipticParaboloid",
    "OneSheetedHyperboloid", "make_surface", "surface_registry",
    "SurfaceFrame",
    "Curvature", "CurvatureSampler", "TangentPlanePursuit",
    "MeshBuffers", "RaycastHit", "Tessellator",
    "CompassReading", "CurvatureCompass", "SurfaceWalker",
    "UmbilicalPointTracker",
    "PathHistory",
    "CompassParams", "PursuitParams", "SurfaceParams",
    "TessellationParams", "WalkerParams",
]
