"""
Parameterized regular surfaces.

Submodules
----------
_base       : RegularSurface abstract base (mapping, pushforward, pullback, forms)
ellipsoid   : Ellipsoid
paraboloid  : EllipticParaboloid
hyperboloid : OneSheetedHyperboloid

Surfaces are also available by name through ``surface_registry``:

    surface = make_surface("ellipsoid", A=2.0, B=1.0, C=1.0)
"""

from pdgclib.operators._registry import MethodRegistry
from pdgclib.surfaces._base import RegularSurface
from pdgclib.surfaces.ellipsoid import Ellipsoid
from pdgclib.surfaces.paraboloid import EllipticParaboloid
from pdgclib.surfaces.hyperboloid import OneSheetedHyperboloid

surface_registry = MethodRegistry("surface")
for _cls in (Ellipsoid, EllipticParaboloid, OneSheetedHyperboloid):
    surface_registry.register(_cls.name, _cls)


def make_surface(name: str, A: float = 1.0, B: float = 1.0, C: float = 1.0,
                 **kwargs) -> RegularSurface:
    """Construct a registered surface by name."""
    return surface_registry.create(name, A, B, C, **kwargs)


__all__ = [
    'RegularSurface',
    'Ellipsoid', 'EllipticParaboloid', 'OneSheetedHyperboloid',
    'surface_registry', 'make_surface',
]
