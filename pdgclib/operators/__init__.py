"""
Operators acting on a point of a regular surface.

Submodules
----------
curvature : CurvatureSampler (sampled normal, principal and Gaussian curvature)
pursuit   : TangentPlanePursuit (inverse of the surface mapping)
_registry : MethodRegistry used for name based lookup
"""

from pdgclib.operators._registry import MethodRegistry
from pdgclib.operators.curvature import Curvature, CurvatureSampler
from pdgclib.operators.pursuit import TangentPlanePursuit

__all__ = [
    'MethodRegistry',
    'Curvature', 'CurvatureSampler',
    'TangentPlanePursuit',
]
