"""
Small vector helpers on numpy arrays used throughout pdgclib.

Local coordinates are arrays of shape (2,), global points and vectors are
arrays of shape (3,). The global frame is y-up.
"""
import numpy as np
from scipy.spatial.transform import Rotation


def as_local(local_point):
    """Return ``local_point`` as a float array of shape (2,)."""
    p = np.asarray(local_point, dtype=np.float64)
    if p.shape != (2,):
        raise ValueError(f"Local coordinate must have shape (2,), got {p.shape}.")
    return p


def as_global(global_vector):
    """Return ``global_vector`` as a float array of shape (3,)."""
    p = np.asarray(global_vector, dtype=np.float64)
    if p.shape != (3,):
        raise ValueError(f"Global vector must have shape (3,), got {p.shape}.")
    return p


def magnitude(a):
    return float(np.linalg.norm(a))


def normalized(a, axis=-1, order=2):
    """Normalize ``a`` along ``axis``; zero vectors are returned unchanged."""
    a = np.asarray(a, dtype=np.float64)
    l2 = np.atleast_1d(np.linalg.norm(a, order, axis))
    l2[l2 == 0] = 1
    out = a / np.expand_dims(l2, axis)
    if a.ndim == 1:
        return out.reshape(a.shape)
    return out


def project_on_plane(vector, plane_normal):
    """Remove the component of ``vector`` along ``plane_normal``.

    ``plane_normal`` need not be unit length. A zero normal leaves the vector
    unchanged.
    """
    vector = np.asarray(vector, dtype=np.float64)
    plane_normal = np.asarray(plane_normal, dtype=np.float64)
    nn = np.dot(plane_normal, plane_normal)
    if nn == 0.0:
        return vector.copy()
    return vector - (np.dot(vector, plane_normal) / nn) * plane_normal


def rotate_about_axis(vector, angle_deg, axis):
    """Rotate ``vector`` by ``angle_deg`` degrees about ``axis`` (right hand rule)."""
    axis_u = normalized(axis)
    rot = Rotation.from_rotvec(np.deg2rad(angle_deg) * axis_u)
    return rot.apply(np.asarray(vector, dtype=np.float64))


def cubic_bezier(p0, p1, p2, p3, resolution=64):
    """Sample the cubic Bezier curve with control points p0..p3.

    Returns an array of shape (resolution, 3) including both end points.
    """
    if resolution < 2:
        raise ValueError("resolution must be at least 2.")
    t = np.linspace(0.0, 1.0, resolution)[:, None]
    P = [np.asarray(p, dtype=np.float64) for p in (p0, p1, p2, p3)]
    return ((1 - t) ** 3 * P[0]
            + 3 * (1 - t) ** 2 * t * P[1]
            + 3 * (1 - t) * t ** 2 * P[2]
            + t ** 3 * P[3])
