"""3D visualization: tessellated surfaces, frames, paths and curvature compasses."""

import numpy as np


def _get_axes(ax, projection='3d'):
    import matplotlib.pyplot as plt

    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection=projection)
    else:
        fig = ax.get_figure()
    return fig, ax


def plot_mesh_3d(
    mesh,
    ax=None,
    color=None,
    alpha: float = 0.6,
    edgecolor='none',
    title: str = None,
    **trisurf_kwargs,
):
    """Plot tessellated mesh buffers with ``plot_trisurf``.

    Parameters
    ----------
    mesh : MeshBuffers
        Output of ``Tessellator.tessellate()``.
    ax : mpl_toolkits.mplot3d.Axes3D or None
        If None, a new 3D figure is created.
    color : color or None
        Face color (default light blue).
    alpha : float
        Face transparency.
    edgecolor : color
        Triangle edge color.
    title : str or None
        Plot title.
    **trisurf_kwargs
        Forwarded to ``ax.plot_trisurf()``.

    Returns
    -------
    fig, ax
    """
    fig, ax = _get_axes(ax)
    if color is None:
        color = np.array([176, 206, 234]) / 255  # Light blue

    V = mesh.vertices
    ax.plot_trisurf(V[:, 0], V[:, 1], V[:, 2], triangles=mesh.faces,
                    color=color, alpha=alpha, edgecolor=edgecolor,
                    **trisurf_kwargs)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_zlabel('z')
    if title:
        ax.set_title(title)
    return fig, ax


def plot_frame_3d(frame, ax=None, scale: float = 1.0):
    """Draw the u tangent (red), v tangent (green), normal (blue) and
    forward (cyan) vectors of a ``SurfaceFrame``, each normalized to ``scale``.
    """
    fig, ax = _get_axes(ax)
    p = frame.global_point
    vectors = [
        (frame.global_u_tangent, 'tab:red'),
        (frame.global_v_tangent, 'tab:green'),
        (frame.global_normal, 'tab:blue'),
        (frame.global_forward, 'tab:cyan'),
    ]
    for vec, color in vectors:
        n = np.linalg.norm(vec)
        if n == 0:
            continue
        d = scale * vec / n
        ax.quiver(p[0], p[1], p[2], d[0], d[1], d[2], color=color)
    return fig, ax


def plot_path_3d(history, ax=None, color='tab:orange', **plot_kwargs):
    """Polyline through the global points of a ``PathHistory``."""
    fig, ax = _get_axes(ax)
    P = history.global_points()
    ax.plot(P[:, 0], P[:, 1], P[:, 2], color=color, **plot_kwargs)
    return fig, ax


def plot_compass_3d(compass, ax=None, color='tab:gray',
                    principal_color='tab:red'):
    """Draw the direction and principal segments of a ``CurvatureCompass``."""
    fig, ax = _get_axes(ax)
    for seg in compass.compass_directions():
        ax.plot(seg[:, 0], seg[:, 1], seg[:, 2], color=color)
    for seg in compass.principal_directions():
        ax.plot(seg[:, 0], seg[:, 1], seg[:, 2], color=principal_color, lw=2)
    return fig, ax


def plot_curvature_compass(sampler, ax=None, title: str = None):
    """Polar plot of sampled normal curvature against sample angle.

    The principal curvatures are marked. ``sampler.compute_curvatures()``
    must have been called.

    Returns
    -------
    fig, ax
    """
    fig, ax = _get_axes(ax, projection='polar')
    theta = np.deg2rad(sampler.angles())
    k = sampler.normal_curvatures()
    # close the loop
    ax.plot(np.append(theta, theta[:1]), np.append(k, k[:1]), color='tab:blue')
    for idx, color in ((sampler.principal_curvature1_index, 'tab:red'),
                       (sampler.principal_curvature2_index, 'tab:green')):
        ax.plot([theta[idx]], [k[idx]], 'o', color=color)
    if title:
        ax.set_title(title)
    return fig, ax
