"""Recording of a frame's path across a surface for post-processing.

PathHistory records snapshots of a ``SurfaceFrame`` via a callback and
provides query APIs for analysis and plotting.

Usage
-----
    from pdgclib.data import PathHistory

    history = PathHistory(record_every=10)
    walker = SurfaceWalker(surface, history=history)
    for step in range(1000):
        walker.step(0.0, 1.0, dt=1 / 90)

    history.global_points()   # (n_snapshots, 3)
    history.path_length()
"""

from typing import NamedTuple

import numpy as np


class PathSnapshot(NamedTuple):
    step: int
    local_point: np.ndarray
    global_point: np.ndarray
    global_forward: np.ndarray


class PathHistory:
    """Records frame snapshots along a path.

    Parameters
    ----------
    record_every : int
        Record a snapshot every N steps (default: 1).
    """

    def __init__(self, record_every: int = 1):
        if record_every < 1:
            raise ValueError("record_every must be at least 1.")
        self.record_every = record_every
        self._snapshots: list[PathSnapshot] = []

    @property
    def n_snapshots(self) -> int:
        return len(self._snapshots)

    @property
    def snapshots(self) -> list:
        return list(self._snapshots)

    def callback(self, step, frame):
        """Record ``frame`` if ``step`` is a multiple of ``record_every``."""
        if step % self.record_every != 0:
            return
        self._record(step, frame)

    def append(self, frame):
        """Manually record a snapshot (alternative to callback)."""
        step = self._snapshots[-1].step + 1 if self._snapshots else 0
        self._record(step, frame)

    def _record(self, step, frame):
        self._snapshots.append(PathSnapshot(int(step), frame.local_point,
                                            frame.global_point,
                                            frame.global_forward))

    def steps(self) -> np.ndarray:
        return np.array([s.step for s in self._snapshots], dtype=int)

    def local_points(self) -> np.ndarray:
        """Recorded local points, shape (n_snapshots, 2)."""
        return np.array([s.local_point for s in self._snapshots]).reshape(-1, 2)

    def global_points(self) -> np.ndarray:
        """Recorded global points, shape (n_snapshots, 3)."""
        return np.array([s.global_point for s in self._snapshots]).reshape(-1, 3)

    def path_length(self) -> float:
        """Length of the polyline through the recorded global points."""
        P = self.global_points()
        if len(P) < 2:
            return 0.0
        return float(np.linalg.norm(np.diff(P, axis=0), axis=1).sum())

    def clear(self):
        """Remove all recorded snapshots."""
        self._snapshots.clear()
