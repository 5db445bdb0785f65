"""Data handling: recording of frame paths."""

from pdgclib.data._history import PathHistory, PathSnapshot

__all__ = ['PathHistory', 'PathSnapshot']
