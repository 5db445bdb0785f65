"""
Shared name registry for pluggable surfaces and factories.

Usage
-----
    surfaces = MethodRegistry("surface")
    surfaces.register("ellipsoid", Ellipsoid)
    surface = surfaces.create("ellipsoid", 2.0, 1.0, 1.0)
    surfaces.available()  # ["ellipsoid"]
"""

from typing import Callable


class MethodRegistry:
    """Registry mapping names to callables (classes or factory functions).

    Parameters
    ----------
    name : str
        Human-readable name for error messages (e.g., "surface").
    """

    def __init__(self, name: str):
        self.name = name
        self._methods: dict[str, Callable] = {}

    def register(self, key: str, fn: Callable) -> None:
        """Register a callable under the given key."""
        self._methods[key] = fn

    def __getitem__(self, key: str) -> Callable:
        if key not in self._methods:
            raise KeyError(
                f"Unknown {self.name}: {key!r}. "
                f"Available: {list(self._methods.keys())}"
            )
        return self._methods[key]

    def __contains__(self, key: str) -> bool:
        return key in self._methods

    def create(self, key: str, *args, **kwargs):
        """Look up ``key`` and call it with the given arguments."""
        return self[key](*args, **kwargs)

    def available(self) -> list[str]:
        """Return list of registered names."""
        return list(self._methods.keys())
