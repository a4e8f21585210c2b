"""Ordered router with exact path and method matching.

Routes are registered during setup and frozen when the app compiles.
Lookup walks the routes in registration order and the first exact
match wins, so the same path may be registered once per method.
"""

from file_bridge.errors import NoMatch
from file_bridge.routing.route import Route


class Router:
    """Linear first-match router.

    Usage::

        router = Router()
        router.add(Route("/provider", publish, method="POST"))
        router.add(Route("/provider", resolve))
        router.compile()
        route = router.find("/provider", "POST")
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._routes.append(route)

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Close the table; ``add()`` raises from now on."""
        self._compiled = True

    def find(self, path: str, method: str) -> Route | None:
        """Return the first route whose path and method equal the request's.

        Comparison is exact and case-sensitive: no trailing-slash
        normalization, no patterns. Returns ``None`` when nothing matches.
        """
        for route in self._routes:
            if route.path == path and route.method == method:
                return route
        return None

    def match(self, method: str, path: str) -> Route:
        """Like ``find()``, but raises ``NoMatch`` (a 404) on a miss."""
        route = self.find(path, method)
        if route is None:
            raise NoMatch(method, path)
        return route
