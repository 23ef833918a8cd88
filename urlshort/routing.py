from collections.abc import Sequence

from .config import RouteRule


def find_upstream(path: str, routes: Sequence[RouteRule]) -> tuple[str | None, str | None]:
    """
    First rule whose prefix covers `path` on a segment boundary.

    `/hello` covers `/hello` and `/hello/x` but not `/helloworld`. Returns
    (upstream, suffix) where suffix is the remaining path, at least '/'.
    """
    for rule in routes:
        base = rule.prefix.rstrip('/')
        if path == base or path.startswith(base + '/'):
            return rule.upstream, path[len(base):] or '/'
    return None, None
