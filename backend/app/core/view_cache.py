"""Render cache for dashboard views, keyed by route path.

Writes call ``revalidate`` with the path whose renders they made stale; the next
request for that path rebuilds its page from storage. Each path keeps at most
``max_renders`` entries; the least recently used one is evicted first.
"""

from collections import OrderedDict
from typing import Any, Callable, Dict, Hashable

DEFAULT_MAX_RENDERS = 64


class ViewCache:
    def __init__(self, max_renders: int = DEFAULT_MAX_RENDERS):
        self.max_renders = max_renders
        self._renders: Dict[str, "OrderedDict[Hashable, Any]"] = {}

    def get_or_render(self, path: str, key: Hashable, render: Callable[[], Any]) -> Any:
        renders = self._renders.setdefault(path, OrderedDict())
        if key in renders:
            renders.move_to_end(key)
            return renders[key]
        value = render()
        renders[key] = value
        while len(renders) > self.max_renders:
            renders.popitem(last=False)
        return value

    def is_cached(self, path: str, key: Hashable) -> bool:
        return key in self._renders.get(path, {})

    def size(self, path: str) -> int:
        return len(self._renders.get(path, {}))

    def revalidate(self, path: str) -> None:
        self._renders.pop(path, None)

    def clear(self) -> None:
        self._renders.clear()


view_cache = ViewCache()
