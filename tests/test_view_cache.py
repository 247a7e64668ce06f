import logging

from backend.app.core.logs import configure_logging
from backend.app.core.view_cache import ViewCache


def test_renders_once_until_revalidated():
    cache = ViewCache()
    calls = []

    def render():
        calls.append(1)
        return len(calls)

    assert cache.get_or_render("/dashboard/invoices", ("", 1), render) == 1
    assert cache.get_or_render("/dashboard/invoices", ("", 1), render) == 1
    cache.revalidate("/dashboard/invoices")
    assert cache.get_or_render("/dashboard/invoices", ("", 1), render) == 2


def test_revalidate_only_touches_its_path():
    cache = ViewCache()
    cache.get_or_render("/dashboard/invoices", ("", 1), lambda: "invoices")
    cache.get_or_render("/dashboard/customers", ("", 1), lambda: "customers")
    cache.revalidate("/dashboard/invoices")
    assert not cache.is_cached("/dashboard/invoices", ("", 1))
    assert cache.is_cached("/dashboard/customers", ("", 1))


def test_renders_per_path_stay_bounded():
    cache = ViewCache(max_renders=3)
    for n in range(50):
        cache.get_or_render("/dashboard/invoices", (f"query-{n}", 1), lambda: n)
    assert cache.size("/dashboard/invoices") == 3
    assert cache.is_cached("/dashboard/invoices", ("query-49", 1))
    assert not cache.is_cached("/dashboard/invoices", ("query-0", 1))


def test_least_recently_used_render_is_evicted_first():
    cache = ViewCache(max_renders=2)
    cache.get_or_render("/dashboard/invoices", ("a", 1), lambda: "a")
    cache.get_or_render("/dashboard/invoices", ("b", 1), lambda: "b")
    cache.get_or_render("/dashboard/invoices", ("a", 1), lambda: "stale")
    cache.get_or_render("/dashboard/invoices", ("c", 1), lambda: "c")
    assert cache.is_cached("/dashboard/invoices", ("a", 1))
    assert not cache.is_cached("/dashboard/invoices", ("b", 1))
    assert cache.get_or_render("/dashboard/invoices", ("a", 1), lambda: "stale") == "a"


def test_configure_logging_installs_one_handler():
    configure_logging("debug")
    configure_logging("debug")
    logger = logging.getLogger("backend")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    configure_logging("info")
