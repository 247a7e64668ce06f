"""Post-write navigation: invalidate the listing view, then send the browser there."""

import logging

from backend.app.core.view_cache import view_cache
from backend.app.schemas.results import Redirect

logger = logging.getLogger(__name__)


def revalidate_path(path: str) -> None:
    logger.debug("Revalidating %s", path)
    view_cache.revalidate(path)


def redirect(path: str) -> Redirect:
    return Redirect(location=path)


def revalidate_and_redirect(path: str) -> Redirect:
    revalidate_path(path)
    return redirect(path)
