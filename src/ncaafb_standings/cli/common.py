from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from ncaafb_standings.core.config import settings
from ncaafb_standings.ingestion.providers.base.client import BaseHttpClient
from ncaafb_standings.ingestion.providers.sportsdata.client import SportsDataClient


def configure_logging(verbose: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@contextmanager
def sportsdata_client() -> Iterator[SportsDataClient]:
    """
    Context-managed SportsData client for CLI commands.
    Ensures the underlying HTTP connection pool is closed.
    """
    http = BaseHttpClient(
        base_url=settings.sportsdata_base_url,
        timeout_s=settings.http_timeout_s,
        connect_timeout_s=settings.http_connect_timeout_s,
    )
    try:
        yield SportsDataClient.from_settings(settings, http=http)
    finally:
        http.close()
