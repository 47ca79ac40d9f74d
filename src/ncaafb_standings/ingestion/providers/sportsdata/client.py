from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ncaafb_standings.core.config import Settings, settings
from ncaafb_standings.ingestion.providers.base.client import BaseHttpClient
from ncaafb_standings.ingestion.providers.base.errors import ProviderResponseError

logger = logging.getLogger(__name__)


@dataclass
class SportsDataClient:
    """Client for the SportsData NCAA football standings feed.

    Credentials and API tier are supplied at construction; nothing here reads
    global state.
    """

    http: BaseHttpClient
    api_key: str = field(repr=False)
    access_level: str = "t"
    version: str = "1"

    @classmethod
    def from_settings(
        cls, cfg: Settings = settings, *, http: BaseHttpClient | None = None
    ) -> SportsDataClient:
        api_key = cfg.require_sportsdata_key()
        if http is None:
            http = BaseHttpClient(
                base_url=cfg.sportsdata_base_url,
                timeout_s=cfg.http_timeout_s,
                connect_timeout_s=cfg.http_connect_timeout_s,
            )
        return cls(
            http=http,
            api_key=api_key,
            access_level=cfg.sportsdata_access_level,
            version=cfg.sportsdata_version,
        )

    def standings_path(self, division: str, year: int | str, season: str) -> str:
        return (
            f"/ncaafb-{self.access_level}{self.version}"
            f"/teams/{division}/{year}/{season}/standings.xml"
        )

    def get_standings_xml(self, division: str, year: int | str, season: str) -> str:
        """Raw standings XML for one division/season, e.g. ("FBS", 2014, "REG")."""

        path = self.standings_path(division, year, season)
        logger.info("Fetching standings division=%s year=%s season=%s", division, year, season)

        text = self.http.get_text(
            path,
            params={"api_key": self.api_key},
            headers={"Accept": "application/xml"},
        )
        if not text.lstrip().startswith("<"):
            raise ProviderResponseError(f"Expected an XML document from {path}")

        logger.debug("Received %d bytes of standings XML", len(text))
        return text
