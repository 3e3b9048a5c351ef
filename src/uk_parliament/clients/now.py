"""Client for the annunciator ("Now") API."""

from __future__ import annotations

from uk_parliament.cancellation import CancellationToken
from uk_parliament.clients.base import BaseApiClient, Endpoint
from uk_parliament.models.now import AnnunciatorMessage, BusinessItem, ChamberStatus


class NowClient(BaseApiClient):
    api_name = "now"
    base_url_key = "now"
    ENDPOINTS = {
        "commons_status": Endpoint("api/Now/Commons"),
        "lords_status": Endpoint("api/Now/Lords"),
        "upcoming_business": Endpoint("api/Now/{house}/Business"),
        "current_business": Endpoint("api/Now/{house}/Current"),
        "annunciator_message": Endpoint("api/Message/message/{annunciator}/current"),
    }

    def commons_status(self, *, cancel: CancellationToken | None = None) -> ChamberStatus:
        return self.fetch("commons_status", ChamberStatus, cancel=cancel)

    def lords_status(self, *, cancel: CancellationToken | None = None) -> ChamberStatus:
        return self.fetch("lords_status", ChamberStatus, cancel=cancel)

    def upcoming_business(self, house: str, *, cancel: CancellationToken | None = None) -> list[BusinessItem]:
        return self.fetch("upcoming_business", list[BusinessItem], {"house": house}, cancel=cancel)

    def current_business(self, house: str, *, cancel: CancellationToken | None = None) -> BusinessItem | None:
        """Return the item under way in ``house``, or ``None`` when nothing is."""
        payload = self.invoke("current_business", {"house": house}, cancel=cancel)
        if payload is None:
            return None
        return self.decode(payload, BusinessItem, "current_business")

    def annunciator_message(
        self, annunciator: str = "CommonsMain", *, cancel: CancellationToken | None = None
    ) -> AnnunciatorMessage | None:
        """Return the message currently shown on an annunciator screen (``CommonsMain`` or ``LordsMain``)."""
        payload = self.invoke("annunciator_message", {"annunciator": annunciator}, cancel=cancel)
        if payload is None:
            return None
        return self.decode(payload, AnnunciatorMessage, "annunciator_message")


__all__ = ["NowClient"]
