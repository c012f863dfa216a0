from api.client import ApiClient
from data.enums import PageKind
from data.refs import FactionRef, Page, PageRef
from graph.pagination import build_page


class Factions:
    def __init__(self, client: ApiClient):
        self.client = client

    def one(self, symbol: str | FactionRef) -> dict:
        if isinstance(symbol, FactionRef):
            symbol = symbol.symbol
        return self.client.factions.get(symbol)["data"]

    def page(self, page: int | None = None, limit: int | None = None) -> Page:
        payload = self.client.factions.list(page=page, limit=limit)
        return build_page(payload, PageKind.FACTIONS, page, limit)

    def resolve_page(self, ref: PageRef) -> Page:
        return self.page(page=ref.page, limit=ref.limit)

    def gref(self, obj: dict) -> FactionRef:
        return FactionRef(obj["symbol"])
