import logging

from api.client import ApiClient
from api.errors import InvalidArgumentError
from data.enums import PageKind
from data.refs import ContractRef, Page, PageRef, ShipRef
from graph.pagination import build_page


def _contract_id(contract: str | ContractRef) -> str:
    return contract.id if isinstance(contract, ContractRef) else contract


class Contracts:
    def __init__(self, client: ApiClient):
        self.client = client

    def one(self, contract: str | ContractRef) -> dict:
        return self.client.contracts.get(_contract_id(contract))["data"]

    def page(self, page: int | None = None, limit: int | None = None) -> Page:
        payload = self.client.contracts.list(page=page, limit=limit)
        return build_page(payload, PageKind.CONTRACTS, page, limit)

    def resolve_page(self, ref: PageRef) -> Page:
        return self.page(page=ref.page, limit=ref.limit)

    def gref(self, obj: dict) -> ContractRef:
        return ContractRef(obj["id"])

    def accept(self, contract: str | ContractRef) -> dict:
        contract_id = _contract_id(contract)
        logging.info(f"Accepting contract {contract_id}")
        return self.client.contracts.accept(contract_id)["data"]

    def fulfill(self, contract: str | ContractRef) -> dict:
        contract_id = _contract_id(contract)
        logging.info(f"Fulfilling contract {contract_id}")
        return self.client.contracts.fulfill(contract_id)["data"]

    def deliver(
        self,
        contract: str | ContractRef,
        trade_symbol: str | None = None,
        units: int | None = None,
        *,
        ship_symbol: str | None = None,
        ship: ShipRef | None = None,
    ) -> dict:
        if ship_symbol is not None and ship is not None:
            raise InvalidArgumentError("Cannot specify both shipSymbol and ship")
        if ship is not None:
            ship_symbol = ship.symbol
        res = self.client.contracts.deliver(_contract_id(contract), ship_symbol, trade_symbol, units)
        return res["data"]
