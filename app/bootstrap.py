import logging
from dataclasses import dataclass

import requests

from api.client import ApiClient
from api.errors import ConfigurationError
from app.config import Settings
from data.store import SessionStore
from flow.events import Notifier
from flow.scheduler import ArrivalScheduler
from graph.root import Root


@dataclass
class AppContext:
    settings: Settings
    store: SessionStore
    client: ApiClient
    scheduler: ArrivalScheduler
    notifier: Notifier
    root: Root

    def close(self) -> None:
        """Drop the credential and caches and close the HTTP session."""
        self.store.reset()
        self.client.http.session.close()


def configure(
    ctx: AppContext,
    *,
    token: str | None = None,
    symbol: str | None = None,
    faction: str | None = None,
    email: str | None = None,
) -> None:
    """
    Set the agent credential: an existing token wins, otherwise register a new agent
    with symbol + faction (+ optional email) and keep the returned token.
    """
    if token:
        ctx.store.set_token(token)
        logging.info("Configured with existing agent token")
    elif symbol and faction:
        ctx.store.clear_credential()
        res = ctx.client.agent.register(symbol, faction, email)
        ctx.store.set_registration(res["data"])
        logging.info(f"Registered agent {symbol} with faction {faction}")
    else:
        raise ConfigurationError("Must provide token or symbol and faction")


def build_app(settings: Settings, *, session: requests.Session | None = None) -> AppContext:
    logging.info("Systems initializing")

    store = SessionStore()
    client = ApiClient(store, settings.api_url, session=session, max_retries=settings.max_retries)
    scheduler = ArrivalScheduler()
    notifier = Notifier()
    root = Root(client, store, scheduler, notifier)
    ctx = AppContext(
        settings=settings,
        store=store,
        client=client,
        scheduler=scheduler,
        notifier=notifier,
        root=root,
    )

    if settings.agent_token:
        configure(ctx, token=settings.agent_token)
    else:
        logging.info("No AGENT_TOKEN set; call configure() to register or supply a token")

    logging.info("All systems operational.")
    return ctx
