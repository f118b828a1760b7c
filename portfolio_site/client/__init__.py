"""Chat client: application state, session driver and API wrapper."""

from portfolio_site.client.api import ApiClientError, PortfolioApiClient
from portfolio_site.client.session import ChatSession
from portfolio_site.client.state import AppState, Message, Origin, Section, initial_state, reduce
from portfolio_site.client.visitors import JsonFileStorage, VisitorCounter

__all__ = [
    "ApiClientError", "PortfolioApiClient",
    "ChatSession",
    "AppState", "Message", "Origin", "Section", "initial_state", "reduce",
    "JsonFileStorage", "VisitorCounter",
]
