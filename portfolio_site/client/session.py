"""
ChatSession — drives one visitor's conversation against the portfolio API.

All state changes go through ``dispatch`` and the pure transitions in
client.state; this class only owns the side effects (network calls, the
delayed section change, notifications).

Concurrency model: one asyncio loop. ``send`` marks the state pending before
its first await, so a second ``send`` issued while a reply is outstanding is
dropped without touching the network. There is no queue and no timeout.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Union

from portfolio_site.client.api import ApiClientError, PortfolioApiClient
from portfolio_site.client.state import (
    ActionReceived,
    AppState,
    Event,
    Message,
    Origin,
    PortfolioLoaded,
    RequestFailed,
    RequestStarted,
    RequestSucceeded,
    Section,
    SectionSelected,
    VisitRecorded,
    initial_state,
    reduce,
)
from portfolio_site.client.visitors import VisitorCounter
from portfolio_site.config import settings
from portfolio_site.schemas.portfolio import PortfolioDocument
from portfolio_site.utils.actions import (
    QUICK_ACTION_MESSAGES,
    extract_action,
    section_for_action,
    strip_action_tags,
)
from portfolio_site.utils.prompts import (
    APOLOGY_MESSAGE,
    CONNECTION_ERROR_DESCRIPTION,
    CONNECTION_ERROR_TITLE,
)

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]
StateListener = Callable[[AppState], None]


def _log_notification(title: str, description: str) -> None:
    logger.warning("%s: %s", title, description)


class ChatSession:
    """One visitor session: conversation log, active section, pending lock."""

    def __init__(
        self,
        api: PortfolioApiClient,
        *,
        section_delay: Optional[float] = None,
        notify: Optional[Notifier] = None,
        on_change: Optional[StateListener] = None,
        visitors: Optional[VisitorCounter] = None,
    ) -> None:
        self._api = api
        self._section_delay = (
            settings.section_change_delay_seconds if section_delay is None else section_delay
        )
        self._notify = notify or _log_notification
        self._on_change = on_change
        self._visitors = visitors
        self._navigation: Optional[asyncio.Task] = None
        self.state: AppState = initial_state()

    # ── State ────────────────────────────────────────────────────────────────

    def dispatch(self, event: Event) -> AppState:
        self.state = reduce(self.state, event)
        if self._on_change is not None:
            self._on_change(self.state)
        return self.state

    # ── Lifecycle ────────────────────────────────────────────────────────────

    async def start(self) -> AppState:
        """Count the visit and fetch the portfolio document once."""
        if self._visitors is not None:
            self.dispatch(VisitRecorded(self._visitors.record_visit()))
        await self.load()
        return self.state

    async def load(self) -> Optional[PortfolioDocument]:
        """Fetch the portfolio document; failure leaves the sections empty, chat still works."""
        try:
            document = await self._api.get_portfolio_data()
        except ApiClientError as exc:
            logger.warning("Could not load portfolio data: %s", exc)
            return None
        self.dispatch(PortfolioLoaded(document))
        return document

    async def aclose(self) -> None:
        if self._navigation is not None and not self._navigation.done():
            self._navigation.cancel()
            try:
                await self._navigation
            except asyncio.CancelledError:
                pass

    # ── Visitor actions ──────────────────────────────────────────────────────

    def select(self, section: Union[Section, str]) -> AppState:
        """Direct navigation; always available, even while a reply is pending."""
        return self.dispatch(SectionSelected(Section(section)))

    async def send(self, text: str) -> bool:
        """
        Send one message to the assistant.

        Returns False (and does nothing) when the text is blank or a previous
        message is still awaiting its reply; True once the turn has finished,
        successfully or with the local apology appended.
        """
        content = (text or "").strip()
        if not content:
            return False
        if self.state.pending:
            logger.debug("Dropped message while a reply is pending")
            return False

        history = self.state.history
        self.dispatch(RequestStarted(Message.create(content, Origin.USER)))

        try:
            response = await self._api.send_message(content, history)
        except ApiClientError as exc:
            logger.error("Chat error: %s", exc)
            self.dispatch(RequestFailed(Message.create(APOLOGY_MESSAGE, Origin.ASSISTANT)))
            self._notify(CONNECTION_ERROR_TITLE, CONNECTION_ERROR_DESCRIPTION)
            return True

        tag = response.action or extract_action(response.message)
        reply = Message.create(strip_action_tags(response.message), Origin.ASSISTANT)
        self.dispatch(RequestSucceeded(reply, tuple(response.conversation_history)))

        if section_for_action(tag) is not None:
            self._schedule_navigation(tag)
        return True

    async def quick_action(self, tag: str) -> bool:
        """Send the canned question behind a quick-action button."""
        message = QUICK_ACTION_MESSAGES.get(tag)
        if message is None:
            return False
        return await self.send(message)

    # ── Navigation ───────────────────────────────────────────────────────────

    def _schedule_navigation(self, tag: str) -> None:
        # a newer tag replaces one still waiting out its delay
        if self._navigation is not None and not self._navigation.done():
            self._navigation.cancel()
        if self._section_delay <= 0:
            self._navigation = None
            self.dispatch(ActionReceived(tag))
            return
        self._navigation = asyncio.get_running_loop().create_task(
            self._navigate_later(tag)
        )

    async def _navigate_later(self, tag: str) -> None:
        await asyncio.sleep(self._section_delay)
        self.dispatch(ActionReceived(tag))

    async def wait_for_navigation(self) -> None:
        """Block until a scheduled section change (if any) has been applied."""
        if self._navigation is not None:
            await self._navigation
