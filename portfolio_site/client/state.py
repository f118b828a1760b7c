"""
Client application state and its pure transition functions.

AppState is immutable. Every event type has exactly one update function that
takes a state and returns a new one; ``reduce`` dispatches on the event type.
Nothing here performs I/O or reads the clock except Message.create.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional, Union

from portfolio_site.schemas.chat import ChatMessage
from portfolio_site.schemas.portfolio import PortfolioDocument
from portfolio_site.utils.actions import INITIAL_SECTION, section_for_action
from portfolio_site.utils.prompts import WELCOME_MESSAGE


class Section(str, Enum):
    """The display modes of the portfolio view. Any section is reachable from any other."""

    WELCOME = "welcome"
    PROJECTS = "projects"
    SKILLS = "skills"
    RESUME = "resume"
    CERTIFICATES = "certificates"
    CONTACT = "contact"


class Origin(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """One entry in the conversation log. Never edited or removed once appended."""

    id: str
    content: str
    origin: Origin
    timestamp: datetime

    @classmethod
    def create(cls, content: str, origin: Origin) -> "Message":
        return cls(
            id=uuid.uuid4().hex,
            content=content,
            origin=origin,
            timestamp=datetime.now(timezone.utc),
        )

    @property
    def is_user(self) -> bool:
        return self.origin is Origin.USER


@dataclass(frozen=True)
class AppState:
    """
    Everything the portfolio view renders from.

    ``messages`` is the conversation log shown to the visitor; ``history`` is
    the relay's view of the conversation and is replaced wholesale with what
    the relay returns. ``pending`` doubles as the "assistant is composing"
    indicator and the send-button lock.
    """

    section: Section = Section(INITIAL_SECTION)
    messages: tuple[Message, ...] = ()
    history: tuple[ChatMessage, ...] = ()
    pending: bool = False
    portfolio: Optional[PortfolioDocument] = None
    last_action: Optional[str] = None
    visitor_count: int = 0


def initial_state() -> AppState:
    """Fresh session: welcome section, log seeded with the assistant greeting."""
    return AppState(messages=(Message.create(WELCOME_MESSAGE, Origin.ASSISTANT),))


# ── Events ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SectionSelected:
    section: Section


@dataclass(frozen=True)
class ActionReceived:
    tag: str


@dataclass(frozen=True)
class MessageAppended:
    message: Message


@dataclass(frozen=True)
class RequestStarted:
    user_message: Message


@dataclass(frozen=True)
class RequestSucceeded:
    reply: Message
    history: tuple[ChatMessage, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RequestFailed:
    apology: Message


@dataclass(frozen=True)
class PortfolioLoaded:
    portfolio: PortfolioDocument


@dataclass(frozen=True)
class VisitRecorded:
    count: int


Event = Union[
    SectionSelected, ActionReceived, MessageAppended, RequestStarted,
    RequestSucceeded, RequestFailed, PortfolioLoaded, VisitRecorded,
]


# ── Transitions ──────────────────────────────────────────────────────────────


def select_section(state: AppState, section: Union[Section, str]) -> AppState:
    """Explicit navigation by the visitor. Raises ValueError for unknown sections."""
    return replace(state, section=Section(section))


def apply_action(state: AppState, tag: str) -> AppState:
    """Navigate for an action tag; unrecognized tags leave the state untouched."""
    target = section_for_action(tag)
    if target is None:
        return state
    return replace(state, section=Section(target), last_action=tag.strip().lower())


def append_message(state: AppState, message: Message) -> AppState:
    return replace(state, messages=state.messages + (message,))


def begin_request(state: AppState, user_message: Message) -> AppState:
    """Log the visitor's message and lock the input until the relay answers."""
    return replace(append_message(state, user_message), pending=True)


def complete_request(
    state: AppState,
    reply: Message,
    history: tuple[ChatMessage, ...],
) -> AppState:
    """Log the assistant reply and adopt the relay's history verbatim."""
    return replace(append_message(state, reply), history=tuple(history), pending=False)


def fail_request(state: AppState, apology: Message) -> AppState:
    """Log a local apology and unlock the input; history is left as it was."""
    return replace(append_message(state, apology), pending=False)


def load_portfolio(state: AppState, portfolio: PortfolioDocument) -> AppState:
    return replace(state, portfolio=portfolio)


def record_visit(state: AppState, count: int) -> AppState:
    return replace(state, visitor_count=count)


_TRANSITIONS: dict[type, Callable[[AppState, object], AppState]] = {
    SectionSelected:  lambda s, e: select_section(s, e.section),
    ActionReceived:   lambda s, e: apply_action(s, e.tag),
    MessageAppended:  lambda s, e: append_message(s, e.message),
    RequestStarted:   lambda s, e: begin_request(s, e.user_message),
    RequestSucceeded: lambda s, e: complete_request(s, e.reply, e.history),
    RequestFailed:    lambda s, e: fail_request(s, e.apology),
    PortfolioLoaded:  lambda s, e: load_portfolio(s, e.portfolio),
    VisitRecorded:    lambda s, e: record_visit(s, e.count),
}


def reduce(state: AppState, event: Event) -> AppState:
    """Apply one event to a state and return the resulting state."""
    try:
        transition = _TRANSITIONS[type(event)]
    except KeyError:
        raise TypeError(f"Unknown event type: {type(event).__name__}") from None
    return transition(state, event)
