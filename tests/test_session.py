"""ChatSession — history round-trip, pending lock, failure fallback, delayed navigation."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from portfolio_site.client.api import PortfolioApiClient
from portfolio_site.client.session import ChatSession
from portfolio_site.client.state import Origin, Section
from portfolio_site.client.visitors import VISITOR_COUNT_KEY, VisitorCounter
from portfolio_site.utils.actions import QUICK_ACTION_MESSAGES
from portfolio_site.utils.prompts import APOLOGY_MESSAGE, CONNECTION_ERROR_TITLE


@pytest.fixture
async def api(fake_api):
    client = PortfolioApiClient("http://portfolio.test", transport=httpx.MockTransport(fake_api))
    yield client
    await client.aclose()


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def make_session(api, notifications):
    def _make(**kwargs):
        kwargs.setdefault("section_delay", 0)
        kwargs.setdefault("notify", lambda title, desc: notifications.append((title, desc)))
        return ChatSession(api, **kwargs)

    return _make


async def test_history_sent_is_previous_reply_history(make_session, fake_api):
    fake_api.replies = ["first reply", "second reply"]
    session = make_session()

    await session.send("first question")
    returned = [turn.model_dump() for turn in session.state.history]
    await session.send("second question")

    assert fake_api.chat_requests[0]["conversationHistory"] == []
    assert fake_api.chat_requests[1]["conversationHistory"] == returned
    assert fake_api.chat_requests[1]["message"] == "second question"
    assert len(session.state.history) == 4


async def test_conversation_log_keeps_insertion_order(make_session, fake_api):
    fake_api.replies = ["r1", "r2"]
    session = make_session()

    await session.send("q1")
    await session.send("q2")

    log = [(m.origin, m.content) for m in session.state.messages]
    assert log[1:] == [
        (Origin.USER, "q1"), (Origin.ASSISTANT, "r1"),
        (Origin.USER, "q2"), (Origin.ASSISTANT, "r2"),
    ]
    assert log[0][0] is Origin.ASSISTANT   # greeting
    assert len({m.id for m in session.state.messages}) == 5


async def test_blank_message_is_not_sent(make_session, fake_api):
    session = make_session()

    assert await session.send("   ") is False
    assert fake_api.chat_requests == []
    assert len(session.state.messages) == 1


async def test_duplicate_send_while_pending_is_dropped(make_session, fake_api):
    fake_api.gate = asyncio.Event()
    session = make_session()

    first = asyncio.create_task(session.send("first"))
    while not fake_api.chat_requests:
        await asyncio.sleep(0)

    assert session.state.pending is True
    assert await session.send("second") is False
    assert len(fake_api.chat_requests) == 1

    fake_api.gate.set()
    assert await first is True
    assert session.state.pending is False
    assert len(fake_api.chat_requests) == 1
    assert [m.content for m in session.state.messages if m.is_user] == ["first"]


async def test_failure_appends_apology_and_notifies(make_session, fake_api, notifications):
    fake_api.fail_chat = True
    session = make_session()

    assert await session.send("hello?") is True

    state = session.state
    assert state.pending is False
    assert state.messages[-1].content == APOLOGY_MESSAGE
    assert state.messages[-1].origin is Origin.ASSISTANT
    assert state.history == ()
    assert notifications and notifications[0][0] == CONNECTION_ERROR_TITLE

    # the rest of the interface still works
    assert session.select("projects").section is Section.PROJECTS
    fake_api.fail_chat = False
    assert await session.send("retry") is True
    assert len(session.state.history) == 2


async def test_action_tag_navigates_after_delay(make_session, fake_api):
    fake_api.replies = ["Here you go! [action:show_skills]", "Anything else?"]
    sections = []
    session = make_session(section_delay=0.05, on_change=lambda s: sections.append(s.section))
    session.select("certificates")

    await session.send("Show me skills")

    assert session.state.section is Section.CERTIFICATES
    await session.wait_for_navigation()
    assert session.state.section is Section.SKILLS
    assert session.state.last_action == "show_skills"
    assert session.state.messages[-1].content == "Here you go!"

    transitions = [b for a, b in zip(sections, sections[1:]) if a is not b]
    assert transitions.count(Section.SKILLS) == 1

    await session.send("thanks")
    await session.wait_for_navigation()
    assert session.state.section is Section.SKILLS
    transitions = [b for a, b in zip(sections, sections[1:]) if a is not b]
    assert transitions == [Section.SKILLS]


async def test_unrecognized_tag_does_not_navigate(make_session, fake_api):
    fake_api.replies = ["I like hiking. [action:show_hobbies]"]
    session = make_session()

    await session.send("hobbies?")

    assert session.state.section is Section.WELCOME
    assert session.state.last_action is None


async def test_quick_action_sends_canned_question(make_session, fake_api):
    fake_api.replies = ["Contact details coming up. [action:show_contact]"]
    session = make_session()

    assert await session.quick_action("show_contact") is True
    assert fake_api.chat_requests[0]["message"] == QUICK_ACTION_MESSAGES["show_contact"]
    assert session.state.section is Section.CONTACT
    assert await session.quick_action("show_hobbies") is False


async def test_start_records_visit_and_loads_portfolio(make_session):
    storage = {VISITOR_COUNT_KEY: "700"}
    session = make_session(visitors=VisitorCounter(storage))

    state = await session.start()

    assert state.visitor_count == 701
    assert storage[VISITOR_COUNT_KEY] == "701"
    assert state.portfolio is not None
    assert state.portfolio.name == "Soma Arjun Yadav"


async def test_portfolio_load_failure_keeps_chat_usable(make_session, fake_api):
    fake_api.fail_portfolio = True
    session = make_session()

    assert await session.load() is None
    assert session.state.portfolio is None
    assert await session.send("still there?") is True
    assert session.state.messages[-1].content == "Happy to help!"
