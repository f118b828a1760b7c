"""
chat_cli.py — terminal front-end for the portfolio assistant.

Talks to a running Portfolio Site service and renders the conversation and
the active section as plain text.

Usage:
    python scripts/chat_cli.py                                   # http://localhost:8000
    python scripts/chat_cli.py --base-url https://example.dev/api
    python scripts/chat_cli.py --storage ~/.portfolio-visits.json  # persist visitor count

In the prompt, ":projects", ":skills", ":resume", ":certificates", ":contact"
and ":welcome" switch sections directly; ":write" fills in the contact form;
":quit" exits.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from portfolio_site.client import (
    AppState,
    ApiClientError,
    ChatSession,
    JsonFileStorage,
    PortfolioApiClient,
    Section,
    VisitorCounter,
)

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def _render_section(state: AppState) -> str:
    """One-screen text summary of the active section."""
    doc = state.portfolio
    if doc is None:
        return f"[{state.section.value}] (portfolio data unavailable)"

    if state.section is Section.PROJECTS:
        lines = [f"  • {p.title} ({p.category}) — {', '.join(p.technologies)}" for p in doc.projects]
    elif state.section is Section.SKILLS:
        lines = [f"  {s.icon} {s.name:<20} {s.level:>3}%" for s in doc.skills]
    elif state.section is Section.RESUME:
        lines = [f"  {t.period:<16} {t.position} @ {t.company}" for t in doc.experience.timeline]
    elif state.section is Section.CERTIFICATES:
        lines = [f"  • {c.name} — {c.issuer} ({c.date})" for c in doc.certificates]
    elif state.section is Section.CONTACT:
        lines = [f"  {doc.email}", f"  {doc.phone}", f"  {doc.linkedin}"]
    else:
        lines = [f"  {doc.name} — {doc.title}", f"  {doc.bio}"]
    return "\n".join([f"── {state.section.value.upper()} ──", *lines])


class _Printer:
    """Prints new log entries and section changes as the state moves."""

    def __init__(self) -> None:
        self._seen = 0
        self._section: Section | None = None

    def __call__(self, state: AppState) -> None:
        for message in state.messages[self._seen:]:
            speaker = "you" if message.is_user else "assistant"
            print(f"[{message.timestamp:%H:%M:%S}] {speaker}: {message.content}")
        self._seen = len(state.messages)
        if state.section is not self._section:
            self._section = state.section
            print(_render_section(state))


def _notify(title: str, description: str) -> None:
    print(f"!! {title}: {description}")


async def _write_contact(api: PortfolioApiClient) -> None:
    """Prompt for the contact form fields and submit them."""
    values = [await asyncio.to_thread(input, f"{field}: ") for field in ("name", "email", "subject", "message")]
    try:
        resp = await api.submit_contact(*values)
    except ApiClientError as exc:
        fields = ", ".join(exc.detail.get("fields", []))
        print(f"!! {exc}" + (f" ({fields})" if fields else ""))
        return
    print(f"{resp.message} (ref {resp.submission_id})")


async def run_cli(base_url: str | None, storage_path: str | None, delay: float | None) -> None:
    storage = JsonFileStorage(Path(storage_path).expanduser()) if storage_path else None
    printer = _Printer()

    async with PortfolioApiClient(base_url) as api:
        session = ChatSession(
            api,
            section_delay=delay,
            notify=_notify,
            on_change=printer,
            visitors=VisitorCounter(storage),
        )
        printer(session.state)
        state = await session.start()
        print(f"👥 {state.visitor_count:,} visitors")

        try:
            while True:
                try:
                    line = await asyncio.to_thread(input, "> ")
                except EOFError:
                    break
                line = line.strip()
                if line in (":quit", ":q"):
                    break
                if line == ":write":
                    await _write_contact(api)
                    continue
                if line.startswith(":"):
                    try:
                        session.select(line[1:])
                    except ValueError:
                        print(f"Unknown section {line[1:]!r}")
                    continue
                await session.send(line)
                await session.wait_for_navigation()
        finally:
            await session.aclose()


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Chat with the portfolio assistant from a terminal.")
    parser.add_argument("--base-url", default=None, help="Service base URL (default: API_BASE_URL)")
    parser.add_argument("--storage", default=None, help="JSON file for the visitor counter")
    parser.add_argument("--delay", type=float, default=None, help="Seconds before a section change")
    args = parser.parse_args()

    asyncio.run(run_cli(args.base_url, args.storage, args.delay))


if __name__ == "__main__":
    main()
