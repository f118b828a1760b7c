"""
Action-tag vocabulary — single source of truth for chat-driven navigation.
Both the chat relay (tag detection) and the client section router import from here.
"""

from __future__ import annotations

import re
from typing import Optional

# Sections the portfolio view can display; "welcome" is the initial one.
SECTIONS = ("welcome", "projects", "skills", "resume", "certificates", "contact")

INITIAL_SECTION = "welcome"

# Recognized action tag → target section
ACTION_SECTIONS: dict[str, str] = {
    "show_projects":     "projects",
    "show_skills":       "skills",
    "show_resume":       "resume",
    "show_certificates": "certificates",
    "show_contact":      "contact",
}

# Canned questions sent by the quick-action buttons
QUICK_ACTION_MESSAGES: dict[str, str] = {
    "show_projects":     "Can you show me Soma Arjun's AI/ML projects?",
    "show_skills":       "What are Soma Arjun's technical skills?",
    "show_resume":       "Can I see Soma Arjun's resume and experience?",
    "show_certificates": "What certifications does Soma Arjun have?",
    "show_contact":      "How can I contact Soma Arjun Yadav?",
}

# "[action:show_skills]", the form the system prompt asks the model to emit
_BRACKETED_TAG = re.compile(r"\[\s*action\s*:\s*([a-z_]+)\s*\]", re.IGNORECASE)
# bare "show_skills" anywhere in the reply
_BARE_TAG = re.compile(r"\b(show_[a-z]+)\b", re.IGNORECASE)


def section_for_action(tag: Optional[str]) -> Optional[str]:
    """Return the section a tag navigates to, or None for unrecognized tags."""
    if not tag:
        return None
    return ACTION_SECTIONS.get(tag.strip().lower())


def extract_action(text: str) -> Optional[str]:
    """
    Return the first recognized action tag embedded in an assistant reply.

    Bracketed tags win over bare tokens; unrecognized tags are ignored.
    """
    if not text:
        return None
    for pattern in (_BRACKETED_TAG, _BARE_TAG):
        for match in pattern.finditer(text):
            tag = match.group(1).lower()
            if tag in ACTION_SECTIONS:
                return tag
    return None


def strip_action_tags(text: str) -> str:
    """
    Remove action tags so they are not shown to the visitor.

    Bracketed tags always go; bare tokens only when they are recognized,
    since those are the ones that can trigger navigation.
    """
    cleaned = _BRACKETED_TAG.sub("", text)
    cleaned = _BARE_TAG.sub(
        lambda m: "" if m.group(1).lower() in ACTION_SECTIONS else m.group(0),
        cleaned,
    )
    cleaned = re.sub(r"[ \t]{2,}", " ", cleaned)
    return re.sub(r"[ \t]+\n", "\n", cleaned).strip()
