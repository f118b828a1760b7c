"""Pydantic schemas for the portfolio document."""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    id: str
    title: str
    description: str
    category: str
    technologies: list[str] = Field(default_factory=list)
    image: str
    github: Optional[str] = None
    live: Optional[str] = None
    featured: bool = False
    status: str = "completed"          # "completed"|"in-progress"


class Skill(BaseModel):
    name: str
    level: int = Field(..., ge=0, le=100)
    icon: str
    category: str


class TimelineEntry(BaseModel):
    """One position on the experience timeline."""

    id: str
    position: str
    company: str
    period: str                        # e.g. "2022 - Present"
    duration: str
    type: str                          # "full-time"|"contract"|...
    description: str
    achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)


class Experience(BaseModel):
    title: str
    description: str
    years: int
    timeline: list[TimelineEntry] = Field(default_factory=list)


class Certificate(BaseModel):
    name: str
    issuer: str
    icon: str
    date: str


class PortfolioDocument(BaseModel):
    """
    Everything the portfolio view renders, fetched once per page load.
    Read-only: nothing in the service mutates it after startup.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    bio: str
    location: str
    email: str
    phone: str
    website: str
    linkedin: str
    github: str
    projects: list[Project] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    experience: Experience
    certificates: list[Certificate] = Field(default_factory=list)
