# =============================================================================
# core/models.py : Data Models for Agents, Skills and Weather
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the records shared by the registry, the skill tracker and the
#   weather lookup.  Everything here is a plain dataclass: no framework
#   imports, no I/O.
#
# HANDLES ARE OPAQUE:
#   AgentConfig.model, .backend and the tool handles are whatever the agent
#   framework produces.  core/ never looks inside them; it only passes them
#   through to the agent factory.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


# -----------------------------------------------------------------------------
# AgentConfig: how to build one agent
# -----------------------------------------------------------------------------
# Optional fields are None when absent.  The registry forwards only the ones
# that are set, so the factory never sees an "empty" marker for them.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AgentConfig:
    """Immutable description of one named agent."""

    name: str                          # Unique registry key
    description: str
    system_prompt: str
    tools: Sequence[Any]               # Framework tool handles, in order
    model: Any                         # Chat model handle
    subagents: Optional[Sequence[Any]] = None
    skills: Optional[Sequence[str]] = None   # Skill directory paths (POSIX)
    backend: Any = None                # Filesystem adapter for skill loading

    def __post_init__(self):
        if not self.name:
            raise ValueError("AgentConfig.name must be a non-empty string")


@dataclass(frozen=True)
class RegistryEntry:
    """One registered config and the agent handle built from it."""

    config: AgentConfig
    agent: Any


@dataclass
class AgentSummary:
    """Listing projection of a registered config."""

    name: str
    description: str
    tools: list[str] = field(default_factory=list)


# -----------------------------------------------------------------------------
# SkillDefinition: the keywords that betray a skill's influence on a reply
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SkillDefinition:
    """Keyword set used to detect one skill in message text."""

    keywords: tuple[str, ...]

    def __post_init__(self):
        # Ordered set: keep first occurrence, drop case-insensitive repeats.
        seen = {}
        for keyword in self.keywords:
            seen.setdefault(keyword.lower(), keyword)
        object.__setattr__(self, "keywords", tuple(seen.values()))


# -----------------------------------------------------------------------------
# Weather records
# -----------------------------------------------------------------------------
@dataclass
class Location:
    """Geocoding result for a city name."""

    latitude: float
    longitude: float
    name: str
    country: str


@dataclass
class WeatherReport:
    """Current conditions, formatted for the model (units included)."""

    city: str
    country: str
    temperature: str                   # "18.2°C"
    apparent_temperature: str          # "16.9°C"
    weather: str                       # WMO code rendered as text
    humidity: str                      # "60%"
    wind_speed: str                    # "12.4 km/h"
    source: str
