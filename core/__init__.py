# =============================================================================
# core/__init__.py
# =============================================================================
# Framework-free logic: data models, the agent registry, the skill usage
# tracker and the Open-Meteo weather lookup.
#
# Nothing in this package imports Google ADK, LiteLLM or FastMCP.  The agent
# framework is plugged in from agent/ through the registry's factory.
# =============================================================================

from core.models import AgentConfig, AgentSummary, RegistryEntry, SkillDefinition
from core.registry import AgentNotFoundError, AgentRegistry
from core.skill_tracker import SkillTracker, count_keyword_matches

__all__ = [
    "AgentConfig",
    "AgentNotFoundError",
    "AgentRegistry",
    "AgentSummary",
    "RegistryEntry",
    "SkillDefinition",
    "SkillTracker",
    "count_keyword_matches",
]
