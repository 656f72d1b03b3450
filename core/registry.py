# =============================================================================
# core/registry.py : Agent Configuration Registry
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Keeps every named agent the application has built, together with the
#   config it was built from.  register() calls the agent factory exactly
#   once and stores the result; later lookups never rebuild anything.
#
# DUPLICATE NAMES:
#   Registering a name twice replaces the earlier entry (last write wins).
#   Config and agent live in one RegistryEntry, so they are always swapped
#   together.  The name keeps its first position in list_names().
#
# THE FACTORY:
#   The registry does not know which agent framework is in use.  It is given
#   a factory callable (agent.factory.create_agent in this project) and
#   passes it keyword arguments built by factory_kwargs().
# =============================================================================

import logging
from typing import Any, Callable, Optional

from core.models import AgentConfig, AgentSummary, RegistryEntry

AgentFactory = Callable[..., Any]

_OPTIONAL_FIELDS = ("subagents", "skills", "backend")


class AgentNotFoundError(LookupError):
    """Raised when a name is looked up that was never registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f'Agent "{name}" not found. Available: {", ".join(available)}')


def factory_kwargs(config: AgentConfig) -> dict[str, Any]:
    """Keyword arguments for the agent factory.

    Optional fields are included only when set.
    """
    kwargs = {
        "name": config.name,
        "description": config.description,
        "model": config.model,
        "system_prompt": config.system_prompt,
        "tools": list(config.tools),
    }
    for field_name in _OPTIONAL_FIELDS:
        value = getattr(config, field_name)
        if value is not None:
            kwargs[field_name] = value
    return kwargs


def tool_name(tool: Any) -> str:
    """Best-effort display name of a framework tool handle."""
    name = getattr(tool, "name", None) or getattr(tool, "__name__", None)
    return name if isinstance(name, str) else type(tool).__name__


class AgentRegistry:
    """Named agents and the configs that built them."""

    def __init__(self, factory: AgentFactory):
        self._factory = factory
        self._entries: dict[str, RegistryEntry] = {}

    def register(self, config: AgentConfig) -> Any:
        agent = self._factory(**factory_kwargs(config))
        self._entries[config.name] = RegistryEntry(config=config, agent=agent)
        logging.info(f"[AgentRegistry] Registered agent: {config.name}")
        return agent

    def get(self, name: str) -> Any:
        entry = self._entries.get(name)
        if entry is None:
            raise AgentNotFoundError(name, self.list_names())
        return entry.agent

    def get_config(self, name: str) -> Optional[AgentConfig]:
        entry = self._entries.get(name)
        return entry.config if entry else None

    def list_names(self) -> list[str]:
        return list(self._entries)

    def list_all(self) -> list[AgentSummary]:
        return [
            AgentSummary(
                name=entry.config.name,
                description=entry.config.description,
                tools=[tool_name(tool) for tool in entry.config.tools],
            )
            for entry in self._entries.values()
        ]

    def remove(self, name: str) -> None:
        self._entries.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
