# =============================================================================
# agent/factory.py : Google ADK Agent Factory
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds agents for the registry (core/registry.py) and hides Google ADK
#   behind one small capability:
#
#       await handle.invoke({"messages": [...]})  →  {"messages": [...]}
#
#   Callers hand in a conversation as plain dicts ({"role", "content"}) and
#   get the same conversation back with the agent's new turns appended.
#   Runner, sessions and events stay inside this module.
#
# HOW AN INVOCATION RUNS:
#   1. A fresh in-memory session is created
#   2. Every message but the last is replayed into it as history
#   3. The last message is sent as the new user turn
#   4. ADK events (text, tool calls, tool results) become dict messages
#
#   There is no timeout and no retry.  Model, network and tool errors
#   propagate to the caller.
# =============================================================================

import json
import re
from typing import Any, Optional, Sequence

from google.adk.agents import Agent
from google.adk.events import Event
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.adk.tools import skill_toolset
from google.genai import types

from agent.backend import FilesystemBackend
from core.models import AgentConfig
from core.registry import factory_kwargs

APP_NAME = "weather_agents"
USER_ID = "cli_user"


def _agent_identifier(name: str) -> str:
    """ADK agent names must be Python identifiers: "weather-agent" → "weather_agent"."""
    identifier = re.sub(r"\W", "_", name)
    return identifier if identifier.isidentifier() else f"agent_{identifier}"


# =============================================================================
# Message conversion (plain dicts ↔ ADK content/events)
# =============================================================================
def _message_field(message: Any, key: str, default: Any = None) -> Any:
    if isinstance(message, dict):
        return message.get(key, default)
    return getattr(message, key, default)


def _tool_response(content: Any) -> dict:
    """Tool message content back into a function_response payload."""
    if isinstance(content, dict):
        return content
    try:
        payload = json.loads(content)
    except (TypeError, ValueError):
        payload = None
    return payload if isinstance(payload, dict) else {"result": content}


def _to_content(message: Any) -> types.Content:
    """Inverse of _event_messages: tool calls and results keep their structure."""
    role = _message_field(message, "role")
    text = _message_field(message, "content")

    if role == "tool":
        return types.Content(role="user", parts=[types.Part(
            function_response=types.FunctionResponse(
                id=_message_field(message, "tool_call_id"),
                name=_message_field(message, "name"),
                response=_tool_response(text),
            )
        )])

    parts = []
    if text:
        parts.append(types.Part(text=str(text)))
    for call in _message_field(message, "tool_calls") or []:
        parts.append(types.Part(function_call=types.FunctionCall(
            id=call.get("id"),
            name=call["name"],
            args=call.get("args") or {},
        )))
    if not parts:
        parts.append(types.Part(text="" if text is None else str(text)))

    return types.Content(role="user" if role == "user" else "model", parts=parts)


def _event_messages(event: Event) -> list[dict]:
    """Convert one ADK event into zero or more dict messages."""
    if not event.content or not event.content.parts:
        return []

    messages = []
    for part in event.content.parts:
        if part.function_call:
            messages.append({
                "role": "assistant",
                "content": "",
                "tool_calls": [{
                    "id": part.function_call.id,
                    "name": part.function_call.name,
                    "args": dict(part.function_call.args or {}),
                }],
            })
        elif part.function_response:
            messages.append({
                "role": "tool",
                "tool_call_id": part.function_response.id,
                "name": part.function_response.name,
                "content": json.dumps(part.function_response.response, ensure_ascii=False, default=str),
            })
        elif part.text:
            messages.append({"role": "assistant", "content": part.text})
    return messages


# =============================================================================
# AdkAgentHandle: the only thing callers get to hold
# =============================================================================
class AdkAgentHandle:
    """Runs one ADK agent on a dict-message conversation."""

    def __init__(self, agent: Agent, session_service: Optional[InMemorySessionService] = None):
        self.agent = agent
        self._session_service = session_service or InMemorySessionService()
        self._runner = Runner(
            agent=agent,
            app_name=APP_NAME,
            session_service=self._session_service,
        )

    @property
    def name(self) -> str:
        return self.agent.name

    async def invoke(self, conversation: dict) -> dict:
        messages = list(conversation.get("messages") or [])
        if not messages:
            raise ValueError("conversation must contain at least one message")

        session = await self._session_service.create_session(
            app_name=APP_NAME,
            user_id=USER_ID,
        )
        for message in messages[:-1]:
            author = "user" if _message_field(message, "role") == "user" else self.agent.name
            await self._session_service.append_event(
                session,
                Event(
                    invocation_id=Event.new_id(),
                    author=author,
                    content=_to_content(message),
                ),
            )

        new_messages = []
        async for event in self._runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=_to_content(messages[-1]),
        ):
            new_messages.extend(_event_messages(event))

        return {"messages": messages + new_messages}


# =============================================================================
# Factory
# =============================================================================
def _as_adk_agent(subagent: Any) -> Any:
    if isinstance(subagent, AdkAgentHandle):
        return subagent.agent
    if isinstance(subagent, AgentConfig):
        return create_agent(**factory_kwargs(subagent)).agent
    return subagent


def create_agent(
    *,
    name: str,
    model: Any,
    system_prompt: str,
    tools: Sequence[Any],
    description: str = "",
    subagents: Optional[Sequence[Any]] = None,
    skills: Optional[Sequence[str]] = None,
    backend: Optional[FilesystemBackend] = None,
) -> AdkAgentHandle:
    """Build an ADK agent and wrap it in an AdkAgentHandle.

    Args:
        name: Registry name; converted to a valid ADK agent name.
        model: Chat model handle (see agent/model.py).
        system_prompt: The agent's instruction.
        tools: Function tools or toolsets.
        description: Shown to a parent agent when this one is a sub-agent.
        subagents: AgentConfigs, AdkAgentHandles or raw ADK agents.
        skills: Skill directories, or folders of them, to load.
        backend: Resolves and loads skill paths.  Defaults to the current
            working directory.

    Returns:
        The handle callers invoke.
    """
    agent_tools = list(tools)
    if skills is not None:
        fs = backend if backend is not None else FilesystemBackend(".")
        loaded = fs.load_skills(skills)
        if loaded:
            agent_tools.append(skill_toolset.SkillToolset(skills=loaded))

    kwargs = {}
    if subagents is not None:
        kwargs["sub_agents"] = [_as_adk_agent(subagent) for subagent in subagents]

    agent = Agent(
        name=_agent_identifier(name),
        model=model,
        description=description,
        instruction=system_prompt,
        tools=agent_tools,
        **kwargs,
    )
    return AdkAgentHandle(agent)
