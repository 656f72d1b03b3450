# =============================================================================
# agent/weather_agent.py : The Weather Agent
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Puts together the "weather-agent": DeepSeek model + get_weather tool +
#   the weather-assistant skill, and registers it.
#
#   Nothing is built at import time.  Entry points call
#   register_weather_agent() with their own registry.
#
# TOOL TRANSPORT (WEATHER_TOOL_TRANSPORT):
#   function (default) → get_weather runs in-process as a function tool
#   mcp                → ADK spawns tools/mcp_server.py and calls it over stdio
# =============================================================================

import os
from pathlib import Path
import sys
from typing import Any, Optional

from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.backend import create_tracked_backend
from agent.model import create_deepseek_model
from agent.prompt import WEATHER_ASSISTANT_PROMPT
from core.models import AgentConfig, SkillDefinition
from core.registry import AgentRegistry
from tools.weather import get_weather

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SKILLS_DIR = PROJECT_ROOT / "skills"
WEATHER_SKILL_PATH = SKILLS_DIR / "weather-assistant" / "SKILL.md"

WEATHER_AGENT_NAME = "weather-agent"
WEATHER_AGENT_DESCRIPTION = "天气查询 Agent — 使用 DeepSeek 模型，支持自然语言查询城市天气"

# Phrases the weather-assistant skill asks the agent to use in its replies.
WEATHER_SKILL_DEFINITIONS = {
    "weather-assistant": SkillDefinition(
        keywords=("温度", "体感", "湿度", "风速", "穿衣建议", "出行建议", "天气状况"),
    ),
}


def weather_tools() -> list:
    """The weather tool, in-process or served by the FastMCP server."""
    transport = os.environ.get("WEATHER_TOOL_TRANSPORT", "function").lower()
    if transport == "mcp":
        return [
            MCPToolset(
                connection_params=StdioServerParameters(
                    command=sys.executable,
                    args=["-m", "tools.mcp_server"],
                    cwd=str(PROJECT_ROOT),
                ),
            )
        ]
    return [get_weather]


def build_weather_agent_config(model: Any = None, backend: Any = None) -> AgentConfig:
    return AgentConfig(
        name=WEATHER_AGENT_NAME,
        description=WEATHER_AGENT_DESCRIPTION,
        system_prompt=WEATHER_ASSISTANT_PROMPT,
        tools=weather_tools(),
        model=model if model is not None else create_deepseek_model(temperature=0),
        skills=[SKILLS_DIR.as_posix()],
        backend=backend if backend is not None else create_tracked_backend(PROJECT_ROOT),
    )


def register_weather_agent(
    registry: AgentRegistry,
    model: Any = None,
    backend: Optional[Any] = None,
) -> Any:
    """Build the weather-agent config and register it; returns the agent handle."""
    return registry.register(build_weather_agent_config(model=model, backend=backend))
