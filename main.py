# =============================================================================
# main.py : Entry Point for the Weather Agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py                      # asks "北京今天天气怎么样？"
#   python main.py "上海明天要带伞吗？"
#
# WHAT HAPPENS:
#   1. Registers the weather-agent (DeepSeek + get_weather + skills)
#   2. Sends the query as a one-message conversation
#   3. Prints the agent's final reply
#   4. Scans the new messages for weather-assistant keywords and prints
#      how often the skill appears to have shaped the reply
#
# One run = one tracker session.
# =============================================================================

from dotenv import load_dotenv

# Load DEEPSEEK_API_KEY etc. before anything reads the environment.
load_dotenv()

from agent.cli import configure_logging, query_from_argv, run
from agent.factory import create_agent
from agent.weather_agent import (
    SKILLS_DIR,
    WEATHER_AGENT_NAME,
    WEATHER_SKILL_DEFINITIONS,
    WEATHER_SKILL_PATH,
    register_weather_agent,
)
from core.registry import AgentRegistry
from core.skill_tracker import SkillTracker

DEFAULT_QUERY = "北京今天天气怎么样？"


def _last_content(messages: list) -> str:
    last = messages[-1]
    content = last.get("content") if isinstance(last, dict) else getattr(last, "content", "")
    return "" if content is None else str(content)


async def run_agent(query: str, registry: AgentRegistry, tracker: SkillTracker) -> dict:
    """Ask the registered weather-agent one question and report skill usage."""
    skill_found = WEATHER_SKILL_PATH.exists()

    print("=== 天气查询 Agent (DeepSeek) ===")
    print(f"📦 Skills 配置: {'✅ weather-assistant 已配置' if skill_found else '❌ 未找到 SKILL.md'}")
    print(f"📂 Skills 路径: {SKILLS_DIR.as_posix()}")
    print("")

    tracker.reset()

    if WEATHER_AGENT_NAME not in registry:
        register_weather_agent(registry)
    agent = registry.get(WEATHER_AGENT_NAME)

    print(f"用户: {query}\n")

    result = await agent.invoke({
        "messages": [{"role": "user", "content": query}],
    })
    messages = result["messages"]

    tracker.analyze_messages(messages, WEATHER_SKILL_DEFINITIONS)

    print(f"\n助手: {_last_content(messages)}\n")
    print("\n📊 Skills 使用统计 (基于关键词分析):")
    print(tracker.format())
    print(f"\n💬 消息轮次: {len(messages)}")

    return result


if __name__ == "__main__":
    configure_logging()
    run(run_agent(
        query_from_argv(DEFAULT_QUERY),
        registry=AgentRegistry(factory=create_agent),
        tracker=SkillTracker(),
    ))
