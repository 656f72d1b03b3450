# =============================================================================
# skills_check.py : Does the weather-assistant skill take effect?
# =============================================================================
#
# HOW TO RUN:
#   python skills_check.py
#   python skills_check.py "对比一下广州和深圳的天气"
#
# The agent here gets only a one-line prompt.  The default question compares
# two cities, which the skill tells the agent how to handle: one get_weather
# call per city, then a comparison.  Two tool-call messages in the output
# mean the skill was followed.
# =============================================================================

from dotenv import load_dotenv

load_dotenv()

from agent.backend import create_tracked_backend
from agent.cli import configure_logging, query_from_argv, run
from agent.factory import create_agent
from agent.model import create_deepseek_model
from agent.prompt import SKILLS_CHECK_PROMPT
from agent.weather_agent import PROJECT_ROOT, SKILLS_DIR
from tools.weather import get_weather

DEFAULT_QUERY = "对比一下北京和上海的天气，哪个城市更适合出行？"


def count_tool_call_messages(messages: list) -> int:
    return sum(1 for message in messages if message.get("tool_calls"))


async def check_skills(query: str) -> dict:
    print(f"📁 Skills 目录路径: {SKILLS_DIR.as_posix()}")
    print(f"📁 项目根目录: {PROJECT_ROOT}\n")

    agent = create_agent(
        name="skills-check",
        model=create_deepseek_model(temperature=0),
        system_prompt=SKILLS_CHECK_PROMPT,
        tools=[get_weather],
        skills=[SKILLS_DIR.as_posix()],
        backend=create_tracked_backend(PROJECT_ROOT),
    )

    print("=== 测试 Skills 加载 ===\n")
    print(f"用户: {query}\n")

    result = await agent.invoke({
        "messages": [{"role": "user", "content": query}],
    })
    messages = result["messages"]

    print("\n=== Agent 回复 ===")
    print(messages[-1]["content"])
    print(f"\n📊 工具调用次数: {count_tool_call_messages(messages)}")

    return result


if __name__ == "__main__":
    configure_logging()
    run(check_skills(query_from_argv(DEFAULT_QUERY)))
