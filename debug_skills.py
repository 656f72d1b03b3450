# =============================================================================
# debug_skills.py : Are skills found and loaded at all?
# =============================================================================
#
# HOW TO RUN:
#   python debug_skills.py
#
# Prints every path involved in skill loading, builds an agent with the
# filesystem backend, lists the tools the agent ended up with (a
# SkillToolset appears only when at least one SKILL.md was loaded) and runs
# one simple query.
# =============================================================================

from dotenv import load_dotenv

load_dotenv()

from agent.backend import create_tracked_backend
from agent.cli import configure_logging, run
from agent.factory import create_agent
from agent.model import create_deepseek_model
from agent.prompt import DEBUG_PROMPT
from agent.weather_agent import PROJECT_ROOT, SKILLS_DIR, WEATHER_SKILL_PATH
from core.registry import tool_name
from tools.weather import get_weather

QUERY = "北京今天天气怎么样？"


async def debug_skills() -> None:
    print("=== Skills 路径调试信息 ===")
    print(f"📁 projectRoot: {PROJECT_ROOT}")
    print(f"📁 skillsDir (POSIX): {SKILLS_DIR.as_posix()}")
    print(f"📁 Skills 实际路径存在: {SKILLS_DIR.exists()}")
    print(f"📄 SKILL.md 存在: {WEATHER_SKILL_PATH.exists()}")
    print("")

    backend = create_tracked_backend(PROJECT_ROOT)

    print("=== 创建 Agent（带 Skills + Backend）===")
    handle = create_agent(
        name="debug-skills",
        model=create_deepseek_model(temperature=0),
        system_prompt=DEBUG_PROMPT,
        tools=[get_weather],
        skills=[SKILLS_DIR.as_posix()],
        backend=backend,
    )
    print("✅ Agent 创建成功\n")

    print("=== Agent 内部状态 ===")
    print(f"Agent name: {handle.name}")
    print(f"Agent tools: {[tool_name(tool) for tool in handle.agent.tools]}")
    print(f"Loaded skills: {backend.loaded_skills}")

    print("\n=== 测试简单查询 ===")
    print(f"用户: {QUERY}\n")
    try:
        result = await handle.invoke({
            "messages": [{"role": "user", "content": QUERY}],
        })
    except Exception as exc:
        print(f"❌ 查询失败: {exc}")
        raise

    print("✅ 查询成功")
    print("\n助手回复:")
    print(result["messages"][-1]["content"])


if __name__ == "__main__":
    configure_logging()
    run(debug_skills())
