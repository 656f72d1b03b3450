# =============================================================================
# tools/mcp_server.py : FastMCP Weather Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes the weather lookup as an MCP tool.  The weather agent uses it
#   when WEATHER_TOOL_TRANSPORT=mcp; any other MCP client can use it too.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Spawned by the agent over stdio (see agent/weather_agent.py)
#
# LOGGING:
#   Logs go to STDERR.  STDOUT is the MCP transport; anything else written
#   there corrupts the protocol stream.
# =============================================================================

import json
import logging
import sys

from fastmcp import FastMCP

from core.weather import lookup_weather

_CYAN = "\033[36m"     # Requests
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status
_RESET = "\033[0m"


def _log_request(tool_name: str, **params) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    logging.info(f"{_GREEN}  ← {tool_name} response: {result}{_RESET}")
    return result


mcp = FastMCP("weather-tools")


@mcp.tool()
def get_weather(city: str) -> str:
    """查询指定城市的当前真实天气信息，包括实时温度、体感温度、天气状况、湿度、风速等。支持全球城市，中英文城市名均可。

    Args:
        city: 要查询天气的城市名称，例如：北京、上海、Tokyo、New York

    Returns:
        JSON 字符串。找不到城市时包含 error 和 message 字段。
    """
    _log_request("get_weather", city=city)

    result = lookup_weather(city)
    if result.get("error"):
        _log_status(f"City not found: {city!r}")
    else:
        _log_status(f"Resolved to {result['city']}, {result['country']}")

    return _log_response("get_weather", json.dumps(result, ensure_ascii=False))


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    mcp.run()
