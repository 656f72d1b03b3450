# =============================================================================
# tools/weather.py : get_weather Function Tool
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Wraps core.weather.lookup_weather as a plain function the agent can call.
#   The agent framework derives the tool contract from the function name,
#   the type hints and the docstring, so the docstring is written for the
#   model (in Chinese, like the rest of the agent's conversation).
#
#   The result is a JSON string with non-ASCII text left unescaped.
# =============================================================================

import json

from core.weather import lookup_weather


def get_weather(city: str) -> str:
    """查询指定城市的当前真实天气信息，包括实时温度、体感温度、天气状况、湿度、风速等。支持全球城市，中英文城市名均可。

    Args:
        city: 要查询天气的城市名称，例如：北京、上海、Tokyo、New York

    Returns:
        JSON 字符串。找不到城市时包含 error 和 message 字段。
    """
    return json.dumps(lookup_weather(city), ensure_ascii=False)
