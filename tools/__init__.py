# =============================================================================
# tools/__init__.py
# =============================================================================
# Tool wrappers around core/ logic.
#
#   tools/weather.py     → get_weather as a plain function tool (in-process)
#   tools/mcp_server.py  → the same tool served over MCP by FastMCP
#
# Tools format input and output only.  They hold no business logic and know
# nothing about the agent framework.
# =============================================================================

from tools.weather import get_weather

__all__ = ["get_weather"]
