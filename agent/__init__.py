# =============================================================================
# agent/__init__.py
# =============================================================================
# Google ADK wiring.
#
#   agent/model.py          → DeepSeek chat model via LiteLlm
#   agent/backend.py        → filesystem backend that loads skill documents
#   agent/factory.py        → create_agent() and the AdkAgentHandle wrapper
#   agent/prompt.py         → system prompts
#   agent/weather_agent.py  → the weather-agent config and registration
#
# Business logic stays in core/; tool wrappers stay in tools/.
# =============================================================================

from agent.backend import FilesystemBackend, create_tracked_backend
from agent.factory import AdkAgentHandle, create_agent
from agent.model import create_deepseek_model

__all__ = [
    "AdkAgentHandle",
    "FilesystemBackend",
    "create_agent",
    "create_deepseek_model",
    "create_tracked_backend",
]
