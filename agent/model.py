# =============================================================================
# agent/model.py : DeepSeek Chat Model (via LiteLlm)
# =============================================================================
#
# DeepSeek speaks the OpenAI chat protocol.  Google ADK reaches it through
# its LiteLlm adapter with the "deepseek/" provider prefix:
#
#     ADK Agent → LiteLlm → DeepSeek API
#
# CONFIGURATION (read when the model is created, after load_dotenv()):
#   DEEPSEEK_API_KEY   : required by the API
#   DEEPSEEK_BASE_URL  : default https://api.deepseek.com/v1
# =============================================================================

import os
from typing import Optional

from google.adk.models.lite_llm import LiteLlm

DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
DEFAULT_MODEL_NAME = "deepseek-chat"


def create_deepseek_model(
    temperature: float = 0,
    max_tokens: Optional[int] = None,
    model_name: str = DEFAULT_MODEL_NAME,
) -> LiteLlm:
    """Create the chat model handle the agents reason with."""
    kwargs = {
        "api_base": os.environ.get("DEEPSEEK_BASE_URL") or DEFAULT_BASE_URL,
        "api_key": os.environ.get("DEEPSEEK_API_KEY"),
        "temperature": temperature,
    }
    if max_tokens is not None:
        kwargs["max_tokens"] = max_tokens

    return LiteLlm(model=f"deepseek/{model_name}", **kwargs)
