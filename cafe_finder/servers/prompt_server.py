"""
Agent Scope Prompt MCP Server.

Serves the local prompt templates from PROMPT_REGISTRY, substituting
variables from the prompt arguments.
Mounted into the registry via tool_registry.py.
"""

from fastmcp import FastMCP

from cafe_finder.infrastructure.trace_decorator import traced
from cafe_finder.prompts import get_prompt

# Import prompt modules to trigger registration in PROMPT_REGISTRY
import cafe_finder.prompts.cafe_concierge_scope  # noqa: F401

prompt_mcp = FastMCP("agent_prompts")


@prompt_mcp.prompt(
    name="cafe_concierge_scope",
    title="Café Concierge Agent Scope Prompt",
    description=(
        "Agent scope prompt that guides the LLM on how to use the café "
        "search, discovery session and place lookup tools. "
        "Supports optional variable: user_name."
    ),
    tags={"agent-scope", "orchestration", "cafe-finder"},
)
@traced(span_name="mcp.prompt.cafe_concierge_scope", handler_type="prompt")
async def cafe_concierge_scope(
    user_name: str = "",
) -> str:
    """Render the agent scope prompt.

    Args:
        user_name: Optional user name for a personalized greeting.
    """
    return get_prompt("cafe_concierge_scope").render(user_name=user_name)
