"""
Agent prompt templates.

Prompt modules call register_prompt() at import time; the prompt server
looks definitions up by name and renders them with the caller's arguments.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


@dataclass(frozen=True, slots=True)
class PromptDefinition:
    """A prompt template with {{variable}} placeholders."""

    name: str
    template_text: str

    # Used when a variable is not supplied or is empty
    defaults: dict[str, str] = field(default_factory=dict)

    # MCP metadata
    title: str = ""
    description: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def variables(self) -> list[str]:
        """Placeholder names in order of first appearance."""
        return list(dict.fromkeys(_PLACEHOLDER_RE.findall(self.template_text)))

    def render(self, **kwargs: str) -> str:
        """Fill placeholders from kwargs, then defaults. Unknown ones are left as-is."""

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            value = kwargs.get(name) or self.defaults.get(name)
            return value if value else match.group(0)

        return _PLACEHOLDER_RE.sub(substitute, self.template_text)


PROMPT_REGISTRY: dict[str, PromptDefinition] = {}


def register_prompt(definition: PromptDefinition) -> PromptDefinition:
    if definition.name in PROMPT_REGISTRY:
        raise ValueError(f"Duplicate prompt name: {definition.name!r}")
    PROMPT_REGISTRY[definition.name] = definition
    return definition


def get_prompt(name: str) -> PromptDefinition:
    try:
        return PROMPT_REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown prompt: {name!r}") from None
