from .client import CompletionClient, FALLBACK_IDEAS_TEXT, generate_ideas
from .prompt import IDEA_PROMPT_TEMPLATE, build_prompt

__all__ = [
    "CompletionClient",
    "FALLBACK_IDEAS_TEXT",
    "generate_ideas",
    "IDEA_PROMPT_TEMPLATE",
    "build_prompt",
]
