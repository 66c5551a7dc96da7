"""
Turn prompt assembly.

Builds the per-turn system instructions from the persona, the session
profile, the soft-ask decision and any retrieved knowledge context, and
renders them together with the conversation into a message list.

Dependencies: langchain_core.prompts, finbot.core.retrieval
System role: Prompt template for the conversational turn
"""

from collections.abc import Iterable, Sequence

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from finbot.configs.retrieval import AnchorRule
from finbot.core.profiling.profile import PROFILE_FIELDS, ProfileField, SessionProfile
from finbot.core.retrieval.retriever import format_context

FIELD_LABELS: dict[str, str] = {
    "name": "name",
    "email": "email",
    "income": "income level",
}

RAG_INSTRUCTIONS = """

KNOWLEDGE CONTEXT INSTRUCTIONS:
- The "Context from knowledge file" section below is authoritative material from the knowledge base.
- When answering, prioritize the information in this context above everything else.
- If the context covers the question, make it the PRIMARY source of your answer.
- Fall back to general knowledge only when the context has nothing relevant.
- When the context answers the question directly (especially with the question's exact wording), answer from that context alone.
- If several passages are given, favour the one that answers the question most directly or repeats its exact phrasing.
{anchor_directives}- Keep your persona and tone, but take the facts from the context when it has them.
- Do not blend the context with general knowledge: if the context has the answer, use only that answer.
- If the context states an answer explicitly, quote or paraphrase it directly."""

TURN_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    MessagesPlaceholder("history"),
])


def profile_facts(profile: SessionProfile) -> list[str]:
    """Known fields rendered as one line each, in canonical order."""
    return [f"User's {FIELD_LABELS[f]} is: {v}" for f, v in profile.known().items()]


def soft_ask_line(field: ProfileField) -> str:
    return f"You should naturally ask for: {field} (but weave it into conversation naturally, don't be direct)"


def anchor_directives(query: str, rules: Iterable[AnchorRule]) -> list[str]:
    """Directives for every anchor rule whose trigger appears in the query."""
    query_lower = query.lower()
    return [
        f'- IMPORTANT: The user asked about "{r.trigger}". Look for the passage that mentions '
        f'"{r.anchor}" and use THAT passage as your answer.'
        for r in rules
        if r.trigger.lower() in query_lower
    ]


def build_system_prompt(
    persona: str,
    profile: SessionProfile,
    ask_field: ProfileField | None = None,
    passages: Sequence[str] = (),
    directives: Sequence[str] = (),
) -> str:
    """
    Assemble the system instructions for one turn.

    Args:
        persona: Base persona text
        profile: Session profile after this turn's merge
        ask_field: Single field to solicit, if any
        passages: Retrieved knowledge passages
        directives: Extra context-usage lines (anchor rules)

    Returns:
        str: Complete system prompt
    """
    prompt = persona

    user_info = profile_facts(profile)
    if ask_field is not None:
        user_info.append(soft_ask_line(ask_field))
    if user_info:
        prompt += "\n\nCurrent user information:\n" + "\n".join(user_info) + "\n"

    asked = [f for f in PROFILE_FIELDS if f in profile.asked_fields]
    if asked:
        prompt += (
            f"\nNote: You have already asked about: {', '.join(asked)}. "
            "Don't ask about these again unless the user brings them up.\n"
        )

    context = format_context(passages)
    if context:
        lines = "".join(f"{d}\n" for d in directives)
        prompt += RAG_INSTRUCTIONS.format(anchor_directives=lines)
    return prompt + context


def render_turn(system_prompt: str, history: Sequence[BaseMessage]) -> list[BaseMessage]:
    """System message followed by the conversation so far."""
    return TURN_PROMPT.format_messages(system_prompt=system_prompt, history=list(history))
