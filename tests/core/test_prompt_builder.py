"""
Test suite for turn prompt assembly.

System role: Verification of system instructions sent to generation
"""

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from finbot.configs.retrieval import AnchorRule
from finbot.core.agent.persona import SYSTEM_PERSONA
from finbot.core.agent.prompt_builder import (
    anchor_directives,
    build_system_prompt,
    render_turn,
)
from finbot.core.profiling.profile import SessionProfile


class TestBuildSystemPrompt:
    """Test suite for build_system_prompt."""

    def test_known_facts_and_soft_ask_should_be_listed(self) -> None:
        # Arrange
        profile = SessionProfile(id="s1", name="Jane", email="jane@example.com")

        # Act
        prompt = build_system_prompt(SYSTEM_PERSONA, profile, ask_field="income")

        # Assert
        assert prompt.startswith(SYSTEM_PERSONA)
        assert "Current user information:" in prompt
        assert "User's name is: Jane" in prompt
        assert "User's email is: jane@example.com" in prompt
        assert "You should naturally ask for: income" in prompt
        assert "Context from knowledge file:" not in prompt
        assert "KNOWLEDGE CONTEXT INSTRUCTIONS" not in prompt

    def test_fresh_profile_should_get_persona_only(self) -> None:
        prompt = build_system_prompt("persona", SessionProfile(id="s1"))

        assert prompt == "persona"

    def test_asked_fields_should_produce_do_not_reask_note(self) -> None:
        profile = SessionProfile(id="s1", asked_fields={"income", "name"})

        prompt = build_system_prompt("persona", profile)

        assert "You have already asked about: name, income." in prompt

    def test_passages_should_add_instructions_and_context(self) -> None:
        # Act
        prompt = build_system_prompt(
            "persona",
            SessionProfile(id="s1"),
            passages=["The only good information is inside information."],
            directives=["- IMPORTANT: use the anchored passage."],
        )

        # Assert
        assert "KNOWLEDGE CONTEXT INSTRUCTIONS" in prompt
        assert "- IMPORTANT: use the anchored passage.\n" in prompt
        assert prompt.endswith(
            "\nContext from knowledge file:\n---\nThe only good information is inside information.\n---\n"
        )

    def test_directives_without_passages_should_be_ignored(self) -> None:
        prompt = build_system_prompt("persona", SessionProfile(id="s1"), directives=["- IMPORTANT: x"])

        assert "IMPORTANT" not in prompt


class TestAnchorDirectives:
    """Test suite for anchor_directives."""

    def test_only_triggered_rules_should_produce_directives(self) -> None:
        rules = [
            AnchorRule(trigger="only good information", anchor="inside information"),
            AnchorRule(trigger="dead cat", anchor="bounce"),
        ]

        directives = anchor_directives("What is the ONLY good information?", rules)

        assert len(directives) == 1
        assert '"inside information"' in directives[0]


class TestRenderTurn:
    """Test suite for render_turn."""

    def test_should_put_system_prompt_first(self) -> None:
        history = [HumanMessage(content="hi {not a template}"), AIMessage(content="yo")]

        messages = render_turn("persona {braces}", history)

        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == "persona {braces}"
        assert messages[1:] == history
