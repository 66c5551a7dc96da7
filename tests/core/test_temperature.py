"""
Test suite for the generation temperature policy.

System role: Verification of sampling parameter selection
"""

from finbot.core.agent.temperature import TemperaturePolicy


class TestTemperaturePolicy:
    """Test suite for TemperaturePolicy.select."""

    def test_no_context_should_use_default(self) -> None:
        policy = TemperaturePolicy(exact_phrases=["only good information"])

        assert policy.select("what is the only good information", has_context=False) == 0.6

    def test_context_should_lower_temperature(self) -> None:
        assert TemperaturePolicy().select("what moves oil?", has_context=True) == 0.3

    def test_exact_phrase_with_context_should_use_exact(self) -> None:
        policy = TemperaturePolicy(exact_phrases=["Only Good Information"])

        assert policy.needs_exact_answer("so what's the only good information?")
        assert policy.select("so what's the only good information?", has_context=True) == 0.1

    def test_default_phrase_list_should_be_empty(self) -> None:
        assert not TemperaturePolicy().needs_exact_answer("only good information")
