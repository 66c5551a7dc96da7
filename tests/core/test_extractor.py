"""
Test suite for the profile field extractor.

Covers ordered pattern rules, the JSON fallback and its failure modes.

System role: Verification of per-turn field extraction
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from finbot.core.exceptions import ExtractionError, GenerationError
from finbot.core.profiling.extractor import (
    INCOME_RULES,
    FieldExtractor,
    apply_rules,
    extract_with_patterns,
    parse_extraction_json,
)


class TestPatternRules:
    """Test suite for the deterministic fast path."""

    def test_name_and_email_should_be_extracted_together(self) -> None:
        # Act
        result = extract_with_patterns("Hi, I'm Jane Doe, email jane@example.com")

        # Assert
        assert result.present() == {"name": "Jane Doe", "email": "jane@example.com"}

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("call me Maverick", "Maverick"),
            ("my name is Ray Dalio", "Ray Dalio"),
            ("Hey, I'm Sam", "Sam"),
            ("Mike here, what's moving today?", "Mike"),
            ("i am Priya", "Priya"),
        ],
    )
    def test_name_rules(self, text: str, expected: str) -> None:
        assert extract_with_patterns(text).name == expected

    def test_lowercase_word_should_not_be_a_name(self) -> None:
        assert extract_with_patterns("i am bullish on chips").name is None

    def test_shorthand_amount_should_win_over_keyword_amount(self) -> None:
        """Test income rule priority: shorthand before keyword-anchored."""
        result = extract_with_patterns("I make about 60000 a year, maybe 75k soon")

        assert result.income == "75k"

    def test_keyword_rule_should_return_amount(self) -> None:
        assert extract_with_patterns("I earn about 60,000 a year").income == "60,000"

    def test_bare_number_should_be_last_resort(self) -> None:
        assert extract_with_patterns("Around 85000 I guess").income == "85000"

    def test_currency_shorthand(self) -> None:
        assert extract_with_patterns("working with $120 thousand").income == "$120 thousand"

    def test_rules_should_be_tried_in_order(self) -> None:
        """Test apply_rules stops at the first matching rule."""
        assert apply_rules("budget is 40k", INCOME_RULES) == "40k"
        assert apply_rules("nothing numeric", INCOME_RULES) is None

    def test_text_without_fields_should_give_empty_result(self) -> None:
        assert extract_with_patterns("what do you think about NVDA?").is_empty()

    def test_digits_inside_email_should_not_become_income(self) -> None:
        result = extract_with_patterns("reach me at j.42@example.com")

        assert result.email == "j.42@example.com"
        assert result.income is None

    def test_income_next_to_email_should_still_be_found(self) -> None:
        result = extract_with_patterns("j.42@example.com, and I make 75k")

        assert result.email == "j.42@example.com"
        assert result.income == "75k"


class TestParseExtractionJson:
    """Test suite for parse_extraction_json."""

    def test_should_keep_known_non_empty_keys(self) -> None:
        result = parse_extraction_json('{"name": "Sam", "email": "", "income": 50000, "age": 30}')

        assert result.present() == {"name": "Sam", "income": "50000"}

    @pytest.mark.parametrize("raw", ["not json", "[1, 2]", '"text"'])
    def test_invalid_reply_should_raise(self, raw: str) -> None:
        with pytest.raises(ExtractionError):
            parse_extraction_json(raw)


class TestFieldExtractor:
    """Test suite for FieldExtractor.extract_fields."""

    @pytest.mark.asyncio
    async def test_fast_path_hit_should_not_call_model(self, scripted_generator) -> None:
        # Arrange
        extractor = FieldExtractor(generator=scripted_generator)

        # Act
        result = await extractor.extract_fields("Hi, I'm Jane Doe, email jane@example.com")

        # Assert
        assert result.name == "Jane Doe"
        assert result.email == "jane@example.com"
        assert scripted_generator.calls == []

    @pytest.mark.asyncio
    async def test_fast_path_miss_should_use_json_fallback(self, make_generator) -> None:
        # Arrange
        generator = make_generator(['{"name": "Sam", "income": "fifty grand"}'])
        extractor = FieldExtractor(generator=generator, temperature=0.1)

        # Act
        result = await extractor.extract_fields("folks call my desk the sam show")

        # Assert
        assert result.present() == {"name": "Sam", "income": "fifty grand"}
        call = generator.calls[0]
        assert call["json_mode"] is True
        assert call["temperature"] == 0.1
        assert "folks call my desk the sam show" in call["messages"][-1].content

    @pytest.mark.asyncio
    async def test_malformed_fallback_should_degrade_to_empty(self, make_generator) -> None:
        extractor = FieldExtractor(generator=make_generator(["sure! here you go"]))

        result = await extractor.extract_fields("what about rates?")

        assert result.is_empty()

    @pytest.mark.asyncio
    async def test_fallback_call_failure_should_degrade_to_empty(self) -> None:
        generator = MagicMock()
        generator.generate = AsyncMock(side_effect=GenerationError("quota exceeded"))
        extractor = FieldExtractor(generator=generator)

        result = await extractor.extract_fields("what about rates?")

        assert result.is_empty()
        generator.generate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_blank_text_should_not_call_model(self, scripted_generator) -> None:
        extractor = FieldExtractor(generator=scripted_generator)

        result = await extractor.extract_fields("   ")

        assert result.is_empty()
        assert scripted_generator.calls == []

    @pytest.mark.asyncio
    async def test_without_generator_should_return_fast_path(self) -> None:
        extractor = FieldExtractor()

        assert (await extractor.extract_fields("what about rates?")).is_empty()
