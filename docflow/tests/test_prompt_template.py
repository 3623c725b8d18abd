"""Tests for prompt template rendering."""

from docflow.utils.prompt_template import (
    INPUT_FALLBACK_TEXT,
    find_placeholders,
    render_prompt_template,
)


class TestRenderPromptTemplate:
    """Test placeholder substitution."""

    def test_substitutes_supplied_variables(self):
        result = render_prompt_template(
            "Hello {name}, flow={flowName}", {"name": "Start", "flowName": "Demo"}
        )
        assert result == "Hello Start, flow=Demo"

    def test_replaces_every_occurrence(self):
        result = render_prompt_template("{x}-{x}-{x}", {"x": "1"})
        assert result == "1-1-1"

    def test_input_without_variable_gets_fallback(self):
        """A leftover {input} should become the fallback text."""
        result = render_prompt_template("Task: {input}", {})
        assert result == f"Task: {INPUT_FALLBACK_TEXT}"
        assert INPUT_FALLBACK_TEXT == "Please analyze this flow state and provide insights."

    def test_supplied_input_wins_over_fallback(self):
        result = render_prompt_template("Task: {input}", {"input": "summarize"})
        assert result == "Task: summarize"

    def test_unknown_placeholder_left_verbatim(self):
        result = render_prompt_template("Look at {foo} in {flowName}", {"flowName": "Demo"})
        assert result == "Look at {foo} in Demo"

    def test_keys_are_case_sensitive(self):
        result = render_prompt_template("{StateName}", {"stateName": "A"})
        assert result == "{StateName}"

    def test_substituted_text_is_not_rescanned(self):
        """Values that look like placeholders should be emitted literally."""
        result = render_prompt_template("{a} {b}", {"a": "{b}", "b": "x"})
        assert result == "{b} x"

    def test_input_from_substituted_value_gets_fallback(self):
        """An {input} left after substitution gets the fallback, wherever it came from."""
        result = render_prompt_template("{stateName}", {"stateName": "{input}"})
        assert result == INPUT_FALLBACK_TEXT

    def test_supplied_input_value_not_replaced(self):
        """With input supplied, a literal {input} from a value is kept."""
        result = render_prompt_template("{input}", {"input": "{input}"})
        assert result == "{input}"

    def test_template_without_placeholders_unchanged(self):
        assert render_prompt_template("plain text", {"x": "y"}) == "plain text"


class TestFindPlaceholders:
    def test_lists_names_once_in_order(self):
        template = "Analyze {stateName} in {flowName}: {input} ({stateName})"
        assert find_placeholders(template) == ["stateName", "flowName", "input"]

    def test_empty_template(self):
        assert find_placeholders("") == []
