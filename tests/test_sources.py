"""Tests for outline generation."""

import pytest

from outlinemap.exceptions import GenerationError
from outlinemap.outline.parser import parse_outline
from outlinemap.sources import DEFAULT_OUTLINE, TemplateOutlineGenerator, generate_outline


class TestTemplateOutlineGenerator:
    def test_prepared_topic(self):
        """Known topics get their prepared outline."""
        text = TemplateOutlineGenerator()("Career Tips")
        assert text.startswith("# Career Tips\n")

    def test_prepared_topic_ignores_case_and_spaces(self):
        """Topic matching ignores case and surrounding spaces."""
        assert TemplateOutlineGenerator()("  plan TRIP ") == TemplateOutlineGenerator()("plan trip")

    def test_generic_outline_uses_topic(self):
        """Other topics get a generic outline titled after them."""
        root = parse_outline(TemplateOutlineGenerator()("quantum computing"))
        assert root.label == "Quantum computing"
        assert [c.label for c in root.children] == ["Key Concepts", "Applications", "Resources"]


class TestGenerateOutline:
    """Validation around the generator call."""

    def test_default_generator(self):
        """Without a generator the templates are used."""
        assert generate_outline("learn about AI").startswith("# Artificial Intelligence")

    def test_custom_generator(self):
        """A caller-supplied generator is called with the topic."""
        assert generate_outline("x", lambda topic: f"# {topic}") == "# x"

    @pytest.mark.parametrize("topic", ["", "   "])
    def test_blank_topic(self, topic):
        """Blank topics are rejected before generating."""
        with pytest.raises(GenerationError, match="blank"):
            generate_outline(topic)

    def test_generator_failure_is_wrapped(self):
        """Generator errors come back as GenerationError with the cause attached."""
        def failing(topic):
            raise ConnectionError("service down")

        with pytest.raises(GenerationError) as exc_info:
            generate_outline("anything", failing)
        assert exc_info.value.topic == "anything"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert "service down" in str(exc_info.value)

    def test_empty_output_rejected(self):
        """A generator that returns only blank lines fails."""
        with pytest.raises(GenerationError, match="no outline content"):
            generate_outline("anything", lambda topic: "\n\n")


class TestDefaultOutline:
    def test_welcome_outline_parses(self):
        """The welcome outline parses into its three sections."""
        root = parse_outline(DEFAULT_OUTLINE)
        assert root.label == "Welcome to Mindmap Maker"
        assert [c.label for c in root.children] == ["Getting Started", "Features", "Export Options"]
        assert max(n.depth for n in root.walk()) == 3
