"""Tests for TreeBuilder: event handling, text accumulation and parse driving."""

import logging

import pytest

from lightdom.shared import XMLParseError
from lightdom.tree import Document, TreeBuilder


def build(xml: bytes, process_namespaces: bool = False) -> Document:
    """Parse ``xml`` into a fresh document, failing the test on errors."""
    document = Document(process_namespaces=process_namespaces)
    error = document.read_xml_data(xml)
    assert error is None, error
    return document


class TestTreeBuilderEvents:
    """Test the state machine by feeding events directly."""

    def test_initial_state(self) -> None:
        """Test a new builder points at the document."""
        document = Document()
        builder = TreeBuilder(document, b"")

        assert builder.current_parent is document
        assert builder.current_element is None
        assert builder.current_value == ""
        assert builder.error is None

    def test_start_element_adds_child_and_descends(self) -> None:
        """Test start_element creates the element under the current parent."""
        document = Document()
        builder = TreeBuilder(document, b"")

        builder.start_element("root", {"a": "1"}, "urn:test")
        builder.start_element("child", {})

        root = document.root
        assert root.attributes == {"a": "1"}
        assert root.namespace_uri == "urn:test"
        assert builder.current_parent is root.children[0]
        assert builder.current_element is root.children[0]

    def test_end_element_moves_to_parent(self) -> None:
        """Test end_element pops back to the enclosing element."""
        document = Document()
        builder = TreeBuilder(document, b"")

        builder.start_element("root", {})
        builder.start_element("child", {})
        builder.end_element("child")
        assert builder.current_parent is document.root

        builder.end_element("root")
        assert builder.current_parent is document

    def test_characters_accumulate_and_strip_whole_buffer(self) -> None:
        """Test each fragment re-strips everything seen so far."""
        document = Document()
        builder = TreeBuilder(document, b"")
        builder.start_element("root", {})

        builder.characters("  ")
        assert document.root.value is None

        builder.characters("ab ")
        assert document.root.value == "ab"

        builder.characters(" cd\n")
        assert document.root.value == "ab  cd"

    def test_start_element_resets_text_buffer(self) -> None:
        """Test text is collected per opened element."""
        document = Document()
        builder = TreeBuilder(document, b"")
        builder.start_element("root", {})
        builder.characters("outer")
        builder.start_element("child", {})
        builder.characters("inner")

        assert document.root.value == "outer"
        assert document.root.child("child").value == "inner"

    def test_characters_before_any_element_are_ignored(self) -> None:
        """Test character data with no open element does not fail."""
        document = Document()
        builder = TreeBuilder(document, b"")

        builder.characters("stray")

        assert document.children == []

    def test_parse_error_is_recorded(self) -> None:
        """Test parse_error stores the error."""
        builder = TreeBuilder(Document(), b"")
        error = XMLParseError("boom")

        builder.parse_error(error)

        assert builder.error is error

    def test_attributes_are_captured_at_start(self) -> None:
        """Test the builder copies attributes into the element."""
        document = Document()
        builder = TreeBuilder(document, b"")
        attributes = {"a": "1"}

        builder.start_element("root", attributes)
        attributes["a"] = "changed"

        assert document.root.attributes == {"a": "1"}


class TestTreeBuilderParsing:
    """Test complete parses driven through try_parsing."""

    def test_try_parsing_success_returns_none(self) -> None:
        """Test a well-formed document builds without error."""
        document = Document()
        builder = TreeBuilder(document, b"<root><a>1</a><b/></root>")

        assert builder.try_parsing() is None
        assert [child.name for child in document.root.children] == ["a", "b"]
        assert builder.statistics.success is True

    def test_try_parsing_returns_recorded_error(self) -> None:
        """Test a malformed document returns the tokenizer error."""
        document = Document()
        builder = TreeBuilder(document, b"<root><a></root>")

        error = builder.try_parsing()

        assert isinstance(error, XMLParseError)
        assert error is builder.error
        assert builder.statistics.success is False

    def test_builder_cannot_be_reused(self) -> None:
        """Test a second try_parsing call is refused."""
        builder = TreeBuilder(Document(), b"<root/>")
        builder.try_parsing()

        with pytest.raises(RuntimeError, match="cannot be reused"):
            builder.try_parsing()

    def test_element_without_text_has_no_value(self) -> None:
        """Test value stays None, never an empty string."""
        document = build(b"<root><empty></empty><closed/></root>")

        assert document.root.child("empty").value is None
        assert document.root.child("closed").value is None

    def test_whitespace_only_content_collapses(self) -> None:
        """Test indentation between tags does not become a value."""
        document = build(b"<root>\n\t<item>A</item>\n\t<item>B</item>\n</root>")

        assert document.root.value is None
        assert [item.value for item in document.root.child("item").all] == ["A", "B"]

    def test_text_split_by_entity_references_is_joined(self) -> None:
        """Test fragments delivered separately form one value."""
        document = build(b"<root>  fish &amp; chips  </root>")
        assert document.root.value == "fish & chips"

    def test_multiline_text_is_stripped_at_the_ends_only(self) -> None:
        """Test inner whitespace of the text is preserved."""
        document = build(b"<root>\n  first line\n  second line\n</root>")
        assert document.root.value == "first line\n  second line"

    def test_text_after_child_extends_last_opened_element(self) -> None:
        """Test trailing text attaches to the most recently opened element."""
        document = build(b"<root>hello<child/>world</root>")

        assert document.root.value == "hello"
        assert document.root.child("child").value == "world"

    def test_namespace_uri_is_recorded(self) -> None:
        """Test namespace URIs are stored when namespaces are processed."""
        document = build(
            b'<x:root xmlns:x="urn:example"><x:child/><plain/></x:root>',
            process_namespaces=True,
        )

        assert document.root.name == "root"
        assert document.root.namespace_uri == "urn:example"
        assert document.root.child("child").namespace_uri == "urn:example"
        assert document.root.child("plain").namespace_uri is None

    def test_statistics_are_collected(self) -> None:
        """Test counters gathered during a parse."""
        xml = b'<root><item id="1">A</item><item id="2">B</item></root>'
        builder = TreeBuilder(Document(), xml)
        builder.try_parsing()

        statistics = builder.statistics
        assert statistics.elements_created == 3
        assert statistics.max_depth == 2
        assert statistics.character_events >= 2
        assert statistics.bytes_processed == len(xml)
        assert statistics.processing_time_ms >= 0.0

    def test_completion_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the builder logs its statistics with correlation info."""
        caplog.set_level(logging.INFO, logger="lightdom.tree.builder")
        document = Document(correlation_id="req-42")

        document.read_xml_data(b"<root/>")

        records = [r for r in caplog.records if r.getMessage() == "Tree building completed"]
        assert len(records) == 1
        assert records[0].correlation_id == "req-42"
        assert records[0].component == "tree_builder"
        assert records[0].elements_created == 1

    def test_parse_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a failed parse logs a warning with the error location."""
        caplog.set_level(logging.WARNING, logger="lightdom.tree.builder")

        Document().read_xml_data(b"<root>")

        records = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(records) == 1
        assert records[0].line == 1
