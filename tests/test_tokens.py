from __future__ import annotations

import unittest

from htmlevents.attrs import AttributeList
from htmlevents.tokens import (
    Comment,
    Doctype,
    EndTag,
    Event,
    RawText,
    StartTag,
    Text,
    attribute,
    attribute_list,
    closed,
    closed_tag,
    comment,
    doctype,
    end_tag,
    raw_text,
    start_tag,
    text,
)


class TestEventRendering(unittest.TestCase):
    def test_token_variants(self) -> None:
        assert str(StartTag("tag", AttributeList.empty())) == "<tag>"
        assert str(EndTag("tag")) == "</tag>"
        assert str(Text("<bomb>")) == "&lt;bomb&gt;"
        assert str(RawText("<bomb>")) == "<bomb>"
        assert str(Comment("Multi\nline\ncomment")) == "<!--Multi\nline\ncomment-->"
        assert str(Doctype()) == "<!DOCTYPE html>"

    def test_self_closing(self) -> None:
        assert str(StartTag("br", [], self_closing=True)) == "<br />"
        assert str(StartTag("br", [], self_closing=False)) == "<br>"

    def test_attributes_in_list_order(self) -> None:
        tag = StartTag("h1", [("id", "hello"), ("class", "fun")])
        assert str(tag) == '<h1 id="hello" class="fun">'

    def test_empty_attribute_syntax(self) -> None:
        tag = StartTag("input", [("type", "checkbox"), ("checked", "")])
        assert str(tag) == '<input type="checkbox" checked>'

    def test_attribute_value_escaped(self) -> None:
        tag = StartTag("a", [("title", "Tom & 'Jerry'")])
        assert str(tag) == '<a title="Tom &amp; &#39;Jerry&#39;">'

    def test_comment_and_raw_text_not_escaped(self) -> None:
        assert str(Comment(" a < b & c ")) == "<!-- a < b & c -->"
        assert str(RawText("&nbsp;")) == "&nbsp;"

    def test_rendering_is_repeatable(self) -> None:
        tag = StartTag("p", [("class", "x")])
        assert str(tag) == str(tag)


class TestClosed(unittest.TestCase):
    def test_closed_start_tag(self) -> None:
        tag = StartTag("img", [("src", "foo-link")])
        result = closed(tag)
        assert isinstance(result, StartTag)
        assert result.self_closing
        assert str(result) == '<img src="foo-link" />'
        assert not tag.self_closing

    def test_closed_is_noop_on_other_events(self) -> None:
        for event in (EndTag("p"), Text("t"), RawText("r"), Comment("c"), Doctype()):
            assert closed(event) is event
        assert closed(EndTag("p")) == EndTag("p")

    def test_closed_copies_attributes(self) -> None:
        tag = StartTag("img", [("src", "a")])
        result = tag.closed()
        result.attrs.set("src", "b")
        assert tag.attrs.get("src") == "a"


class TestEventEquality(unittest.TestCase):
    def test_start_tag_equality_ignores_attribute_order(self) -> None:
        left = StartTag("p", [("a", "1"), ("b", "2")])
        right = StartTag("p", [("b", "2"), ("a", "1")])
        assert left == right
        assert left != left.closed()

    def test_data_events_compare_by_kind(self) -> None:
        assert Text("x") == Text("x")
        assert Text("x") != RawText("x")
        assert Comment("x") != Text("x")
        assert Doctype() == Doctype()

    def test_repr(self) -> None:
        assert repr(EndTag("p")) == "EndTag('p')"
        assert repr(Text("hi")) == "Text('hi')"
        assert repr(Doctype()) == "Doctype()"


class TestBuilders(unittest.TestCase):
    def test_attribute_builders(self) -> None:
        assert str(attribute("checked")) == "checked"
        attrs = attribute_list([("id", "x")], class_="fun", data_x="1")
        assert attrs.items() == [("id", "x"), ("class", "fun"), ("data_x", "1")]

    def test_start_tag_keywords(self) -> None:
        assert str(start_tag("h1", id="hello", class_="fun")) == '<h1 id="hello" class="fun">'

    def test_start_tag_keywords_extend_existing_list(self) -> None:
        attrs = attribute_list(id="a")
        tag = start_tag("div", attrs, title="t")
        assert str(tag) == '<div id="a" title="t">'
        assert len(attrs) == 1

    def test_closed_tag(self) -> None:
        assert str(closed_tag("img", src="foo-link")) == '<img src="foo-link" />'

    def test_simple_builders(self) -> None:
        assert end_tag("p") == EndTag("p")
        assert text("t") == Text("t")
        assert raw_text("r") == RawText("r")
        assert comment("c") == Comment("c")
        assert doctype() == Doctype()


class TestEventBase(unittest.TestCase):
    def test_base_class_is_abstract(self) -> None:
        with self.assertRaises(TypeError):
            Event()

    def test_subclass_must_render(self) -> None:
        class Incomplete(Event):
            __slots__ = ()

        with self.assertRaises(TypeError):
            Incomplete()

    def test_subclass_with_rendering(self) -> None:
        class Newline(Event):
            __slots__ = ()

            def write_to(self, write) -> None:
                write("\n")

        newline = Newline()
        assert str(newline) == "\n"
        assert closed(newline) is newline
