"""
AttributeEditor and TextEditor.
"""

import pytest

from tag_editor.core.attributes import set_attribute
from tag_editor.core.errors import InvalidArgumentError
from tag_editor.core.text_editor import replace_first_child_or_append, replace_tag_value


class TestSetAttribute:
    def test_creates_attribute(self, parse):
        doc = parse("<cfg><port>1</port></cfg>")
        port = doc.getElementsByTagName("port")[0]
        set_attribute(port, "proto", "tcp")
        assert port.getAttribute("proto") == "tcp"

    def test_overwrites_and_is_idempotent(self, parse):
        doc = parse("<cfg proto='udp'/>")
        root = doc.documentElement
        set_attribute(root, "proto", "tcp")
        set_attribute(root, "proto", "tcp")
        assert root.getAttribute("proto") == "tcp"
        assert root.attributes.length == 1

    def test_children_untouched(self, parse):
        doc = parse("<cfg><a/>x</cfg>")
        root = doc.documentElement
        set_attribute(root, "k", "v")
        assert root.toxml() == '<cfg k="v"><a/>x</cfg>'


class TestReplaceFirstChildOrAppend:
    def test_appends_to_childless_element(self, parse):
        doc = parse("<cfg><port/></cfg>")
        port = doc.getElementsByTagName("port")[0]
        replace_first_child_or_append(port, "8080")
        assert port.toxml() == "<port>8080</port>"

    def test_replaces_only_first_child(self, parse):
        doc = parse("<cfg><port>old<x/>tail</port></cfg>")
        port = doc.getElementsByTagName("port")[0]
        replace_first_child_or_append(port, "new")
        assert len(port.childNodes) == 3
        assert port.toxml() == "<port>new<x/>tail</port>"

    def test_first_child_element_is_replaced(self, parse):
        doc = parse("<cfg><port><x/><y/></port></cfg>")
        port = doc.getElementsByTagName("port")[0]
        replace_first_child_or_append(port, "v")
        assert port.toxml() == "<port>v<y/></port>"

    def test_none_value_rejected_without_change(self, parse):
        doc = parse("<cfg><port>1</port></cfg>")
        port = doc.getElementsByTagName("port")[0]
        with pytest.raises(InvalidArgumentError):
            replace_first_child_or_append(port, None)
        assert port.toxml() == "<port>1</port>"


class TestReplaceTagValue:
    def test_updates_every_match(self, ports_doc):
        replace_tag_value(ports_doc, "port", "7070")
        assert ports_doc.documentElement.toxml() == "<cfg><port>7070</port><port>7070</port></cfg>"

    def test_no_match_is_noop(self, ports_doc):
        before = ports_doc.toxml()
        replace_tag_value(ports_doc, "host", "x")
        assert ports_doc.toxml() == before

    def test_none_value_rejected(self, ports_doc):
        with pytest.raises(InvalidArgumentError):
            replace_tag_value(ports_doc, "port", None)
        assert ports_doc.documentElement.toxml() == "<cfg><port>8080</port><port>9090</port></cfg>"
