"""
StructureEditor: inserting and deleting elements.
"""

import pytest
from xml.dom import minidom

from tag_editor.core.errors import InvalidArgumentError, TreeInvariantError
from tag_editor.core.locator import exists, find_all, is_attached
from tag_editor.core.structure import (
    InsertResult,
    Placement,
    delete_tag,
    insert_new_tag_below,
    insert_tag_in_element,
    insert_tag_value,
)


class TestInsertNewTagBelow:
    def test_appends_under_first_match(self, parse):
        doc = parse("<cfg><server id='1'><host>a</host></server><server id='2'/></cfg>")
        result = insert_new_tag_below(doc, "server", "port", "80")

        assert isinstance(result, InsertResult)
        assert result.placement is Placement.ATTACHED
        assert result.attached
        assert result.parent.getAttribute("id") == "1"
        assert result.parent.lastChild is result.element
        assert result.element.toxml() == "<port>80</port>"

    def test_missing_parent_is_orphaned(self, parse):
        doc = parse("<cfg/>")
        result = insert_new_tag_below(doc, "missing", "child", "v")

        assert result.placement is Placement.ORPHANED
        assert not result.attached
        assert result.parent.tagName == "missing"
        assert result.parent.parentNode is None
        assert result.parent.toxml() == "<missing><child>v</child></missing>"
        assert not exists(doc, "child")
        assert not exists(doc, "missing")
        assert not is_attached(doc, result.element)
        assert doc.documentElement.toxml() == "<cfg/>"

    def test_missing_parent_logs_warning(self, parse, caplog):
        doc = parse("<cfg/>")
        with caplog.at_level("WARNING"):
            insert_new_tag_below(doc, "missing", "child", "v")
        assert "missing" in caplog.text

    def test_none_value_rejected(self, parse):
        doc = parse("<cfg><server/></cfg>")
        with pytest.raises(InvalidArgumentError):
            insert_new_tag_below(doc, "server", "port", None)
        assert doc.documentElement.toxml() == "<cfg><server/></cfg>"


class TestInsertTagValue:
    def test_scenario_port(self, parse):
        doc = parse("<cfg/>")
        element = insert_tag_value(doc, "port", "8080")
        assert doc.documentElement.toxml() == "<cfg><port>8080</port></cfg>"
        assert element.parentNode is doc.documentElement

    def test_appended_last(self, parse):
        doc = parse("<cfg><a/></cfg>")
        insert_tag_value(doc, "b", "x")
        assert doc.documentElement.lastChild.tagName == "b"

    def test_none_value_gives_childless_element(self, parse):
        doc = parse("<cfg/>")
        element = insert_tag_value(doc, "flag", None)
        assert element.childNodes == []
        assert doc.documentElement.toxml() == "<cfg><flag/></cfg>"


class TestInsertTagInElement:
    def test_appends_to_given_parent(self, parse):
        doc = parse("<cfg><db><host>a</host></db></cfg>")
        db = doc.getElementsByTagName("db")[0]
        element = insert_tag_in_element(db, "port", "5432")
        assert db.toxml() == "<db><host>a</host><port>5432</port></db>"
        assert element.parentNode is db

    def test_works_on_detached_parent(self):
        doc = minidom.Document()
        parent = doc.createElement("detached")
        insert_tag_in_element(parent, "k", "v")
        assert parent.toxml() == "<detached><k>v</k></detached>"

    def test_none_value_rejected_before_mutation(self, parse):
        doc = parse("<cfg><db/></cfg>")
        db = doc.getElementsByTagName("db")[0]
        with pytest.raises(InvalidArgumentError):
            insert_tag_in_element(db, "port", None)
        assert db.childNodes == []

    def test_invalid_argument_is_value_error(self, parse):
        doc = parse("<cfg/>")
        with pytest.raises(ValueError):
            insert_tag_in_element(doc.documentElement, "port", None)


class TestDeleteTag:
    def test_removes_all_matches(self, ports_doc):
        delete_tag(ports_doc, "port")
        assert ports_doc.documentElement.toxml() == "<cfg/>"

    def test_idempotent(self, ports_doc):
        delete_tag(ports_doc, "port")
        after_first = ports_doc.toxml()
        delete_tag(ports_doc, "port")
        assert ports_doc.toxml() == after_first

    def test_no_match_is_noop(self, ports_doc):
        before = ports_doc.toxml()
        delete_tag(ports_doc, "host")
        assert ports_doc.toxml() == before

    def test_nested_matches(self, parse):
        doc = parse("<cfg><a><a>x</a></a><b/></cfg>")
        outer, inner = find_all(doc.documentElement, "a")
        delete_tag(doc, "a")
        assert doc.documentElement.toxml() == "<cfg><b/></cfg>"
        assert outer.parentNode is None
        assert inner.parentNode is None

    def test_keeps_siblings(self, parse):
        doc = parse("<cfg><x/><port>1</port><y/></cfg>")
        delete_tag(doc, "port")
        assert doc.documentElement.toxml() == "<cfg><x/><y/></cfg>"

    def test_parentless_match_is_invariant_violation(self, parse, monkeypatch):
        doc = parse("<cfg><port>1</port></cfg>")
        orphan = doc.createElement("port")
        monkeypatch.setattr(
            "tag_editor.core.structure.find_all", lambda scope, tag_name: [orphan]
        )
        with pytest.raises(TreeInvariantError):
            delete_tag(doc, "port")
