# tests/dom/test_audit.py
import logging

import pytest
from pydantic import ValidationError

from lydio.dom.builder import AuditContext, Doctype, Fragment, Issue, Leaf, Raw, Tag, Text
from lydio.dom.core import SELF_CLOSING_TAGS
from lydio.dom.registry import DOMRegistry

NON_VOID_NAMES = ["div", "p", "span", "section", "ul", "li", "a", "table", "BR"]


@pytest.mark.parametrize("name", sorted(SELF_CLOSING_TAGS))
def test_void_name_as_tag_is_reported(name):
    ctx = Tag(name).audit()
    assert [i.code for i in ctx] == ["SELF_CLOSING_AS_TAG"]
    assert "should not be a self-closing tag" in ctx.issues[0].message


@pytest.mark.parametrize("name", sorted(SELF_CLOSING_TAGS))
def test_void_name_as_leaf_is_clean(name):
    assert not Leaf(name).audit().has_issues()
    assert Leaf(name).validate() is True


@pytest.mark.parametrize("name", NON_VOID_NAMES)
def test_non_void_name_as_leaf_is_reported(name):
    ctx = Leaf(name).audit()
    assert [i.code for i in ctx] == ["NOT_SELF_CLOSING"]
    assert ctx.issues[0].node_kind == "leaf"


@pytest.mark.parametrize("name", NON_VOID_NAMES)
def test_non_void_name_as_tag_is_clean(name):
    assert Tag(name).validate() is True


def test_missing_tag_name_is_reported_once():
    for node in (Tag(), Leaf()):
        ctx = node.audit()
        assert [i.code for i in ctx] == ["MISSING_TAG_NAME"]
        assert ctx.issues[0].severity == "CRITICAL"


def test_doctype_audit():
    assert len(Doctype("html").audit()) == 0
    assert len(Doctype("bogus").audit()) == 1
    assert Doctype("bogus").audit().issues[0].code == "INVALID_DOCTYPE"
    assert len(Doctype("bogus", force=True).audit()) == 0


@pytest.mark.parametrize("doctype_type", ["html", "xhtml", "transitional", "strict", "frameset"])
def test_all_known_doctypes_are_valid(doctype_type):
    assert Doctype(doctype_type).validate()


def test_walk_is_pre_order_and_never_stops_early():
    root = Fragment().set_id("root")
    br = root.add_and_get(Tag("br").set_id("a"))
    br.append(Leaf("div").set_id("b"))
    root.doctype("bogus").set_id("c")
    root.tag("section").set_id("d").append(Tag("hr").set_id("e"))

    ctx = root.audit()
    assert [(i.node_id, i.code) for i in ctx] == [
        ("a", "SELF_CLOSING_AS_TAG"),
        ("b", "NOT_SELF_CLOSING"),
        ("c", "INVALID_DOCTYPE"),
        ("e", "SELF_CLOSING_AS_TAG"),
    ]
    assert root.validate() is False


def test_audit_starts_at_the_called_node():
    page = Tag("div")
    inner = page.tag("section")
    inner.leaf("span")
    page.tag("br")

    assert [i.code for i in inner.audit()] == ["NOT_SELF_CLOSING"]
    assert [i.code for i in page.audit()] == ["NOT_SELF_CLOSING", "SELF_CLOSING_AS_TAG"]


def test_text_and_raw_children_are_skipped():
    div = Tag("div").text("<br>").raw("<br>")
    div.append(Text("x")).append(Raw("y"))
    assert div.validate() is True


def test_each_audit_returns_a_fresh_context():
    node = Tag("img")
    first = node.audit()
    second = node.audit()
    assert first is not second
    assert len(first) == len(second) == 1


def test_node_id_is_reported_as_string():
    ctx = Tag("br").set_id(42).audit()
    assert ctx.issues[0].node_id == "42"
    assert ctx.issues[0].format().startswith("[WARNING] tag#42 SELF_CLOSING_AS_TAG:")


def test_ignored_codes_argument_and_setting(clean_config):
    tree = Fragment().append(Tag("br")).append(Leaf("div"))
    assert [i.code for i in tree.audit(ignored_codes=["NOT_SELF_CLOSING"])] == ["SELF_CLOSING_AS_TAG"]

    clean_config.set_nested("audit.ignored_codes", ["SELF_CLOSING_AS_TAG", "NOT_SELF_CLOSING"])
    assert tree.validate() is True
    # An explicit argument overrides the setting
    assert len(tree.audit(ignored_codes=[])) == 2


@pytest.mark.parametrize("setting, expected", [
    ("NOT_SELF_CLOSING", ["SELF_CLOSING_AS_TAG"]),
    ("NOT_SELF_CLOSING, SELF_CLOSING_AS_TAG", []),
    ("", ["SELF_CLOSING_AS_TAG", "NOT_SELF_CLOSING"]),
])
def test_ignored_codes_setting_as_string(clean_config, setting, expected):
    clean_config.set_nested("audit.ignored_codes", setting)
    tree = Fragment().append(Tag("br")).append(Leaf("div"))
    assert [i.code for i in tree.audit()] == expected
    assert [i.code for i in tree.audit(ignored_codes=setting)] == expected


def test_count_by_code_and_report():
    tree = Fragment().append(Tag("br")).append(Tag("hr")).append(Doctype("x"))
    ctx = tree.audit()
    assert ctx.count_by_code() == {"SELF_CLOSING_AS_TAG": 2, "INVALID_DOCTYPE": 1}
    assert len(ctx.format_report()) == 3


def test_debug_validate_logs_each_issue(caplog):
    tree = Fragment().append(Tag("br")).append(Leaf("p"))
    with caplog.at_level(logging.WARNING, logger="lydio.dom.traits"):
        assert tree.debug_validate() is False
    messages = [r.getMessage() for r in caplog.records if r.name == "lydio.dom.traits"]
    assert len(messages) == 2
    assert "SELF_CLOSING_AS_TAG" in messages[0]
    assert "NOT_SELF_CLOSING" in messages[1]


def test_debug_validate_is_silent_when_clean(caplog):
    with caplog.at_level(logging.DEBUG, logger="lydio.dom.traits"):
        assert Tag("div").append(Leaf("br")).debug_validate() is True
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_issue_is_immutable():
    issue = Issue(node_kind="tag", code="X", message="m")
    with pytest.raises(ValidationError):
        issue.code = "Y"


def test_audit_context_collects_in_order():
    ctx = AuditContext()
    assert not ctx.has_issues()
    ctx.add(Issue(node_kind="tag", code="A", message="a")).add(Issue(node_kind="leaf", code="B", message="b"))
    assert [i.code for i in ctx] == ["A", "B"]


def test_registry_knows_every_issue_code():
    assert DOMRegistry.get_all_possible_codes() == [
        "INVALID_DOCTYPE", "MISSING_TAG_NAME", "NOT_SELF_CLOSING", "SELF_CLOSING_AS_TAG"
    ]
    assert DOMRegistry.get_definition("tag").model is Tag
    assert DOMRegistry.get_definition("fragment").audit_rules == []
    assert DOMRegistry.get_definition("text") is None
