import pytest
from ruamel.yaml import YAMLError

from yamlcomments.core.config import ExtractorConfig
from yamlcomments.core.engine import CommentExtractor, extract_yaml_comments
from yamlcomments.core.models import CommentRecord


def comments_of(yaml_text, **config):
    return extract_yaml_comments(yaml_text, ExtractorConfig(**config)).comments


def test_simple_comment_attaches_to_following_key():
    assert comments_of("a: 1\n# greeting\nb: 2") == [CommentRecord(line=2, path="b", text="greeting")]


def test_leading_comment_belongs_to_document():
    comments = comments_of("# This is a config file\nname: John\n# Age of the person\nage: 30")
    assert comments == [
        CommentRecord(line=1, path="document", text="This is a config file"),
        CommentRecord(line=3, path="age", text="Age of the person"),
    ]


def test_multiple_comments_keep_source_order():
    yaml_text = (
        "# Config file\n"
        "name: John\n"
        "# Age info\n"
        "age: 30\n"
        "# Active user\n"
        "active: true"
    )
    assert [(c.line, c.path, c.text) for c in comments_of(yaml_text)] == [
        (1, "document", "Config file"),
        (3, "age", "Age info"),
        (5, "active", "Active user"),
    ]


def test_comment_before_first_child_maps_to_container():
    """
    NESTING TEST: the first comment inside a mapping annotates the mapping
    itself; later comments annotate the nested key they precede.
    """
    yaml_text = "person:\n  # User name\n  name: John\n  # User age\n  age: 30"
    assert comments_of(yaml_text) == [
        CommentRecord(line=2, path="person", text="User name"),
        CommentRecord(line=4, path="person.age", text="User age"),
    ]


def test_sequence_items_use_index_paths():
    yaml_text = "items:\n  # First item\n  - one\n  # Second item\n  - two"
    assert comments_of(yaml_text) == [
        CommentRecord(line=2, path="items", text="First item"),
        CommentRecord(line=4, path="items.1", text="Second item"),
    ]


def test_sequence_of_mappings():
    yaml_text = (
        "containers:\n"
        "  - name: web\n"
        "    # Pinned image\n"
        "    image: nginx:1.25\n"
        "  - name: sidecar\n"
    )
    assert comments_of(yaml_text) == [CommentRecord(line=3, path="containers.0.image", text="Pinned image")]


@pytest.mark.parametrize("indicator", ["|", ">", "|-", ">+"])
def test_block_scalar_body_is_never_a_comment(indicator):
    yaml_text = (
        f"description: {indicator}\n"
        "  This is a\n"
        "  # not a comment\n"
        "      # nor this\n"
        "  multiline string\n"
        "note: important"
    )
    assert comments_of(yaml_text) == []


def test_comment_after_block_scalar_is_kept():
    yaml_text = "script: |\n  echo hi\n  # still script\n# Next step\nafter: 1\n"
    assert comments_of(yaml_text) == [CommentRecord(line=4, path="after", text="Next step")]


def test_hash_inside_plain_value_is_not_a_comment():
    yaml_text = "url: https://example.com\n# This is a comment\npath: /api#endpoint"
    assert comments_of(yaml_text) == [CommentRecord(line=2, path="path", text="This is a comment")]


def test_hash_inside_quoted_value_and_key_is_not_a_comment():
    yaml_text = 'title: "C# rocks"\n"a#b": 1\n# real\nb: 2'
    assert comments_of(yaml_text) == [CommentRecord(line=3, path="b", text="real")]


def test_marker_spacing_variants():
    yaml_text = "# comment with space\na: 1\n#comment without space\nb: 2\n#  two spaces\nc: 3"
    assert [c.text for c in comments_of(yaml_text)] == [
        "comment with space",
        "comment without space",
        " two spaces",
    ]


def test_inner_hashes_are_preserved_in_text():
    assert comments_of("# see #42 and #43\na: 1")[0].text == "see #42 and #43"


def test_document_without_comments_yields_nothing():
    assert comments_of("name: John\nage: 30\nactive: true") == []


def test_empty_and_comment_only_documents():
    assert comments_of("") == []
    assert comments_of("# just a note\n# and another\n") == [
        CommentRecord(line=1, path="document", text="just a note"),
        CommentRecord(line=2, path="document", text="and another"),
    ]


def test_comment_at_end_of_file_falls_back_to_document():
    assert comments_of("a: 1\n# trailing note") == [CommentRecord(line=2, path="document", text="trailing note")]


def test_trailing_comment_annotates_value_on_same_line():
    yaml_text = "a: 1 # one\nnested:\n  b: text # bee\n  c: [1, 2] # list\n"
    assert comments_of(yaml_text) == [
        CommentRecord(line=1, path="a", text="one"),
        CommentRecord(line=3, path="nested.b", text="bee"),
        CommentRecord(line=4, path="nested.c", text="list"),
    ]


def test_trailing_comment_after_container_key():
    assert comments_of("person: # the person\n  name: x") == [
        CommentRecord(line=1, path="person", text="the person"),
    ]


def test_trailing_comment_on_block_scalar_header():
    yaml_text = "script: | # run it\n  echo hi\nafter: 1"
    assert comments_of(yaml_text) == [CommentRecord(line=1, path="script", text="run it")]


def test_trailing_comment_on_sequence_item():
    assert comments_of("- one # first\n- two # second") == [
        CommentRecord(line=1, path="0", text="first"),
        CommentRecord(line=2, path="1", text="second"),
    ]


def test_full_line_only_ignores_trailing_comments():
    yaml_text = "a: 1 # one\n# two\nb: 2"
    assert comments_of(yaml_text, include_trailing=False) == [CommentRecord(line=2, path="b", text="two")]


def test_custom_document_label():
    assert comments_of("# header\na: 1", document_label="<root>")[0].path == "<root>"


def test_alias_value_is_reachable_through_its_key():
    yaml_text = "base: &b 1\n# copy of base\ncopy: *b"
    assert comments_of(yaml_text) == [CommentRecord(line=2, path="copy", text="copy of base")]


def test_non_scalar_key_uses_placeholder():
    yaml_text = "? [a, b]\n# complex\n: pair value\nz: 2 # zed"
    assert comments_of(yaml_text) == [
        CommentRecord(line=2, path="<non-scalar-key>", text="complex"),
        CommentRecord(line=4, path="z", text="zed"),
    ]


def test_multi_document_stream():
    yaml_text = "a: 1\n---\n# second doc\nb: 2\n# before c\nc: 3"
    assert comments_of(yaml_text) == [
        CommentRecord(line=3, path="document", text="second doc"),
        CommentRecord(line=5, path="c", text="before c"),
    ]


def test_crlf_line_endings():
    assert comments_of("a: 1\r\n# greeting\r\nb: 2\r\n") == [CommentRecord(line=2, path="b", text="greeting")]


def test_leading_byte_order_mark():
    assert comments_of("\ufeff# header\na: 1") == [CommentRecord(line=1, path="document", text="header")]


def test_extraction_is_idempotent():
    yaml_text = "# head\nmetadata:\n  # labels\n  labels:\n    app: web # inline\nspec:\n  - x\n  # y\n  - y\n"
    first = comments_of(yaml_text)
    second = comments_of(yaml_text)
    assert first == second
    assert [c.line for c in first] == sorted(c.line for c in first)


def test_parse_errors_propagate():
    with pytest.raises(YAMLError):
        extract_yaml_comments("a: [1, 2\n# dangling")


def test_extract_file_reads_utf8_sig(tmp_path):
    target = tmp_path / "config.yaml"
    target.write_text("# héllo\nname: John\n", encoding="utf-8-sig")
    result = CommentExtractor().extract_file(target)
    assert result.to_list() == [{"line": 1, "path": "document", "text": "héllo"}]


def test_extract_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        CommentExtractor().extract_file(tmp_path / "missing.yaml")


@pytest.mark.parametrize("yaml_text,expected", [
    ("a:\n# about b\nb: 1", [(2, "b", "about b")]),
    ("on:\n  workflow_dispatch:\n  # run on push\n  push:\n    branches: [main]\n",
     [(3, "on.push", "run on push")]),
    ("a: # note a\nb: 1", [(1, "a", "note a")]),
    ("items:\n  -\n  # second\n  - x", [(3, "items.1", "second")]),
    ("a:\n# tail", [(2, "document", "tail")]),
])
def test_comments_around_empty_values(yaml_text, expected):
    assert [(c.line, c.path, c.text) for c in comments_of(yaml_text)] == expected
