import pytest

from featuredoc.core.models import LineKind
from featuredoc.extraction.lexer import ManifestLexer


@pytest.mark.parametrize("line, kind, content", [
    ("#! Group title", LineKind.GROUPING, " Group title"),
    ("#!", LineKind.GROUPING, ""),
    ("## Enables foo", LineKind.ATTACHED, " Enables foo"),
    ("##", LineKind.ATTACHED, ""),
    ("[features]", LineKind.TABLE, ""),
    ("foo = []", LineKind.ASSIGNMENT, ""),
    ("]", LineKind.OTHER, ""),
])
def test_classify_line(line, kind, content):
    shard = ManifestLexer().classify_line(1, line)
    assert shard.kind is kind
    assert shard.content == content
    assert shard.text == line


@pytest.mark.parametrize("line", ["", "# plain comment", "#", "###", "### Heading", "##!", "#!---", "#!x"])
def test_noise_is_dropped(line):
    assert ManifestLexer().classify_line(1, line) is None


def test_shard_trims_and_numbers_lines():
    text = "\ufeff[features]\r\n\r\n  ## doc  \r\n# noise\n\tfoo = []\n"
    shards = ManifestLexer().shard(text)

    assert [(s.line_no, s.kind, s.text) for s in shards] == [
        (1, LineKind.TABLE, "[features]"),
        (3, LineKind.ATTACHED, "## doc"),
        (5, LineKind.ASSIGNMENT, "foo = []"),
    ]
    assert shards[1].content == " doc"


def test_split_assignment():
    lexer = ManifestLexer()
    assert lexer.split_assignment('"serde" = { optional = true }') == ("serde", " { optional = true }")
    assert lexer.split_assignment("a = b = c") == ("a", " b = c")
