import pytest

from codefrag.classifier import MAX_POSITIONAL_INDEX, classify, parse_index
from codefrag.dialects import get as get_dialect
from codefrag.errors import MalformedIndexError

CS = get_dialect("C#")


def test_positional_and_named_are_split():
    c = classify({"_Parameter1": "a", "Name": "x"}, CS)
    assert [(p.index, p.value.escaped) for p in c.ordered] == [(1, '"a"')]
    assert [(p.name, p.value.escaped) for p in c.named] == [("Name", '"x"')]


def test_positional_sorted_by_index():
    c = classify({"_Parameter2": "b", "_Parameter1": "a"}, CS)
    assert [p.index for p in c.ordered] == [1, 2]


def test_named_sorted_by_name_not_input_order():
    c = classify({"Foo": "x", "Bar": "y", "baz": "z"}, CS)
    assert [p.name for p in c.named] == ["Bar", "Foo", "baz"]


def test_literal_marker_sets_flag_and_is_dropped():
    c = classify({"Count": "5", "Count_IsLiteral": "true"}, CS)
    assert len(c.named) == 1
    p = c.named[0]
    assert p.name == "Count"
    assert p.is_literal
    assert p.rendered == "5"


def test_literal_marker_accepts_capitalized_true_and_bool():
    assert classify({"A": "1", "A_IsLiteral": "True"}, CS).named[0].is_literal
    assert classify({"A": "1", "A_IsLiteral": True}, CS).named[0].is_literal


def test_false_marker_is_still_dropped():
    c = classify({"A": "1", "A_IsLiteral": "false"}, CS)
    assert [p.name for p in c.named] == ["A"]
    assert not c.named[0].is_literal
    assert c.named[0].rendered == '"1"'


def test_malformed_index_raises_with_context():
    with pytest.raises(MalformedIndexError, match="Unable to parse 'X' as an index") as exc:
        classify({"_ParameterX": "a"}, CS, attribute="Description")
    details = exc.value.problem.details
    assert details["key"] == "_ParameterX"
    assert details["attribute"] == "Description"


@pytest.mark.parametrize(
    "key",
    [
        "_Parameter",
        "_Parameter0",
        "_Parameter-1",
        "_Parameter1.5",
        "_Parameter65537",
        "_Parameter2147483648",
        "_Parameter99999999999",
    ],
)
def test_invalid_indices_rejected(key):
    with pytest.raises(MalformedIndexError):
        parse_index(key)


def test_index_parsing_tolerates_sign_and_whitespace():
    assert parse_index("_Parameter+3") == 3
    assert parse_index("_Parameter 2 ") == 2


def test_index_at_upper_bound_accepted():
    assert parse_index(f"_Parameter{MAX_POSITIONAL_INDEX}") == MAX_POSITIONAL_INDEX


def test_huge_index_fails_before_assembly():
    with pytest.raises(MalformedIndexError, match="99999999999"):
        classify({"_Parameter99999999999": "a"}, CS, attribute="A")
