from codefrag.assembler import assemble
from codefrag.classifier import classify
from codefrag.dialects import get as get_dialect

CS = get_dialect("C#")
VB = get_dialect("VB")


def _args(params, dialect=CS):
    return assemble(classify(params, dialect), dialect)


def test_positional_reordered_ascending():
    assert _args({"_Parameter2": "b", "_Parameter1": "a"}) == '"a", "b"'


def test_positional_gap_filled_with_null_literal():
    assert _args({"_Parameter1": "v1", "_Parameter3": "v3"}) == '"v1", null, "v3"'
    assert _args({"_Parameter1": "v1", "_Parameter3": "v3"}, VB) == '"v1", Nothing, "v3"'


def test_named_alphabetical():
    assert _args({"Foo": "x", "Bar": "y"}) == 'Bar = "y", Foo = "x"'


def test_literal_named_is_unquoted():
    out = _args({"Count": "5", "Count_IsLiteral": "true"})
    assert out == "Count = 5"
    assert "IsLiteral" not in out


def test_positional_before_named():
    assert _args({"Named": "n", "_Parameter1": "p"}) == '"p", Named = "n"'


def test_empty_parameters():
    assert _args({}) == ""


def test_null_named_value():
    assert _args({"Alias": None}) == "Alias = null"
