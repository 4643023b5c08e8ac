from pathlib import Path

import pytest

from codefrag.config import FragmentConfig, load_fragment_config
from codefrag.errors import ConfigurationError
from codefrag.types import Language

_MANIFEST = """\
language: vb
output_file: AssemblyInfo.vb
output_directory: obj
attributes:
  - name: System.Reflection.AssemblyDescription
    parameters:
      _Parameter1: "Hello"
  - name: System.Runtime.InteropServices.ComVisible
    parameters:
      _Parameter1: false
"""


def test_load_yaml_manifest(tmp_path: Path):
    p = tmp_path / "fragment.yaml"
    p.write_text(_MANIFEST, encoding="utf-8")
    cfg = load_fragment_config(str(p))

    assert cfg.language == Language.VB
    assert cfg.output_file == "AssemblyInfo.vb"
    assert cfg.output_directory == "obj"
    assert [a.name for a in cfg.attributes] == [
        "System.Reflection.AssemblyDescription",
        "System.Runtime.InteropServices.ComVisible",
    ]
    assert cfg.attributes[1].parameters == {"_Parameter1": False}


def test_json_manifest_is_accepted(tmp_path: Path):
    p = tmp_path / "fragment.json"
    p.write_text('{"language": "C#", "attributes": []}', encoding="utf-8")
    cfg = load_fragment_config(str(p))
    assert cfg.language == Language.CSHARP
    assert cfg.attributes == []
    assert cfg.output_file is None


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="Manifest not found"):
        load_fragment_config(str(tmp_path / "nope.yaml"))


def test_top_level_must_be_mapping(tmp_path: Path):
    p = tmp_path / "list.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="got list"):
        load_fragment_config(str(p))


@pytest.mark.parametrize(
    "d, match",
    [
        ({"attributes": []}, "missing required key 'language'"),
        ({"language": "C#", "attributes": {}}, "'attributes' must be a list"),
        ({"language": "C#", "attributes": ["x"]}, r"attributes\[0\]: must be an object"),
        ({"language": "C#", "attributes": [{"parameters": {}}]}, "'name' must be a non-empty string"),
        ({"language": "C#", "attributes": [{"name": "A", "parameters": [1]}]}, "'parameters' must be an object"),
        ({"language": "java", "attributes": []}, "must be one of F#, C# or VB"),
    ],
)
def test_invalid_manifests(d, match):
    with pytest.raises(ConfigurationError, match=match):
        FragmentConfig.from_dict(d)
