import pytest

from featuredoc.core.config import FeatureDocConfig
from featuredoc.core.engine import FeatureDocEngine
from featuredoc.core.errors import InjectionError, ManifestNotFoundError

DOCUMENTED = "[package]\nname = \"demo\"\n\n[features]\n## Fast path\nfast = []\n"
STRIPPED = "[package]\nname = \"demo\"\n\n[features]\nfast = []\n"
FRAGMENT = "* **`fast`** —  Fast path\n\n"


@pytest.fixture
def crate(tmp_path):
    (tmp_path / "Cargo.toml").write_text(DOCUMENTED, encoding="utf-8")
    return tmp_path


def test_extract_reads_project_manifest(crate):
    context = FeatureDocEngine(str(crate)).extract()
    assert context.markdown == FRAGMENT


def test_orig_manifest_is_used_when_comments_were_stripped(tmp_path):
    (tmp_path / "Cargo.toml").write_text(STRIPPED, encoding="utf-8")
    (tmp_path / "Cargo.toml.orig").write_text(DOCUMENTED, encoding="utf-8")

    path, text = FeatureDocEngine(str(tmp_path)).locate_manifest()
    assert path.name == "Cargo.toml.orig"
    assert text == DOCUMENTED


def test_orig_without_comments_is_ignored(tmp_path):
    (tmp_path / "Cargo.toml").write_text(STRIPPED, encoding="utf-8")
    (tmp_path / "Cargo.toml.orig").write_text(STRIPPED, encoding="utf-8")

    path, _ = FeatureDocEngine(str(tmp_path)).locate_manifest()
    assert path.name == "Cargo.toml"


def test_missing_manifest(tmp_path):
    with pytest.raises(ManifestNotFoundError, match="Can't open Cargo.toml"):
        FeatureDocEngine(str(tmp_path)).locate_manifest()


def test_inject_replaces_marked_region(crate):
    target = crate / "README.md"
    target.write_text(
        "# Demo\n\n<!-- featuredoc:start -->\nstale\n<!-- featuredoc:end -->\n\nFooter\n",
        encoding="utf-8",
    )
    engine = FeatureDocEngine(str(crate))

    report = engine.inject(target)
    expected = "# Demo\n\n<!-- featuredoc:start -->\n" + FRAGMENT + "<!-- featuredoc:end -->\n\nFooter\n"
    assert report["status"] == "UPDATED"
    assert report["written"] is True
    assert target.read_text(encoding="utf-8") == expected
    assert not list(crate.glob("*.featuredoc.tmp"))

    again = engine.inject(target)
    assert again["status"] == "UNCHANGED"
    assert again["written"] is False


def test_inject_dry_run_leaves_file_alone(crate):
    target = crate / "README.md"
    original = "<!-- featuredoc:start --><!-- featuredoc:end -->\n"
    target.write_text(original, encoding="utf-8")

    report = FeatureDocEngine(str(crate)).inject(target, dry_run=True)
    assert report["status"] == "PREVIEW"
    assert FRAGMENT in report["new_content"]
    assert target.read_text(encoding="utf-8") == original


@pytest.mark.parametrize("document", [
    "no markers at all\n",
    "<!-- featuredoc:end -->\n<!-- featuredoc:start -->\n",
])
def test_inject_requires_marker_pair(crate, document):
    target = crate / "README.md"
    target.write_text(document, encoding="utf-8")
    with pytest.raises(InjectionError, match="marker"):
        FeatureDocEngine(str(crate)).inject(target)


def test_write_fragment(crate):
    output = crate / "docs" / "features.md"
    output.parent.mkdir()

    report = FeatureDocEngine(str(crate)).write_fragment(output)
    assert report["entries"] == 1
    assert output.read_text(encoding="utf-8") == FRAGMENT


def test_custom_markers_and_label(crate):
    config = FeatureDocConfig(feature_label="`{feature}`", start_marker="[//]: # (begin)",
                              end_marker="[//]: # (end)")
    engine = FeatureDocEngine(str(crate), config)

    assert engine.splice("[//]: # (begin)\n[//]: # (end)", "X\n") == "[//]: # (begin)\nX\n[//]: # (end)"
    assert engine.extract().markdown == "* `fast` —  Fast path\n\n"
