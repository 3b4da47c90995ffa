from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from mdncompat import output
from mdncompat.exceptions import DescriptorError
from mdncompat.model import CompatInfo, FeatureRecord
from mdncompat.tree import merge_record


def _record(path: str, title: str = "", summary: str = "") -> FeatureRecord:
    return FeatureRecord(
        path=path,
        type="css-property",
        title=title or path.rsplit(".", maxsplit=1)[-1],
        mdn_url=None,
        summary=summary,
        spec_url=None,
        compat=CompatInfo(status={"standard_track": True}, support=None),
        spec_data=None,
    )


def test_merge_builds_nested_tree() -> None:
    tree: dict[str, object] = {}
    tree = merge_record(tree, _record("css.properties.margin"))
    tree = merge_record(tree, _record("css.properties.padding"))

    assert list(tree) == ["css"]
    properties = tree["css"]["properties"]  # type: ignore[index]
    assert list(properties) == ["margin", "padding"]
    assert properties["margin"]["path"] == "css.properties.margin"
    assert properties["margin"]["compat"] == {"status": {"standard_track": True}}
    assert properties["padding"]["specData"] is None


def test_merge_same_path_last_write_wins() -> None:
    tree = merge_record({}, _record("css.properties.margin", summary="first"))
    tree = merge_record(tree, _record("css.properties.margin", summary="second"))

    assert tree["css"]["properties"]["margin"]["summary"] == "second"


def test_merge_keeps_children_when_parent_arrives_later() -> None:
    tree = merge_record({}, _record("api.Window.alert"))
    tree = merge_record(tree, _record("api.Window"))

    window = tree["api"]["Window"]
    assert window["path"] == "api.Window"
    assert window["alert"]["path"] == "api.Window.alert"


def test_merge_nests_children_under_existing_record() -> None:
    tree = merge_record({}, _record("api.Window"))
    tree = merge_record(tree, _record("api.Window.alert"))

    assert tree["api"]["Window"]["title"] == "Window"
    assert tree["api"]["Window"]["alert"]["title"] == "alert"


def test_merge_rejects_empty_path() -> None:
    with pytest.raises(ValueError, match="empty path"):
        merge_record({}, _record(""))


def test_write_data_is_compact_and_replaces(tmp_path: Path) -> None:
    dist = tmp_path / "dist"
    tree = merge_record({}, _record("css.properties.margin", summary="Sets the ‘margin’."))

    target = output.write_data(tree, dist)
    first = target.read_bytes()
    output.write_data(tree, dist)

    assert target == dist / "data.json"
    assert target.read_bytes() == first
    assert b"\n" not in first
    assert b'"path":"css.properties.margin"' in first
    assert "‘margin’" in first.decode("utf-8")
    assert [item.name for item in dist.iterdir()] == ["data.json"]


def test_write_data_keeps_previous_artifact_on_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "data.json"
    target.write_text('{"old":true}', encoding="utf-8")

    def _boom(_src: object, _dst: object) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr(output.os, "replace", _boom)

    with pytest.raises(PermissionError):
        output.write_data({"new": {}}, tmp_path)
    assert target.read_text(encoding="utf-8") == '{"old":true}'
    assert [item.name for item in tmp_path.iterdir()] == ["data.json"]


def test_dist_package_mirrors_selected_fields(tmp_path: Path) -> None:
    source = tmp_path / "package.json"
    target = tmp_path / "dist" / "package.json"
    target.parent.mkdir()
    source.write_text(
        json.dumps(
            {
                "name": "mdn-feature-data",
                "version": "2.1.0",
                "description": "Feature data",
                "license": "MIT",
                "scripts": {"build": "mdncompat"},
            }
        ),
        encoding="utf-8",
    )
    target.write_text(
        json.dumps(
            {
                "name": "old",
                "version": "1.0.0",
                "homepage": "https://old.example",
                "main": "data.json",
                "files": ["data.json"],
            }
        ),
        encoding="utf-8",
    )

    merged = output.prepare_dist_package(source, target)
    output.write_dist_package(target, merged)

    assert merged == json.loads(target.read_text(encoding="utf-8"))
    assert merged["name"] == "mdn-feature-data"
    assert merged["version"] == "2.1.0"
    assert merged["license"] == "MIT"
    assert merged["main"] == "data.json"
    assert merged["files"] == ["data.json"]
    assert "homepage" not in merged
    assert "scripts" not in merged
    assert target.read_text(encoding="utf-8").startswith('{\n  "name"')


def test_prepare_dist_package_errors(tmp_path: Path) -> None:
    source = tmp_path / "package.json"
    target = tmp_path / "target.json"
    source.write_text("[]", encoding="utf-8")
    target.write_text("{}", encoding="utf-8")

    with pytest.raises(DescriptorError, match="expected a JSON object"):
        output.prepare_dist_package(source, target)

    source.write_text("{not json", encoding="utf-8")
    with pytest.raises(DescriptorError, match="JSONDecodeError"):
        output.prepare_dist_package(source, target)

    with pytest.raises(DescriptorError, match="file not found"):
        output.prepare_dist_package(tmp_path / "missing.json", target)


def test_copy_files_to_dist(tmp_path: Path) -> None:
    readme = tmp_path / "README.md"
    readme.write_text("# readme\n", encoding="utf-8")
    dist = tmp_path / "dist"
    dist.mkdir()

    copied = output.copy_files_to_dist([readme], dist)

    assert copied == [dist / "README.md"]
    assert (dist / "README.md").read_text(encoding="utf-8") == "# readme\n"


def test_field_named_child_after_parent_is_dropped(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="mdncompat.tree")
    tree = merge_record({}, _record("api.Event"))
    tree = merge_record(tree, _record("api.Event.type"))
    tree = merge_record(tree, _record("api.Event.type.deep"))

    event = tree["api"]["Event"]
    assert event["type"] == "css-property"
    assert event["path"] == "api.Event"
    assert "Dropping api.Event.type" in caplog.text


def test_field_named_child_before_parent_is_dropped(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="mdncompat.tree")
    tree = merge_record({}, _record("api.Document.title"))
    tree = merge_record(tree, _record("api.Document.body"))
    tree = merge_record(tree, _record("api.Document"))

    document = tree["api"]["Document"]
    assert document["title"] == "Document"
    assert document["body"]["path"] == "api.Document.body"
    assert "Dropping api.Document.title" in caplog.text


def test_field_collision_policy_is_order_independent() -> None:
    parent_first = merge_record(merge_record({}, _record("api.Blob")), _record("api.Blob.type"))
    child_first = merge_record(merge_record({}, _record("api.Blob.type")), _record("api.Blob"))

    assert parent_first == child_first


def test_prepare_dist_package_does_not_write(tmp_path: Path) -> None:
    source = tmp_path / "package.json"
    target = tmp_path / "target.json"
    source.write_text('{"name": "new"}', encoding="utf-8")
    target.write_text('{"name": "old"}', encoding="utf-8")

    assert output.prepare_dist_package(source, target) == {"name": "new"}
    assert target.read_text(encoding="utf-8") == '{"name": "old"}'


def test_check_files_exist(tmp_path: Path) -> None:
    readme = tmp_path / "README.md"
    readme.write_text("# readme\n", encoding="utf-8")

    output.check_files_exist([readme])
    with pytest.raises(FileNotFoundError, match="File to copy not found"):
        output.check_files_exist([readme, tmp_path / "LICENSE"])
