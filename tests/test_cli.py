from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from component_loader.cli.app import app

runner = CliRunner()

STATESTORE = """apiVersion: dapr.io/v1alpha1
kind: Component
metadata:
  name: statestore
spec:
  type: state.redis
  version: v1
  metadata:
  - name: redisHost
    value: localhost:6379
scopes:
- checkout
"""

PUBSUB = """apiVersion: dapr.io/v1alpha1
kind: Component
metadata:
  name: pubsub
spec:
  type: pubsub.redis
  version: v1
"""


@pytest.fixture
def good_dir(tmp_path: Path) -> Path:
    (tmp_path / "statestore.yaml").write_text(STATESTORE)
    (tmp_path / "pubsub.yml").write_text("---\n" + PUBSUB + "---\nkind: Subscription\n")
    return tmp_path


def test_list_json(good_dir: Path) -> None:
    result = runner.invoke(app, ["list", "--path", str(good_dir), "-o", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert [c["name"] for c in data] == ["pubsub", "statestore"]
    assert data[1]["type"] == "state.redis"
    assert data[1]["scopes"] == ["checkout"]


def test_list_type_filter(good_dir: Path) -> None:
    result = runner.invoke(app, ["list", "-p", str(good_dir), "-o", "json", "--type", "pubsub.redis"])
    assert result.exit_code == 0, result.output
    assert [c["name"] for c in json.loads(result.stdout)] == ["pubsub"]


def test_list_table(good_dir: Path) -> None:
    result = runner.invoke(app, ["list", "-p", str(good_dir)])
    assert result.exit_code == 0, result.output
    assert "Components" in result.output


def test_list_missing_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["list", "-p", str(tmp_path / "absent")])
    assert result.exit_code == 2


def test_show_json(good_dir: Path) -> None:
    result = runner.invoke(app, ["show", "statestore", "-p", str(good_dir), "-o", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["api_version"] == "dapr.io/v1alpha1"
    assert data["spec"]["metadata"][0] == {"name": "redisHost", "value": "localhost:6379"}


def test_show_table(good_dir: Path) -> None:
    result = runner.invoke(app, ["show", "statestore", "-p", str(good_dir)])
    assert result.exit_code == 0, result.output
    assert "state.redis" in result.output


def test_show_not_found(good_dir: Path) -> None:
    result = runner.invoke(app, ["show", "nope", "-p", str(good_dir)])
    assert result.exit_code == 1


def test_validate_clean(good_dir: Path) -> None:
    result = runner.invoke(app, ["validate", "-p", str(good_dir), "-o", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["summary"] == {"files": 2, "components": 2, "diagnostics": 0, "warnings": 0}


def test_validate_reports_parse_errors(good_dir: Path) -> None:
    (good_dir / "zz-broken.yaml").write_text("kind: Component\nspec: [unterminated\n")
    result = runner.invoke(app, ["validate", "-p", str(good_dir)])
    assert result.exit_code == 1
    assert "1 parse error(s)" in result.output


def test_split_json(tmp_path: Path) -> None:
    path = tmp_path / "multi.yaml"
    path.write_bytes(b"a: 1\n---\nb: 2\n---\n")
    result = runner.invoke(app, ["split", str(path), "-o", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == ["a: 1", "b: 2"]


def test_split_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["split", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1


def test_bracketed_name_is_printed_literally(tmp_path: Path) -> None:
    (tmp_path / "odd.yaml").write_text(
        'kind: Component\nmetadata:\n  name: "a[/b]"\n  namespace: "[bold]"\nspec:\n  type: "[/x]"\n'
    )
    listed = runner.invoke(app, ["list", "-p", str(tmp_path)])
    assert listed.exit_code == 0, listed.output

    shown = runner.invoke(app, ["show", "a[/b]", "-p", str(tmp_path)])
    assert shown.exit_code == 0, shown.output
    assert "a[/b]" in shown.output


def test_validate_with_bracketed_path(tmp_path: Path) -> None:
    components = tmp_path / "a["
    components.mkdir()
    (components / "x]bad.yaml").write_text("kind: Component\nspec: [unterminated\n")
    result = runner.invoke(app, ["validate", "-p", str(components)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "1 parse error(s)" in result.output


def test_split_bracketed_file_name(tmp_path: Path) -> None:
    path = tmp_path / "[/y].yaml"
    path.parent.mkdir()
    path.write_bytes(b"a: 1\n---\nb: 2\n")
    result = runner.invoke(app, ["split", str(path)])
    assert result.exit_code == 0, result.output
