#
#  Copyright (C) 2017-2025 Dremio Corporation
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
import json

import pytest
import yaml
from typer.testing import CliRunner

from pluginutils.cli import ty
from pluginutils.config import settings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def form_file(temp_config_dir, form_data):
    f = temp_config_dir / "form.yaml"
    f.write_text(yaml.dump(form_data))
    return f


def test_formdata_get(runner, mock_config_dir, form_file):
    result = runner.invoke(ty, ["formdata", "get", str(form_file), "command.data"])
    assert result.exit_code == 0, result.output
    assert "FIND" in result.output


def test_formdata_get_nested_map(runner, mock_config_dir, form_file):
    result = runner.invoke(ty, ["formdata", "get", str(form_file), "body.data"])
    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output) == {"filter": {"status": "active"}}


def test_formdata_get_missing(runner, mock_config_dir, form_file):
    result = runner.invoke(ty, ["formdata", "get", str(form_file), "limit.value"])
    assert result.exit_code == 1
    assert "not configured" in result.output


def test_formdata_get_invalid_path(runner, mock_config_dir, form_file):
    result = runner.invoke(ty, ["formdata", "get", str(form_file), "a..b"])
    assert result.exit_code != 0


def test_formdata_set(runner, mock_config_dir, form_file):
    result = runner.invoke(
        ty, ["formdata", "set", str(form_file), "body.data.limit", "25"]
    )
    assert result.exit_code == 0, result.output
    doc = yaml.safe_load(form_file.read_text())
    assert doc["body"]["data"]["limit"] == 25
    assert doc["body"]["data"]["filter"] == {"status": "active"}


def test_formdata_set_dry_run(runner, mock_config_dir, form_file):
    before = form_file.read_text()
    result = runner.invoke(
        ty, ["formdata", "set", str(form_file), "command.data", "UPDATE", "--dry-run"]
    )
    assert result.exit_code == 0, result.output
    assert "UPDATE" in result.output
    assert form_file.read_text() == before


def test_formdata_set_new_json_file(runner, mock_config_dir, temp_config_dir):
    f = temp_config_dir / "new.json"
    result = runner.invoke(ty, ["formdata", "set", str(f), "a.b", "true"])
    assert result.exit_code == 0, result.output
    assert json.loads(f.read_text()) == {"a": {"b": True}}


def test_formdata_set_through_scalar(runner, mock_config_dir, form_file):
    result = runner.invoke(ty, ["formdata", "set", str(form_file), "limit.x", "1"])
    assert result.exit_code != 0
    assert yaml.safe_load(form_file.read_text())["limit"] == 10


def test_missing_file(runner, mock_config_dir, temp_config_dir):
    result = runner.invoke(
        ty, ["formdata", "get", str(temp_config_dir / "nope.yaml"), "a"]
    )
    assert result.exit_code != 0


@pytest.mark.parametrize(
    "doc,hinted",
    [
        ({"url": "http://localhost:8080"}, True),
        ({"endpoints": [{"host": "db.example.com", "port": 5432}]}, False),
        ({"endpoints": [{"host": "127.0.0.1", "port": 5432}]}, True),
        ({"endpoints": "broken"}, False),
    ],
)
def test_datasource_hint(runner, mock_config_dir, temp_config_dir, doc, hinted):
    f = temp_config_dir / "datasource.yaml"
    f.write_text(yaml.dump(doc))
    result = runner.invoke(ty, ["datasource", "hint", str(f)])
    assert result.exit_code == 0, result.output
    if hinted:
        assert "hint" in result.output and "ngrok" in result.output
    else:
        assert "No hints" in result.output


def test_datasource_hint_disabled(runner, mock_config_dir, temp_config_dir):
    cfg = temp_config_dir / "cfg.yaml"
    cfg.write_text(yaml.dump({"hints": {"enabled": False}}))
    f = temp_config_dir / "datasource.yaml"
    f.write_text(yaml.dump({"url": "http://localhost:8080"}))
    result = runner.invoke(ty, ["--cfg", str(cfg), "datasource", "hint", str(f)])
    assert result.exit_code == 0, result.output
    assert "No hints" in result.output


def test_columns_duplicates(runner, mock_config_dir):
    result = runner.invoke(
        ty, ["columns", "duplicates", "id", "name", "id", "email", "name"]
    )
    assert result.exit_code == 0, result.output
    assert "id" in result.output and "name" in result.output
    assert "email" not in result.output


def test_columns_no_duplicates(runner, mock_config_dir):
    result = runner.invoke(ty, ["columns", "duplicates", "id", "name"])
    assert result.exit_code == 0, result.output
    assert "No duplicate columns" in result.output


def test_log_level_option(runner, mock_config_dir):
    result = runner.invoke(ty, ["--log-level", "DEBUG", "columns", "duplicates", "x"])
    assert result.exit_code == 0, result.output
    assert settings.instance().log.level == "DEBUG"


def test_config_create_and_list(runner, mock_config_dir):
    result = runner.invoke(ty, ["config", "create"])
    assert result.exit_code == 0, result.output
    assert settings.default_config().exists()
    result = runner.invoke(ty, ["config", "list"])
    assert result.exit_code == 0, result.output
    assert "enabled: true" in result.output


@pytest.mark.parametrize("doc", [[1, 2], "hello"])
@pytest.mark.parametrize("field", ["a", "a.b"])
def test_formdata_set_on_non_map_document(
    runner, mock_config_dir, temp_config_dir, doc, field
):
    f = temp_config_dir / "form.yaml"
    f.write_text(yaml.dump(doc))
    before = f.read_text()
    result = runner.invoke(
        ty, ["formdata", "set", str(f), field, "1"], env={"COLUMNS": "200"}
    )
    assert result.exit_code == 2, result.output
    assert not isinstance(result.exception, TypeError)
    assert "not a map" in result.output
    assert f.read_text() == before
