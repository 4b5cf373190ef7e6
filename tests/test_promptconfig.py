from __future__ import annotations

import json

from termprompt.config import PromptConfig
from termprompt import constants


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "nested" / "config.json"

    config = PromptConfig.from_file(str(path))

    assert config == PromptConfig.make_default()
    assert path.is_file()
    assert json.loads(path.read_text(encoding="utf-8"))["pointer"] == (
        constants.FIGURE_POINTER_SMALL
    )


def test_written_config_is_read_back(tmp_path):
    path = str(tmp_path / "config.json")
    config = PromptConfig.make_default()
    config.prefix = "» "
    config.keys = {"submit": ["enter"]}
    config.style["message"] = "underline"

    config.to_file(path)

    assert PromptConfig.from_file(path) == config


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"version": "0.1", "indent": "    ", "colour": "blue"}),
        encoding="utf-8",
    )

    config = PromptConfig.from_file(str(path))

    assert config is not None
    assert config.indent == "    "
    assert config.keys == constants.DEFAULT_KEYS


def test_malformed_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{ not json", encoding="utf-8")

    assert PromptConfig.from_file(str(path)) is None
    assert PromptConfig.load(str(path)) == PromptConfig.make_default()
    assert "Unable to read config" in caplog.text


def test_default_keys_are_not_shared_between_instances():
    first = PromptConfig.make_default()
    first.keys["submit"].append("y")

    assert PromptConfig.make_default().keys == {"submit": ["enter", "return"]}


def test_default_path_points_at_a_json_file():
    path = PromptConfig.default_path()

    assert path.endswith("config.json")
    assert constants.APPLICATION_NAME in path
