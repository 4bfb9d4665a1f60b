import json
import pathlib

from falconkeys.commontypes import SchemaPolicy
from falconkeys.settings import DEFAULT_SUGGESTION_COUNT, Settings


def test_defaults():
    settings = Settings.load(None)
    assert settings.schema_policy is SchemaPolicy.ABORT
    assert settings.encoding == "utf-8"
    assert settings.suggestion_count == DEFAULT_SUGGESTION_COUNT


def test_load_partial(tmp_path: pathlib.Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"schema_policy": "skip", "encoding": "cp1252"}))
    settings = Settings.load(path)
    assert settings.schema_policy is SchemaPolicy.SKIP
    assert settings.encoding == "cp1252"
    assert settings.log_level == "WARNING"


def test_save_and_load(tmp_path: pathlib.Path):
    path = tmp_path / "settings.json"
    settings = Settings.for_test()
    settings.save(path)
    raw = json.loads(path.read_text())
    assert raw["schema_policy"] == "SKIP"
    assert Settings.load(path) == settings
