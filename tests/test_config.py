import pytest
import yaml

from tinydatalog.engine.config import Config, DEFAULT_CONFIG, config
from tinydatalog.engine.data_set import DataSet
from tinydatalog.model import fact, program


def test_singleton():
    assert Config.get_instance() is config
    with pytest.raises(RuntimeError):
        Config()


def test_defaults():
    assert config.get_max_iterations() == DEFAULT_CONFIG["evaluation"]["max_iterations"]
    assert config.get_max_candidates() is None
    assert config.get_check_arity() is True
    assert config.get("no.such.key", "fallback") == "fallback"


def test_set_and_get_dot_paths():
    config.set("evaluation.max_candidates", 50)
    config.set("extra.nested.value", 3)
    assert config.get("evaluation.max_candidates") == 50
    assert config.get("extra.nested.value") == 3
    config.reset()
    assert config.get("evaluation.max_candidates") is None


def test_load_from_file_merges_with_defaults(tmp_path):
    path = tmp_path / "datalog.yaml"
    path.write_text(yaml.dump({"relations": {"check_arity": False}}))
    config.load_from_file(str(path))
    assert config.get_check_arity() is False
    assert config.get_max_iterations() == 1000


def test_missing_file_keeps_defaults(tmp_path, caplog):
    config.load_from_file(str(tmp_path / "missing.yaml"))
    assert "not found" in caplog.text
    assert config.get_check_arity() is True


def test_save_round_trip(tmp_path):
    path = tmp_path / "saved.yaml"
    config.set("evaluation.max_iterations", 7)
    config.save(str(path))
    assert yaml.safe_load(path.read_text())["evaluation"]["max_iterations"] == 7


def test_data_set_reads_config_and_keywords_override():
    config.set("relations.check_arity", False)
    permissive = DataSet()
    permissive.ingest(program(fact("p", "a"), fact("p", "a", "b")))
    assert len(permissive) == 2
    assert DataSet(check_arity=True).check_arity is True


def test_getters_fall_back_to_defaults_when_keys_are_missing():
    config.set("evaluation", {})
    config.set("relations", {})
    assert config.get_max_iterations() == DEFAULT_CONFIG["evaluation"]["max_iterations"]
    assert config.get_max_candidates() == DEFAULT_CONFIG["evaluation"]["max_candidates"]
    assert config.get_show_progress() == DEFAULT_CONFIG["evaluation"]["show_progress"]
    assert config.get_check_arity() == DEFAULT_CONFIG["relations"]["check_arity"]
