#!filepath: tests/config/test_app_config.py
import yaml
import pytest

from koala_lightgbm.config import AppConfig
from koala_lightgbm.config.log_config import LogConfig
from koala_lightgbm.config.model_config import ModelConfig, TransformerConfig
from koala_lightgbm.models.lgbm_model import LGBMBinaryClassifier, LGBMRegressor
from koala_lightgbm.training.machine import SupervisedMachine


@pytest.fixture(autouse=True)
def no_env_override(monkeypatch):
    monkeypatch.delenv("KOALA_LOG_LEVEL", raising=False)


@pytest.fixture
def sample_config_file(tmp_path):
    """
    临时 YAML 配置（pytest 自动清理目录）
    """
    data = {
        "log": {
            "dir": None,
            "rotation": "1 day",
            "retention": "7 days",
            "level": "DEBUG",
        },
        "model": {
            "family": "lightgbm",
            "task": "binary",
            "params": {
                "num_iterations": 50,
                "num_leaves": 15,
                "validation_fraction": 0.1,
            },
        },
        "transformer": {
            "sorted": True,
            "categorical_features": ["city"],
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.model, ModelConfig)
    assert isinstance(cfg.transformer, TransformerConfig)

    assert cfg.log.level == "DEBUG"
    assert cfg.model.task == "binary"
    assert cfg.model.params["num_leaves"] == 15
    assert cfg.transformer.categorical_features == ["city"]


def test_default_config_file():
    cfg = AppConfig.load()

    assert cfg.model.family == "lightgbm"
    assert cfg.model.task == "regression"
    assert cfg.model.params["validation_fraction"] == 0.2


def test_env_overrides_log_level(sample_config_file, monkeypatch):
    monkeypatch.setenv("KOALA_LOG_LEVEL", "WARNING")

    cfg = AppConfig.load(path=str(sample_config_file))
    assert cfg.log.level == "WARNING"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yml"))


def test_missing_model_section_should_fail(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"log": {"level": "INFO"}}))

    with pytest.raises(Exception):
        AppConfig.load(path=str(bad_file))


def test_unknown_task_should_fail(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"model": {"task": "ranking"}}))

    with pytest.raises(Exception):
        AppConfig.load(path=str(bad_file))


def test_build_machine(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))
    machine = cfg.build_machine()

    assert isinstance(machine, SupervisedMachine)
    assert isinstance(machine.model, LGBMBinaryClassifier)
    assert machine.model.params()["num_iterations"] == 50
    assert machine.model.params()["validation_fraction"] == 0.1
    assert machine.transformer_X.sorted is True
    assert list(machine.transformer_X.categorical_features) == ["city"]


def test_build_machine_rejects_unknown_param(tmp_path):
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text(yaml.safe_dump({"model": {"params": {"not_a_param": 1}}}))

    cfg = AppConfig.load(path=str(cfg_file))
    with pytest.raises(Exception):
        cfg.build_machine()


def test_default_build_machine_is_regressor():
    machine = AppConfig.load().build_machine()
    assert isinstance(machine.model, LGBMRegressor)


def test_apply_logging_writes_file(tmp_path):
    cfg = AppConfig(
        log=LogConfig(dir=str(tmp_path / "logs"), level="DEBUG"),
        model=ModelConfig(),
    )
    cfg.apply_logging()

    assert (tmp_path / "logs").is_dir()
