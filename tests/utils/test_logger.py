#!filepath: tests/utils/test_logger.py
import pytest
from loguru import logger

from koala_lightgbm import logs


@pytest.fixture
def captured():
    lines = []
    sink_id = logger.add(lambda msg: lines.append(str(msg)), level="DEBUG")
    yield lines
    logger.remove(sink_id)


def test_catch_reraises_and_logs(captured):
    @logs.catch(msg="engine failed")
    def boom():
        raise RuntimeError("native")

    with pytest.raises(RuntimeError, match="native"):
        boom()

    output = "\n".join(captured)
    assert "[ERROR] boom: engine failed" in output


def test_catch_passes_result_through(captured):
    @logs.catch(log_outputs=True, log_time=True)
    def add(a, b):
        return a + b

    assert add(1, 2) == 3

    output = "\n".join(captured)
    assert "[RETURN] add result=3" in output
    assert "[TIME] add" in output


def test_catch_preserves_name():
    @logs.catch()
    def some_function():
        return None

    assert some_function.__name__ == "some_function"


def test_configure_with_file_sink(tmp_path):
    logs.configure(log_dir=str(tmp_path / "logs"), log_level="DEBUG")
    try:
        assert (tmp_path / "logs").is_dir()
        assert logs.level == "DEBUG"
    finally:
        logs.configure(log_dir=None, log_level="INFO")
