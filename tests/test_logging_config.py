import logging

import pytest

from cloud_assignment.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    uvicorn_error = logging.getLogger("uvicorn.error")
    uvicorn_level = uvicorn_error.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    uvicorn_error.setLevel(uvicorn_level)


def test_records_go_to_stdout(restore_root_logger, capsys):
    configure_logging("debug")

    logging.getLogger("cloud_assignment.test").debug("listener ready")

    assert restore_root_logger.level == logging.DEBUG
    assert "listener ready" in capsys.readouterr().out


def test_uvicorn_lifecycle_lines_are_held_back(restore_root_logger, capsys):
    configure_logging("INFO")

    logging.getLogger("uvicorn.error").info("Waiting for application startup.")
    logging.getLogger("uvicorn.error").error("address already in use")

    out = capsys.readouterr().out
    assert "Waiting for application startup." not in out
    assert "address already in use" in out
