from collections.abc import Iterator

import pytest
from loguru import logger

from minsh import logging_utils


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    yield
    logger.remove()


def test_default_profile_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    logging_utils.configure_logging(level="debug")
    logger.debug("resolved {} to {}", "tool", "/bin/tool")
    captured = capsys.readouterr()
    assert "resolved tool to /bin/tool" in captured.err
    assert "DEBUG" in captured.err
    assert captured.out == ""


def test_level_filters_records(capsys: pytest.CaptureFixture[str]) -> None:
    logging_utils.configure_logging(level="WARNING")
    logger.debug("hidden")
    logger.warning("shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.err
    assert "shown" in captured.err


def test_configuration_is_applied_once(capsys: pytest.CaptureFixture[str]) -> None:
    logging_utils.configure_logging(level="INFO")
    logging_utils.configure_logging(level="info")
    logger.info("marker-7f3a")
    err = capsys.readouterr().err
    assert err.count("marker-7f3a") == 1
    assert len(err.splitlines()) == 1
