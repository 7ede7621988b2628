from pathlib import Path

import pytest
from pydantic import ValidationError

from remote_webdriver.config import DriverConfig, load_config
from remote_webdriver.factory import build_driver
from remote_webdriver.transport.httpx_transport import HTTPXTransport


def test_load_config_reads_env_file(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text(
        "\n".join(
            [
                "REMOTE_WEBDRIVER_SERVICE_URL=http://grid:4444/wd/hub",
                "REMOTE_WEBDRIVER_SESSION_ID=abc",
                "REMOTE_WEBDRIVER_TRANSPORT__TIMEOUT=12.5",
            ]
        )
    )

    config = load_config(env_file=env_path)

    assert config.service_url == "http://grid:4444/wd/hub"
    assert config.session_id == "abc"
    assert config.transport.timeout == 12.5


def test_load_config_prioritises_overrides(tmp_path: Path, monkeypatch) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text(
        "\n".join(
            [
                "REMOTE_WEBDRIVER_SERVICE_URL=http://dotenv:4444/wd/hub",
                "REMOTE_WEBDRIVER_SESSION_ID=from-dotenv",
                "REMOTE_WEBDRIVER_TRANSPORT__TIMEOUT=7",
            ]
        )
    )
    monkeypatch.setenv("REMOTE_WEBDRIVER_SERVICE_URL", "http://environ:4444/wd/hub")

    config = load_config(env_path, service_url=None, session_id="override")

    assert config.service_url == "http://environ:4444/wd/hub"
    assert config.session_id == "override"
    assert config.transport.timeout == 7.0


def test_load_config_rejects_invalid_values(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REMOTE_WEBDRIVER_TRANSPORT__TIMEOUT", "abc")

    with pytest.raises(ValidationError):
        load_config()


def test_build_driver_from_config() -> None:
    config = DriverConfig(service_url="http://grid:4444/wd/hub/", session_id="s1")

    driver = build_driver(config)
    try:
        assert driver.driver_url == "http://grid:4444/wd/hub"
        assert driver.session_id == "s1"
        assert isinstance(driver.dispatcher.transport, HTTPXTransport)
    finally:
        driver.dispatcher.transport.close()
