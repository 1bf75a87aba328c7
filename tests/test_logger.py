import logging
from stake_accounts import config
from stake_accounts.logger import get_logger


def test_log_level_from_env(monkeypatch):
    monkeypatch.delenv("STAKE_ACCOUNTS_LOG_LEVEL", raising=False)
    assert config.log_level() == logging.INFO
    monkeypatch.setenv("STAKE_ACCOUNTS_LOG_LEVEL", "debug")
    assert config.log_level() == logging.DEBUG
    monkeypatch.setenv("STAKE_ACCOUNTS_LOG_LEVEL", "nonsense")
    assert config.log_level() == logging.INFO


def test_get_logger_writes_file(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "stake.log"
    monkeypatch.setenv("STAKE_ACCOUNTS_LOG_FILE", str(path))
    log = get_logger("StakeAccounts.Test.File", level=logging.INFO)
    log.info("[TEST] hello")
    for handler in log.handlers:
        handler.flush()
    assert '"msg": "[TEST] hello"' in path.read_text()


def test_get_logger_single_handler_set(monkeypatch):
    monkeypatch.delenv("STAKE_ACCOUNTS_LOG_FILE", raising=False)
    a = get_logger("StakeAccounts.Test.Once")
    b = get_logger("StakeAccounts.Test.Once")
    assert a is b
    assert len(a.handlers) == 1


def test_get_logger_defers_file_creation(tmp_path, monkeypatch):
    path = tmp_path / "deferred" / "stake.log"
    monkeypatch.setenv("STAKE_ACCOUNTS_LOG_FILE", str(path))
    log = get_logger("StakeAccounts.Test.Deferred", level=logging.INFO)
    assert not path.parent.exists()

    log.debug("[TEST] below level")
    assert not path.parent.exists()

    log.info("[TEST] written")
    for handler in log.handlers:
        handler.flush()
    assert "[TEST] written" in path.read_text()
