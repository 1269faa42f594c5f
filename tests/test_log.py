from dropgate.utils import log


class TestLogFile:
    @staticmethod
    def test_default_log_file(monkeypatch):
        monkeypatch.delenv('DROPGATE_LOG_FILE', raising=False)
        assert log.get_log_file() == log.DEFAULT_LOG_FILE

    @staticmethod
    def test_configured_log_file(monkeypatch, tmp_path):
        path = str(tmp_path / 'dropgate.log')
        monkeypatch.setenv('DROPGATE_LOG_FILE', path)
        assert log.get_log_file() == path

    @staticmethod
    def test_disabled_log_file(monkeypatch):
        monkeypatch.setenv('DROPGATE_LOG_FILE', '')
        assert log.get_log_file() is None
