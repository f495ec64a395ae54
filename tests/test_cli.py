from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from main import cli
from web_automation import __version__


class TestCli:
    def test_version(self):
        result = CliRunner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_tools(self):
        result = CliRunner().invoke(cli, ["tools"])
        assert result.exit_code == 0
        assert "Web Automation Tools" in result.output
        assert "navigate" in result.output

    def test_serve_applies_overrides(self, tmp_path, monkeypatch):
        monkeypatch.delenv("WEB_AUTOMATION_BROWSER", raising=False)
        with patch("web_automation.server.WebAutomationServer") as server_cls, \
                patch("web_automation.logging_config.setup_logging") as setup_logging:
            server_cls.return_value.run = AsyncMock()
            result = CliRunner().invoke(
                cli,
                ["serve", "--browser", "firefox", "--timeout-ms", "1000", "--screenshot-dir", str(tmp_path)],
            )

        assert result.exit_code == 0, result.output
        setup_logging.assert_called_once_with(level=None, json_format=None, log_file=None)
        config = server_cls.call_args.args[0]
        assert config.browser_type.value == "firefox"
        assert config.default_timeout_ms == 1000
        assert config.screenshot_dir == tmp_path
        server_cls.return_value.run.assert_awaited_once()
