import json
from unittest.mock import patch

import pytest

from ram.cli import main
from ram.config import settings


@pytest.fixture(autouse=True)
def no_sentry(monkeypatch):
    monkeypatch.delenv("SENTRY_DSN", raising=False)


class TestParseCommand:
    def test_prints_intent_json(self, capsys):
        assert main(["parse", "Gym on march 2", "--language", "en-US"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["kind"] == "scheduling"
        assert data["scheduling"]["activity"] == "Gym"
        assert data["scheduling"]["time_label"] == "All Day"
        assert data["scheduling"]["is_valid"] is True

    def test_command_intent(self, capsys):
        assert main(["parse", "ram sudo mode"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"kind": "command", "raw_text": "ram sudo mode", "command": "activate_admin"}

    def test_override(self, capsys):
        assert main(["parse", "Dentist", "--override", "2026-11-03T15:30"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["scheduling"]["instant"].startswith("2026-11-03T15:30")

    def test_bad_override(self, capsys):
        assert main(["parse", "Dentist", "--override", "soon"]) == 2
        assert "Invalid manual date override" in capsys.readouterr().out


class TestSentryTags:
    def test_language_is_tagged(self, capsys):
        with patch("ram.cli.set_tag") as mock_set_tag:
            assert main(["parse", "Cena mañana", "--language", "es-ES"]) == 0
        mock_set_tag.assert_called_once_with("language", "es-ES")

    def test_default_language_is_tagged(self, capsys):
        with patch("ram.cli.set_tag") as mock_set_tag:
            main(["check"])
        mock_set_tag.assert_called_once_with("language", settings.language)


class TestHeatmapCommand:
    def test_totals_from_logs_file(self, tmp_path, capsys):
        logs = tmp_path / "logs.json"
        logs.write_text(
            json.dumps(
                [
                    {"date_key": "2025-03-03", "minutes": 40},
                    {"date_key": "2025-03-04", "minutes": 25},
                ]
            )
        )

        assert main(["heatmap", "--year", "2025", "--logs", str(logs)]) == 0
        assert "Total focus in 2025: 1h 5m" in capsys.readouterr().out

    def test_missing_logs_file(self, tmp_path, capsys):
        assert main(["heatmap", "--logs", str(tmp_path / "nope.json")]) == 1
        assert "not found" in capsys.readouterr().out


class TestCheckCommand:
    def test_prints_configuration(self, capsys):
        assert main(["check"]) == 0
        out = capsys.readouterr().out
        assert "Ram Configuration Check" in out
        assert "Timezone:" in out
