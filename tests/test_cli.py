"""Tests for the command line interface."""
import pytest

from textanalyser import cli
from textanalyser.config import Config


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch, tmp_path):
    """Keep the user's own config file out of the tests."""
    monkeypatch.setattr(cli, "get_default_config_path", lambda: tmp_path / "absent.yaml")


class TestResolveAnalysers:

    def test_defaults_come_from_config(self):
        assert cli.resolve_analysers(None, Config.default()) == ["chars", "words"]

    def test_all_expands(self):
        assert cli.resolve_analysers(["words", "all"], Config.default()) == [
            "chars", "words", "dictionary"
        ]

    def test_duplicates_dropped(self):
        assert cli.resolve_analysers(["words", "words", "chars"], Config.default()) == [
            "words", "chars"
        ]


class TestMain:

    def test_default_reports(self, sample_path, capsys):
        exit_code = cli.main([str(sample_path)])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Most popular character is 't' with an occurrence count of 7" in out
        assert "Most popular word is 'the' with an occurrence count of 3" in out
        assert "Dictionary Analyser" not in out

    def test_dictionary_analyser(self, sample_path, dictionary_path, capsys):
        exit_code = cli.main([
            str(sample_path), "-a", "dictionary", "-D", str(dictionary_path)
        ])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "The dictionary word count is 5" in out
        assert "The number of words present in the dictionary is 5" in out

    def test_config_dictionaries_are_merged(
        self, tmp_path, sample_path, dictionary_path, extra_dictionary_path, capsys
    ):
        config_path = tmp_path / "config.yaml"
        Config(dictionaries=[str(dictionary_path)]).save(config_path)

        exit_code = cli.main([
            str(sample_path), "-a", "dictionary",
            "-D", str(extra_dictionary_path), "-c", str(config_path)
        ])

        assert exit_code == 0
        assert "The dictionary word count is 7" in capsys.readouterr().out

    def test_summary(self, sample_path, capsys):
        exit_code = cli.main([str(sample_path), "-a", "words", "--summary"])

        assert exit_code == 0
        assert "Longest word" in capsys.readouterr().out

    def test_missing_file_returns_error(self, tmp_path, capsys):
        exit_code = cli.main([str(tmp_path / "missing.txt")])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_dictionary_returns_error(self, sample_path, tmp_path):
        exit_code = cli.main([
            str(sample_path), "-a", "dictionary", "-D", str(tmp_path / "none.txt")
        ])

        assert exit_code == 1

    def test_unknown_analyser_is_rejected(self, sample_path):
        with pytest.raises(SystemExit):
            cli.main([str(sample_path), "-a", "sentences"])

    def test_config_with_empty_keys_runs(self, tmp_path, sample_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("dictionaries:\nanalysers:\n", encoding="utf-8")

        exit_code = cli.main([str(sample_path), "-c", str(config_path)])

        assert exit_code == 0
        assert "Most popular word is 'the'" in capsys.readouterr().out

    def test_malformed_config_returns_error(self, tmp_path, sample_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("dictionaries: {path: words.txt}\n", encoding="utf-8")

        exit_code = cli.main([str(sample_path), "-c", str(config_path)])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().out


class TestHandleAnalyse:

    @pytest.fixture
    def warnings(self, monkeypatch):
        messages = []
        monkeypatch.setattr(cli.logger, "warning", lambda msg, *args: messages.append(msg % args))
        return messages

    def test_unused_dictionary_files_warn(self, sample_path, dictionary_path, warnings):
        exit_code = cli.handle_analyse(
            str(sample_path), ["words"], [str(dictionary_path)], Config.default()
        )

        assert exit_code == 0
        assert any("ignored" in message for message in warnings)

    def test_dictionary_analyser_without_files_warns(self, sample_path, warnings):
        cli.handle_analyse(str(sample_path), ["dictionary"], [], Config.default())

        assert any("without any dictionary files" in message for message in warnings)

    def test_no_warning_when_dictionary_files_are_used(
        self, sample_path, dictionary_path, warnings
    ):
        cli.handle_analyse(
            str(sample_path), ["dictionary"], [str(dictionary_path)], Config.default()
        )

        assert warnings == []
