"""
Tests for python -m spark_review
"""

import importlib

import pytest

from spark_review import __main__ as cli


class TestCli:

    def test_list(self, capsys):
        assert cli.main(["--list"]) == 0
        out = capsys.readouterr().out
        for topic in cli.TOPICS:
            assert topic in out

    def test_unknown_topic(self, capsys):
        assert cli.main(["select", "joins"]) == 2
        assert "unknown topic(s): joins" in capsys.readouterr().err

    def test_unknown_environment(self):
        with pytest.raises(SystemExit):
            cli.main(["--env", "staging"])

    def test_topics_are_importable(self):
        for module_name in cli.TOPICS.values():
            assert callable(importlib.import_module(module_name).demo)

    def test_runs_selected_topics(self, spark, monkeypatch, capsys):
        calls = []

        def fake_run_job(job, app_name=None, env=None):
            calls.append(env)
            return job(spark)

        monkeypatch.setattr(cli, "run_job", fake_run_job)
        monkeypatch.setattr(cli, "setup_logging", lambda level: None)

        assert cli.main(["select", "missing", "--env", "test"]) == 0
        assert calls == ["test"]
        out = capsys.readouterr().out
        assert "-- select --" in out
        assert "-- missing --" in out
        assert "age_next_year" in out
