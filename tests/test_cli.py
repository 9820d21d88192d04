"""Tests for localroute.cli — CLI entrypoint and commands."""

from pathlib import Path

import pytest

from localroute.cli import main

ROUTES_TOML = """
[localization]
default_culture = "en"

[localization.cultures]
en = "English"
fi = "Suomi"

[controllers.account.names]
en = "account"
fi = "tili"

[controllers.account.actions.login]
parameters = ["id"]

[controllers.account.actions.login.cultures.en]
route = "login"
link_name = "Login"

[controllers.account.actions.login.cultures.fi]
route = "kirjaudu"
link_name = "Kirjaudu"
"""

BROKEN_TOML = """
[localization]
default_culture = "en"

[localization.cultures]
en = "English"
fi = "Suomi"

[controllers.fi.names]
en = "fi"

[controllers.fi.actions.about.cultures.fi]
route = "meista"
"""


@pytest.fixture
def route_file(tmp_path: Path) -> str:
    path = tmp_path / "routes.toml"
    path.write_text(ROUTES_TOML, encoding="utf-8")
    return str(path)


@pytest.fixture
def broken_file(tmp_path: Path) -> str:
    path = tmp_path / "broken.toml"
    path.write_text(BROKEN_TOML, encoding="utf-8")
    return str(path)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "localroute" in capsys.readouterr().out

    def test_resolve_missing_args(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve"])
        assert exc_info.value.code == 2


class TestRoutesCommand:
    def test_lists_every_culture(
        self, route_file: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes", route_file])
        out = capsys.readouterr().out

        assert "CULTURE" in out
        assert "/account/login" in out
        assert "/fi/tili/kirjaudu" in out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "missing.toml")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestResolveCommand:
    def test_default_culture(self, route_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", route_file, "account", "login"])
        assert capsys.readouterr().out.strip() == "/account/login"

    def test_culture_and_params(
        self, route_file: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["resolve", route_file, "account", "login", "--culture", "fi", "--param", "id=3"])
        out = capsys.readouterr().out.splitlines()

        assert out == ["/fi/tili/kirjaudu/3", "link name: Kirjaudu"]

    def test_unknown_action(self, route_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", route_file, "account", "register"])
        assert exc_info.value.code == 1
        assert "'register'" in capsys.readouterr().err

    def test_bad_param(self, route_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", route_file, "account", "login", "--param", "id"])
        assert exc_info.value.code == 1
        assert "NAME=VALUE" in capsys.readouterr().err


class TestDetectCommand:
    def test_detect(self, route_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["detect", route_file, "/fi/tili/kirjaudu"])
        main(["detect", route_file, "/account/login"])
        assert capsys.readouterr().out.splitlines() == ["fi", "en"]


class TestCheckCommand:
    def test_clean_file(self, route_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", route_file])
        assert "No errors." in capsys.readouterr().out

    def test_errors_exit_one(self, broken_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", broken_file])
        assert exc_info.value.code == 1

        out = capsys.readouterr().out
        assert "missing-default-route" in out
        assert "culture-collision" in out
