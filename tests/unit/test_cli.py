import json
import os
from pathlib import Path
from typing import cast

import pytest
from cyclopts import App
from pytest_mock import MockerFixture
from rich.console import Console

from folio.cli import CLIContext
from folio.cli._commands import ExitCode, exit_with_error, register_commands
from folio.cli._commands._shared import format_json, format_table, format_toml, format_yaml
from folio.config import Config


class TestCommandRegistration:
    def test_register_commands_registers_subcommands(
        self, mocker: MockerFixture
    ) -> None:
        mock_app = mocker.MagicMock(spec=App)
        register_commands(mock_app)

        assert cast("int", mock_app.command.call_count) >= 5  # pyright: ignore[reportAny]


class TestFormatters:
    def test_json_is_indented(self) -> None:
        output = format_json({"a": {"b": 1}})

        assert json.loads(output) == {"a": {"b": 1}}
        assert "\n  " in output

    def test_json_compact(self) -> None:
        assert format_json({"a": 1}, indent=False) == '{"a":1}'

    def test_yaml_keeps_key_order(self) -> None:
        assert format_yaml({"z": 1, "a": 2}) == "z: 1\na: 2\n"

    def test_toml(self) -> None:
        assert format_toml({"site": {"title": "Notes"}}) == '[site]\ntitle = "Notes"\n'

    def test_table(self) -> None:
        output = format_table(["#", "Title"], [["1", "Notes"]])

        assert "Title" in output
        assert "Notes" in output
        assert output.count("|") >= 6


class TestExitWithError:
    def test_prints_and_exits(self) -> None:
        console = Console(width=100, force_terminal=False, color_system=None)

        with console.capture() as capture, pytest.raises(SystemExit) as exc_info:
            exit_with_error("broken [bold]thing[/bold]", ExitCode.NOT_FOUND, console=console)

        assert exc_info.value.code == ExitCode.NOT_FOUND
        assert "Error: broken [bold]thing[/bold]" in capture.get()


class TestServeCommand:
    def test_runs_uvicorn_with_app(self, mocker: MockerFixture) -> None:
        from folio.cli._commands._serve import serve

        run = mocker.patch("uvicorn.run")
        CLIContext.set_current(CLIContext(config=Config.from_dict({})))

        serve(host="127.0.0.1", port=8123)

        run.assert_called_once()
        assert run.call_args.kwargs["port"] == 8123
        assert run.call_args.kwargs["host"] == "127.0.0.1"

    def test_reload_uses_factory_import_string(self, mocker: MockerFixture) -> None:
        from folio.cli._commands._serve import serve

        run = mocker.patch("uvicorn.run")

        serve(port=8123, reload=True)

        assert run.call_args.args == ("folio.server:create_app",)
        assert run.call_args.kwargs["factory"] is True
        assert run.call_args.kwargs["reload"] is True

    def test_reload_passes_config_options_to_worker(
        self, tmp_path: Path, mocker: MockerFixture
    ) -> None:
        from folio.cli._commands._serve import serve
        from folio.server import create_app

        config_file = tmp_path / "other.toml"
        _ = config_file.write_text('[site]\ntitle = "Other"\nauthor = "Ada"\n')
        environ = mocker.patch.dict(os.environ)
        _ = mocker.patch("uvicorn.run")
        CLIContext.set_current(
            CLIContext(
                config=Config.from_dict({}),
                config_path=config_file,
                project_root=tmp_path,
                cli_overrides={"site": {"title": "From CLI"}},
            )
        )

        serve(port=8123, reload=True)

        assert environ["FOLIO_SERVE_CONFIG"] == str(config_file.resolve())
        assert environ["FOLIO_SERVE_PROJECT_ROOT"] == str(tmp_path.resolve())
        worker_config = create_app().state.config
        assert worker_config.site.title == "From CLI"
        assert worker_config.site.author == "Ada"
        assert worker_config.root == tmp_path.resolve()

    def test_port_zero_picks_free_port(self, mocker: MockerFixture) -> None:
        from folio.cli._commands._serve import serve

        run = mocker.patch("uvicorn.run")

        serve(port=0)

        assert run.call_args.kwargs["port"] > 0
