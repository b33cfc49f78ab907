from pathlib import Path

import pytest

from folio.config import (
    Config,
    ConfigLoadError,
    SourceKind,
    ConfigValidationError,
    LogLevel,
    safe_load_config,
)
from folio.config import _discovery
from tests.conftest import FolioProject


class TestFromDict:
    def test_constructor_holds_defaults(self) -> None:
        config = Config()

        assert config.get("site.language") == "en"
        assert config.to_dict() == Config.from_dict({}).to_dict()

    def test_empty_uses_defaults(self) -> None:
        config = Config.from_dict({})

        assert config.site.language == "en"
        assert config.site.title == ""
        assert config.logging.level is LogLevel.INFO
        assert config.projects.file == ""

    def test_values_override_defaults(self) -> None:
        config = Config.from_dict({"site": {"title": "Notes"}})

        assert config.site.title == "Notes"
        assert config.get("site.language") == "en"

    def test_validation_error(self) -> None:
        with pytest.raises(ConfigValidationError):
            _ = Config.from_dict({"logging": {"level": "loud"}})

    def test_get_with_default(self) -> None:
        config = Config.from_dict({})

        assert config.get("site.missing", "fallback") == "fallback"
        assert config.get("site.language.deeper") is None

    def test_to_dict_is_a_copy(self) -> None:
        config = Config.from_dict({})

        data = config.to_dict()
        data["site"]["title"] = "changed"

        assert config.site.title == ""
        assert config.get("site.title") == ""

    def test_to_toml(self) -> None:
        toml = Config.from_dict({"site": {"title": "Notes"}}).to_toml()

        assert "[site]" in toml
        assert 'title = "Notes"' in toml


class TestResolvePath:
    def test_empty_is_none(self) -> None:
        assert Config.from_dict({}).resolve_path("") is None

    def test_absolute_is_kept(self, tmp_path: Path) -> None:
        config = Config.from_dict({}, root=Path("/elsewhere"))

        assert config.resolve_path(str(tmp_path)) == tmp_path

    def test_relative_joins_root(self) -> None:
        config = Config.from_dict({}, root=Path("/site"))

        assert config.resolve_path("static") == Path("/site/static")

    def test_relative_without_root_uses_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        assert Config.from_dict({}).resolve_path("static") == Path.cwd() / "static"


class TestFromFile:
    def test_root_is_file_directory(self, folio_project: FolioProject) -> None:
        config = Config.from_file(folio_project.config_file)

        assert config.root == folio_project.root.resolve()
        assert config.site.author == "Ada"
        assert config.resolve_path(config.site.static_dir) == (
            folio_project.root.resolve() / "static"
        )

    def test_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "folio.toml"
        _ = path.write_text("[site\n")

        with pytest.raises(ConfigLoadError):
            _ = Config.from_file(path)


class TestLoad:
    def test_discovers_project_config(self, folio_project: FolioProject) -> None:
        config = Config.load()

        assert config.site.title == "Ada's Workshop"
        assert config.root == folio_project.root.resolve()

    def test_env_overrides_project(
        self, folio_project: FolioProject, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FOLIO_SITE__TITLE", "From Env")

        assert Config.load().site.title == "From Env"

    def test_numeric_env_value_for_text_setting(
        self, folio_project: FolioProject, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FOLIO_SITE__TITLE", "2024")
        monkeypatch.setenv("FOLIO_SITE__DESCRIPTION", "true")
        monkeypatch.setenv("FOLIO_PROJECTS__FILE", "42")

        config, error = safe_load_config()

        assert error is None
        assert config.site.title == "2024"
        assert config.site.description == "true"
        assert config.projects.file == "42"
        assert config.get("site.title") == "2024"
        assert config.site.author == "Ada"

    def test_cli_overrides_env(
        self, folio_project: FolioProject, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FOLIO_SITE__TITLE", "From Env")

        config = Config.load(
            include_cli=True, cli_overrides={"site": {"title": "From CLI"}}
        )

        assert config.site.title == "From CLI"

    def test_user_config_below_project(self, folio_project: FolioProject) -> None:
        user_path = _discovery.get_user_config_path()
        user_path.parent.mkdir(parents=True, exist_ok=True)
        _ = user_path.write_text('[site]\ntitle = "User"\nauthor = "Someone"\nlanguage = "de"\n')

        config = Config.load()

        assert config.site.title == "Ada's Workshop"
        assert config.site.language == "de"

    def test_sources_highest_first(self, folio_project: FolioProject) -> None:
        names = [source.kind for source in Config.load().sources]

        assert names[0] is SourceKind.ENV
        assert names[-1] is SourceKind.DEFAULT

    def test_sources_include_cli_layer_when_overridden(self, folio_project: FolioProject) -> None:
        config = Config.load(include_cli=True, cli_overrides={"site": {"title": "x"}})

        assert [source.kind for source in config.sources][:2] == [SourceKind.CLI, SourceKind.ENV]

    def test_invalid_project_file(self, folio_project: FolioProject) -> None:
        _ = folio_project.config_file.write_text('[logging]\nlevel = "loud"\n')

        with pytest.raises(ConfigValidationError):
            _ = Config.load()

    def test_without_project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        config = Config.load()

        assert config.root is None
        assert config.site.language == "en"


class TestSafeLoadConfig:
    def test_success(self, folio_project: FolioProject) -> None:
        config, error = safe_load_config()

        assert error is None
        assert config.site.author == "Ada"

    def test_falls_back_to_defaults(
        self, folio_project: FolioProject, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _ = folio_project.config_file.write_text("[site\n")

        config, error = safe_load_config()

        assert error is not None
        assert config.site.title == ""
        assert "Warning: Failed to load config" in capsys.readouterr().err

    def test_strict_mode_exits(
        self, folio_project: FolioProject, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FOLIO_STRICT_CONFIG", "1")
        _ = folio_project.config_file.write_text("[site\n")

        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config()

        assert exc_info.value.code == 1

    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            _ = safe_load_config(config_path=tmp_path / "missing.toml")

    def test_explicit_path(self, folio_project: FolioProject) -> None:
        config, error = safe_load_config(config_path=folio_project.config_file)

        assert error is None
        assert config.projects.file == "projects.yaml"

    def test_explicit_path_with_overrides(self, folio_project: FolioProject) -> None:
        config, error = safe_load_config(
            config_path=folio_project.config_file,
            cli_overrides={"site": {"title": "From CLI"}},
        )

        assert error is None
        assert config.site.title == "From CLI"
        assert config.site.author == "Ada"
        assert [source.kind for source in config.sources] == [
            SourceKind.CLI,
            SourceKind.PROJECT,
        ]
