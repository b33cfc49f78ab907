from pathlib import Path

from folio.config import (
    PROJECT_CONFIG_NAME,
    ConfigSource,
    SourceKind,
    discover_sources,
    find_project_root,
)


class TestFindProjectRoot:
    def test_finds_config_in_parent(self, tmp_path: Path) -> None:
        _ = (tmp_path / PROJECT_CONFIG_NAME).write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == tmp_path.resolve()

    def test_returns_none_without_config(self, tmp_path: Path) -> None:
        assert find_project_root(tmp_path) is None

    def test_directory_named_like_config_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / PROJECT_CONFIG_NAME).mkdir()

        assert find_project_root(tmp_path) is None


class TestDiscoverSources:
    def test_precedence_order(self, tmp_path: Path) -> None:
        _ = (tmp_path / PROJECT_CONFIG_NAME).write_text("")

        sources = discover_sources(
            tmp_path, include_cli=True, cli_overrides={"site": {"title": "X"}}
        )

        assert [source.kind for source in sources] == [
            SourceKind.CLI,
            SourceKind.ENV,
            SourceKind.PROJECT,
            SourceKind.USER,
            SourceKind.DEFAULT,
        ]
        assert sources[2].path == tmp_path / PROJECT_CONFIG_NAME
        assert sources[2].exists is True

    def test_missing_user_config_is_reported(self, tmp_path: Path) -> None:
        sources = discover_sources(tmp_path, include_env=False)

        user = next(s for s in sources if s.kind == SourceKind.USER)
        assert user.exists is False


class TestConfigSourceLabel:
    def test_file_layer(self, tmp_path: Path) -> None:
        source = ConfigSource(SourceKind.PROJECT, path=tmp_path / "folio.toml", exists=False)

        assert source.label == f"project: {tmp_path / 'folio.toml'} (missing)"

    def test_non_file_layer(self) -> None:
        assert ConfigSource(SourceKind.ENV).label == "env: -"
