"""Unit tests for editor settings."""

from pathlib import Path

import pytest

from catalog_term_editor.config import (
    ENV_LANGUAGE,
    EditorSettings,
    EnvironmentLanguageResolver,
    SettingsLanguageResolver,
    load_settings,
)


@pytest.fixture(autouse=True)
def _clear_language_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_LANGUAGE, raising=False)


class TestLoadSettings:
    def test_defaults_without_file(self) -> None:
        settings = load_settings()

        assert settings.language is None
        assert settings.fallback_language == "en"
        assert settings.messages_path is None

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """有効なYAMLファイルから設定を読み込めること."""
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text(
            "language: fr\nfallback_language: en\nmessages_path: messages.yml\n",
            encoding="utf-8",
        )

        settings = load_settings(settings_file)

        assert settings.language == "fr"
        assert settings.fallback_language == "en"
        # 設定ファイルからの相対パスとして解決されること
        assert settings.messages_path == tmp_path / "messages.yml"

    def test_empty_file(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text("", encoding="utf-8")

        settings = load_settings(settings_file)

        assert settings.language is None

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text("language: fr\n", encoding="utf-8")
        monkeypatch.setenv(ENV_LANGUAGE, "de")

        settings = load_settings(settings_file)

        assert settings.language == "de"

    def test_blank_environment_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text("language: fr\n", encoding="utf-8")
        monkeypatch.setenv(ENV_LANGUAGE, "  ")

        assert load_settings(settings_file).language == "fr"

    def test_nonexistent_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Settings file not found"):
            load_settings(tmp_path / "nonexistent.yml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text("language: [fr\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_settings(settings_file)

    def test_root_not_mapping(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text("- fr\n- en\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_settings(settings_file)

    def test_invalid_language_code(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text("language: French\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid language"):
            load_settings(settings_file)

    @pytest.mark.parametrize(
        ("content", "name"),
        [
            ("language: no\n", "language"),  # YAML 1.1 では真偽値 False になる
            ("language: 123\n", "language"),
            ("fallback_language: 1\n", "fallback_language"),
        ],
    )
    def test_non_string_language(self, tmp_path: Path, content: str, name: str) -> None:
        """文字列でない言語コードはTypeErrorではなくValueErrorになること."""
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text(content, encoding="utf-8")

        with pytest.raises(ValueError, match=f"Invalid {name} in settings"):
            load_settings(settings_file)

    def test_non_string_messages_path(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.yml"
        settings_file.write_text("messages_path: 5\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid messages_path"):
            load_settings(settings_file)


class TestSettingsLanguageResolver:
    def test_follows_settings(self) -> None:
        """設定の言語を変更するとリゾルバの結果も変わること（キャッシュしない）."""
        settings = EditorSettings(language="fr")
        resolver = SettingsLanguageResolver(settings)

        assert resolver.get_language() == "fr"
        settings.language = "it"
        assert resolver.get_language() == "it"

    def test_unconfigured(self) -> None:
        assert SettingsLanguageResolver(EditorSettings()).get_language() is None


class TestEnvironmentLanguageResolver:
    def test_reads_environment_on_each_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """環境変数の変更が次の呼び出しから反映されること（キャッシュしない）."""
        resolver = EnvironmentLanguageResolver(EditorSettings(language="fr"))

        assert resolver.get_language() == "fr"
        monkeypatch.setenv(ENV_LANGUAGE, "de")
        assert resolver.get_language() == "de"
        monkeypatch.delenv(ENV_LANGUAGE)
        assert resolver.get_language() == "fr"

    def test_invalid_environment_falls_back_to_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_LANGUAGE, "German")
        resolver = EnvironmentLanguageResolver(EditorSettings(language="it"))

        assert resolver.get_language() == "it"

    def test_unconfigured(self) -> None:
        assert EnvironmentLanguageResolver().get_language() is None
