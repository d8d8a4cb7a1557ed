"""エディタ設定（アクティブ言語・メッセージカタログ）の読み込み.

settings.yml の例:
    language: fr
    fallback_language: en
    messages_path: messages.yml

環境変数 CATALOG_TERM_EDITOR_LANGUAGE が設定されていれば language を上書きします。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from loguru import logger

from .core.language import is_language_code

ENV_LANGUAGE = "CATALOG_TERM_EDITOR_LANGUAGE"


@dataclass
class EditorSettings:
    """エディタ設定.

    Attributes:
        language: アクティブ言語（未設定なら None）
        fallback_language: 表示文字列が見つからない場合に使う言語
        messages_path: メッセージカタログ（YAML）のパス
    """

    language: str | None = None
    fallback_language: str = "en"
    messages_path: Path | None = None

    def __post_init__(self) -> None:
        for name in ("language", "fallback_language"):
            code = getattr(self, name)
            if code is not None and not is_language_code(code):
                msg = f"Invalid {name} in settings: '{code}' (expected ISO 639 code like 'en')"
                raise ValueError(msg)


def load_settings(settings_path: Path | str | None = None) -> EditorSettings:
    """設定ファイルと環境変数から EditorSettings を作る.

    Args:
        settings_path: settings.yml のパス（None なら環境変数のみ）

    Returns:
        エディタ設定

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: YAML形式が不正、ルートがマッピングでない、言語コードが不正な場合
    """
    data: dict = {}
    base_dir = Path.cwd()

    if settings_path is not None:
        settings_path = Path(settings_path)
        if not settings_path.exists():
            raise FileNotFoundError(f"Settings file not found: {settings_path}")

        try:
            with open(settings_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in settings file: {settings_path}"
            raise ValueError(msg) from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            msg = f"Settings file must contain a mapping, got {type(loaded)}"
            raise ValueError(msg)
        data = loaded
        base_dir = settings_path.parent

    language = data.get("language")
    env_language = os.environ.get(ENV_LANGUAGE, "").strip()
    if env_language:
        language = env_language

    # messages_path は設定ファイルからの相対パスとして扱う
    messages_path = data.get("messages_path")
    if messages_path is not None:
        if not isinstance(messages_path, str):
            msg = f"Invalid messages_path in settings: {messages_path!r} (expected a path string)"
            raise ValueError(msg)
        messages_path = base_dir / Path(messages_path)

    settings = EditorSettings(
        language=language,
        fallback_language=data.get("fallback_language", "en"),
        messages_path=messages_path,
    )
    if settings_path is not None:
        logger.info(f"Loaded settings from {settings_path} (language={settings.language})")
    return settings


class SettingsLanguageResolver:
    """EditorSettings.language をアクティブ言語として返すリゾルバ."""

    def __init__(self, settings: EditorSettings) -> None:
        self.settings = settings

    def get_language(self) -> str | None:
        return self.settings.language

    def __repr__(self) -> str:
        return f"SettingsLanguageResolver(language={self.settings.language!r})"


class EnvironmentLanguageResolver:
    """CATALOG_TERM_EDITOR_LANGUAGE を呼び出しごとに読み、無ければ設定の言語を返すリゾルバ.

    環境変数が言語コードとして不正な場合は警告して設定の言語を使います。
    """

    def __init__(self, settings: EditorSettings | None = None) -> None:
        self.settings = settings if settings is not None else EditorSettings()

    def get_language(self) -> str | None:
        env_language = os.environ.get(ENV_LANGUAGE, "").strip()
        if env_language:
            if is_language_code(env_language):
                return env_language
            logger.warning(f"Ignoring invalid {ENV_LANGUAGE}: '{env_language}'")
        return self.settings.language

    def __repr__(self) -> str:
        return f"EnvironmentLanguageResolver(language={self.settings.language!r})"
