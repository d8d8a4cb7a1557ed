"""表示文字列（タイトル・ヒント・補足説明）のカタログ.

フィールドバインディングはメッセージキーだけを持ち、実際の文字列はここで引きます。

messages.yml の形式:
    en:
      edit_product_form_item_stores_title: Stores
    fr:
      edit_product_form_item_stores_title: Magasins
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

import yaml
from loguru import logger

from .config import EditorSettings
from .core.exceptions import MissingMessageError
from .core.language import is_language_code


class AppLocalizations(Protocol):
    """メッセージキーから表示文字列を返すサービス."""

    def get(self, key: str) -> str: ...


DEFAULT_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "edit_product_form_item_stores_title": "Stores",
        "edit_product_form_item_stores_hint": "Store",
        "edit_product_form_item_emb_codes_title": "Traceability codes",
        "edit_product_form_item_emb_codes_hint": "Traceability code",
        "edit_product_form_item_emb_codes_explanations": (
            "Examples: EMB 53062, FR 62.448.034 CE, 84 R 20, 33 RECOLTANT 522"
        ),
        "edit_product_form_item_labels_title": "Labels & Certifications",
        "edit_product_form_item_labels_subtitle": "Labels, certifications, awards",
        "edit_product_form_item_labels_hint": "Label",
        "edit_product_form_item_categories_title": "Categories",
        "edit_product_form_item_categories_hint": "Category",
        "edit_product_form_item_countries_title": "Countries where sold",
        "edit_product_form_item_countries_hint": "Country",
        "edit_product_form_item_countries_explanations": (
            "Indicate only the countries where the product is widely available in stores"
        ),
    },
}


class MessageCatalog:
    """言語別メッセージのカタログ.

    get() は language → fallback_language の順に探します。
    """

    def __init__(
        self,
        messages: Mapping[str, Mapping[str, str]],
        language: str | None = None,
        fallback_language: str = "en",
    ) -> None:
        self._messages = {lang: dict(texts) for lang, texts in messages.items()}
        self.language = language
        self.fallback_language = fallback_language

    @property
    def languages(self) -> list[str]:
        return sorted(self._messages)

    def _search_order(self) -> list[str]:
        order = [self.language, self.fallback_language]
        return [lang for i, lang in enumerate(order) if lang is not None and lang not in order[:i]]

    def get(self, key: str) -> str:
        """メッセージキーの表示文字列を返す.

        Raises:
            MissingMessageError: どの検索対象言語にもキーが無い場合
        """
        search_order = self._search_order()
        for lang in search_order:
            text = self._messages.get(lang, {}).get(key)
            if text is not None:
                return text
        raise MissingMessageError(key, search_order)

    def has(self, key: str) -> bool:
        return any(key in self._messages.get(lang, {}) for lang in self._search_order())

    @classmethod
    def from_settings(cls, settings: EditorSettings) -> MessageCatalog:
        """設定からカタログを作る（messages_path が無ければ既定メッセージのみ）."""
        if settings.messages_path is None:
            return cls(DEFAULT_MESSAGES, settings.language, settings.fallback_language)
        return load_message_catalog(settings.messages_path, settings.language, settings.fallback_language)


def load_message_catalog(
    messages_path: Path | str,
    language: str | None = None,
    fallback_language: str = "en",
    include_defaults: bool = True,
) -> MessageCatalog:
    """YAMLファイルからメッセージカタログを読み込む.

    Args:
        messages_path: messages.yml のパス
        language: 表示言語
        fallback_language: 見つからない場合の言語
        include_defaults: DEFAULT_MESSAGES の上にファイルの内容を重ねるか

    Returns:
        メッセージカタログ

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ValueError: YAML形式が不正、または {言語: {キー: 文字列}} の形でない場合
    """
    messages_path = Path(messages_path)

    if not messages_path.exists():
        raise FileNotFoundError(f"Messages file not found: {messages_path}")

    try:
        with open(messages_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in messages file: {messages_path}"
        raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"Messages file must contain a mapping of languages, got {type(data)}"
        raise ValueError(msg)

    messages: dict[str, dict[str, str]] = {}
    if include_defaults:
        messages = {lang: dict(texts) for lang, texts in DEFAULT_MESSAGES.items()}

    for lang, texts in data.items():
        if not isinstance(lang, str) or not is_language_code(lang):
            msg = f"Invalid language code in messages file: '{lang}'"
            raise ValueError(msg)
        if not isinstance(texts, dict):
            msg = f"Invalid messages for '{lang}': expected mapping, got {type(texts)}"
            raise ValueError(msg)
        for key, text in texts.items():
            if not isinstance(text, str):
                msg = f"Invalid message '{lang}.{key}': expected string, got {type(text)}"
                raise ValueError(msg)
        messages.setdefault(lang, {}).update(texts)

    logger.info(f"Loaded messages for {len(data)} language(s) from {messages_path}")
    return MessageCatalog(messages, language, fallback_language)
