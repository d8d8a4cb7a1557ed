"""言語別表示名を持つタグフィールドの用語エディタ.

ラベル・カテゴリ・国などは、保存形式が言語プレフィックス付きタグ（例: "en:organic"）の
カンマ区切りで、ユーザーは自分の表示言語の用語（例: "Bio"）で編集します。

設計方針:
    - 初期化時に「表示名 → タグ」の対応を、タグ一覧と表示名一覧を位置で組にして作る
    - 件数が一致しない場合は対応付けを推測せず、空リストから編集を始める
    - 書き戻し時、既知の表示名は元のタグを、新しい用語は "<言語>:<用語>" を出力する
    - 対応表のエントリは削除しない（削除→再追加した用語は元のタグに戻る）
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from .exceptions import LanguageNotConfiguredError
from .product import Product
from .term_editor import SEPARATOR, TermEditor

if TYPE_CHECKING:
    from ..fields.base_field import LocalizedFieldBinding
    from .language import LanguageResolver


class LocalizedStatus(str, Enum):
    """言語別データの読み込み結果."""

    AVAILABLE = "available"  # タグと表示名が揃っている
    MISSING = "missing"  # タグ/表示名/アクティブ言語のいずれかが無い
    LENGTH_MISMATCH = "length_mismatch"  # タグ数と表示名数が一致しない


@dataclass(frozen=True)
class LocalizedSource:
    """ある言語でのタグ一覧と表示名一覧."""

    status: LocalizedStatus
    tags: list[str] = field(default_factory=list)
    translations: list[str] = field(default_factory=list)

    @property
    def is_available(self) -> bool:
        return self.status is LocalizedStatus.AVAILABLE

    def pairs(self) -> list[tuple[str, str]]:
        """(表示名, タグ) の組を位置順で返す. AVAILABLE 以外は空."""
        if not self.is_available:
            return []
        return list(zip(self.translations, self.tags))


def resolve_localized_source(
    tags: Sequence[str] | None,
    in_languages: Mapping[str, Sequence[str]] | None,
    language: str | None,
) -> LocalizedSource:
    """タグ一覧と言語別表示名から、指定言語の LocalizedSource を組み立てる.

    Args:
        tags: 言語プレフィックス付きタグ一覧（例: ["en:a", "en:b"]）
        in_languages: 言語コード → 表示名一覧
        language: アクティブ言語

    Returns:
        AVAILABLE / MISSING / LENGTH_MISMATCH のいずれか

    Examples:
        >>> resolve_localized_source(["en:a"], {"en": ["apple"]}, "en").pairs()
        [('apple', 'en:a')]
        >>> resolve_localized_source(["en:a"], {"en": ["x", "y"]}, "en").status.value
        'length_mismatch'
    """
    if tags is None or in_languages is None or language is None:
        return LocalizedSource(LocalizedStatus.MISSING)

    translations = in_languages.get(language)
    if translations is None:
        return LocalizedSource(LocalizedStatus.MISSING)

    if len(translations) != len(tags):
        return LocalizedSource(
            LocalizedStatus.LENGTH_MISMATCH,
            tags=list(tags),
            translations=list(translations),
        )

    return LocalizedSource(
        LocalizedStatus.AVAILABLE,
        tags=list(tags),
        translations=list(translations),
    )


class LocalizedTermEditor(TermEditor):
    """表示言語で編集し、タグ形式で書き戻す用語エディタ."""

    binding: LocalizedFieldBinding

    def __init__(self, binding: LocalizedFieldBinding, language_resolver: LanguageResolver) -> None:
        super().__init__(binding)
        self.language_resolver = language_resolver
        self._term_to_tags: dict[str, str] = {}

    @property
    def tag_mapping(self) -> dict[str, str]:
        """表示名 → タグ の対応表（コピー）."""
        return dict(self._term_to_tags)

    def init_terms(self, product: Product) -> list[str]:
        source = resolve_localized_source(
            self.binding.read_tags(product),
            self.binding.read_in_languages(product),
            self.language_resolver.get_language(),
        )

        if source.status is LocalizedStatus.LENGTH_MISMATCH:
            logger.warning(
                f"[{self.field_name}] Tag/translation count mismatch for {product.barcode}: "
                f"{len(source.tags)} tags vs {len(source.translations)} translations "
                f"(language={self.language_resolver.get_language()}). Starting from empty terms."
            )
        if not source.is_available:
            return []

        for term, tag in source.pairs():
            self._term_to_tags[term] = tag
        return list(source.translations)

    def term_to_tag(self, term: str, language: str | None = None) -> str:
        """用語を保存用タグに変換する（既知なら元のタグ、未知なら "<言語>:<用語>"）."""
        tag = self._term_to_tags.get(term)
        if tag is not None:
            return tag
        if language is None:
            language = self._require_language()
        return f"{language}:{term}"

    def change_product(self, changed_product: Product) -> None:
        """用語をタグに変換して書き込む（言語は新しい用語のタグを作るときだけ解決する）."""
        value = SEPARATOR.join(self.term_to_tag(term) for term in self.terms)
        self.binding.write(changed_product, value)

    def _require_language(self) -> str:
        language = self.language_resolver.get_language()
        if language is None:
            raise LanguageNotConfiguredError(self.field_name)
        return language
