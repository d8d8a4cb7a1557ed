"""フィールドバインディング（基底クラス）.

編集対象の各フィールド（販売店、ラベルなど）について、
商品からの読み出し・パッチへの書き込み・表示文字列のキーをまとめた設定オブジェクトです。
ロジックは持たず、エディタ側（TermEditor / LocalizedTermEditor）が kind で使い分けます。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from ..core.product import Product


class FieldKind(str, Enum):
    """フィールドの種類（エディタの選択に使う）."""

    PLAIN = "plain"  # カンマ区切り文字列をそのまま編集
    LOCALIZED = "localized"  # 言語プレフィックス付きタグを表示名で編集


@dataclass(frozen=True, kw_only=True)
class FieldBinding:
    """全フィールド共通の設定.

    Attributes:
        name: フィールド名（レジストリのキー、ログ表示用）
        write: パッチ Product に新しい値（カンマ区切り文字列）を書き込む関数
        title_key: 編集画面タイトルのメッセージキー
        hint_key: 追加欄ヒントのメッセージキー
        subtitle_key: サブタイトルのメッセージキー（無ければ None）
        explanations_key: 追加欄の補足説明のメッセージキー（無ければ None）
    """

    kind: ClassVar[FieldKind]

    name: str
    write: Callable[[Product, str], None]
    title_key: str
    hint_key: str
    subtitle_key: str | None = None
    explanations_key: str | None = None

    def message_keys(self) -> list[str]:
        """このフィールドが使うメッセージキー（未設定は除く）."""
        keys = [self.title_key, self.subtitle_key, self.hint_key, self.explanations_key]
        return [k for k in keys if k is not None]


@dataclass(frozen=True, kw_only=True)
class PlainFieldBinding(FieldBinding):
    """カンマ区切り文字列フィールド（例: stores）."""

    kind: ClassVar[FieldKind] = FieldKind.PLAIN

    read: Callable[[Product], str | None]


@dataclass(frozen=True, kw_only=True)
class LocalizedFieldBinding(FieldBinding):
    """言語別表示名を持つタグフィールド（例: labels）.

    Attributes:
        read_tags: 商品のタグ一覧を返す関数（例: product.labels_tags）
        read_in_languages: 言語コード → 表示名一覧 を返す関数
    """

    kind: ClassVar[FieldKind] = FieldKind.LOCALIZED

    read_tags: Callable[[Product], list[str] | None]
    read_in_languages: Callable[[Product], dict[str, list[str]] | None]


def attribute_writer(attribute: str) -> Callable[[Product, str], None]:
    """Product の属性に値を書き込む write フックを作る."""

    def write(changed_product: Product, value: str) -> None:
        setattr(changed_product, attribute, value)

    write.__name__ = f"write_{attribute}"
    return write
