"""編集対象の商品レコード（Product）.

同じクラスを「元レコード」と「差分パッチ」の両方に使います。
パッチは barcode と変更されたフィールドだけを持つ Product です。

JSON表現は Open Food Facts 形式のキーに合わせています:
    - "code": バーコード
    - "stores" / "emb_codes" / "labels" / "categories" / "countries": カンマ区切り文字列
    - "<field>_tags": 言語プレフィックス付きタグのリスト（例: ["en:organic"]）
    - "<field>_tags_<lc>": 言語 lc での表示名リスト（例: "labels_tags_fr"）
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from typing import Any

# タグ + 言語別翻訳を持つフィールド
LOCALIZED_FIELDS = ("labels", "categories", "countries")

# カンマ区切り文字列で保持するフィールド
STRING_FIELDS = ("stores", "emb_codes", "labels", "categories", "countries")


@dataclass
class Product:
    """カタログ上の1商品.

    Attributes:
        barcode: 商品の識別子（不変）
        stores: 販売店（カンマ区切り）
        emb_codes: 包装業者コード（カンマ区切り）
        labels / categories / countries: 書き込み用のカンマ区切りタグ文字列
        *_tags: 言語プレフィックス付きタグのリスト
        *_tags_in_languages: 言語コード → 表示名リスト（タグと同じ並び）
    """

    barcode: str
    stores: str | None = None
    emb_codes: str | None = None
    labels: str | None = None
    labels_tags: list[str] | None = None
    labels_tags_in_languages: dict[str, list[str]] | None = None
    categories: str | None = None
    categories_tags: list[str] | None = None
    categories_tags_in_languages: dict[str, list[str]] | None = None
    countries: str | None = None
    countries_tags: list[str] | None = None
    countries_tags_in_languages: dict[str, list[str]] | None = None

    def changed_fields(self) -> dict[str, Any]:
        """barcode 以外で値が設定されているフィールドを返す（パッチの中身確認用）."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "barcode" and getattr(self, f.name) is not None
        }

    def merge(self, patch: Product) -> Product:
        """パッチを適用した新しい Product を返す.

        パッチ側で None でないフィールドだけを上書きします。自身は変更しません。

        Raises:
            ValueError: barcode が一致しない場合
        """
        if patch.barcode != self.barcode:
            msg = f"Cannot merge patch for {patch.barcode} into product {self.barcode}"
            raise ValueError(msg)
        return replace(self, **patch.changed_fields())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        """Open Food Facts 形式の辞書から Product を生成する.

        Raises:
            ValueError: "code"（または "barcode"）が無い場合
        """
        barcode = data.get("code", data.get("barcode"))
        if barcode is None or not str(barcode).strip():
            msg = f"Product data has no 'code': keys={sorted(data)}"
            raise ValueError(msg)

        values: dict[str, Any] = {}
        for name in STRING_FIELDS:
            value = data.get(name)
            if value is not None:
                values[name] = str(value)

        for name in LOCALIZED_FIELDS:
            tags = data.get(f"{name}_tags")
            if isinstance(tags, list):
                values[f"{name}_tags"] = [str(t) for t in tags]

            in_languages = _collect_in_languages(data, name)
            if in_languages:
                values[f"{name}_tags_in_languages"] = in_languages

        return cls(barcode=str(barcode).strip(), **values)

    def to_dict(self) -> dict[str, Any]:
        """Open Food Facts 形式の辞書に変換する（None のフィールドは出力しない）."""
        result: dict[str, Any] = {"code": self.barcode}
        for name in STRING_FIELDS:
            value = getattr(self, name)
            if value is not None:
                result[name] = value

        for name in LOCALIZED_FIELDS:
            tags = getattr(self, f"{name}_tags")
            if tags is not None:
                result[f"{name}_tags"] = list(tags)
            in_languages = getattr(self, f"{name}_tags_in_languages")
            for language, translations in (in_languages or {}).items():
                result[f"{name}_tags_{language}"] = list(translations)

        return result


def _collect_in_languages(data: dict[str, Any], name: str) -> dict[str, list[str]]:
    # "labels_tags_fr" のような言語別キーだけを拾う（"_tags_hierarchy" 等は対象外）
    pattern = re.compile(rf"^{name}_tags_([a-z]{{2,3}})$")
    in_languages: dict[str, list[str]] = {}
    for key, value in data.items():
        m = pattern.match(key)
        if m and isinstance(value, list):
            in_languages[m.group(1)] = [str(v) for v in value]
    return in_languages
