"""複数値テキストフィールドの用語エディタ.

1商品・1フィールド分の「作業中の用語リスト」を保持し、
追加/削除/変更検出と、変更があった場合だけの差分パッチ生成を行います。

流れ:
    1. re_init(product) で現在の値から用語リストを作る
    2. add_term() / remove_term() を繰り返す
    3. get_changed_product() で None（変更なし）またはパッチを受け取る
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from loguru import logger

from .exceptions import EditorNotInitializedError
from .product import Product

if TYPE_CHECKING:
    from ..fields.base_field import FieldBinding, PlainFieldBinding
    from ..messages import AppLocalizations

SEPARATOR = ","


def split_string(value: str | None, separator: str = SEPARATOR) -> list[str]:
    """カンマ区切り文字列を用語リストに分割する.

    全体の前後空白だけを除去し、各要素はトリムしません（正規化は add_term 側の責務）。

    Examples:
        >>> split_string(" a,b ")
        ['a', 'b']
        >>> split_string("a, b")
        ['a', ' b']
        >>> split_string("   ")
        []
    """
    if value is None:
        return []
    value = value.strip()
    if not value:
        return []
    return value.split(separator)


@dataclass
class EditSession:
    """1回分の編集セッション（対象商品・作業中の用語・変更フラグ）."""

    product: Product
    terms: list[str]
    changed: bool = False


class TermEditor:
    """文字列フィールド用の用語エディタ.

    サブクラスは init_terms() / change_product() を差し替えて、
    用語の読み込み方と書き戻し方を変えます。
    """

    def __init__(self, binding: FieldBinding) -> None:
        self.binding = binding
        self._session: EditSession | None = None

    @property
    def field_name(self) -> str:
        return self.binding.name

    @property
    def session(self) -> EditSession:
        if self._session is None:
            raise EditorNotInitializedError(self.field_name)
        return self._session

    @property
    def product(self) -> Product:
        """編集中の商品."""
        return self.session.product

    @property
    def terms(self) -> list[str]:
        """現在の用語リスト（コピーではなく実体）."""
        return self.session.terms

    @property
    def changed(self) -> bool:
        return self.session.changed

    def re_init(self, product: Product) -> None:
        """新しい（または再取得した）商品で編集をやり直す."""
        terms = self.init_terms(product)
        self._session = EditSession(product=product, terms=terms)
        logger.debug(f"[{self.field_name}] Loaded {len(terms)} terms for {product.barcode}")

    def init_terms(self, product: Product) -> list[str]:
        """商品の現在値から初期の用語リストを返す."""
        return split_string(cast("PlainFieldBinding", self.binding).read(product))

    def add_term(self, term: str) -> bool:
        """用語を追加する.

        Returns:
            追加した場合 True。空文字（トリム後）または既存の用語なら False
        """
        session = self.session
        term = term.strip()
        if not term:
            return False
        if term in session.terms:
            return False
        session.terms.append(term)
        session.changed = True
        logger.debug(f"[{self.field_name}] Added term: {term}")
        return True

    def remove_term(self, term: str) -> bool:
        """用語を削除する（最初に一致した1件のみ）.

        Returns:
            削除した場合 True、存在しなければ False
        """
        session = self.session
        if term not in session.terms:
            return False
        session.terms.remove(term)
        session.changed = True
        logger.debug(f"[{self.field_name}] Removed term: {term}")
        return True

    def change_product(self, changed_product: Product) -> None:
        """現在の用語リストをパッチに書き込む."""
        self.binding.write(changed_product, SEPARATOR.join(self.terms))

    def get_changed_product(self) -> Product | None:
        """変更が無ければ None、あれば保存用のパッチ Product を返す.

        パッチを返した時点で変更フラグは戻るため、続けて呼ぶと None になります。
        """
        session = self.session
        if not session.changed:
            return None
        changed_product = Product(barcode=session.product.barcode)
        self.change_product(changed_product)
        session.changed = False
        logger.info(f"[{self.field_name}] Built patch for {changed_product.barcode}")
        return changed_product

    def split_string(self, value: str | None) -> list[str]:
        return split_string(value)

    # 表示文字列（編集画面のタイトル、追加欄のヒントなど）

    def get_title(self, localizations: AppLocalizations) -> str:
        return localizations.get(self.binding.title_key)

    def get_subtitle(self, localizations: AppLocalizations) -> str | None:
        if self.binding.subtitle_key is None:
            return None
        return localizations.get(self.binding.subtitle_key)

    def get_add_hint(self, localizations: AppLocalizations) -> str:
        return localizations.get(self.binding.hint_key)

    def get_add_explanations(self, localizations: AppLocalizations) -> str | None:
        if self.binding.explanations_key is None:
            return None
        return localizations.get(self.binding.explanations_key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self.field_name!r})"
