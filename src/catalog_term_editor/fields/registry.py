"""フィールド名 → バインディング の登録と、エディタの生成."""

from __future__ import annotations

from loguru import logger

from ..config import EnvironmentLanguageResolver
from ..core.exceptions import UnknownFieldError
from ..core.language import LanguageResolver
from ..core.localized import LocalizedTermEditor
from ..core.term_editor import TermEditor
from .base_field import FieldBinding, FieldKind, LocalizedFieldBinding
from .localized_fields import CATEGORIES, COUNTRIES, LABELS
from .plain_fields import EMB_CODES, STORES

FIELD_BINDINGS: dict[str, FieldBinding] = {
    binding.name: binding for binding in (STORES, EMB_CODES, LABELS, CATEGORIES, COUNTRIES)
}


def get_field_binding(name: str) -> FieldBinding:
    """フィールド名からバインディングを取得する.

    Raises:
        UnknownFieldError: 登録されていないフィールド名の場合
    """
    try:
        return FIELD_BINDINGS[name]
    except KeyError:
        raise UnknownFieldError(name, sorted(FIELD_BINDINGS)) from None


def create_editor(
    binding: FieldBinding | str,
    language_resolver: LanguageResolver | None = None,
) -> TermEditor:
    """バインディングの種類に応じたエディタを作る.

    Args:
        binding: バインディング、またはフィールド名
        language_resolver: ローカライズ済みフィールド用の言語リゾルバ
            （省略時は呼び出しごとに環境変数を読む EnvironmentLanguageResolver）

    Returns:
        PLAIN なら TermEditor、LOCALIZED なら LocalizedTermEditor

    Raises:
        UnknownFieldError: フィールド名が登録されていない場合
    """
    if isinstance(binding, str):
        binding = get_field_binding(binding)

    if binding.kind is FieldKind.PLAIN:
        return TermEditor(binding)

    assert isinstance(binding, LocalizedFieldBinding)
    if language_resolver is None:
        language_resolver = EnvironmentLanguageResolver()
        logger.debug(f"[{binding.name}] Using language resolver from environment: {language_resolver}")
    return LocalizedTermEditor(binding, language_resolver)
