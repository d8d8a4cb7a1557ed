"""編集対象フィールドのバインディング群."""

from .base_field import FieldBinding, FieldKind, LocalizedFieldBinding, PlainFieldBinding
from .localized_fields import CATEGORIES, COUNTRIES, LABELS
from .plain_fields import EMB_CODES, STORES
from .registry import FIELD_BINDINGS, create_editor, get_field_binding

__all__ = [
    "FieldBinding",
    "FieldKind",
    "LocalizedFieldBinding",
    "PlainFieldBinding",
    "STORES",
    "EMB_CODES",
    "LABELS",
    "CATEGORIES",
    "COUNTRIES",
    "FIELD_BINDINGS",
    "create_editor",
    "get_field_binding",
]
