"""カンマ区切り文字列フィールドのバインディング."""

from operator import attrgetter

from .base_field import PlainFieldBinding, attribute_writer

STORES = PlainFieldBinding(
    name="stores",
    read=attrgetter("stores"),
    write=attribute_writer("stores"),
    title_key="edit_product_form_item_stores_title",
    hint_key="edit_product_form_item_stores_hint",
)

# 包装業者コード（例: "FR 62.448.034 CE"）
EMB_CODES = PlainFieldBinding(
    name="emb_codes",
    read=attrgetter("emb_codes"),
    write=attribute_writer("emb_codes"),
    title_key="edit_product_form_item_emb_codes_title",
    hint_key="edit_product_form_item_emb_codes_hint",
    explanations_key="edit_product_form_item_emb_codes_explanations",
)
