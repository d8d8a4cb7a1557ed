"""言語別表示名を持つタグフィールドのバインディング.

読み出しは `<field>_tags` と `<field>_tags_in_languages`、書き込みは `<field>` です。
"""

from operator import attrgetter

from .base_field import LocalizedFieldBinding, attribute_writer

LABELS = LocalizedFieldBinding(
    name="labels",
    read_tags=attrgetter("labels_tags"),
    read_in_languages=attrgetter("labels_tags_in_languages"),
    write=attribute_writer("labels"),
    title_key="edit_product_form_item_labels_title",
    subtitle_key="edit_product_form_item_labels_subtitle",
    hint_key="edit_product_form_item_labels_hint",
)

CATEGORIES = LocalizedFieldBinding(
    name="categories",
    read_tags=attrgetter("categories_tags"),
    read_in_languages=attrgetter("categories_tags_in_languages"),
    write=attribute_writer("categories"),
    title_key="edit_product_form_item_categories_title",
    hint_key="edit_product_form_item_categories_hint",
)

COUNTRIES = LocalizedFieldBinding(
    name="countries",
    read_tags=attrgetter("countries_tags"),
    read_in_languages=attrgetter("countries_tags_in_languages"),
    write=attribute_writer("countries"),
    title_key="edit_product_form_item_countries_title",
    hint_key="edit_product_form_item_countries_hint",
    explanations_key="edit_product_form_item_countries_explanations",
)
