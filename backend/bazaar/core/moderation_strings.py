"""Moderation Strings — localized user-facing text for every reason code.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Every ReasonCode has a message in every Locale (tests enforce coverage)
    - Placeholders are limited to {max_price}, {max_size_mb}, {flagged},
      {min_length}, {max_length}; missing params never raise

Design Decisions:
    - Reason codes travel over the wire; text is rendered at the edge so the
      same verdict can be shown in any UI language
    - Unknown keys fall back to a generic per-locale message instead of
      leaking the raw code to end users
"""

import string

from bazaar.core.domain_types import Locale, ReasonCode

R = ReasonCode


# --- Validation messages ------------------------------------------------------

_MESSAGES: dict[Locale, dict[ReasonCode, str]] = {
    Locale.RU: {
        R.TITLE_EMPTY: "Заголовок не может быть пустым",
        R.TITLE_SHORT: "Заголовок слишком короткий (минимум {min_length} символов)",
        R.TITLE_LONG: "Заголовок слишком длинный (максимум {max_length} символов)",
        R.TITLE_URL: "Ссылки в заголовке запрещены",
        R.TITLE_REPEATED: "Слишком много повторяющихся символов",
        R.TITLE_DIGITS: "Слишком много цифр в заголовке",
        R.TITLE_NO_LETTERS: "Заголовок должен содержать буквы",
        R.TITLE_SYMBOLS: "Слишком много одинаковых символов",
        R.TITLE_CAPS: "Не пишите заголовок заглавными буквами",
        R.DESCRIPTION_EMPTY: "Описание не может быть пустым",
        R.DESCRIPTION_SHORT: "Описание слишком короткое (минимум {min_length} символов)",
        R.DESCRIPTION_LONG: "Описание слишком длинное (максимум {max_length} символов)",
        R.DESCRIPTION_REPEATED: "Слишком много повторяющихся символов в описании",
        R.PRICE_INVALID: "Укажите корректную цену",
        R.PRICE_FREE_NONZERO: "Для бесплатных объявлений цена должна быть 0",
        R.PRICE_REQUIRED: "Укажите цену",
        R.PRICE_MAX_EXCEEDED: "Максимальная цена: {max_price}€",
        R.COMMENT_EMPTY: "Комментарий не может быть пустым",
        R.COMMENT_SHORT: "Комментарий слишком короткий",
        R.COMMENT_LONG: "Комментарий слишком длинный (максимум {max_length} символов)",
        R.COMMENT_BAD_WORDS: "Комментарий содержит запрещённые слова: {flagged}",
        R.COMMENT_REPEATED: "Слишком много повторяющихся символов",
        R.COMMENT_DIGITS: "Комментарий состоит почти из одних цифр",
        R.COMMENT_LINKS: "Ссылки в комментариях запрещены",
        R.CONTENT_FLAGGED: "Объявление содержит запрещённые слова: {flagged}",
        R.GIBBERISH_CLUSTER: "Текст похож на случайный набор букв",
        R.GIBBERISH_NO_VOWELS: "В словах нет гласных, проверьте текст",
        R.GIBBERISH_DENSITY: "Текст похож на случайный набор букв",
        R.GIBBERISH_UNKNOWN_LONG_WORD: "Неизвестное слово, проверьте текст",
        R.IMAGE_TOO_LARGE: "Файл слишком большой (макс {max_size_mb}MB)",
        R.IMAGE_INVALID_TYPE: "Можно загружать только изображения",
    },
    Locale.UA: {
        R.TITLE_EMPTY: "Заголовок не може бути порожнім",
        R.TITLE_SHORT: "Заголовок занадто короткий (мінімум {min_length} символів)",
        R.TITLE_LONG: "Заголовок занадто довгий (максимум {max_length} символів)",
        R.TITLE_URL: "Посилання в заголовку заборонені",
        R.TITLE_REPEATED: "Забагато символів, що повторюються",
        R.TITLE_DIGITS: "Забагато цифр у заголовку",
        R.TITLE_NO_LETTERS: "Заголовок має містити літери",
        R.TITLE_SYMBOLS: "Забагато однакових символів",
        R.TITLE_CAPS: "Не пишіть заголовок великими літерами",
        R.DESCRIPTION_EMPTY: "Опис не може бути порожнім",
        R.DESCRIPTION_SHORT: "Опис занадто короткий (мінімум {min_length} символів)",
        R.DESCRIPTION_LONG: "Опис занадто довгий (максимум {max_length} символів)",
        R.DESCRIPTION_REPEATED: "Забагато символів, що повторюються, в описі",
        R.PRICE_INVALID: "Вкажіть коректну ціну",
        R.PRICE_FREE_NONZERO: "Для безкоштовних оголошень ціна має бути 0",
        R.PRICE_REQUIRED: "Вкажіть ціну",
        R.PRICE_MAX_EXCEEDED: "Максимальна ціна: {max_price}€",
        R.COMMENT_EMPTY: "Коментар не може бути порожнім",
        R.COMMENT_SHORT: "Коментар занадто короткий",
        R.COMMENT_LONG: "Коментар занадто довгий (максимум {max_length} символів)",
        R.COMMENT_BAD_WORDS: "Коментар містить заборонені слова: {flagged}",
        R.COMMENT_REPEATED: "Забагато символів, що повторюються",
        R.COMMENT_DIGITS: "Коментар складається майже з самих цифр",
        R.COMMENT_LINKS: "Посилання в коментарях заборонені",
        R.CONTENT_FLAGGED: "Оголошення містить заборонені слова: {flagged}",
        R.GIBBERISH_CLUSTER: "Текст схожий на випадковий набір літер",
        R.GIBBERISH_NO_VOWELS: "У словах немає голосних, перевірте текст",
        R.GIBBERISH_DENSITY: "Текст схожий на випадковий набір літер",
        R.GIBBERISH_UNKNOWN_LONG_WORD: "Невідоме слово, перевірте текст",
        R.IMAGE_TOO_LARGE: "Файл занадто великий (макс {max_size_mb}MB)",
        R.IMAGE_INVALID_TYPE: "Можна завантажувати лише зображення",
    },
    Locale.EN: {
        R.TITLE_EMPTY: "Title cannot be empty",
        R.TITLE_SHORT: "Title is too short (at least {min_length} characters)",
        R.TITLE_LONG: "Title is too long (at most {max_length} characters)",
        R.TITLE_URL: "Links are not allowed in the title",
        R.TITLE_REPEATED: "Too many repeated characters",
        R.TITLE_DIGITS: "Too many digits in the title",
        R.TITLE_NO_LETTERS: "Title must contain letters",
        R.TITLE_SYMBOLS: "Too many identical symbols",
        R.TITLE_CAPS: "Please don't write the title in capital letters",
        R.DESCRIPTION_EMPTY: "Description cannot be empty",
        R.DESCRIPTION_SHORT: "Description is too short (at least {min_length} characters)",
        R.DESCRIPTION_LONG: "Description is too long (at most {max_length} characters)",
        R.DESCRIPTION_REPEATED: "Too many repeated characters in the description",
        R.PRICE_INVALID: "Enter a valid price",
        R.PRICE_FREE_NONZERO: "Free listings must have a price of 0",
        R.PRICE_REQUIRED: "Enter a price",
        R.PRICE_MAX_EXCEEDED: "Maximum price: {max_price}€",
        R.COMMENT_EMPTY: "Comment cannot be empty",
        R.COMMENT_SHORT: "Comment is too short",
        R.COMMENT_LONG: "Comment is too long (at most {max_length} characters)",
        R.COMMENT_BAD_WORDS: "Comment contains prohibited words: {flagged}",
        R.COMMENT_REPEATED: "Too many repeated characters",
        R.COMMENT_DIGITS: "Comment is almost entirely digits",
        R.COMMENT_LINKS: "Links are not allowed in comments",
        R.CONTENT_FLAGGED: "Listing contains prohibited words: {flagged}",
        R.GIBBERISH_CLUSTER: "Text looks like a random set of letters",
        R.GIBBERISH_NO_VOWELS: "Words have no vowels, please check the text",
        R.GIBBERISH_DENSITY: "Text looks like a random set of letters",
        R.GIBBERISH_UNKNOWN_LONG_WORD: "Unknown word, please check the text",
        R.IMAGE_TOO_LARGE: "File is too large (max {max_size_mb}MB)",
        R.IMAGE_INVALID_TYPE: "Only images can be uploaded",
    },
}

_GENERIC_MESSAGE: dict[Locale, str] = {
    Locale.RU: "Проверьте введённые данные",
    Locale.UA: "Перевірте введені дані",
    Locale.EN: "Please check your input",
}


# --- Quality hints -------------------------------------------------------------

_QUALITY_HINTS: dict[Locale, dict[str, str]] = {
    Locale.RU: {
        "quality_title_short": "Короткий заголовок",
        "quality_description_more": "Описание можно подробнее",
        "quality_description_short": "Слишком краткое описание",
        "quality_photos_more": "Добавьте больше фото (3+)",
        "quality_photos_none": "Добавьте хотя бы одно фото",
        "quality_price_missing": "Укажите цену",
        "quality_location_missing": "Укажите местоположение",
        "quality_contacts_missing": "Укажите контакты",
    },
    Locale.UA: {
        "quality_title_short": "Короткий заголовок",
        "quality_description_more": "Опис можна детальніше",
        "quality_description_short": "Занадто стислий опис",
        "quality_photos_more": "Додайте більше фото (3+)",
        "quality_photos_none": "Додайте хоча б одне фото",
        "quality_price_missing": "Вкажіть ціну",
        "quality_location_missing": "Вкажіть місцезнаходження",
        "quality_contacts_missing": "Вкажіть контакти",
    },
    Locale.EN: {
        "quality_title_short": "Short title",
        "quality_description_more": "The description could be more detailed",
        "quality_description_short": "Description is too brief",
        "quality_photos_more": "Add more photos (3+)",
        "quality_photos_none": "Add at least one photo",
        "quality_price_missing": "Set a price",
        "quality_location_missing": "Set a location",
        "quality_contacts_missing": "Add contact details",
    },
}


class _SafeParams(dict):
    """Leaves unknown placeholders in place instead of raising KeyError."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _render_param(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def format_error_message(
    error_key: ReasonCode | str | None,
    locale: Locale,
    params: dict | None = None,
) -> str:
    """Render the localized message for a reason code.

    Unknown or missing keys return the generic message for the locale.
    """
    try:
        code = ReasonCode(error_key)
    except ValueError:
        return _GENERIC_MESSAGE[locale]

    template = _MESSAGES[locale].get(code)
    if template is None:
        return _GENERIC_MESSAGE[locale]

    values = _SafeParams(
        {k: _render_param(v) for k, v in (params or {}).items()},
    )
    return string.Formatter().vformat(template, (), values)


def get_quality_hint(key: str, locale: Locale) -> str:
    return _QUALITY_HINTS[locale].get(key, key)
