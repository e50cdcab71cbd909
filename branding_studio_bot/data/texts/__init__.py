# branding_studio_bot/data/texts/__init__.py
from .en import texts as en_texts
from .vi import texts as vi_texts
from .dto import LocaleTexts

ALL_TEXTS: dict[str, LocaleTexts] = {
    "en": en_texts,
    "vi": vi_texts,
}

DEFAULT_LOCALE = "en"


def resolve_locale(language_code: str | None) -> str:
    """Maps a Telegram language code (e.g. ``vi`` or ``en-US``) to a supported locale."""
    if not language_code:
        return DEFAULT_LOCALE
    code = language_code.split("-")[0].lower()
    return code if code in ALL_TEXTS else DEFAULT_LOCALE


def get_texts(locale: str) -> LocaleTexts:
    """
    Retrieves the text object for a given locale, falling back to the default.
    """
    return ALL_TEXTS.get(locale, ALL_TEXTS[DEFAULT_LOCALE])
