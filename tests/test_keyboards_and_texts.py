import pytest

from branding_studio_bot.data.constants import AspectRatio, ResultAction
from branding_studio_bot.data.texts import ALL_TEXTS, get_texts, resolve_locale
from branding_studio_bot.keyboards.inline import (
    AspectRatioCallback,
    ResultActionCallback,
    aspect_ratio_kb,
    close_preview_kb,
    result_actions_kb,
)

EN = get_texts("en")


def test_ratio_keyboard_marks_only_the_selected_ratio():
    (row,) = aspect_ratio_kb(AspectRatio.VERTICAL, EN).inline_keyboard
    assert len(row) == 3
    marked = [b for b in row if b.text.startswith("✅ ")]
    assert len(marked) == 1
    assert AspectRatioCallback.unpack(marked[0].callback_data).ratio is AspectRatio.VERTICAL


def test_ratio_buttons_show_label_and_value():
    (row,) = aspect_ratio_kb(AspectRatio.SQUARE, EN).inline_keyboard
    assert [b.text for b in row[1:]] == ["▬ Landscape 16:9", "▮ Portrait 9:16"]


def test_ratio_callback_round_trip():
    packed = AspectRatioCallback(ratio=AspectRatio.HORIZONTAL).pack()
    assert packed == "ratio|16:9"
    assert AspectRatioCallback.unpack(packed).ratio is AspectRatio.HORIZONTAL


def test_result_keyboard_offers_every_action_but_close():
    buttons = [b for row in result_actions_kb(EN).inline_keyboard for b in row]
    actions = {ResultActionCallback.unpack(b.callback_data).action for b in buttons}
    assert actions == {ResultAction.DOWNLOAD, ResultAction.PREVIEW, ResultAction.NEW_PROMPT, ResultAction.RESET}


def test_close_preview_keyboard():
    ((button,),) = close_preview_kb(EN).inline_keyboard
    assert ResultActionCallback.unpack(button.callback_data).action is ResultAction.CLOSE_PREVIEW


@pytest.mark.parametrize(
    ("language_code", "expected"),
    [(None, "en"), ("", "en"), ("vi", "vi"), ("VI", "vi"), ("en-US", "en"), ("de", "en")],
)
def test_resolve_locale(language_code, expected):
    assert resolve_locale(language_code) == expected


def test_unknown_locale_falls_back_to_english():
    assert get_texts("fr") is EN


@pytest.mark.parametrize("locale", sorted(ALL_TEXTS))
def test_templates_accept_their_placeholders(locale):
    texts = ALL_TEXTS[locale]
    assert "support@example.com" in texts.messages.help.format(email="support@example.com")
    assert "1:1" in texts.messages.cropped_caption.format(ratio=texts.aspect_ratios.for_ratio(AspectRatio.SQUARE))
    assert {c.command for c in texts.commands} == {"start", "cancel", "help"}
