# branding_studio_bot/data/texts/en.py
from .dto import (
    AspectRatioLabels,
    BotCommandInfo,
    BotInfo,
    ButtonTexts,
    ErrorTexts,
    LocaleTexts,
    MessageTexts,
)

texts = LocaleTexts(
    commands=[
        BotCommandInfo(command="start", description="✨ Create a branding photo"),
        BotCommandInfo(command="cancel", description="↩️ Start over"),
        BotCommandInfo(command="help", description="❓ Get help"),
    ],
    bot_info=BotInfo(
        short_description="Personal Branding Studio ✨ Professional photos with AI",
        description=(
            "Turn any photo of yourself into a professional branding portrait. ✨\n\n"
            "Send a photo, pick a size, describe the shot you want, "
            "and the AI restyles it while keeping your face exactly as it is."
        ),
    ),
    aspect_ratios=AspectRatioLabels(
        square="⬛ Square",
        horizontal="▬ Landscape",
        vertical="▮ Portrait",
    ),
    buttons=ButtonTexts(
        download="⬇️ Download",
        preview="🔍 Full size",
        close_preview="✖️ Close",
        new_prompt="✏️ New description",
        reset="🔄 Start over",
    ),
    messages=MessageTexts(
        welcome=(
            "👋 <b>Welcome to Personal Branding Studio!</b>\n\n"
            "<b>1.</b> Send me the original photo.\n"
            "<b>2.</b> Choose the size you need.\n"
            "<b>3.</b> Describe the photo you want, for example: "
            "<i>a professional portrait in a black suit, standing in a modern office with a blurred background</i>."
        ),
        restart="Alright, let's start fresh! Send me a new photo. 📸",
        help=(
            "Send a photo, choose a size with the buttons under the preview, then describe the result you want.\n\n"
            "Use /cancel to start over. Questions? Write to {email}"
        ),
        cropping="✂️ Cropping your photo...",
        cropped_caption=(
            "Here is your photo cropped to <b>{ratio}</b>.\n\n"
            "Pick another size or send me a description of the photo you want."
        ),
        generating="🎨 The AI is creating, please wait...",
        result_caption=(
            "✨ Your branding photo is ready!\n\n"
            "Send another description to try again with the same photo."
        ),
        preview_caption="🔍 Full-size preview",
        still_working="⏳ I'm still working on your previous request. Please wait a moment.",
        new_prompt="✏️ Send me a new description for your photo.",
        no_photo="Please upload a photo first.",
        no_result="There is no generated image yet.",
        unexpected_input=(
            "I'm waiting for a photo or a text description. "
            "If you want to start over, just send /cancel."
        ),
    ),
    errors=ErrorTexts(
        upload_failed="Could not upload the file. Please try again.",
        not_an_image="This file is not an image. Please send a photo.",
        file_too_large="This file is too large. Please send a smaller photo.",
        crop_failed="Could not crop the image. Please try another one.",
        session_not_ready="Please upload a photo and enter a description.",
        invalid_api_key="Invalid API Key. Please check your configuration.",
        generation_failed=(
            "Failed to generate the image. The model may be unable to process this request. "
            "Please try a different image or prompt."
        ),
        unexpected="😔 An unexpected error occurred. Please try again.",
    ),
)
