# branding_studio_bot/data/texts/vi.py
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
        BotCommandInfo(command="start", description="✨ Tạo ảnh thương hiệu"),
        BotCommandInfo(command="cancel", description="↩️ Làm lại"),
        BotCommandInfo(command="help", description="❓ Trợ giúp"),
    ],
    bot_info=BotInfo(
        short_description="Personal Branding Studio ✨ Ảnh chuyên nghiệp với AI",
        description=(
            "Tạo ảnh thương hiệu cá nhân chuyên nghiệp với AI. ✨\n\n"
            "Gửi ảnh, chọn kích cỡ, mô tả ảnh mong muốn "
            "và AI sẽ tạo ảnh mới mà vẫn giữ nguyên khuôn mặt của bạn."
        ),
    ),
    aspect_ratios=AspectRatioLabels(
        square="⬛ Vuông",
        horizontal="▬ Ngang",
        vertical="▮ Dọc",
    ),
    buttons=ButtonTexts(
        download="⬇️ Tải xuống",
        preview="🔍 Xem ảnh lớn",
        close_preview="✖️ Đóng",
        new_prompt="✏️ Mô tả mới",
        reset="🔄 Làm lại",
    ),
    messages=MessageTexts(
        welcome=(
            "👋 <b>Chào mừng đến với Personal Branding Studio!</b>\n\n"
            "<b>1.</b> Tải ảnh gốc lên.\n"
            "<b>2.</b> Chọn kích cỡ.\n"
            "<b>3.</b> Mô tả ảnh mong muốn, ví dụ: "
            "<i>một bức ảnh chân dung chuyên nghiệp, mặc vest đen, đứng trong văn phòng hiện đại với nền mờ</i>."
        ),
        restart="Được rồi, hãy bắt đầu lại! Gửi cho tôi một ảnh mới. 📸",
        help=(
            "Gửi ảnh, chọn kích cỡ bằng các nút bên dưới ảnh xem trước, sau đó mô tả ảnh mong muốn.\n\n"
            "Dùng /cancel để làm lại. Cần hỗ trợ? Liên hệ {email}"
        ),
        cropping="✂️ Đang cắt ảnh...",
        cropped_caption=(
            "Ảnh của bạn đã được cắt theo tỉ lệ <b>{ratio}</b>.\n\n"
            "Chọn kích cỡ khác hoặc gửi mô tả ảnh mong muốn."
        ),
        generating="🎨 AI đang sáng tạo, vui lòng chờ...",
        result_caption=(
            "✨ Ảnh thương hiệu của bạn đã sẵn sàng!\n\n"
            "Gửi mô tả khác để thử lại với cùng ảnh gốc."
        ),
        preview_caption="🔍 Ảnh kích thước đầy đủ",
        still_working="⏳ Tôi vẫn đang xử lý yêu cầu trước. Vui lòng chờ một chút.",
        new_prompt="✏️ Hãy gửi mô tả mới cho ảnh của bạn.",
        no_photo="Vui lòng tải ảnh lên trước.",
        no_result="Chưa có ảnh nào được tạo.",
        unexpected_input=(
            "Tôi đang chờ một ảnh hoặc một đoạn mô tả. "
            "Nếu muốn làm lại, hãy gửi /cancel."
        ),
    ),
    errors=ErrorTexts(
        upload_failed="Không thể tải tệp lên. Vui lòng thử lại.",
        not_an_image="Tệp này không phải là ảnh. Vui lòng gửi một bức ảnh.",
        file_too_large="Tệp quá lớn. Vui lòng gửi ảnh nhỏ hơn.",
        crop_failed="Không thể cắt ảnh. Vui lòng thử một ảnh khác.",
        session_not_ready="Vui lòng tải ảnh lên và nhập mô tả.",
        invalid_api_key="API Key không hợp lệ. Vui lòng kiểm tra cấu hình.",
        generation_failed=(
            "Không thể tạo ảnh. Mô hình có thể không xử lý được yêu cầu này. "
            "Vui lòng thử ảnh hoặc mô tả khác."
        ),
        unexpected="😔 Đã xảy ra lỗi không mong muốn. Vui lòng thử lại.",
    ),
)
