# branding_studio_bot/services/errors.py


class BrandingStudioError(Exception):
    """Base class for errors that end up as a single user-visible message."""
    default_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ImageProcessingError(BrandingStudioError):
    """The uploaded file could not be read, decoded or cropped."""
    default_message = "Could not process the image."


class ImageGenerationError(BrandingStudioError):
    default_message = (
        "Failed to generate the image. The model may be unable to process this request. "
        "Please try a different image or prompt."
    )


class InvalidApiKeyError(ImageGenerationError):
    default_message = "Invalid API Key. Please check your configuration."


class SessionNotReadyError(BrandingStudioError):
    """Generation was requested without a cropped image or without a prompt."""
    default_message = "Please upload a photo and enter a description."


class GenerationInProgressError(BrandingStudioError):
    default_message = "A generation request is already in progress."
