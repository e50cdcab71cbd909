# branding_studio_bot/services/prompt_enhancer.py

BRANDING_PROMPT_TEMPLATE = """
**Objective**: Transform the provided image into a professional branding photograph based on the user's request.
**CRITICAL INSTRUCTION**: You MUST preserve the person's face from the original image with 100% accuracy. The facial features, expression, and identity must remain completely unchanged. Do not alter the face.
**Style**: The final image must be ultra-realistic, photorealistic, 8K resolution, with professional studio lighting, and extremely high detail, suitable for a corporate website or LinkedIn profile.
**User's Request**: "{{USER_PROMPT}}"
"""


def build_enhanced_prompt(user_prompt: str) -> str:
    """Wraps the user's free-form request into the identity-preserving branding instructions."""
    return BRANDING_PROMPT_TEMPLATE.replace("{{USER_PROMPT}}", user_prompt.strip()).strip()
