from branding_studio_bot.services.prompt_enhancer import build_enhanced_prompt


def test_user_request_is_quoted_inside_the_instructions():
    prompt = build_enhanced_prompt("  wearing a navy suit in a bright office  ")
    assert prompt.endswith('**User\'s Request**: "wearing a navy suit in a bright office"')
    assert prompt.startswith("**Objective**")


def test_identity_preservation_is_always_requested():
    prompt = build_enhanced_prompt("on a beach")
    assert "preserve the person's face" in prompt
    assert "identity must remain completely unchanged" in prompt
    assert "photorealistic" in prompt


def test_placeholder_like_text_in_request_is_kept_verbatim():
    assert "{name}" in build_enhanced_prompt("a mug that says {name}")
