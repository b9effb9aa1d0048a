def build_translate_prompt(text: str) -> str:
    """Build the user message asking for one phrase to be translated."""
    return f'Translate: "{text.strip()}"'
