"""Shell configuration"""

DEFAULT_PROMPT = "$"
MAX_PROMPT_LENGTH = 64
MAX_LINE_LENGTH = 256


class Config:
    def __init__(
        self,
        prompt: str = DEFAULT_PROMPT,
        max_prompt_length: int = MAX_PROMPT_LENGTH,
        max_line_length: int = MAX_LINE_LENGTH,
    ) -> None:
        if max_prompt_length < 1:
            raise ValueError("max_prompt_length must be positive")
        if max_line_length < 1:
            raise ValueError("max_line_length must be positive")
        if len(prompt) > max_prompt_length:
            raise ValueError(
                f"prompt may be no longer than {max_prompt_length} characters"
            )
        self.prompt = prompt
        self.max_prompt_length = max_prompt_length
        self.max_line_length = max_line_length
