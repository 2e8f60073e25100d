"""Per-shell mutable state: the prompt text and the running flag"""

from .config import DEFAULT_PROMPT, MAX_PROMPT_LENGTH
from .exceptions import SizeTooLargeError


class Session:
    def __init__(self, prompt: str = DEFAULT_PROMPT, max_prompt_length: int = MAX_PROMPT_LENGTH):
        self.max_prompt_length = max_prompt_length
        self.prompt = prompt
        self.running = True

    def set_prompt(self, text: str) -> None:
        """
        Replace the prompt text

        Raises SizeTooLargeError, leaving the current prompt in place, when
        ``text`` is longer than ``max_prompt_length``.
        """
        if len(text) > self.max_prompt_length:
            raise SizeTooLargeError(
                f"Prompt may be no longer than {self.max_prompt_length} characters, "
                f"entered prompt is {len(text)} characters"
            )
        self.prompt = text

    def terminate(self) -> None:
        self.running = False
