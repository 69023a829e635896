"""Counter for tokens, lines, and characters in the generated output.

Token counting uses OpenAI's tiktoken library, which is an optional dependency. The
tokenizer is selected by model name (``gpt-4`` resolves to the cl100k_base encoding)
or directly by encoding name (``o200k_base``). Counts from a model's tokenizer are an
approximation for other language models.
"""

import importlib.util
from typing import Any, NamedTuple, Optional

from copytree.exceptions import TokenizationError, TokenizerNotAvailableError


class CountResult(NamedTuple):
    """Counts for one piece of text. ``tokens`` is None when token counting is disabled."""

    lines: int
    tokens: Optional[int]
    characters: int


def tiktoken_available() -> bool:
    """Return True if the tiktoken package can be imported."""
    return importlib.util.find_spec("tiktoken") is not None


class TokenCounter:
    """Running totals of lines, characters and, optionally, tokens.

    Lines and characters are always counted. Tokens are counted only when a model is
    given; asking for a model without tiktoken installed is an error rather than a
    silent downgrade.

    Attributes:
        model (Optional[str]): Model or encoding name, or None if token counting is disabled.
        encoder (Optional[Any]): The tiktoken encoding in use, or None.

    Example:
        >>> counter = TokenCounter()
        >>> counter.count("fn main() {}\\n")
        CountResult(lines=1, tokens=None, characters=13)
        >>> counter.total_lines
        1

    Raises:
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
        ValueError: If tiktoken knows neither a model nor an encoding by that name.
    """

    def __init__(self, model: Optional[str] = None) -> None:
        self.model = model
        self.encoder: Optional[Any] = None
        if model is not None:
            if not tiktoken_available():
                raise TokenizerNotAvailableError()
            self.encoder = self._load_encoder(model)
        self.reset_counts()

    @staticmethod
    def _load_encoder(model: str) -> Any:
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            pass
        try:
            return tiktoken.get_encoding(model)
        except ValueError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Use a model name such as "
                "'gpt-4' or an encoding name such as 'cl100k_base'."
            )

    @property
    def counts_tokens(self) -> bool:
        return self.encoder is not None

    def count(self, text: str) -> CountResult:
        """Count ``text`` and add it to the running totals.

        Raises:
            TokenizationError: If the tokenizer fails. Line and character totals are
                updated before tokenizing, so they stay correct.
        """
        lines = text.count("\n")
        characters = len(text)
        self.total_lines += lines
        self.total_characters += characters

        tokens = None
        if self.encoder is not None:
            try:
                # Special-token text in files is counted as ordinary text
                tokens = len(self.encoder.encode(text, disallowed_special=()))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {e}") from e
            self.total_tokens = (self.total_tokens or 0) + tokens

        return CountResult(lines=lines, tokens=tokens, characters=characters)

    def reset_counts(self) -> None:
        """Reset all running totals while keeping the tokenizer."""
        self.total_lines = 0
        self.total_characters = 0
        self.total_tokens: Optional[int] = 0 if self.counts_tokens else None
