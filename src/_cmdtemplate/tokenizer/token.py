from dataclasses import dataclass
from typing import Optional

from _cmdtemplate.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token in a command template, either a literal character
    (kind=TokenKind.CHARACTER with the character as value) or
    a directive such as TokenKind.BASENAME, which has no value.
    """

    kind: TokenKind
    value: Optional[str] = None

    def __post_init__(self):
        if self.kind == TokenKind.CHARACTER:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(
                    f"Character token needs exactly one character, got {self.value!r}"
                )
        elif self.value is not None:
            raise ValueError(
                f"Directive {self.kind} takes no value, got {self.value!r}"
            )

    @classmethod
    def character(cls, value):
        return cls(TokenKind.CHARACTER, value)

    def get_value(self):
        """
        :returns: The template text the token was read from. For
            character tokens that is the character itself, for directives
            the braced spelling, ie. "{//}" for kind=TokenKind.DIRNAME.
        """
        if self.kind == TokenKind.CHARACTER:
            return self.value
        return "{" + TokenKind.directives()[self.kind] + "}"
