"""
In this module, a tokenizer is a generator that takes a text stream
containing a command template and generates tokens. A token is either
a literal character or a directive, such as "{/}" (basename of the input),
which a job runner replaces with a value when rendering the command.

Templates are read in a single pass one character at a time. Tokenization
of a template never fails, any text that does not form a directive is
given back as characters, see TemplateTokenizer.
"""

from .errors import WrongStreamModeError
from .template_tokenizer import TemplateTokenizer, match_directive
from .token import Token
from .token_kind import TokenKind

__all__ = [
    "TemplateTokenizer",
    "Token",
    "TokenKind",
    "WrongStreamModeError",
    "match_directive",
]
