import cmdtemplate.version
from _cmdtemplate.reading import lazy_read, read, tokenize
from _cmdtemplate.tokenizer import (
    TemplateTokenizer,
    Token,
    TokenKind,
    WrongStreamModeError,
)
from _cmdtemplate.writing import untokenize, write

__author__ = """CmdTemplate developers"""

__version__ = cmdtemplate.version.version

__all__ = [
    "TemplateTokenizer",
    "Token",
    "TokenKind",
    "WrongStreamModeError",
    "lazy_read",
    "read",
    "tokenize",
    "untokenize",
    "write",
]
