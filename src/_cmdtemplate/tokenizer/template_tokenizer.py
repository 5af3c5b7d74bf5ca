from _cmdtemplate.tokenizer.errors import WrongStreamModeError
from _cmdtemplate.tokenizer.token import Token
from _cmdtemplate.tokenizer.token_kind import TokenKind

# Map from the text between braces to the kind of directive it spells.
directive_kinds = {spelling: kind for kind, spelling in TokenKind.directives().items()}


def match_directive(pattern):
    """
    :param pattern: The text between an opening and a closing brace.
    :returns: The TokenKind of the directive spelled by pattern, ie.
        TokenKind.DIRNAME for "//" and TokenKind.PLACEHOLDER for "",
        or None if pattern is not a directive.
    """
    return directive_kinds.get(pattern)


def tokenize_characters(characters):
    """
    Tokenizer yielding one character token for each of the given characters.
    """
    for character in characters:
        yield Token.character(character)


class TemplateTokenizer:
    """
    The template tokenizer is an iterable for tokens for a given text stream
    containing a command template, ie. for a stream containing "mv {} {.}.bak"
    it yields character tokens for "mv ", a placeholder token, a character
    token for " ", a remove extension token and character tokens for ".bak".

    Tokenization never fails: braces that do not enclose a directive, and
    a final brace that is never closed, are yielded as characters.
    """

    def __init__(self, stream):
        """
        :param stream: A text stream containing the template.
        """
        self.stream = stream

    def __iter__(self):
        return self.tokenize_template()

    def read_char(self):
        read_char = self.stream.read(1)
        if isinstance(read_char, bytes):
            raise WrongStreamModeError(
                "Command template stream was opened in binary mode!"
            )
        return read_char

    def tokenize_template(self):
        matching = False
        pattern = []

        read_char = self.read_char()
        while read_char:
            if read_char == "{" and not matching:
                matching = True
            elif read_char == "}" and matching:
                matching = False
                yield from self.tokenize_pattern("".join(pattern))
                pattern.clear()
            elif not matching:
                yield Token.character(read_char)
            else:
                # A second "{" is part of the pattern, directives do not nest.
                pattern.append(read_char)
            read_char = self.read_char()

        # The closing brace was never found, give back what was read.
        if matching:
            yield Token.character("{")
            yield from tokenize_characters(pattern)

    def tokenize_pattern(self, pattern):
        """
        Tokenize the text found between a pair of braces, yields the
        directive token if the text spells a directive, otherwise
        the braces and text as characters.
        """
        kind = match_directive(pattern)
        if kind is not None:
            yield Token(kind)
        else:
            yield Token.character("{")
            yield from tokenize_characters(pattern)
            yield Token.character("}")
