import pathlib
import warnings
from functools import wraps

from _cmdtemplate.reading import tokenize
from _cmdtemplate.tokenizer import Token


def takes_stream(i, mode, **open_kwargs):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode, **open_kwargs) as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def template_text(tokens, stacklevel):
    """
    :param stacklevel: Passed on to warnings.warn, counted from this
        function, so the warning points at the code calling the public
        function.
    """
    tokens = list(tokens)
    for token in tokens:
        if not isinstance(token, Token):
            raise TypeError(f"Expected a template token, got {token!r}")

    template = "".join(token.get_value() for token in tokens)

    if tokenize(template) != tokens:
        warnings.warn(
            f"Template text {template!r} does not tokenize "
            "to the given tokens, character braces form a directive.",
            stacklevel=stacklevel,
        )
    return template


def untokenize(tokens):
    """
    Gives the template text for the given tokens, such that
    untokenize(tokenize(template)) == template.

    Character tokens are written as is, so for instance the characters
    "{", "." and "}" are written as "{.}", which is read back as a
    directive. A warning is emitted whenever the resulting text does not
    tokenize to the given tokens.
    """
    return template_text(tokens, stacklevel=3)


# Files are written without newline translation so that
# read(path) gives back the characters of the tokens.
@takes_stream(0, "w", encoding="utf-8", newline="")
def write(filelike, tokens):
    """
    Writes the template text for the given tokens to the given
    file or stream, see untokenize.

    >>> write("command.template", tokenize("cp {} {.}.bak"))

    :param filelike: Either a path to the file or an open text stream.
    :param tokens: Iterable of template tokens.
    """
    # Called through the takes_stream wrapper.
    filelike.write(template_text(tokens, stacklevel=4))
