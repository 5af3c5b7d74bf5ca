import io
import pathlib
from contextlib import contextmanager

from _cmdtemplate.tokenizer import TemplateTokenizer


def tokenize(template):
    """
    Tokenizes a command template and returns the list of tokens,
    ie. tokens = tokenize("gzip {} > {/.}.gz").

    :param template: The template as a string, or a text stream
        containing the template.
    """
    stream = template
    if isinstance(template, str):
        stream = io.StringIO(template)
    return list(TemplateTokenizer(stream))


def read(filelike):
    """
    Reads a command template from a file and returns the list
    of tokens, ie. tokens = read("/my/command.template").
    """
    with lazy_read(filelike) as tokens:
        return list(tokens)


@contextmanager
def lazy_read(filelike):
    """
    Context manager giving an iterator of the tokens in a template file.
    The tokens are read from the file as the iterator is consumed.

    :param filelike: Either a path to the template file, which is opened and
        closed by lazy_read, or an open text stream.
    """
    # No newline translation, the tokens hold the characters of the file.
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rt", encoding="utf-8", newline="") as file_stream:
            yield iter(TemplateTokenizer(file_stream))
    else:
        yield iter(TemplateTokenizer(filelike))
