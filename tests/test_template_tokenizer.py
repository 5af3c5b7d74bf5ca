import io

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _cmdtemplate.reading import tokenize
from _cmdtemplate.tokenizer import (
    TemplateTokenizer,
    Token,
    TokenKind,
    WrongStreamModeError,
    match_directive,
)

from .generators.template_contents import literal_text, templates


def characters(text):
    return [Token.character(c) for c in text]


@given(literal_text)
def test_tokenize_literal_text(text):
    assert tokenize(text) == characters(text)


def test_tokenize_empty():
    assert tokenize("") == []


def test_tokenize_placeholder():
    assert tokenize("{}") == [Token(TokenKind.PLACEHOLDER)]


@pytest.mark.parametrize(
    "template, expected_kind",
    [
        ("{.}", TokenKind.REMOVE_EXTENSION),
        ("{/}", TokenKind.BASENAME),
        ("{//}", TokenKind.DIRNAME),
        ("{/.}", TokenKind.BASE_AND_EXT),
        ("{%}", TokenKind.SLOT),
        ("{#}", TokenKind.JOB),
        ("{#^}", TokenKind.JOB_TOTAL),
    ],
)
def test_tokenize_directive(template, expected_kind):
    assert tokenize(template) == [Token(expected_kind)]


@pytest.mark.parametrize("kind, spelling", TokenKind.directives().items())
def test_match_directive(kind, spelling):
    assert match_directive(spelling) == kind


@pytest.mark.parametrize("pattern", ["x", " .", ". ", "/./", "#^^", "^#", "{/"])
def test_match_directive_unmatched(pattern):
    assert match_directive(pattern) is None


def test_tokenize_unmatched_pattern():
    assert tokenize("{x}") == characters("{x}")


def test_tokenize_directives_are_case_and_space_sensitive():
    assert tokenize("{ . }") == characters("{ . }")


def test_tokenize_unterminated_pattern():
    assert tokenize("foo{ba") == characters("foo{ba")


def test_tokenize_unterminated_empty_pattern():
    assert tokenize("foo{") == characters("foo{")


@pytest.mark.parametrize(
    "template, expected_tokens",
    [
        ("a{b{c", characters("a{b{c")),
        ("{x}{y", characters("{x}{y")),
        ("{{", characters("{{")),
        ("{/}{//", [Token(TokenKind.BASENAME)] + characters("{//")),
        ("{.}}{", [Token(TokenKind.REMOVE_EXTENSION)] + characters("}{")),
    ],
)
def test_tokenize_unterminated_after_brace_or_pattern(template, expected_tokens):
    assert tokenize(template) == expected_tokens


def test_tokenize_lone_closing_brace():
    assert tokenize("a}b") == characters("a}b")


def test_tokenize_multiple():
    assert tokenize("foo {} bar") == (
        characters("foo ") + [Token(TokenKind.PLACEHOLDER)] + characters(" bar")
    )


def test_tokenize_no_space():
    assert tokenize("foo{}bar") == (
        characters("foo") + [Token(TokenKind.PLACEHOLDER)] + characters("bar")
    )


def test_tokenize_adjacent_directives():
    assert tokenize("{#}{%}{/.}") == [
        Token(TokenKind.JOB),
        Token(TokenKind.SLOT),
        Token(TokenKind.BASE_AND_EXT),
    ]


def test_tokenize_does_not_nest():
    assert tokenize("{{/}}") == characters("{{/}}")


def test_tokenize_nested_brace_then_directive():
    assert tokenize("{{}{.}") == characters("{{}") + [Token(TokenKind.REMOVE_EXTENSION)]


def test_tokenize_non_ascii():
    assert tokenize("ø{/}é") == (
        characters("ø") + [Token(TokenKind.BASENAME)] + characters("é")
    )


def test_tokenize_command():
    assert tokenize("convert {} -resize 50% {//}/small_{/.}.png") == (
        characters("convert ")
        + [Token(TokenKind.PLACEHOLDER)]
        + characters(" -resize 50% ")
        + [Token(TokenKind.DIRNAME)]
        + characters("/small_")
        + [Token(TokenKind.BASE_AND_EXT)]
        + characters(".png")
    )


@given(templates())
def test_tokens_give_back_template(template):
    tokens = tokenize(template)
    assert "".join(t.get_value() for t in tokens) == template


@given(templates())
def test_tokenize_stream(template):
    assert tokenize(io.StringIO(template)) == tokenize(template)


@given(st.lists(literal_text, min_size=2))
def test_tokenize_concatenated_literals(texts):
    assert tokenize("".join(texts)) == [t for s in texts for t in tokenize(s)]


def test_template_tokenizer_is_lazy():
    stream = io.StringIO("{#} rest")
    tokens = iter(TemplateTokenizer(stream))

    assert next(tokens) == Token(TokenKind.JOB)
    assert stream.read() == " rest"


def test_wrong_mode_error_binary():
    stream = io.BytesIO(b"echo {}")
    tokens = iter(TemplateTokenizer(stream))
    with pytest.raises(WrongStreamModeError):
        next(tokens)
