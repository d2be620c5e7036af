import pytest

from pairedit.lexer import Lexer, tokenize
from pairedit.tokens import State


def kinds(code):
    return [(t.name, t.type) for t in tokenize(code)]


def test_simple_declaration():
    assert kinds("int x = 5;") == [
        ("int", State.KW),
        ("x", State.ID),
        ("=", State.OPER),
        ("5", State.NUM),
        (";", State.OPER),
    ]


@pytest.mark.parametrize("code", ["", "   ", "\t \t"])
def test_blank_input_gives_no_tokens(code):
    assert tokenize(code) == []


@pytest.mark.parametrize("code", ["double", "sizeof", "return"])
def test_keywords_reached_through_identifiers(code):
    assert kinds(code) == [(code, State.KW)]


def test_identifier_that_starts_like_keyword():
    assert kinds("integer") == [("integer", State.ID)]


def test_keyword_followed_by_paren():
    assert kinds("if(x)") == [
        ("if", State.KW),
        ("(", State.OPER),
        ("x", State.ID),
        (")", State.OPER),
    ]


@pytest.mark.parametrize("op", ["+=", "->", "<<=", "::"])
def test_compound_operators(op):
    assert kinds(f"a{op}b") == [("a", State.ID), (op, State.OPER), ("b", State.ID)]


def test_division_is_not_comment():
    assert [t.type for t in tokenize("a/b")] == [State.ID, State.OPER, State.ID]


def test_float_in_call():
    assert kinds("f(1.5)") == [
        ("f", State.ID),
        ("(", State.OPER),
        ("1.5", State.FNUM),
        (")", State.OPER),
    ]


def test_float_followed_by_dot():
    assert [t.type for t in tokenize("3.14.1")] == [State.FNUM, State.OPER, State.NUM]


def test_number_with_suffix():
    assert kinds("10u") == [("10u", State.NUM)]


def test_number_with_double_suffix_is_undefined():
    assert kinds("10uu") == [("10uu", State.UNDEF)]


def test_leading_underscore_is_undefined():
    assert kinds("_x") == [("_x", State.UNDEF)]


def test_keyword_with_bad_char_becomes_undefined():
    assert kinds("int$") == [("int$", State.UNDEF)]


def test_string_literal():
    assert kinds('x = "hi there";') == [
        ("x", State.ID),
        ("=", State.OPER),
        ('"hi there"', State.LIT),
        (";", State.OPER),
    ]


def test_char_literal():
    assert kinds("c = 'a';") == [
        ("c", State.ID),
        ("=", State.OPER),
        ("'a'", State.LIT),
        (";", State.OPER),
    ]


def test_unterminated_literal_runs_to_end():
    assert kinds('"abc') == [('"abc', State.LIT)]


def test_line_comment():
    assert kinds("// hello") == [("// hello", State.COM)]


def test_trailing_line_comment():
    assert [t.type for t in tokenize("x = 1; // note")] == [
        State.ID, State.OPER, State.NUM, State.OPER, State.COM,
    ]


def test_block_comment_then_identifier():
    assert kinds("/* x */ y") == [("/* x */", State.COM), ("y", State.ID)]


SAMPLES = [
    "int x = 5;",
    "for(int i=0;i<10;++i){sum+=a[i];}",
    'printf("%d\\n", x); // print',
    "/* block */ return a->b.c;",
    "float f = 3.25f * 2;",
    "char c='z'; _bad $ 12ab",
]


@pytest.mark.parametrize("code", SAMPLES)
def test_token_spans_match_source(code):
    for token in tokenize(code):
        assert code[token.begin:token.end] == token.name


@pytest.mark.parametrize("code", SAMPLES)
def test_tokens_are_ordered_and_disjoint(code):
    tokens = tokenize(code)
    for left, right in zip(tokens, tokens[1:]):
        assert left.end <= right.begin
    assert all(t.begin < t.end for t in tokens)


@pytest.mark.parametrize("code", ["a+b*c", "x=y;", "i++;--j", "p->q::r"])
def test_tokens_cover_all_non_space_text(code):
    assert "".join(t.name for t in tokenize(code)) == code


def test_last_token_ends_at_end_of_text():
    code = "a = b"
    assert tokenize(code)[-1].end == len(code)


def test_lexer_reuse_replaces_tokens():
    lexer = Lexer()
    lexer.lexical_analysis("int a")
    result = lexer.lexical_analysis("b")
    assert [t.name for t in result] == ["b"]
    assert [t.name for t in lexer.tokens] == ["b"]


def test_tokens_property_is_a_copy():
    lexer = Lexer()
    lexer.lexical_analysis("a b")
    lexer.tokens.clear()
    assert [t.name for t in lexer.tokens] == ["a", "b"]


def test_was_running_flag_survives_clear():
    lexer = Lexer()
    assert lexer.was_running is False
    lexer.lexical_analysis("x")
    lexer.clear()
    assert lexer.was_running is True
    assert lexer.state is State.ST