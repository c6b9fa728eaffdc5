import pytest

from core import FormatError, OPERATOR_DEFINITIONS, Token, Tokenizer, LEFT_PAREN, RIGHT_PAREN, parse_number


def test_tokenize_simple_expression():
    tokens = Tokenizer.tokenize("2+3*4")
    assert tokens == [
        Token.number(2), Token.operator('+'), Token.number(3),
        Token.operator('*'), Token.number(4),
    ]

def test_tokenize_multi_digit_and_decimal_literals():
    tokens = Tokenizer.tokenize("12.5/100")
    assert tokens == [Token.number(12.5), Token.operator('/'), Token.number(100)]

def test_leading_minus_is_negative_literal():
    assert Tokenizer.tokenize("-5+3") == [Token.number(-5), Token.operator('+'), Token.number(3)]

def test_minus_after_operator_is_negative_literal():
    assert Tokenizer.tokenize("5--3") == [Token.number(5), Token.operator('-'), Token.number(-3)]

def test_minus_after_left_paren_is_negative_literal():
    tokens = Tokenizer.tokenize("2*(-3)")
    assert tokens == [Token.number(2), Token.operator('*'), LEFT_PAREN, Token.number(-3), RIGHT_PAREN]

def test_minus_after_right_paren_is_binary():
    tokens = Tokenizer.tokenize("(2)-3")
    assert tokens == [LEFT_PAREN, Token.number(2), RIGHT_PAREN, Token.operator('-'), Token.number(3)]

def test_minus_after_number_is_binary():
    assert Tokenizer.tokenize("7-2") == [Token.number(7), Token.operator('-'), Token.number(2)]

def test_second_decimal_point_is_ignored():
    assert Tokenizer.tokenize("1.2.3") == [Token.number(1.23)]

def test_decimal_point_after_operator_starts_new_literal():
    assert Tokenizer.tokenize("2+.5") == [Token.number(2), Token.operator('+'), Token.number(0.5)]

def test_negative_decimal_without_leading_zero():
    assert Tokenizer.tokenize("-.5") == [Token.number(-0.5)]

def test_empty_input_gives_no_tokens():
    assert Tokenizer.tokenize("") == []

@pytest.mark.parametrize("expression", ["2+a", "2 + 3", "3%2", "1,5"])
def test_unidentified_character_raises(expression):
    with pytest.raises(FormatError) as exc_info:
        Tokenizer.tokenize(expression)
    assert "unidentified character" in exc_info.value.message

@pytest.mark.parametrize("expression", [".", "-.", "2+."])
def test_malformed_number_raises(expression):
    with pytest.raises(FormatError) as exc_info:
        Tokenizer.tokenize(expression)
    assert "malformed number" in exc_info.value.message

def test_literal_beyond_float_range_raises():
    with pytest.raises(FormatError) as exc_info:
        Tokenizer.tokenize("9" * 400)
    assert "out of range" in exc_info.value.message

def test_large_finite_literal_round_trips():
    tokens = Tokenizer.tokenize("9" * 300 + "+1")
    text = Tokenizer.serialize(tokens)
    assert "inf" not in text
    assert Tokenizer.tokenize(text) == tokens

def test_too_long_expression_raises():
    with pytest.raises(FormatError) as exc_info:
        Tokenizer.tokenize("1" * 11, max_length=10)
    assert "too long" in exc_info.value.message

def test_each_call_returns_fresh_tokens():
    first = Tokenizer.tokenize("1+1")
    second = Tokenizer.tokenize("1+1")
    assert first == second
    assert first is not second

def test_serialize_canonical_form():
    assert Tokenizer.serialize(Tokenizer.tokenize("2.50+3.")) == "2.5+3"
    assert Tokenizer.serialize(Tokenizer.tokenize("0.0000001*2")) == "0.0000001*2"

@pytest.mark.parametrize("expression", ["2+3*4", "-5+3", "5--3", "(1.5+2)^-0.25", "2*(-3)", "1.2.3/4"])
def test_serialize_round_trip_reparses(expression):
    tokens = Tokenizer.tokenize(expression)
    assert Tokenizer.tokenize(Tokenizer.serialize(tokens)) == tokens

def test_tokens_are_immutable():
    token = Token.number(1)
    with pytest.raises(AttributeError):
        token.value = 2.0


@pytest.mark.parametrize("text,expected", [
    ("12", 12.0), ("-0.5", -0.5), (".5", 0.5), ("5.", 5.0), ("-7", -7.0),
])
def test_parse_number_accepts_literals(text, expected):
    assert parse_number(text) == expected

@pytest.mark.parametrize("text", ["", "-", ".", "1.2.3", "1e5", "+3", "--1", "inf", "nan", "9" * 400, "-" + "9" * 400])
def test_parse_number_rejects_non_literals(text):
    assert parse_number(text) is None

def test_operator_definitions_are_immutable():
    info = OPERATOR_DEFINITIONS['^']
    assert (info.precedence, info.name) == (4, 'pow')
    with pytest.raises(AttributeError):
        info.precedence = 1
