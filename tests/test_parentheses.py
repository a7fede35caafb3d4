import pytest

from algosolve.parentheses import is_valid_parentheses, longest_valid_parentheses


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", True),
        ("()", True),
        ("()[]{}", True),
        ("(]", False),
        ("([])", True),
        ("([)]", False),
    ],
)
def test_is_valid_parentheses_source_cases(text, expected):
    assert is_valid_parentheses(text) is expected


def test_non_bracket_characters_are_invalid():
    assert is_valid_parentheses("(a)") is False


def test_unclosed_opening_is_invalid():
    assert is_valid_parentheses("((") is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("(", 0),
        ("()", 2),
        ("(()", 2),
        (")()())", 4),
        ("())()())", 4),
    ],
)
def test_longest_valid_parentheses_source_cases(text, expected):
    assert longest_valid_parentheses(text) == expected


@pytest.mark.parametrize("text", ["()", "(())", "()()", "(()())", "((()))()"])
def test_fully_valid_string_spans_whole_length(text):
    assert longest_valid_parentheses(text) == len(text)


@pytest.mark.parametrize("text", ["(((", ")))", ")(", "))(("])
def test_no_pairs_gives_zero(text):
    assert longest_valid_parentheses(text) == 0


@pytest.mark.parametrize("text", ["(()", ")()())", "())()())", "(()(()"])
def test_longest_is_even_and_bounded(text):
    result = longest_valid_parentheses(text)
    assert result % 2 == 0
    assert 0 <= result <= len(text)