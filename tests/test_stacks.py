import pytest

from algodrills.stacks import (
    FrequencyStack,
    MinStack,
    eval_rpn,
    is_valid_brackets,
    next_greater_then_smaller,
    postfix_to_prefix,
    remove_outer_parentheses,
    reverse_string,
)


@pytest.mark.parametrize("text", ["hello world", "abc", "x", "a b  c"])
def test_reverse_string_round_trip(text):
    assert reverse_string(reverse_string(text)) == text


def test_reverse_string_swaps_ends():
    result = reverse_string("stack")
    assert result[0] == "k"
    assert result[-1] == "s"
    assert sorted(result) == sorted("stack")


def test_reverse_string_palindrome_and_empty():
    assert reverse_string("racecar") == "racecar"
    assert reverse_string("") == ""


def test_postfix_to_prefix_simple():
    assert postfix_to_prefix("ab+") == "+ab"


def test_postfix_to_prefix_single_operand():
    assert postfix_to_prefix("a") == "a"


def test_postfix_to_prefix_keeps_characters_and_leads_with_last_operator():
    result = postfix_to_prefix("ab+c*")
    assert result[0] == "*"
    assert sorted(result) == sorted("ab+c*")


@pytest.mark.parametrize("expr", ["+", "a+", ""])
def test_postfix_to_prefix_malformed(expr):
    with pytest.raises(ValueError):
        postfix_to_prefix(expr)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("{[()]}", True),
        ("", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
    ],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected


def test_eval_rpn_basic():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9


def test_eval_rpn_truncates_toward_zero():
    assert eval_rpn(["7", "-2", "/"]) == -3


def test_eval_rpn_accepts_string():
    tokens = ["4", "13", "5", "/", "+"]
    assert eval_rpn(" ".join(tokens)) == eval_rpn(tokens)


def test_eval_rpn_single_number():
    assert eval_rpn(["42"]) == 42


def test_eval_rpn_missing_operand():
    with pytest.raises(ValueError):
        eval_rpn(["1", "+"])


def test_eval_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


def test_eval_rpn_bad_token():
    with pytest.raises(ValueError):
        eval_rpn(["1", "x", "+"])


def test_min_stack_tracks_minimum():
    stack = MinStack()
    for value in (5, 3, 7):
        stack.push(value)
    assert stack.minimum() == 3
    assert stack.pop() == 7
    assert stack.minimum() == 3
    assert stack.pop() == 3
    assert stack.minimum() == 5


def test_min_stack_duplicate_minimum():
    stack = MinStack()
    stack.push(2)
    stack.push(2)
    stack.pop()
    assert stack.minimum() == 2


def test_min_stack_empty():
    stack = MinStack()
    assert stack.minimum() is None
    assert stack.pop() is None
    assert len(stack) == 0


def test_frequency_stack_counts_top():
    stack = FrequencyStack()
    for value in ("a", "b", "a"):
        stack.push(value)
    assert stack.top_frequency() == 2
    assert stack.pop() == "a"
    assert stack.top_frequency() == 1
    assert stack.pop() == "b"
    assert stack.top_frequency() == 1


def test_frequency_stack_empty():
    stack = FrequencyStack()
    assert stack.top_frequency() is None
    assert stack.pop() is None
    assert len(stack) == 0


def test_remove_outer_parentheses_single_pair():
    assert remove_outer_parentheses("()") == ""


def test_remove_outer_parentheses_drops_one_pair_per_group():
    text = "(()())(())"
    result = remove_outer_parentheses(text)
    assert len(result) == len(text) - 4
    assert is_valid_brackets(result)


def test_remove_outer_parentheses_nested_group():
    assert remove_outer_parentheses("((()))") == "(())"


def test_next_greater_then_smaller_decreasing():
    assert next_greater_then_smaller([9, 7, 5, 3]) == [-1, -1, -1, -1]


def test_next_greater_then_smaller_answers_come_from_items():
    items = [5, 1, 9, 2, 8, 3, 10, 4]
    result = next_greater_then_smaller(items)
    assert len(result) == len(items)
    assert all(value == -1 or value in items for value in result)
    assert result[-1] == -1


def test_next_greater_then_smaller_empty():
    assert next_greater_then_smaller([]) == []