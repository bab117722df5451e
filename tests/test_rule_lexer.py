import pytest

from choicerules.domain.tokens import Comparison, TokenKind
from choicerules.services.errors import MalformedRuleError, MalformedRuleKind
from choicerules.services.rule_lexer import parse_rule, tokenize_rule


def test_tokenize_reference_operator_literal() -> None:
    tokens, negated = tokenize_rule("v[65]<70")

    assert not negated
    assert [token.kind for token in tokens] == [
        TokenKind.VARIABLE,
        TokenKind.OPERATOR,
        TokenKind.LITERAL,
    ]
    assert tokens[0].ref_id == 65
    assert tokens[1].comparison is Comparison.LT
    assert tokens[2].value == 70


def test_tokenize_leading_bang_is_negation() -> None:
    tokens, negated = tokenize_rule("!s[3]")

    assert negated
    assert len(tokens) == 1
    assert tokens[0].kind is TokenKind.SWITCH
    assert tokens[0].ref_id == 3


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("=", Comparison.EQ),
        ("==", Comparison.EQ),
        ("===", Comparison.EQ),
        ("!=", Comparison.NE),
        ("!==", Comparison.NE),
        ("<", Comparison.LT),
        ("<=", Comparison.LE),
        (">", Comparison.GT),
        (">=", Comparison.GE),
    ],
)
def test_operator_aliases(text: str, expected: Comparison) -> None:
    parsed = parse_rule(f"v[1]{text}5")

    assert parsed.comparison is expected


def test_signed_literals() -> None:
    parsed = parse_rule("v[2]>=-5")
    assert parsed.right is not None
    assert parsed.right.value == -5

    parsed = parse_rule("v[2]=+3")
    assert parsed.right is not None
    assert parsed.right.value == 3


def test_gold_token() -> None:
    parsed = parse_rule("!v[4]>g")

    assert parsed.negated
    assert parsed.right is not None
    assert parsed.right.kind is TokenKind.GOLD


def test_bare_inventory_is_condition() -> None:
    parsed = parse_rule("i[55]")

    assert not parsed.is_comparison
    assert parsed.left.kind is TokenKind.ITEM


def test_inventory_on_both_sides_is_comparison() -> None:
    parsed = parse_rule("i[6]>=w[2]")

    assert parsed.is_comparison
    assert parsed.left.kind is TokenKind.ITEM
    assert parsed.right is not None
    assert parsed.right.kind is TokenKind.WEAPON


@pytest.mark.parametrize(
    ("rule", "kind"),
    [
        ("", MalformedRuleKind.EMPTY_RULE),
        ("s[3] ", MalformedRuleKind.UNEXPECTED_CHARACTERS),
        ("x[3]", MalformedRuleKind.UNEXPECTED_CHARACTERS),
        ("s[3]!", MalformedRuleKind.UNEXPECTED_CHARACTERS),
        ("???", MalformedRuleKind.UNEXPECTED_CHARACTERS),
        ("!", MalformedRuleKind.TOKEN_COUNT),
        ("v[1]<", MalformedRuleKind.TOKEN_COUNT),
        ("v[1]<2<3", MalformedRuleKind.TOKEN_COUNT),
        ("v[1]", MalformedRuleKind.INVALID_FIRST_OPERAND),
        ("g", MalformedRuleKind.INVALID_FIRST_OPERAND),
        ("5", MalformedRuleKind.INVALID_FIRST_OPERAND),
        ("v[1]5g", MalformedRuleKind.INVALID_OPERATOR),
        ("<<<", MalformedRuleKind.INVALID_FIRST_OPERAND),
        ("v[1]<<", MalformedRuleKind.INVALID_SECOND_OPERAND),
        ("v[1]>s[2]", MalformedRuleKind.ILLEGAL_OPERAND_POSITION),
        ("v[1]=p[2]", MalformedRuleKind.ILLEGAL_OPERAND_POSITION),
        ("s[1]=1", MalformedRuleKind.ILLEGAL_OPERAND_POSITION),
    ],
)
def test_malformed_rules_are_classified(rule: str, kind: MalformedRuleKind) -> None:
    with pytest.raises(MalformedRuleError) as excinfo:
        parse_rule(rule)

    assert excinfo.value.kind is kind
    assert excinfo.value.rule == rule
    assert kind.value in str(excinfo.value)
