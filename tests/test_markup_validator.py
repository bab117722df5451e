from choicerules.services.markup_validator import (
    Issue,
    format_issue,
    has_errors,
    validate_choice_markup,
)


def test_valid_markup_has_no_issues() -> None:
    issues = validate_choice_markup(
        [
            "<<[s[3],!s[4]]>>Hello",
            "(([v[65]<70]))<<[i[6]>=v[4]]>>World",
            "Plain",
        ]
    )

    assert issues == []


def test_illegal_position_reported() -> None:
    issues = validate_choice_markup(["Hello <<[s[1]]>>"], prompt_id="door")

    assert [issue.code for issue in issues] == ["ILLEGAL_TAG_POSITION"]
    assert issues[0].context["prompt"] == "door"
    assert has_errors(issues)


def test_malformed_rules_reported_per_block() -> None:
    issues = validate_choice_markup(["<<[s[1],v[2]]>>(([v[1]>s[2]]))Broken"])

    codes = [(issue.code, issue.context["block"], issue.context["kind"]) for issue in issues]
    assert codes == [
        ("MALFORMED_RULE", "disable", "INVALID_FIRST_OPERAND"),
        ("MALFORMED_RULE", "hide", "ILLEGAL_OPERAND_POSITION"),
    ]


def test_empty_label_is_a_warning() -> None:
    issues = validate_choice_markup(["<<[s[1]]>>"])

    assert [issue.code for issue in issues] == ["EMPTY_LABEL"]
    assert not has_errors(issues)


def test_format_issue() -> None:
    issue = Issue(
        severity="ERROR",
        code="MALFORMED_RULE",
        message="Bad rule.",
        context={"choice": "2", "rule": "???"},
    )

    assert format_issue(issue) == "[ERROR] MALFORMED_RULE: Bad rule. (choice=2 rule=???)"
