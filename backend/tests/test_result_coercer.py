import pytest

from models.responses import AnalysisResult
from services.errors import MalformedResponseError
from services.result_coercer import brace_span, coerce

VALID = '{"atsScore":80,"matchedSkills":[],"missingSkills":[],"improvements":[]}'


def test_strict_parse():
    result = coerce(VALID)
    assert isinstance(result, AnalysisResult)
    assert result.ats_score == 80
    assert result.matched_skills == []


def test_recovers_object_from_surrounding_prose():
    result = coerce(f"Sure! {VALID} Hope that helps.")
    assert result.ats_score == 80


def test_serializes_with_camel_case_keys():
    text = '{"atsScore":65,"matchedSkills":["backend"],"missingSkills":["Go"],"improvements":["Add Go projects"]}'
    assert coerce(text).model_dump(by_alias=True) == {
        "atsScore": 65,
        "matchedSkills": ["backend"],
        "missingSkills": ["Go"],
        "improvements": ["Add Go projects"],
    }


def test_extra_keys_ignored():
    text = '{"atsScore":10,"matchedSkills":[],"missingSkills":[],"improvements":[],"notes":"x"}'
    assert coerce(text).ats_score == 10


def test_no_braces_raises():
    with pytest.raises(MalformedResponseError, match="Failed to parse AI response as JSON") as exc_info:
        coerce("I cannot help with that.")
    assert [a.stage for a in exc_info.value.attempts] == ["strict"]


def test_broken_span_raises_after_both_stages():
    with pytest.raises(MalformedResponseError) as exc_info:
        coerce('Here: {"atsScore": 80, "matchedSkills": [')
    assert [a.stage for a in exc_info.value.attempts] == ["strict"]

    with pytest.raises(MalformedResponseError) as exc_info:
        coerce('Here: {"atsScore": 80, "matchedSkills": [} done')
    err = exc_info.value
    assert [a.stage for a in err.attempts] == ["strict", "brace_span"]
    assert not any(a.ok for a in err.attempts)
    assert err.__cause__ is err.attempts[-1].error


def test_empty_object_fails_schema_validation():
    with pytest.raises(MalformedResponseError, match="did not match the analysis schema"):
        coerce("{}")


def test_wrong_field_types_fail_validation():
    with pytest.raises(MalformedResponseError):
        coerce('{"atsScore":"high","matchedSkills":"Go","missingSkills":[],"improvements":[]}')


def test_score_out_of_range_fails_validation():
    with pytest.raises(MalformedResponseError):
        coerce('{"atsScore":140,"matchedSkills":[],"missingSkills":[],"improvements":[]}')


def test_raw_excerpt_capped_at_2000_chars():
    text = "x" * 5000
    with pytest.raises(MalformedResponseError) as exc_info:
        coerce(text)
    assert exc_info.value.raw_excerpt == "x" * 2000


def test_brace_span_is_greedy():
    assert brace_span('a {"x": {"y": 1}} b {"z": 2} c') == '{"x": {"y": 1}} b {"z": 2}'


def test_brace_span_missing():
    assert brace_span("no json") is None
    assert brace_span("} reversed {") is None
