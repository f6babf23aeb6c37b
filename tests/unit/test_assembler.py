"""Tests for result assembly."""

from lyly_assistant.quiz.assembler import assemble_result
from lyly_assistant.quiz.validator import validate_quiz_output

from tests.stubs import envelope, mc_item


def test_order_preserved_not_grouped_by_level(make_plan):
    plan = make_plan({"remembering": 2, "understanding": 1})
    raw = [mc_item("remembering", "A"), mc_item("understanding", "B"), mc_item("remembering", "C")]
    result = assemble_result(validate_quiz_output(envelope(raw), plan))
    assert len(result) == 3
    assert [q.question for q in result.questions] == ["A", "B", "C"]
    assert result.to_payload() == {"questions": raw}


def test_empty_result():
    assert assemble_result([]).to_payload() == {"questions": []}
