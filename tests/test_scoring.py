import itertools

import pytest
from pydantic import ValidationError

from intakescore.models.forms import AssessmentForm
from intakescore.scoring.assessment import score_assessment

LIMITS = ["limits_work", "limits_sleep", "limits_walk", "limits_lift"]
RED_FLAGS = ["numbness", "bowel_bladder_loss", "fever_weight_loss", "recent_trauma"]

def mk(**overrides):
    data = dict(
        pain_now=6,
        pain_week=4,
        limits_work=True,
        limits_sleep=False,
        limits_walk=True,
        limits_lift=False,
        numbness=False,
        bowel_bladder_loss=False,
        fever_weight_loss=False,
        recent_trauma=False,
        chronicity="2_6",
        region="lower_back",
    )
    data.update(overrides)
    return AssessmentForm(**data)

def test_lower_back_example():
    res = score_assessment(mk())
    assert res.pain_level == 5
    assert res.functional_score == 2
    assert res.red_flag is False
    assert res.region == "lower_back"
    assert res.chronicity == "2_6"
    assert res.bmi is None

def test_pain_half_rounds_up():
    assert score_assessment(mk(pain_now=5, pain_week=4)).pain_level == 5
    assert score_assessment(mk(pain_now=0, pain_week=1)).pain_level == 1
    assert score_assessment(mk(pain_now=2, pain_week=1)).pain_level == 2

def test_pain_bounds():
    assert score_assessment(mk(pain_now=0, pain_week=0)).pain_level == 0
    assert score_assessment(mk(pain_now=10, pain_week=10)).pain_level == 10

def test_pain_level_matches_mean_everywhere():
    for a, b in itertools.product(range(11), repeat=2):
        level = score_assessment(mk(pain_now=a, pain_week=b)).pain_level
        assert 0 <= level <= 10
        assert level == (a + b + 1) // 2

def test_functional_score_counts_limits():
    assert score_assessment(mk(**{k: True for k in LIMITS})).functional_score == 4
    assert score_assessment(mk(**{k: False for k in LIMITS})).functional_score == 0
    for combo in itertools.product([True, False], repeat=4):
        res = score_assessment(mk(**dict(zip(LIMITS, combo))))
        assert res.functional_score == sum(combo)

def test_any_single_red_flag_triggers():
    assert score_assessment(mk()).red_flag is False
    for name in RED_FLAGS:
        assert score_assessment(mk(**{name: True})).red_flag is True

def test_numbness_tingling_alone_is_not_a_red_flag():
    assert score_assessment(mk(presence_numbness_tingling=True)).red_flag is False

def test_region_and_chronicity_pass_through_unvalidated():
    res = score_assessment(mk(region="not_a_region", chronicity="weird_bucket"))
    assert res.region == "not_a_region"
    assert res.chronicity == "weird_bucket"

def test_idempotent_and_input_untouched():
    form = mk()
    before = form.model_dump()
    assert score_assessment(form) == score_assessment(form)
    assert form.model_dump() == before

def test_form_is_frozen():
    form = mk()
    with pytest.raises(ValidationError):
        form.pain_now = 9

def test_bmi_when_height_and_weight_given():
    assert score_assessment(mk(height_cm=180.0, weight_kg=81.0)).bmi == 25.0
    assert score_assessment(mk(height_cm=170.0, weight_kg=70.0)).bmi == 24.2

def test_bmi_missing_or_nonpositive():
    assert score_assessment(mk(height_cm=180.0)).bmi is None
    assert score_assessment(mk(height_cm=0.0, weight_kg=70.0)).bmi is None

@pytest.mark.parametrize("field,value", [("pain_now", 11), ("pain_week", -1)])
def test_out_of_range_pain_rejected(field, value):
    with pytest.raises(ValidationError) as exc:
        mk(**{field: value})
    assert field in str(exc.value)

def test_missing_field_rejected():
    data = mk().model_dump()
    del data["limits_lift"]
    with pytest.raises(ValidationError) as exc:
        AssessmentForm(**data)
    assert "limits_lift" in str(exc.value)

def test_no_silent_coercion():
    with pytest.raises(ValidationError):
        mk(pain_now="6")
    with pytest.raises(ValidationError):
        mk(numbness="yes")
    with pytest.raises(ValidationError):
        mk(pain_now=True)

def test_extra_ui_fields_ignored():
    data = mk().model_dump()
    data.update({"consent": True, "occupation": "nurse"})
    assert score_assessment(AssessmentForm(**data)).pain_level == 5
