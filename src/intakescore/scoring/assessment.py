from __future__ import annotations

import math
from typing import Optional

from intakescore.models.forms import AssessmentForm, AssessmentResult


def _round_half_up(x: float, ndigits: int = 0) -> float:
    scale = 10 ** ndigits
    return math.floor(x * scale + 0.5) / scale


def _pain_level(form: AssessmentForm) -> int:
    # Half up: (5 + 4) / 2 = 4.5 -> 5
    return int(_round_half_up((form.pain_now + form.pain_week) / 2))


def _functional_score(form: AssessmentForm) -> int:
    limits = [form.limits_work, form.limits_sleep, form.limits_walk, form.limits_lift]
    return sum(1 for v in limits if v)


def _red_flag(form: AssessmentForm) -> bool:
    return bool(
        form.numbness
        or form.bowel_bladder_loss
        or form.fever_weight_loss
        or form.recent_trauma
    )


def _bmi(form: AssessmentForm) -> Optional[float]:
    h, w = form.height_cm, form.weight_kg
    if h is None or w is None or h <= 0 or w <= 0:
        return None
    return _round_half_up(w / ((h / 100) ** 2), 1)


def score_assessment(form: AssessmentForm) -> AssessmentResult:
    """
    Score an intake form. Pure: the form is frozen and nothing is written
    anywhere, so repeated calls give identical results.
    """
    return AssessmentResult(
        pain_level=_pain_level(form),
        functional_score=_functional_score(form),
        red_flag=_red_flag(form),
        region=form.region,
        chronicity=form.chronicity,
        bmi=_bmi(form),
    )
