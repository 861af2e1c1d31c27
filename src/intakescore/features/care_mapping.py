from __future__ import annotations

from typing import Dict, List, Tuple

from intakescore.models.forms import AssessmentForm, CareMapping
from intakescore.models.types import (
    AcuteOnset,
    ErgonomicCause,
    HighRepetition,
    RedFlagCategory,
)

ACUTE_ONSETS = {o.value for o in AcuteOnset}

HIGH_REPETITION = {r.value for r in HighRepetition}

# (regions that trigger the block, exercises added), checked in order
REGION_EXERCISES: List[Tuple[Tuple[str, ...], List[str]]] = [
    (("neck", "upper_back"), ["neck_mobility", "scapular_retraction", "posture_drills"]),
    (("shoulder",), ["shoulder_range", "rotator_cuff_strength", "scapular_stabilisation"]),
    (("lower_back",), ["lumbar_mobility", "core_activation", "hip_hinge_drills"]),
]

GENERAL_EXERCISES = ["general_mobility", "posture_cues"]


def _regions(form: AssessmentForm) -> List[str]:
    if form.primary_sites:
        return list(form.primary_sites)
    if form.region:
        return [form.region]
    return []


def _ergonomic_causes(form: AssessmentForm) -> List[str]:
    causes = []
    if form.prolonged_static_posture:
        causes.append(ErgonomicCause.POSTURE.value)
    if form.repetitive_motion_freq in HIGH_REPETITION:
        causes.append(ErgonomicCause.REPETITION.value)
    if form.overhead_arm_work:
        causes.append(ErgonomicCause.OVERHEAD.value)
    if form.vibrating_tools:
        causes.append(ErgonomicCause.VIBRATION.value)
    return causes


def _safe_self_exercises(regions: List[str]) -> List[str]:
    if not regions:
        return list(GENERAL_EXERCISES)

    exercises: List[str] = []
    for triggers, block in REGION_EXERCISES:
        if any(r in regions for r in triggers):
            exercises.extend(block)
    return exercises


def _red_flags(form: AssessmentForm) -> List[str]:
    checks: Dict[RedFlagCategory, bool] = {
        RedFlagCategory.NEUROLOGICAL_SYMPTOMS: form.numbness or form.presence_numbness_tingling,
        RedFlagCategory.CAUDA_EQUINA_SIGNS: form.bowel_bladder_loss,
        RedFlagCategory.SYSTEMIC_FEATURES: form.fever_weight_loss,
        RedFlagCategory.RECENT_MAJOR_TRAUMA: form.recent_trauma,
    }
    return [cat.value for cat, hit in checks.items() if hit]


def derive_care_mapping(form: AssessmentForm) -> CareMapping:
    """
    Map an intake form to what a clinician looks at first:
      - acute stage (onset under 6 weeks)
      - regions (primary sites, else the form's region)
      - ergonomic exposure
      - basic self-exercise suggestions per region
      - named red-flag categories
    """
    regions = _regions(form)

    return CareMapping(
        acute_stage=form.pain_onset in ACUTE_ONSETS,
        regions=regions,
        ergonomic_causes=_ergonomic_causes(form),
        safe_self_exercises=_safe_self_exercises(regions),
        red_flags=_red_flags(form),
    )
