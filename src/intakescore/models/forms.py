from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

class AssessmentForm(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    pain_now: int = Field(..., ge=0, le=10)
    pain_week: int = Field(..., ge=0, le=10)

    limits_work: bool
    limits_sleep: bool
    limits_walk: bool
    limits_lift: bool

    numbness: bool  # red flag
    bowel_bladder_loss: bool  # red flag
    fever_weight_loss: bool  # red flag
    recent_trauma: bool  # red flag

    chronicity: str
    region: str

    # Optional intake sections, only used for BMI and the care mapping
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    pain_onset: Optional[str] = None
    primary_sites: List[str] = Field(default_factory=list)
    presence_numbness_tingling: bool = False
    prolonged_static_posture: bool = False
    repetitive_motion_freq: Optional[str] = None
    overhead_arm_work: bool = False
    vibrating_tools: bool = False

class AssessmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    pain_level: int = Field(..., ge=0, le=10)
    functional_score: int = Field(..., ge=0, le=4)
    red_flag: bool
    region: str
    chronicity: str
    bmi: Optional[float] = None

class CareMapping(BaseModel):
    acute_stage: bool
    regions: List[str]
    ergonomic_causes: List[str]
    safe_self_exercises: List[str]
    red_flags: List[str]
