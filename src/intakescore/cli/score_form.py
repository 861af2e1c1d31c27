from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from intakescore.features.care_mapping import derive_care_mapping
from intakescore.models.forms import AssessmentForm
from intakescore.scoring.assessment import score_assessment


def load_form(form_path: str) -> AssessmentForm:
    # safe_load also reads JSON
    raw: Dict[str, Any] = yaml.safe_load(Path(form_path).read_text())
    return AssessmentForm.model_validate(raw)


def run(form_path: str, out_path: Optional[str] = None) -> None:
    form = load_form(form_path)
    result = score_assessment(form)
    payload = json.dumps(result.model_dump(), indent=2)
    print(payload)

    if out_path:
        outp = Path(out_path)
        outp.parent.mkdir(parents=True, exist_ok=True)
        outp.write_text(payload)
        print(f"Wrote {outp.resolve()}")


def run_mapping(form_path: str) -> None:
    form = load_form(form_path)
    mapping = derive_care_mapping(form)
    print(json.dumps(mapping.model_dump(), indent=2))
