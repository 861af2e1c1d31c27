from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from intakescore.features.care_mapping import derive_care_mapping
from intakescore.models.forms import AssessmentForm
from intakescore.scoring.assessment import score_assessment


def run(batch_path: str, out_dir: str = "out") -> Dict[str, Any]:
    cfg = yaml.safe_load(Path(batch_path).read_text())
    forms = cfg["forms"]

    results: List[Dict[str, Any]] = []
    skipped: List[Dict[str, Any]] = []

    for i, raw in enumerate(forms):
        # Non-mapping entries still go through validation and get skipped
        form_id = str(raw.get("form_id") or i) if isinstance(raw, dict) else str(i)

        try:
            form = AssessmentForm.model_validate(raw)
        except ValidationError as e:
            # One bad form shouldn't stop the batch
            fields = sorted({".".join(str(p) for p in err["loc"]) or "form" for err in e.errors()})
            print(f"{form_id} skipped (invalid form): {', '.join(fields)}")
            skipped.append({"form_id": form_id, "invalid_fields": fields})
            continue

        result = score_assessment(form)
        mapping = derive_care_mapping(form)

        results.append(
            {
                "form_id": form_id,
                "result": result.model_dump(),
                "care_mapping": mapping.model_dump(),
            }
        )

        line = (
            f"{form_id} {result.region}/{result.chronicity} | "
            f"pain={result.pain_level} func={result.functional_score} "
            f"red_flag={int(result.red_flag)}"
        )
        if result.red_flag:
            line += f" ESCALATE: {', '.join(mapping.red_flags)}"
        print(line)

    payload = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "summary": {
            "forms_total": len(forms),
            "scored": len(results),
            "skipped": len(skipped),
            "red_flags": sum(1 for r in results if r["result"]["red_flag"]),
        },
        "results": results,
        "skipped": skipped,
    }

    outp = Path(out_dir)
    outp.mkdir(parents=True, exist_ok=True)
    (outp / "results.json").write_text(json.dumps(payload, indent=2))
    print(f"Wrote {(outp / 'results.json').resolve()}")

    return payload
