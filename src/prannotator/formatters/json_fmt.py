from __future__ import annotations

import dataclasses
import json

from ..models import AnnotationResult


def format_json(result: AnnotationResult) -> str:
    return json.dumps(dataclasses.asdict(result), indent=2)
