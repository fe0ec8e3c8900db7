"""Output formatters for class models — text and JSON."""

import json

from cra_core.metrics import CRAScore
from cra_core.model import ClassModel
from cra_core.optimizer import MergeEvent


def model_to_text(model: ClassModel, score: CRAScore | None = None) -> str:
    """Convert a partitioned model to a human-readable summary."""
    lines = [f"{model.name}: {len(model.classes)} classes, "
             f"{len(model.features)} features", ""]

    for cls in model.classes:
        lines.append(f"  [{cls.name}] {cls.method_count()} methods, "
                     f"{cls.attribute_count()} attributes")
        names = cls.feature_names()
        for name in names[:10]:
            lines.append(f"       {name}")
        if len(names) > 10:
            lines.append(f"       ... and {len(names) - 10} more")
        lines.append("")

    if score is not None:
        lines.append(_score_line(score))

    return "\n".join(lines)


def model_to_json(model: ClassModel, score: CRAScore | None = None) -> str:
    """Convert a partitioned model to JSON format."""
    result: dict = {
        "name": model.name,
        "feature_count": len(model.features),
        "classes": [
            {
                "name": cls.name,
                "methods": cls.method_count(),
                "attributes": cls.attribute_count(),
                "features": cls.feature_names(),
            }
            for cls in model.classes
        ],
    }
    if score is not None:
        result["cohesion"] = score.cohesion
        result["coupling"] = score.coupling
        result["cra_index"] = score.cra_index
    return json.dumps(result, indent=2)


def merge_line(event: MergeEvent) -> str:
    return f"Now merging {event.first} and {event.second}"


def _score_line(score: CRAScore) -> str:
    return (f"CRA-Index: {score.cra_index:.4f} "
            f"(cohesion {score.cohesion:.4f}, coupling {score.coupling:.4f})")
