"""Greedy merge optimizer for class responsibility assignment.

Starting from one class per feature, repeatedly merges the pair of classes
with the highest merge effect until no pair has a positive effect.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from cra_core.metrics import MergeCandidate, candidate_merges
from cra_core.model import ClassModel

_log = logging.getLogger("cra.optimizer")


@dataclass
class MergeEvent:
    first: str
    second: str
    merged: str
    effect: float


@dataclass
class OptimizationResult:
    initial_classes: int
    final_classes: int
    events: list[MergeEvent] = field(default_factory=list)

    @property
    def merge_count(self) -> int:
        return len(self.events)


def select_best_merge(model: ClassModel) -> Optional[MergeCandidate]:
    """Return the candidate pair with the highest effect, or None.

    Ties go to the first pair in (i, j) class-index order, so the result
    is reproducible for a given partition.
    """
    best: Optional[MergeCandidate] = None
    best_effect = 0.0
    for candidate in candidate_merges(model):
        effect = candidate.effect
        if best is None or effect > best_effect:
            best, best_effect = candidate, effect
    return best


def merge_to_fixed_point(model: ClassModel,
                         on_merge: Callable[[MergeEvent], None] | None = None
                         ) -> list[MergeEvent]:
    """Merge the best pair while its effect is strictly positive.

    Merged classes are named C1, C2, ... in merge order.  A partition that
    is already at its fixed point is left untouched.
    """
    events: list[MergeEvent] = []
    counter = 1
    best = select_best_merge(model)
    while best is not None and best.effect > 0:
        effect = best.effect
        _log.info("Now merging %s and %s (effect=%.4f)",
                  best.first.name, best.second.name, effect)
        merged = model.merge(best.first, best.second, f"C{counter}")
        counter += 1
        event = MergeEvent(first=best.first.name, second=best.second.name,
                           merged=merged.name, effect=effect)
        events.append(event)
        if on_merge:
            on_merge(event)
        best = select_best_merge(model)

    _log.debug("Fixed point reached with %d classes after %d merges",
               len(model.classes), len(events))
    return events


def optimize(model: ClassModel,
             on_merge: Callable[[MergeEvent], None] | None = None
             ) -> OptimizationResult:
    """Validate the model, reset it to singleton classes, and merge to a fixed point.

    Raises MalformedGraph before any merge if the model is invalid.  A model
    without features yields an empty partition.
    """
    model.validate()
    model.reset_to_singletons()
    initial = len(model.classes)
    _log.info("Optimizing %r: %d features (%d methods, %d attributes)",
              model.name, initial, len(model.methods), len(model.attributes))

    events = merge_to_fixed_point(model, on_merge=on_merge)
    return OptimizationResult(
        initial_classes=initial,
        final_classes=len(model.classes),
        events=events,
    )
