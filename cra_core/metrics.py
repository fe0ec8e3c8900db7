"""Cohesion and coupling metrics over a class partition."""

from collections import defaultdict
from dataclasses import dataclass

from cra_core.model import ClassModel, DesignClass


def _at_least_one(n: int) -> int:
    return max(n, 1)


def _combination_count(methods: int) -> int:
    return max(methods * methods - 1, 1)


# ---------------------------------------------------------------------------
# MAI / MMI counting
# ---------------------------------------------------------------------------

@dataclass
class Interactions:
    """Dependency counts between the classes of one partition, by class index.

    ``mai[(x, y)]`` counts (method, target) pairs where the method lives in
    class ``x``, the target is one of its data dependencies, and the target
    lives in class ``y``.  ``mmi`` is the same over functional dependencies.
    """
    classes: list[DesignClass]
    methods: list[int]
    attributes: list[int]
    mai: dict[tuple[int, int], int]
    mmi: dict[tuple[int, int], int]

    def data(self, x: int, y: int) -> int:
        return self.mai.get((x, y), 0)

    def functional(self, x: int, y: int) -> int:
        return self.mmi.get((x, y), 0)


def count_interactions(classes: list[DesignClass]) -> Interactions:
    """Count MAI/MMI for every class pair in a single pass over the edges."""
    owner: dict[str, int] = {}
    for idx, cls in enumerate(classes):
        for f in cls.features:
            owner[f.name] = idx

    mai: dict[tuple[int, int], int] = defaultdict(int)
    mmi: dict[tuple[int, int], int] = defaultdict(int)
    for idx, cls in enumerate(classes):
        for f in cls.features:
            if not f.is_method:
                continue
            # Dependencies are sets; a repeated target counts once.
            for target in dict.fromkeys(f.data_dependency):
                mai[(idx, owner[target])] += 1
            for target in dict.fromkeys(f.functional_dependency):
                mmi[(idx, owner[target])] += 1

    return Interactions(
        classes=classes,
        methods=[c.method_count() for c in classes],
        attributes=[c.attribute_count() for c in classes],
        mai=dict(mai),
        mmi=dict(mmi),
    )


# ---------------------------------------------------------------------------
# Merge effect
# ---------------------------------------------------------------------------

@dataclass
class MergeCandidate:
    first: DesignClass
    second: DesignClass
    m_i: int
    m_j: int
    a_i: int
    a_j: int
    mai_ii: int = 0
    mai_ij: int = 0
    mai_ji: int = 0
    mai_jj: int = 0
    mmi_ii: int = 0
    mmi_ij: int = 0
    mmi_ji: int = 0
    mmi_jj: int = 0

    @property
    def effect(self) -> float:
        return merge_effect(self)


def merge_effect(c: MergeCandidate) -> float:
    """Estimated gain of merging the candidate's two classes.

    Sum of the change in data cohesion, the change in functional cohesion,
    and the coupling between the two classes that the merge removes.
    May be negative.
    """
    cohesion_data = (
        (c.mai_ii + c.mai_ij + c.mai_ji + c.mai_jj)
        / _at_least_one((c.m_i + c.m_j) * (c.a_i + c.a_j))
        - c.mai_ii / _at_least_one(c.m_i * c.a_i)
        - c.mai_jj / _at_least_one(c.m_j * c.a_j)
    )
    cohesion_func = (
        (c.mmi_ii + c.mmi_ij + c.mmi_ji + c.mmi_jj)
        / _combination_count(c.m_i + c.m_j)
        - c.mmi_ii / _combination_count(c.m_i)
        - c.mmi_jj / _combination_count(c.m_j)
    )
    coupling = (
        c.mai_ij / _at_least_one(c.m_i * c.a_j)
        + c.mai_ji / _at_least_one(c.m_j * c.a_i)
        + c.mmi_ij / _at_least_one(c.m_i * (c.m_j - 1))
        + c.mmi_ji / _at_least_one(c.m_j * (c.m_i - 1))
    )
    return cohesion_data + cohesion_func + coupling


def candidate_for(counts: Interactions, i: int, j: int) -> MergeCandidate:
    return MergeCandidate(
        first=counts.classes[i],
        second=counts.classes[j],
        m_i=counts.methods[i],
        m_j=counts.methods[j],
        a_i=counts.attributes[i],
        a_j=counts.attributes[j],
        mai_ii=counts.data(i, i),
        mai_ij=counts.data(i, j),
        mai_ji=counts.data(j, i),
        mai_jj=counts.data(j, j),
        mmi_ii=counts.functional(i, i),
        mmi_ij=counts.functional(i, j),
        mmi_ji=counts.functional(j, i),
        mmi_jj=counts.functional(j, j),
    )


def candidate_merges(model: ClassModel) -> list[MergeCandidate]:
    """All unordered pairs of distinct classes, ordered by class index (i < j)."""
    counts = count_interactions(model.classes)
    n = len(model.classes)
    return [candidate_for(counts, i, j)
            for i in range(n)
            for j in range(i + 1, n)]


# ---------------------------------------------------------------------------
# CRA-index
# ---------------------------------------------------------------------------

@dataclass
class CRAScore:
    cohesion: float
    coupling: float

    @property
    def cra_index(self) -> float:
        return self.cohesion - self.coupling


def evaluate(model: ClassModel) -> CRAScore:
    """Compute cohesion, coupling and CRA-index of the current partition."""
    counts = count_interactions(model.classes)
    ms, attrs = counts.methods, counts.attributes

    cohesion = 0.0
    for c in range(len(model.classes)):
        cohesion += counts.data(c, c) / _at_least_one(ms[c] * attrs[c])
        cohesion += counts.functional(c, c) / _at_least_one(ms[c] * (ms[c] - 1))

    coupling = 0.0
    for (c, d), n in counts.mai.items():
        if c != d:
            coupling += n / _at_least_one(ms[c] * attrs[d])
    for (c, d), n in counts.mmi.items():
        if c != d:
            coupling += n / _at_least_one(ms[c] * (ms[d] - 1))

    return CRAScore(cohesion=cohesion, coupling=coupling)
