"""In-memory class model: features, classes, and their ownership."""

from collections import Counter
from dataclasses import dataclass, field

METHOD = "method"
ATTRIBUTE = "attribute"
FEATURE_KINDS = (METHOD, ATTRIBUTE)


class MalformedGraph(Exception):
    """Raised when a class model violates the ownership or edge invariants."""


@dataclass(frozen=True)
class Feature:
    name: str
    kind: str                                   # "method" | "attribute"
    data_dependency: tuple[str, ...] = ()
    functional_dependency: tuple[str, ...] = ()

    @property
    def is_method(self) -> bool:
        return self.kind == METHOD

    @property
    def is_attribute(self) -> bool:
        return self.kind == ATTRIBUTE


@dataclass(eq=False)
class DesignClass:
    """A named group of features. Compared by identity, not by name."""
    name: str
    features: list[Feature] = field(default_factory=list)

    def method_count(self) -> int:
        return sum(1 for f in self.features if f.is_method)

    def attribute_count(self) -> int:
        return sum(1 for f in self.features if f.is_attribute)

    def feature_names(self) -> list[str]:
        return [f.name for f in self.features]


@dataclass
class ClassModel:
    name: str = "Class Model"
    features: list[Feature] = field(default_factory=list)
    classes: list[DesignClass] = field(default_factory=list)

    def feature(self, name: str) -> Feature:
        for f in self.features:
            if f.name == name:
                return f
        raise KeyError(name)

    @property
    def methods(self) -> list[Feature]:
        return [f for f in self.features if f.is_method]

    @property
    def attributes(self) -> list[Feature]:
        return [f for f in self.features if f.is_attribute]

    def owners(self) -> dict[str, DesignClass]:
        """Map each feature name to the class that currently owns it."""
        return {f.name: cls for cls in self.classes for f in cls.features}

    def validate(self) -> None:
        """Check the model invariants, raising MalformedGraph on the first violation.

        A model without any classes is an unassigned input and is accepted.
        Once classes exist, every feature must belong to exactly one of them.
        """
        counts = Counter(f.name for f in self.features)
        dupes = sorted(n for n, c in counts.items() if c > 1)
        if dupes:
            raise MalformedGraph(f"Duplicate feature names: {', '.join(dupes)}")

        known = set(counts)
        for f in self.features:
            if f.kind not in FEATURE_KINDS:
                raise MalformedGraph(
                    f"Feature {f.name!r} has unknown kind {f.kind!r} "
                    f"(expected one of: {', '.join(FEATURE_KINDS)})"
                )
            if f.is_attribute and (f.data_dependency or f.functional_dependency):
                raise MalformedGraph(f"Attribute {f.name!r} cannot carry dependencies")
            for target in (*f.data_dependency, *f.functional_dependency):
                if target not in known:
                    raise MalformedGraph(
                        f"Feature {f.name!r} depends on unknown feature {target!r}"
                    )

        if not self.classes:
            return

        owned: Counter = Counter()
        for cls in self.classes:
            for f in cls.features:
                if f.name not in known:
                    raise MalformedGraph(
                        f"Class {cls.name!r} encapsulates unknown feature {f.name!r}"
                    )
                owned[f.name] += 1
        for name in counts:
            if owned[name] == 0:
                raise MalformedGraph(f"Feature {name!r} does not belong to any class")
            if owned[name] > 1:
                raise MalformedGraph(
                    f"Feature {name!r} belongs to {owned[name]} classes"
                )

    def reset_to_singletons(self) -> None:
        """Replace the partition with one class per feature, in feature order."""
        self.classes = [DesignClass(name="C" + f.name, features=[f])
                        for f in self.features]

    def merge(self, first: DesignClass, second: DesignClass, name: str) -> DesignClass:
        """Remove both classes and append one owning their concatenated features."""
        if first is second:
            raise ValueError(f"Cannot merge class {first.name!r} with itself")
        merged = DesignClass(name=name, features=first.features + second.features)
        self.classes = [c for c in self.classes if c is not first and c is not second]
        self.classes.append(merged)
        return merged
