"""YAML read/write for class models."""

import logging
from pathlib import Path

import yaml

from cra_core.model import (
    ClassModel,
    DesignClass,
    Feature,
    MalformedGraph,
)

_log = logging.getLogger("cra.store")

OUTPUT_SUFFIX = ".Output.yaml"


def output_path(input_path: Path) -> Path:
    """Derive the result path for an input model: model.yaml -> model.Output.yaml."""
    input_path = Path(input_path)
    return input_path.with_name(input_path.stem + OUTPUT_SUFFIX)


def _name_list(value, where: str, unique: bool = False) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise MalformedGraph(f"{where} must be a list of feature names")
    names = tuple(str(v) for v in value)
    if unique:
        names = tuple(dict.fromkeys(names))
    return names


def _has_name(raw) -> bool:
    return isinstance(raw, dict) and raw.get("name") is not None and raw["name"] != ""


def _parse_feature(raw, index: int) -> Feature:
    if not _has_name(raw):
        raise MalformedGraph(f"Feature #{index + 1} must be a mapping with a name")
    name = str(raw["name"])
    return Feature(
        name=name,
        kind=str(raw.get("kind") or ""),
        data_dependency=_name_list(raw.get("data_dependency"),
                                   f"{name}.data_dependency", unique=True),
        functional_dependency=_name_list(raw.get("functional_dependency"),
                                         f"{name}.functional_dependency", unique=True),
    )


def from_dict(data: dict) -> ClassModel:
    """Build and validate a ClassModel from its plain-dict form."""
    if not isinstance(data, dict):
        raise MalformedGraph("Class model must be a mapping")

    features = [_parse_feature(raw, i)
                for i, raw in enumerate(data.get("features") or [])]
    by_name = {f.name: f for f in features}

    classes = []
    for i, raw in enumerate(data.get("classes") or []):
        if not _has_name(raw):
            raise MalformedGraph(f"Class #{i + 1} must be a mapping with a name")
        cls_name = str(raw["name"])
        members = []
        for fname in _name_list(raw.get("encapsulates"), f"{cls_name}.encapsulates"):
            if fname not in by_name:
                raise MalformedGraph(
                    f"Class {cls_name!r} encapsulates unknown feature {fname!r}"
                )
            members.append(by_name[fname])
        classes.append(DesignClass(name=cls_name, features=members))

    model = ClassModel(name=str(data.get("name") or "Class Model"),
                       features=features, classes=classes)
    model.validate()
    return model


def to_dict(model: ClassModel) -> dict:
    """Plain-dict form of a model, preserving feature and class order."""
    features = []
    for f in model.features:
        entry: dict = {"name": f.name, "kind": f.kind}
        if f.data_dependency:
            entry["data_dependency"] = list(f.data_dependency)
        if f.functional_dependency:
            entry["functional_dependency"] = list(f.functional_dependency)
        features.append(entry)

    data: dict = {"name": model.name, "features": features}
    if model.classes:
        data["classes"] = [
            {"name": c.name, "encapsulates": c.feature_names()}
            for c in model.classes
        ]
    return data


def load(path: Path) -> ClassModel:
    """Load and validate a class model from a YAML file.

    Raises FileNotFoundError if the file is missing and MalformedGraph if
    its content does not describe a valid model.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MalformedGraph(f"{path} is not valid YAML: {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedGraph(f"{path} is not UTF-8 text: {e}") from e

    model = from_dict(data)
    _log.info("Loaded %s: %d features, %d classes",
              path, len(model.features), len(model.classes))
    return model


def save(model: ClassModel, path: Path) -> None:
    """Write a class model to a YAML file."""
    path = Path(path)
    with open(path, "w") as f:
        yaml.dump(to_dict(model), f, default_flow_style=False,
                  sort_keys=False, allow_unicode=True)
    _log.info("Saved %s: %d classes", path, len(model.classes))
