"""Shared fixtures for cra_core tests."""

import pytest

from cra_core.model import ATTRIBUTE, METHOD, ClassModel, Feature


@pytest.fixture(autouse=True)
def cra_home(tmp_path, monkeypatch):
    """Keep logs and debug flags out of the real home directory."""
    home = tmp_path / "cra-home"
    monkeypatch.setenv("CRA_HOME", str(home))
    monkeypatch.delenv("CRA_DEBUG", raising=False)
    return home


@pytest.fixture
def two_pairs_model():
    """Two independent method/attribute pairs: m1 reads a1, m2 reads a2."""
    return ClassModel(name="pairs", features=[
        Feature("a1", ATTRIBUTE),
        Feature("m1", METHOD, data_dependency=("a1",)),
        Feature("a2", ATTRIBUTE),
        Feature("m2", METHOD, data_dependency=("a2",)),
    ])


@pytest.fixture
def two_pairs_yaml(tmp_path):
    path = tmp_path / "pairs.yaml"
    path.write_text(
        "name: pairs\n"
        "features:\n"
        "  - name: a1\n"
        "    kind: attribute\n"
        "  - name: m1\n"
        "    kind: method\n"
        "    data_dependency: [a1]\n"
        "  - name: a2\n"
        "    kind: attribute\n"
        "  - name: m2\n"
        "    kind: method\n"
        "    data_dependency: [a2]\n"
    )
    return path
