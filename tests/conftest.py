"""Shared pytest fixtures for PyPTable tests."""
import pytest
from pathlib import Path

from pyptable.core.catalog import ElementCatalog
from pyptable.core.elements import Block, Element, Phase
from pyptable.parsing.api import default_catalog


def make_record(**overrides):
    """Raw dataset row for hydrogen, with any field replaced by keyword."""
    record = {
        'atomic_number': 1,
        'symbol': 'H',
        'name': 'Hydrogen',
        'group': 1,
        'period': 1,
        'atomic_weight': 1.008,
        'protons': 1,
        'neutrons': 0,
        'electrons': 1,
        'melting_point': 14.01,
        'boiling_point': 20.28,
        'density': 0.00008988,
        'electronegativity': 2.20,
        'block': 's',
        'phase': 'gas',
    }
    record.update(overrides)
    return record


@pytest.fixture
def record_factory():
    """Factory for raw dataset rows based on hydrogen."""
    return make_record


@pytest.fixture
def hydrogen_record():
    """Raw dataset row for hydrogen."""
    return make_record()


@pytest.fixture
def hydrogen():
    """Hydrogen as an Element."""
    return Element(
        atomic_number=1, symbol='H', name='Hydrogen', group=1, period=1,
        atomic_weight=1.008, protons=1, neutrons=0, electrons=1,
        melting_point=14.01, boiling_point=20.28, density=0.00008988,
        electronegativity=2.20, block=Block.S, phase=Phase.GAS
    )


@pytest.fixture
def transition_metal_records():
    """Raw rows for scandium through chromium, deliberately out of order."""
    rows = [
        (24, 'Cr', 'Chromium', 6, 51.996, 28, 2180.0, 2944.0, 7.15, 1.66),
        (21, 'Sc', 'Scandium', 3, 44.956, 24, 1814.0, 3109.0, 2.989, 1.36),
        (23, 'V', 'Vanadium', 5, 50.942, 28, 2183.0, 3680.0, 6.11, 1.63),
        (22, 'Ti', 'Titanium', 4, 47.867, 26, 1941.0, 3560.0, 4.506, 1.54),
    ]
    return [
        make_record(atomic_number=z, symbol=sym, name=name, group=group, period=4,
                    atomic_weight=weight, protons=z, neutrons=neutrons, electrons=z,
                    melting_point=mp, boiling_point=bp, density=density,
                    electronegativity=en, block='d', phase='solid')
        for z, sym, name, group, weight, neutrons, mp, bp, density, en in rows
    ]


@pytest.fixture
def full_catalog():
    """The bundled 118-element catalog."""
    return default_catalog()


@pytest.fixture
def light_catalog(full_catalog):
    """Catalog of the first 18 elements, hydrogen through argon."""
    return ElementCatalog(full_catalog.all()[:18], name="light elements")


@pytest.fixture
def bundled_dataset_path():
    """Path to the bundled YAML dataset."""
    return Path(__file__).parent.parent / "src" / "pyptable" / "data" / "elements" / "elements.yaml"


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a temporary file and return its path."""
    def _write(content, name="dataset.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
