"""Unit tests for the dataset file parsers."""

import pytest
from pyptable.core.catalog import ElementCatalog
from pyptable.core.exceptions import ValidationError
from pyptable.parsing.config.dataset_yaml_parser import ElementDatasetParser, YAMLFileParser

HYDROGEN_HELIUM = """\
name: first period
version: 1
source: handbook
elements:
  - {atomic_number: 1, symbol: "H", name: Hydrogen, group: 1, period: 1, atomic_weight: 1.008,
     protons: 1, neutrons: 0, electrons: 1, melting_point: 14.01, boiling_point: 20.28,
     density: 0.00008988, electronegativity: 2.2, block: s, phase: gas}
  - {atomic_number: 2, symbol: "He", name: Helium, group: 18, period: 1, atomic_weight: 4.0026,
     protons: 2, neutrons: 2, electrons: 2, melting_point: 1.7976931348623157e+308,
     boiling_point: 4.22, density: 0.0001785, electronegativity: null, block: s, phase: gas}
"""


class TestYAMLFileParser:
    """Test cases for low-level YAML loading."""
    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported as such."""
        with pytest.raises(FileNotFoundError, match="Dataset file not found"):
            YAMLFileParser(tmp_path / "missing.yaml")

    def test_unsupported_extension(self, write_yaml):
        """Test that unknown file types are rejected before reading."""
        path = write_yaml("elements: []", name="dataset.json")
        with pytest.raises(ValueError, match="Unsupported file type"):
            YAMLFileParser(path)

    def test_directory_rejected(self, tmp_path):
        """Test that a directory is not accepted as a dataset."""
        folder = tmp_path / "data.yaml"
        folder.mkdir()
        with pytest.raises(ValueError, match="not a file"):
            YAMLFileParser(folder)

    def test_duplicate_keys(self, write_yaml):
        """Test that duplicate mapping keys are an error."""
        path = write_yaml("name: a\nname: b\nelements: []\n")
        with pytest.raises(ValueError, match="Duplicate key"):
            YAMLFileParser(path)

    def test_syntax_error(self, write_yaml):
        """Test that malformed YAML is reported as a ValueError."""
        path = write_yaml("name: [unclosed\nelements: {\n")
        with pytest.raises(ValueError):
            YAMLFileParser(path)


class TestElementDatasetParser:
    """Test cases for element dataset structure and catalog creation."""
    def test_create_catalog(self, write_yaml):
        """Test building a catalog from a small YAML dataset."""
        parser = ElementDatasetParser(write_yaml(HYDROGEN_HELIUM))
        catalog = parser.create_catalog()
        assert isinstance(catalog, ElementCatalog)
        assert catalog.symbols == ('H', 'He')
        assert catalog.name == "first period"
        assert catalog.version == "1"
        assert catalog.by_symbol('He').melting_point is None
        assert catalog.by_symbol('He').electronegativity is None

    def test_metadata_and_records(self, write_yaml):
        """Test the raw accessors."""
        parser = ElementDatasetParser(write_yaml(HYDROGEN_HELIUM))
        assert parser.metadata == {'name': 'first period', 'version': '1', 'source': 'handbook'}
        assert len(parser.records) == 2

    def test_summarize(self, write_yaml):
        """Test the dataset summary."""
        info = ElementDatasetParser(write_yaml(HYDROGEN_HELIUM)).summarize()
        assert info['total_records'] == 2
        assert info['atomic_number_range'] == (1, 2)
        assert info['blocks'] == {'S': 2}
        assert info['phases'] == {'GAS': 2}

    def test_root_must_be_mapping(self, write_yaml):
        """Test that a bare list is not a dataset."""
        with pytest.raises(ValidationError, match="mapping"):
            ElementDatasetParser(write_yaml("- 1\n- 2\n"))

    def test_unknown_top_level_key(self, write_yaml):
        """Test that misspelled top-level keys are reported with a suggestion."""
        with pytest.raises(ValidationError, match="did you mean 'elements'"):
            ElementDatasetParser(write_yaml("name: x\nelemnts: []\n"))

    def test_missing_elements(self, write_yaml):
        """Test that the elements section is required."""
        with pytest.raises(ValidationError, match="Missing required field: elements"):
            ElementDatasetParser(write_yaml("name: x\n"))

    def test_elements_must_be_list(self, write_yaml):
        """Test that the elements section is a list."""
        with pytest.raises(ValidationError, match="must be a list"):
            ElementDatasetParser(write_yaml("elements:\n  H: 1\n"))

    def test_empty_elements(self, write_yaml):
        """Test that an empty dataset is rejected."""
        with pytest.raises(ValidationError, match="empty"):
            ElementDatasetParser(write_yaml("elements: []\n"))

    def test_invalid_record_fails_catalog(self, write_yaml):
        """Test that a bad record is reported when the catalog is built."""
        content = HYDROGEN_HELIUM.replace("electrons: 2,", "electrons: 3,")
        parser = ElementDatasetParser(write_yaml(content))
        with pytest.raises(ValidationError, match="electrons"):
            parser.create_catalog()

    def test_csv_dataset_named_after_file(self, tmp_path, hydrogen_record):
        """Test that tabular datasets take their name from the file."""
        path = tmp_path / "hydrogen_only.csv"
        path.write_text(",".join(hydrogen_record) + "\n"
                        + ",".join(str(v) for v in hydrogen_record.values()) + "\n", encoding="utf-8")
        parser = ElementDatasetParser(path)
        assert parser.metadata['name'] == "hydrogen_only"
        assert parser.create_catalog().by_atomic_number(1).symbol == 'H'
