"""Unit tests for Element, Block and Phase."""

import dataclasses
import sys

import pytest
from pyptable.core.elements import Block, Element, Phase, element_problems
from pyptable.core.exceptions import ValidationError


def _hydrogen(**overrides):
    values = dict(
        atomic_number=1, symbol='H', name='Hydrogen', group=1, period=1,
        atomic_weight=1.008, protons=1, neutrons=0, electrons=1,
        melting_point=14.01, boiling_point=20.28, density=0.00008988,
        electronegativity=2.20, block=Block.S, phase=Phase.GAS
    )
    values.update(overrides)
    return Element(**values)


class TestElement:
    """Test cases for the Element record."""
    def test_element_creation_valid(self, hydrogen):
        """Test valid element creation."""
        assert hydrogen.atomic_number == 1
        assert hydrogen.symbol == 'H'
        assert hydrogen.name == 'Hydrogen'
        assert hydrogen.block is Block.S
        assert hydrogen.phase is Phase.GAS
        assert hydrogen.mass_number == 1

    def test_element_is_immutable(self, hydrogen):
        """Test that element fields cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            hydrogen.name = 'Protium'

    def test_element_equality_and_hash(self, hydrogen):
        """Test that equal records compare and hash equal."""
        assert _hydrogen() == hydrogen
        assert hash(_hydrogen()) == hash(hydrogen)

    def test_unknown_values_are_none(self):
        """Test that unknown physical values are stored as None."""
        helium = _hydrogen(atomic_number=2, symbol='He', name='Helium', group=18,
                           protons=2, neutrons=2, electrons=2, melting_point=None,
                           electronegativity=None)
        assert helium.melting_point is None
        assert not helium.has_melting_point
        assert not helium.has_electronegativity
        assert helium.has_boiling_point

    def test_sentinel_value_rejected(self):
        """Test that the legacy maximum-float marker cannot be stored directly."""
        with pytest.raises(ValidationError, match="unknown-value marker"):
            _hydrogen(melting_point=sys.float_info.max)

    def test_protons_must_equal_atomic_number(self):
        """Test proton count invariant."""
        with pytest.raises(ValidationError, match="protons"):
            _hydrogen(protons=2, electrons=2)

    def test_electrons_must_equal_protons(self):
        """Test neutral atom invariant."""
        with pytest.raises(ValidationError, match="electrons"):
            _hydrogen(electrons=0)

    def test_group_out_of_range(self):
        """Test that groups outside 1..18 are rejected."""
        with pytest.raises(ValidationError, match="group"):
            _hydrogen(group=19)

    def test_missing_group_only_for_f_block(self):
        """Test that only f-block elements may omit their group."""
        with pytest.raises(ValidationError, match="f-block"):
            _hydrogen(group=None)
        cerium = _hydrogen(atomic_number=58, symbol='Ce', name='Cerium', group=None, period=6,
                           atomic_weight=140.12, protons=58, neutrons=82, electrons=58,
                           block=Block.F, phase=Phase.SOLID)
        assert cerium.group is None

    def test_invalid_symbol(self):
        """Test symbol format validation."""
        for symbol in ('h', 'HE', 'Abc', ''):
            with pytest.raises(ValidationError, match="symbol"):
                _hydrogen(symbol=symbol)

    def test_non_positive_weight(self):
        """Test that atomic weight must be positive."""
        with pytest.raises(ValidationError, match="atomic_weight must be positive"):
            _hydrogen(atomic_weight=0.0)

    def test_boolean_is_not_an_integer(self):
        """Test that booleans are not accepted as integer fields."""
        with pytest.raises(ValidationError, match="period must be an integer"):
            _hydrogen(period=True)

    def test_all_problems_reported_together(self):
        """Test that several problems are collected in one error."""
        with pytest.raises(ValidationError) as exc_info:
            _hydrogen(neutrons=-1, group=25)
        assert len(exc_info.value.errors) == 2

    def test_element_problems_empty_for_valid_record(self, hydrogen):
        """Test that a valid element reports no problems."""
        assert element_problems(hydrogen) == []

    def test_as_dict(self, hydrogen):
        """Test plain mapping export."""
        record = hydrogen.as_dict()
        assert record['symbol'] == 'H'
        assert record['block'] == 'S'
        assert record['phase'] == 'GAS'
        assert len(record) == 15

    def test_str(self, hydrogen):
        """Test human-readable representation."""
        assert str(hydrogen) == "Hydrogen (H, Z=1)"


class TestBlockAndPhase:
    """Test cases for the classification enums."""
    @pytest.mark.parametrize("text", ["d", "D", "D_BLOCK", "d-block", " d "])
    def test_block_parse_variants(self, text):
        """Test the accepted spellings of a block."""
        assert Block.parse(text) is Block.D

    def test_block_parse_member(self):
        """Test that members parse to themselves."""
        assert Block.parse(Block.F) is Block.F

    def test_block_parse_invalid(self):
        """Test rejected block values."""
        with pytest.raises(ValueError, match="Invalid Block"):
            Block.parse("g")
        with pytest.raises(ValueError):
            Block.parse(3)

    @pytest.mark.parametrize("text,expected", [
        ("solid", Phase.SOLID), ("LIQUID", Phase.LIQUID), ("Gas", Phase.GAS)
    ])
    def test_phase_parse(self, text, expected):
        """Test phase parsing."""
        assert Phase.parse(text) is expected

    def test_phase_has_no_plasma(self):
        """Test that only standard-condition phases exist."""
        assert [p.name for p in Phase] == ['SOLID', 'LIQUID', 'GAS']
        with pytest.raises(ValueError):
            Phase.parse("plasma")
