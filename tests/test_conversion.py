"""
Unit tests for the unit conversion service.
"""

import pytest

from constants import UNIT_CONFIG, WEIGHT_UNITS, VOLUME_UNITS, UNKNOWN_UNIT, USED_DEFAULT
from services.conversion import (
    resolve_override,
    convert_to_grams_with_metadata,
    convert_to_grams,
    scale_nutrition,
    calculate_nutrition_by_100g,
    calculate_nutrition_with_conversion,
)
from services.errors import UnsupportedUnitError


class TestResolveOverride:
    """Tests for the two-tier override lookup."""

    def test_ingredient_value_wins(self):
        assert resolve_override({'grams_per_piece': 60}, 'grams_per_piece') == (60, False)

    def test_missing_value_uses_default(self):
        assert resolve_override({'grams_per_piece': None}, 'grams_per_piece') == (100, True)

    def test_no_overrides_at_all(self):
        assert resolve_override(None, 'ml_density_g_per_ml') == (1, True)


class TestWeightUnits:
    """Weight units convert exactly and are never estimated."""

    @pytest.mark.parametrize('unit', sorted(WEIGHT_UNITS))
    def test_ratio_is_exact(self, unit):
        ratio = UNIT_CONFIG[unit][1]
        result = convert_to_grams_with_metadata(3.5, unit)
        assert result['grams'] == 3.5 * ratio
        assert result['is_estimated'] is False
        assert result['warnings'] == []

    def test_unit_token_is_normalized(self):
        result = convert_to_grams_with_metadata(1.5, '  KG ')
        assert result['grams'] == 1500

    def test_overrides_do_not_apply(self):
        result = convert_to_grams_with_metadata(200, 'g', {'ml_density_g_per_ml': 0.5})
        assert result['grams'] == 200


class TestVolumeUnits:
    """Volume units go through the ingredient density."""

    def test_liter_without_density_uses_default(self):
        result = convert_to_grams_with_metadata(1, 'l')
        assert result['grams'] == 1000
        assert result['is_estimated'] is True
        assert [w['code'] for w in result['warnings']] == [USED_DEFAULT]

    def test_density_override(self):
        result = convert_to_grams_with_metadata(100, 'ml', {'ml_density_g_per_ml': 0.92})
        assert result['grams'] == pytest.approx(92)
        assert result['is_estimated'] is False
        assert result['warnings'] == []

    def test_every_volume_unit_is_known(self):
        for unit in VOLUME_UNITS:
            assert convert_to_grams_with_metadata(1, unit)['grams'] is not None


class TestPieceUnits:
    """Piece-like units use the matching override or its default."""

    def test_tablespoon_default(self):
        result = convert_to_grams_with_metadata(1, 'EL')
        assert result['grams'] == 15
        assert result['is_estimated'] is True
        assert result['warnings'][0]['code'] == USED_DEFAULT

    def test_piece_override(self):
        result = convert_to_grams_with_metadata(2, 'Stück', {'grams_per_piece': 60})
        assert result['grams'] == 120
        assert result['is_estimated'] is False

    def test_aliases_share_override(self):
        overrides = {'grams_per_teaspoon': 4}
        assert convert_to_grams(1, 'TL', overrides) == 4
        assert convert_to_grams(1, 'tsp', overrides) == 4
        assert convert_to_grams(1, 'Teelöffel', overrides) == 4

    def test_hands_with_umlaut(self):
        assert convert_to_grams(2, ' Hände ') == 100

    def test_pinch_default(self):
        assert convert_to_grams(2, 'Prise') == 1


class TestUnknownUnit:
    """Unknown units are a warning in graceful mode and an error in strict mode."""

    def test_graceful(self):
        result = convert_to_grams_with_metadata(3, 'bucket')
        assert result['grams'] is None
        assert result['is_estimated'] is True
        assert result['warnings'][0]['code'] == UNKNOWN_UNIT
        assert 'bucket' in result['warnings'][0]['message']

    def test_strict_raises(self):
        with pytest.raises(UnsupportedUnitError) as excinfo:
            convert_to_grams(3, 'bucket')
        assert excinfo.value.unit == 'bucket'

    def test_empty_unit(self):
        assert convert_to_grams_with_metadata(1, '')['grams'] is None


class TestNutritionScaling:
    """Tests for per-100 g scaling helpers."""

    def test_missing_values_count_as_zero(self):
        scaled = scale_nutrition({'calories': 100, 'protein': None}, 250)
        assert scaled['calories'] == 250
        assert scaled['protein'] == 0
        assert scaled['salt'] == 0

    def test_strict_by_100g(self):
        result = calculate_nutrition_by_100g(2, 'kg', {'calories': 50, 'fat': 1})
        assert result['grams'] == 2000
        assert result['calories'] == 1000
        assert result['fat'] == 20

    def test_strict_by_100g_rejects_unknown_unit(self):
        with pytest.raises(UnsupportedUnitError):
            calculate_nutrition_by_100g(1, 'Becher', {'calories': 50})

    def test_graceful_unknown_unit_contributes_zero(self):
        result = calculate_nutrition_with_conversion(1, 'Becher', {'calories': 50})
        assert result['grams'] is None
        assert result['calories'] == 0
        assert result['is_estimated'] is True
        assert result['warnings'][0]['code'] == UNKNOWN_UNIT

    def test_graceful_uses_overrides(self):
        result = calculate_nutrition_with_conversion(1, 'Dose', {'calories': 100}, {'grams_per_can': 240})
        assert result['grams'] == 240
        assert result['calories'] == 240
        assert result['is_estimated'] is False
