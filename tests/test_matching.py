"""
Unit tests for nutrition matching and slot candidate ranking.
"""

import pytest

from services.matching import calculate_diff, get_nutrition_match_result
from services.slot_matching import build_slot_target, rank_candidates


TARGET = {'calories': 600, 'protein': 30, 'carbs': 50, 'fat': 15}


def candidate(id, name, calories, protein, carbs, fat):
    return {'id': id, 'name': name, 'calories': calories, 'protein': protein, 'carbs': carbs, 'fat': fat}


class TestCalculateDiff:

    def test_percent_of_target(self):
        assert calculate_diff(200, 186) == {'absolute': -14.0, 'percent': 7.0}

    def test_zero_target_zero_candidate(self):
        assert calculate_diff(0, 0)['percent'] == 0

    def test_zero_target_positive_candidate(self):
        assert calculate_diff(0, 12)['percent'] == 100


class TestGetNutritionMatchResult:

    def test_reflexive(self):
        result = get_nutrition_match_result(TARGET, TARGET)
        assert result['is_match'] is True
        assert result['score'] == 0
        assert all(diff['percent'] == 0 for diff in result['diffs'].values())

    def test_reflexive_for_any_positive_tolerance(self):
        tight = {'calories': 0.1, 'protein': 0.1, 'carbs': 0.1, 'fat': 0.1}
        assert get_nutrition_match_result(TARGET, TARGET, tight)['is_match'] is True

    def test_zero_calorie_target(self):
        target = dict(TARGET, calories=0)
        result = get_nutrition_match_result(target, dict(TARGET, calories=0))
        assert result['diffs']['calories']['percent'] == 0
        assert result['is_match'] is True

    def test_within_tolerance(self):
        result = get_nutrition_match_result(TARGET, {'calories': 660, 'protein': 33, 'carbs': 55, 'fat': 17})
        assert result['is_match'] is True
        assert result['diffs']['calories']['percent'] == 10.0
        assert result['diffs']['protein']['percent'] == 10.0
        assert result['diffs']['fat']['percent'] == 13.3

    def test_protein_is_weighted_in_score(self):
        result = get_nutrition_match_result(TARGET, {'calories': 660, 'protein': 33, 'carbs': 55, 'fat': 17})
        # 10 + 10 + 13.3 + 10 * 1.25
        assert result['score'] == pytest.approx(45.8)

    def test_protein_out_of_tolerance(self):
        result = get_nutrition_match_result(TARGET, dict(TARGET, protein=34))
        assert result['diffs']['protein']['percent'] == 13.3
        assert result['is_match'] is False

    def test_custom_tolerance(self):
        loose = {'calories': 15, 'protein': 15, 'carbs': 15, 'fat': 15}
        assert get_nutrition_match_result(TARGET, dict(TARGET, protein=34), loose)['is_match'] is True

    def test_partial_tolerance_uses_defaults(self):
        assert get_nutrition_match_result(TARGET, dict(TARGET, protein=34), {'protein': 15})['is_match'] is True
        # calories keep their default 15% while protein is tightened
        result = get_nutrition_match_result(TARGET, dict(TARGET, calories=660), {'protein': 5})
        assert result['is_match'] is True
        assert get_nutrition_match_result(TARGET, dict(TARGET, calories=660), {'calories': 5})['is_match'] is False

    def test_missing_candidate_values_count_as_zero(self):
        result = get_nutrition_match_result(TARGET, dict(TARGET, fat=None))
        assert result['diffs']['fat']['percent'] == 100
        assert result['is_match'] is False


class TestBuildSlotTarget:

    def test_rounded_target(self):
        target = build_slot_target([
            {
                'amount': 80,
                'unit': 'g',
                'nutrition_per_100g': {'calories': 370, 'protein': 13, 'carbs': 59, 'fat': 7},
            },
            {
                'amount': 1,
                'unit': 'TL',
                'nutrition_per_100g': {'calories': 300, 'carbs': 80},
            },
        ])
        assert target['calories'] == 311.0
        assert target['protein'] == 10.4
        assert target['carbs'] == 51.2
        assert target['fat'] == 5.6
        assert target['warning_count'] == 1
        assert target['has_estimated_conversions'] is True

    def test_empty_slot(self):
        target = build_slot_target([])
        assert target['calories'] == 0
        assert target['warning_count'] == 0


class TestRankCandidates:

    target = {'calories': 200, 'protein': 12, 'carbs': 20, 'fat': 4}

    def test_drops_non_matching(self):
        matches = rank_candidates(self.target, [
            candidate(1, 'Skyr Bowl', 186, 12.5, 21, 4.2),
            candidate(2, 'Protein Pudding', 186, 14, 21, 4.2),
        ])
        assert [m['id'] for m in matches] == [1]
        assert matches[0]['name'] == 'Skyr Bowl'
        assert matches[0]['calories_diff_percent'] == 7.0
        assert matches[0]['protein_diff_percent'] == 4.2
        assert matches[0]['carbs_diff_percent'] == 5.0
        assert matches[0]['fat_diff_percent'] == 5.0

    def test_best_score_first(self):
        matches = rank_candidates(self.target, [
            candidate(1, 'Close', 186, 12.5, 21, 4.2),
            candidate(2, 'Exact', 200, 12, 20, 4),
        ])
        assert [m['id'] for m in matches] == [2, 1]
        assert matches[0]['score'] == 0

    def test_limit_and_stable_ties(self):
        candidates = [candidate(i, f'Bowl {i}', 190, 12, 20, 4) for i in range(1, 5)]
        matches = rank_candidates(self.target, candidates, limit=2)
        assert [m['id'] for m in matches] == [1, 2]

    def test_no_candidates(self):
        assert rank_candidates(self.target, []) == []

    def test_never_more_than_limit(self):
        candidates = [candidate(i, f'Bowl {i}', 200, 12, 20, 4) for i in range(10)]
        assert len(rank_candidates(self.target, candidates)) == 5
