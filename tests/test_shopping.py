"""
Tests for the weekly shopping list.
"""

import pytest

from models import db, UserShoppingList, UserShoppingListItem
from services import (
    NotFoundError,
    ValidationError,
    create_enrollment,
    create_recipe,
    resolve_shopping_category,
    add_recipe_to_shopping_list,
    add_slot_to_shopping_list,
    add_manual_item,
    cleanup_shopping_list,
    toggle_item,
    delete_item,
)

USER_ID = 42


@pytest.fixture
def enrollment(diet_path, start_date):
    return create_enrollment(USER_ID, diet_path['path'].id, start_date, [])


@pytest.fixture
def porridge(oats, milk):
    return create_recipe('Porridge', ingredients=[
        {'ingredient_id': oats.id, 'amount': 80, 'unit': 'g'},
        {'ingredient_id': milk.id, 'amount': 200, 'unit': 'ml'},
    ])


def items_by_label(shopping_list):
    return {item.label: item for item in shopping_list.items}


class TestResolveShoppingCategory:

    @pytest.mark.parametrize('label, category', [
        ('Haferflocken', 'grains'),
        ('Käse gerieben', 'dairy'),
        ('Hähnchenbrust', 'meat'),
        ('Apfel', 'fruit'),
        ('  Cherry TOMATEN ', 'produce'),
        ('Mineralwasser', 'drinks'),
        ('Spülmittel', 'other'),
        ('', 'other'),
    ])
    def test_keywords(self, label, category):
        assert resolve_shopping_category(label) == category


class TestAddRecipeToShoppingList:

    def test_creates_lines(self, enrollment, porridge):
        shopping_list = add_recipe_to_shopping_list(enrollment.id, 1, porridge.id, user_id=USER_ID)
        items = items_by_label(shopping_list)

        assert shopping_list.user_id == USER_ID
        assert set(items) == {'Haferflocken', 'Milch'}
        assert items['Haferflocken'].amount == 80
        assert items['Haferflocken'].category == 'grains'
        assert items['Milch'].unit == 'ml'
        assert items['Milch'].source_recipe_id == porridge.id

    def test_importing_twice_sums_amounts(self, enrollment, porridge):
        add_recipe_to_shopping_list(enrollment.id, 1, porridge.id)
        shopping_list = add_recipe_to_shopping_list(enrollment.id, 1, porridge.id)

        assert UserShoppingList.query.filter_by(enrollment_id=enrollment.id, week=1).count() == 1
        assert len(shopping_list.items) == 2
        items = items_by_label(shopping_list)
        assert items['Haferflocken'].amount == 160
        assert items['Milch'].amount == 400

    def test_weeks_are_separate(self, enrollment, porridge):
        add_recipe_to_shopping_list(enrollment.id, 1, porridge.id)
        week_2 = add_recipe_to_shopping_list(enrollment.id, 2, porridge.id)
        assert items_by_label(week_2)['Haferflocken'].amount == 80

    def test_different_units_stay_separate(self, enrollment, porridge, oats):
        spoonful = create_recipe('Topping', ingredients=[
            {'ingredient_id': oats.id, 'amount': 2, 'unit': 'EL'},
        ])
        add_recipe_to_shopping_list(enrollment.id, 1, porridge.id)
        shopping_list = add_recipe_to_shopping_list(enrollment.id, 1, spoonful.id)

        oat_lines = [item for item in shopping_list.items if item.ingredient_id == oats.id]
        assert sorted((item.amount, item.unit) for item in oat_lines) == [(2, 'EL'), (80, 'g')]

    def test_week_outside_path(self, enrollment, porridge):
        with pytest.raises(ValidationError):
            add_recipe_to_shopping_list(enrollment.id, 0, porridge.id)
        with pytest.raises(ValidationError):
            add_recipe_to_shopping_list(enrollment.id, 9, porridge.id)

    def test_recipe_without_ingredients(self, enrollment):
        empty = create_recipe('Luft')
        with pytest.raises(ValidationError):
            add_recipe_to_shopping_list(enrollment.id, 1, empty.id)
        assert UserShoppingList.query.count() == 0

    def test_missing_recipe(self, enrollment):
        with pytest.raises(NotFoundError):
            add_recipe_to_shopping_list(enrollment.id, 1, 9999)

    def test_missing_enrollment(self, porridge):
        with pytest.raises(NotFoundError):
            add_recipe_to_shopping_list(9999, 1, porridge.id)


class TestAddSlotToShoppingList:

    def test_adds_slot_ingredients(self, enrollment, breakfast_plan, porridge):
        add_recipe_to_shopping_list(enrollment.id, 1, porridge.id)
        shopping_list = add_slot_to_shopping_list(enrollment.id, 1, breakfast_plan.id, 'Breakfast')

        items = items_by_label(shopping_list)
        assert items['Haferflocken'].amount == 160
        assert items['Milch'].amount == 400

    def test_empty_slot(self, enrollment, breakfast_plan):
        with pytest.raises(ValidationError):
            add_slot_to_shopping_list(enrollment.id, 1, breakfast_plan.id, 'Dinner')


class TestManualItems:

    def test_manual_items_are_not_merged_on_insert(self, enrollment):
        first = add_manual_item(enrollment.id, 1, 'Eier', amount=6, unit='Stk')
        second = add_manual_item(enrollment.id, 1, 'Eier', amount=4, unit='Stk')

        assert first.id != second.id
        assert first.dedupe_key.startswith('manual:')
        assert first.dedupe_key != second.dedupe_key
        assert first.category == 'meat'

    def test_rejects_empty_label(self, enrollment):
        with pytest.raises(ValidationError):
            add_manual_item(enrollment.id, 1, '   ')

    def test_rejects_non_positive_amount(self, enrollment):
        with pytest.raises(ValidationError):
            add_manual_item(enrollment.id, 1, 'Brot', amount=0)

    def test_rejects_infinite_amount(self, enrollment):
        with pytest.raises(ValidationError):
            add_manual_item(enrollment.id, 1, 'Brot', amount=float('inf'))


class TestCleanupShoppingList:

    def test_merges_same_label_and_unit(self, enrollment):
        first = add_manual_item(enrollment.id, 1, 'Eier', amount=6, unit='Stk')
        add_manual_item(enrollment.id, 1, '  eier ', amount=4, unit='stk')
        add_manual_item(enrollment.id, 1, 'Eier', amount=1, unit='Packung')

        assert cleanup_shopping_list(enrollment.id, 1) == 1

        kept = db.session.get(UserShoppingListItem, first.id)
        assert kept.amount == 10
        assert UserShoppingListItem.query.count() == 2

    def test_unknown_amount_wins(self, enrollment):
        first = add_manual_item(enrollment.id, 1, 'Salz', amount=1, unit='Packung')
        add_manual_item(enrollment.id, 1, 'Salz', unit='Packung')

        cleanup_shopping_list(enrollment.id, 1)
        assert db.session.get(UserShoppingListItem, first.id).amount is None

    def test_checked_if_any_checked(self, enrollment):
        first = add_manual_item(enrollment.id, 1, 'Müsli', amount=1)
        second = add_manual_item(enrollment.id, 1, 'Muesli', amount=1)
        toggle_item(second.id)

        cleanup_shopping_list(enrollment.id, 1)
        kept = db.session.get(UserShoppingListItem, first.id)
        assert kept.is_checked is True
        assert kept.amount == 2

    def test_unchecked_item_is_kept(self, enrollment):
        checked = add_manual_item(enrollment.id, 1, 'Eier', amount=6, unit='Stk')
        toggle_item(checked.id)
        unchecked = add_manual_item(enrollment.id, 1, 'Eier', amount=4, unit='Stk')

        assert cleanup_shopping_list(enrollment.id, 1) == 1
        assert db.session.get(UserShoppingListItem, checked.id) is None
        kept = db.session.get(UserShoppingListItem, unchecked.id)
        assert kept.amount == 10
        assert kept.is_checked is True

    def test_missing_list(self, enrollment):
        assert cleanup_shopping_list(enrollment.id, 3) == 0


class TestItemActions:

    def test_toggle(self, enrollment):
        item = add_manual_item(enrollment.id, 1, 'Brot')
        assert toggle_item(item.id).is_checked is True
        assert toggle_item(item.id).is_checked is False

    def test_delete(self, enrollment):
        item = add_manual_item(enrollment.id, 1, 'Brot')
        delete_item(item.id)
        assert db.session.get(UserShoppingListItem, item.id) is None

    def test_missing_item(self, session):
        with pytest.raises(NotFoundError):
            toggle_item(9999)
        with pytest.raises(NotFoundError):
            delete_item(9999)
