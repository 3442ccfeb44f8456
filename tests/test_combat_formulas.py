from __future__ import annotations

from shadowcombat.domain.combat_formulas import (
    DESPERATE_BASE_DAMAGE,
    embrace_damage,
    gain_shadow_points,
    get_action_cost,
    get_action_description,
    illuminate_damage,
    reflect_heal,
    reflect_heal_range,
    shadow_damage,
    shadow_defense,
)


def test_illuminate_damage_scales_with_level() -> None:
    assert illuminate_damage(1) == 4
    assert illuminate_damage(5) == 10
    assert illuminate_damage(20) == 33


def test_illuminate_damage_treats_level_below_one_as_one() -> None:
    assert illuminate_damage(0) == illuminate_damage(1)
    assert illuminate_damage(-3) == illuminate_damage(1)


def test_embrace_damage_is_half_sp_with_minimum_one() -> None:
    assert embrace_damage(0) == 1
    assert embrace_damage(1) == 1
    assert embrace_damage(5) == 2
    assert embrace_damage(10) == 5


def test_reflect_heal_bounds_follow_random_extremes() -> None:
    assert reflect_heal(5, lambda: 0.0) == 1
    assert reflect_heal(5, lambda: 0.999) == 5
    assert reflect_heal(0, lambda: 0.999) == 1
    assert reflect_heal_range(5) == (1, 5)


def test_shadow_defense_and_damage_use_half_of_light() -> None:
    assert shadow_defense(10) == 5
    assert shadow_defense(3) == 1
    assert shadow_damage(10) == 3
    assert shadow_damage(0) == 8
    assert shadow_damage(40) == 1


def test_shadow_damage_applies_status_modifiers() -> None:
    assert shadow_damage(10, damage_multiplier=2.0) == 6
    assert shadow_damage(10, damage_reduction=0.5) == 6
    assert shadow_damage(10, base_damage=DESPERATE_BASE_DAMAGE) == 5
    assert shadow_damage(40, damage_multiplier=0.0) == 1


def test_get_action_cost_lists_each_pool() -> None:
    assert get_action_cost("ILLUMINATE") == {"lp": 2}
    assert get_action_cost("REFLECT") == {"sp": 3}
    assert get_action_cost("ENDURE") == {}
    assert get_action_cost("ENDURE", endure_energy_cost=2) == {"energy": 2}
    assert get_action_cost("EMBRACE") == {"sp": 5}
    assert get_action_cost("DANCE") == {}


def test_get_action_description_names_illuminate_damage_for_level() -> None:
    assert "Deals 10 damage." in get_action_description("ILLUMINATE", level=5)
    assert "heals 1-5 health" in get_action_description("REFLECT", level=5)
    assert get_action_description("ENDURE")
    assert get_action_description("EMBRACE")
    assert get_action_description("DANCE") == ""


def test_gain_shadow_points_caps_without_lowering() -> None:
    assert gain_shadow_points(4, 2) == 6
    assert gain_shadow_points(9, 3) == 10
    assert gain_shadow_points(15, 1) == 15
