import dataclasses

import pytest

from difficulty import DIFFICULTIES, PROFILES, UnknownDifficultyError, get_profile


def test_lookup_is_case_insensitive():
    assert get_profile("Hard") is PROFILES["hard"]
    assert get_profile(" medium ").name == "medium"


def test_unknown_name_fails_closed():
    with pytest.raises(UnknownDifficultyError) as exc:
        get_profile("nightmare")
    assert isinstance(exc.value, ValueError)
    assert exc.value.name == "nightmare"


def test_presets_get_harder():
    easy, medium, hard = (PROFILES[n] for n in DIFFICULTIES)
    assert easy.game_speed < medium.game_speed < hard.game_speed
    assert easy.gravity < medium.gravity < hard.gravity
    assert easy.obstacle_frequency > medium.obstacle_frequency > hard.obstacle_frequency
    assert easy.obstacle_height < medium.obstacle_height < hard.obstacle_height
    assert not easy.allow_multiple_obstacles
    assert medium.allow_multiple_obstacles and hard.allow_multiple_obstacles
    assert all(p.float_impulse < 0 for p in PROFILES.values())


def test_profile_is_read_only():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PROFILES["easy"].gravity = 2.0


def test_max_speed():
    assert PROFILES["easy"].max_speed == 4
