import pytest

from piksy.animation import Animation, Frame
from piksy.animation_manager import AnimationManager
from piksy.config import LoggerConfig, LogLevel
from piksy.logger import Logger


@pytest.fixture
def logger():
    return Logger(LoggerConfig(level=LogLevel.TRACE, enable_colors=False))


@pytest.fixture
def manager(logger):
    return AnimationManager(logger)


def test_default_animations_get_increasing_numbers(manager):
    manager.new_default_animation()
    manager.new_default_animation()
    assert list(manager.animations) == ["New Animation 1", "New Animation 2"]
    assert manager.current_animation.name == "New Animation 2"


def test_default_animation_reuses_lowest_free_number(manager):
    manager.new_default_animation()
    manager.new_default_animation()
    manager.remove_animation("New Animation 1")
    manager.new_default_animation()
    assert "New Animation 1" in manager.animations
    assert len(manager.animations) == 2


def test_add_makes_current(manager):
    animation = Animation("Walk")
    animation.frames.append(Frame(0, 0, 4, 4))
    manager.add_animation("Walk", animation)
    assert manager.current_animation is animation


def test_duplicate_name_gets_suffix(manager):
    manager.add_animation("Walk", Animation("Walk"))
    manager.add_animation("Walk", Animation("Walk"))
    assert set(manager.animations) == {"Walk", "Walk 1"}
    assert manager.current_animation is manager.animations["Walk 1"]


def test_remove_current_clears_current(manager):
    manager.add_animation("Run", Animation("Run"))
    manager.remove_animation("Run")
    assert manager.current_animation is None
    assert "Run" not in manager.animations


def test_remove_unknown_warns(manager, logger):
    manager.remove_animation("ghost")
    assert logger.messages()[-1][0] is LogLevel.WARN


def test_set_unknown_keeps_current(manager):
    manager.add_animation("Idle", Animation("Idle"))
    manager.set_current_animation("ghost")
    assert manager.current_animation.name == "Idle"


def test_rename_current(manager):
    manager.add_animation("Idle", Animation("Idle"))
    assert manager.update_animation_name("Rest") is True
    assert "Idle" not in manager.animations
    assert manager.current_animation is manager.animations["Rest"]
    assert manager.current_animation.name == "Rest"


def test_rename_to_taken_name_fails(manager):
    manager.add_animation("Idle", Animation("Idle"))
    manager.add_animation("Run", Animation("Run"))
    assert manager.update_animation_name("Idle") is False
    assert manager.current_animation.name == "Run"


def test_rename_without_current_fails(manager):
    assert manager.update_animation_name("Anything") is False


def test_clear(manager):
    manager.new_default_animation()
    manager.clear()
    assert len(manager.animations) == 0
    assert manager.current_animation is None


def test_animations_view_is_read_only(manager):
    manager.new_default_animation()
    with pytest.raises(TypeError):
        manager.animations["x"] = Animation("x")