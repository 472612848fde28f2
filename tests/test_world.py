import pytest

from neonrpg.geometry import Vector
from neonrpg.story import Story
from neonrpg.world import (
    Scene,
    Zoom,
    factory_interaction,
    house_interaction,
    transition,
)


@pytest.mark.parametrize(
    "colour, scene, x, y",
    [
        ((255, 0, 0), Scene.BAR, 160.0, 360.0),
        ((254, 0, 0), Scene.CITY, 3289.0, 380.0),
        ((0, 254, 0), Scene.CITY, 4160.0, 2116.0),
        ((0, 0, 255), Scene.HOUSE, 447.25, 300.0),
        ((255, 255, 0), Scene.STORE, 250.0, 605.0),
        ((255, 254, 0), Scene.CITY, 1238.0, 339.0),
        ((0, 255, 254), Scene.CITY, 1974.0, 2173.0),
    ],
)
def test_open_doors(colour, scene, x, y):
    result = transition(colour, Story())
    assert (result.scene, result.x, result.y) == (scene, x, y)


def test_factory_exit_resets_factory():
    assert transition((0, 254, 0), Story()).reset_factory is True
    assert transition((255, 0, 0), Story()).reset_factory is False


def test_factory_door_needs_progress():
    assert transition((0, 255, 0), Story()) is None
    result = transition((0, 255, 0), Story(first_factory=2))
    assert (result.scene, result.x, result.y) == (Scene.FACTORY, 90.0, 406.0)


def test_house_door_needs_exit_flag():
    assert transition((0, 0, 254), Story()) is None
    result = transition((0, 0, 254), Story(exit_house=1))
    assert (result.scene, result.x, result.y) == (Scene.CITY, 3665.71, 878.22)


def test_manor_door_needs_history_and_moves_robot():
    assert transition((0, 255, 255), Story(history=2)) is None
    result = transition((0, 255, 255), Story(history=4))
    assert result.scene == Scene.MANOR
    assert result.robot == Vector(218.0, 400.0)
    assert result.position == Vector(218.0, 400.0)


def test_plain_colours_lead_nowhere():
    assert transition((255, 255, 255), Story()) is None
    assert transition(None, Story()) is None


def test_colour_with_alpha_is_accepted():
    assert transition((255, 0, 0, 255), Story()).scene == Scene.BAR


def test_house_mother_script_once():
    story = Story()
    assert house_interaction(400, 350, True, story) == 11
    assert story.exit_house == 1
    assert house_interaction(400, 350, True, story) is None


def test_house_mother_needs_key():
    story = Story()
    assert house_interaction(400, 350, False, story) is None
    assert story.exit_house == 0


def test_house_door_script():
    story = Story(first_factory=1)
    assert house_interaction(100, 350, True, story) == 4
    assert story.first_factory == 2
    assert story.show_prompt is True


def test_house_prompt_cleared_outside_door_zone():
    story = Story(show_prompt=True)
    house_interaction(400, 350, False, story)
    assert story.show_prompt is False


def test_house_far_away_does_nothing():
    story = Story(first_factory=1)
    assert house_interaction(10, 10, True, story) is None
    assert story.first_factory == 1
    assert story.show_prompt is False


def test_factory_script_once():
    story = Story()
    assert factory_interaction(4200, 2100, True, story) == 5
    assert story.first_factory == 1
    assert story.show_prompt is True
    assert factory_interaction(4200, 2100, True, story) is None


def test_factory_outside_zone():
    story = Story()
    assert factory_interaction(4200, 100, True, story) is None
    assert story.first_factory == 0
    assert story.show_prompt is False


def test_zoom_limits():
    zoom = Zoom()
    assert zoom.scroll(1) == 0.3
    assert zoom.scroll(-1) == 0.4
    assert zoom.scroll(-1) == 0.5
    assert zoom.scroll(-1) == 0.5
    assert zoom.scroll(1) == 0.4
    assert zoom.scroll(1) == 0.3
    assert zoom.scroll(1) == 0.3


def test_zoom_offsets_round_trip():
    zoom = Zoom()
    zoom.scroll(-1)
    assert zoom.gui_offset == Vector(95, 55)
    assert zoom.minimap_offset == Vector(98, 55)
    zoom.scroll(1)
    assert zoom.gui_offset == Vector(0, 0)
    assert zoom.minimap_offset == Vector(0, 0)


def test_zoom_ignores_other_deltas():
    zoom = Zoom()
    assert zoom.scroll(0) == 0.3
    assert zoom.gui_offset == Vector()