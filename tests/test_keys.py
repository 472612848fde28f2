import pytest

from neonrpg.keys import Action, Key, Keybinds, key_name


def test_key_names_from_table():
    assert key_name(Key.A) == "A"
    assert key_name(Key.Pause) == "Pause"
    assert key_name(Key.LShift) == "LShift"


def test_unknown_codes():
    assert key_name(Key.Unknown) == "Unknown"
    assert key_name(-1) == "Unknown"
    assert key_name(9999) == "Unknown"


@pytest.mark.parametrize("key", [k for k in Key if k is not Key.Unknown])
def test_every_key_name_round_trips(key):
    assert Key[key_name(key)] is key


def test_default_bindings():
    binds = Keybinds()
    assert binds[Action.UP] is Key.Z
    assert binds[Action.DOWN] is Key.S
    assert binds[Action.LEFT] is Key.Q
    assert binds[Action.RIGHT] is Key.D
    assert binds[Action.SPRINT] is Key.LShift
    assert binds[Action.USE] is Key.E


def test_rebind_single_action():
    binds = Keybinds()
    binds.request(Action.UP)
    assert binds.handle_key(Key.W) == {Action.UP: "W"}
    assert binds[Action.UP] is Key.W
    assert binds.pending == set()


def test_one_press_rebinds_every_pending_action():
    binds = Keybinds()
    binds.request(Action.SPRINT)
    binds.request(Action.USE)
    changed = binds.handle_key(Key.Space)
    assert set(changed) == {Action.SPRINT, Action.USE}
    assert binds[Action.SPRINT] is Key.Space
    assert binds[Action.USE] is Key.Space


def test_key_without_request_changes_nothing():
    binds = Keybinds()
    assert binds.handle_key(Key.W) == {}
    assert binds.bindings == Keybinds().bindings


def test_invalid_code_raises():
    binds = Keybinds()
    binds.request(Action.LEFT)
    with pytest.raises(ValueError):
        binds.handle_key(9999)


def test_is_moving():
    binds = Keybinds()
    assert binds.is_moving({Key.Z})
    assert binds.is_moving({Key.D, Key.LShift})
    assert not binds.is_moving({Key.LShift})


def test_is_sprinting_needs_movement():
    binds = Keybinds()
    assert binds.is_sprinting({Key.LShift, Key.Z})
    assert not binds.is_sprinting({Key.LShift})
    assert not binds.is_sprinting({Key.Z})


def test_is_idle():
    binds = Keybinds()
    assert binds.is_idle(set())
    assert not binds.is_idle({Key.LShift})
    assert not binds.is_idle({Key.Q})


def test_rebound_key_replaces_old_one():
    binds = Keybinds()
    binds.request(Action.UP)
    binds.handle_key(Key.W)
    assert not binds.is_moving({Key.Z})
    assert binds.is_moving({Key.W})