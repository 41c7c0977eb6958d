from hellkit.common import EngineMode, ViewportMode
from hellkit.engine_state import EngineState


def test_next_player_wraps_with_two_players():
    state = EngineState()
    assert state.next_player() == 1
    assert state.current_player == 1
    assert state.next_player() == 0
    assert state.current_player == 0


def test_next_player_visits_every_player_once_per_cycle():
    state = EngineState(player_count=3)
    seen = [state.next_player() for _ in range(3)]
    assert sorted(seen) == [0, 1, 2]
    assert state.current_player == 0


def test_next_player_prints_current_player(capsys):
    state = EngineState()
    state.next_player()
    assert capsys.readouterr().out == "Current player is: 1\n"


def test_next_viewport_mode_cycles():
    state = EngineState()
    assert state.next_viewport_mode() is ViewportMode.SPLITSCREEN
    assert state.next_viewport_mode() is ViewportMode.FULLSCREEN
    assert state.viewport_mode is ViewportMode.FULLSCREEN


def test_next_viewport_mode_reports_player(capsys):
    state = EngineState(current_player=1)
    state.next_viewport_mode()
    assert capsys.readouterr().out == "Current player: 1\n"


def test_states_do_not_share_mouse_ray():
    first = EngineState(engine_mode=EngineMode.EDITOR)
    second = EngineState()
    first.mouse_ray[1] = 1.0
    assert second.mouse_ray[1] == 0.0
    assert first.engine_mode is EngineMode.EDITOR
    assert second.engine_mode is EngineMode.GAME