import pytest

from dropflow.dashboard import Dashboard, Inlet


def _recording_dashboard():
    events = {"inlets": [], "auto": [], "neck": [], "direction": []}
    board = Dashboard(
        on_inlet_requests=events["inlets"].append,
        on_auto_catch_requests=events["auto"].append,
        on_use_neck_requests=events["neck"].append,
        on_neck_direction_requests=events["direction"].append,
    )
    return board, events


INFO = [[1, 2, 0, 100], [3, 4, 1, 50]]


def test_inlet_label_and_clamp():
    inlet = Inlet(pump_id=1, transducer_id=2, limit=100)
    assert inlet.label == "P1 T2"
    assert inlet.clamp(250) == 100
    assert inlet.clamp(-3) == 0


def test_reset_inlets_reports_zeros():
    board, events = _recording_dashboard()
    board.reset_inlets(INFO)
    assert [i.limit for i in board.inlets] == [100, 50]
    assert [i.label for i in board.inlets] == ["P1 T2", "P3 T4"]
    assert events["inlets"] == [[0.0, 0.0]]


def test_set_inlet_clamps_and_reports():
    board, events = _recording_dashboard()
    board.reset_inlets(INFO)
    board.set_inlet(1, 80)
    assert board.inlet_values == [0.0, 50.0]
    assert events["inlets"][-1] == [0.0, 50.0]


def test_set_inlet_without_change_is_silent():
    board, events = _recording_dashboard()
    board.reset_inlets(INFO)
    board.set_inlet(0, 0)
    assert len(events["inlets"]) == 1


def test_set_inlet_out_of_range():
    board, _ = _recording_dashboard()
    board.reset_inlets(INFO)
    with pytest.raises(IndexError):
        board.set_inlet(2, 10)


def test_regurgitate_uses_only_available_values():
    board, _ = _recording_dashboard()
    board.reset_inlets(INFO)
    board.regurgitate_inlets([30.7])
    assert board.inlet_values == [30.0, 0.0]
    board.regurgitate_inlets([10, 20, 99])
    assert board.inlet_values == [10.0, 20.0]


def test_zero_inlets():
    board, events = _recording_dashboard()
    board.reset_inlets(INFO)
    board.regurgitate_inlets([10, 20])
    board.zero_inlets()
    assert board.inlet_values == [0.0, 0.0]
    assert events["inlets"][-1] == [0.0, 0.0]


def test_reset_check_groups_report_unchecked():
    board, events = _recording_dashboard()
    board.reset_auto_catch(3)
    board.reset_use_neck(2)
    board.reset_neck_direction(1)
    assert events["auto"] == [[False, False, False]]
    assert events["neck"] == [[False, False]]
    assert events["direction"] == [[False]]


def test_check_box_clicks_report_states():
    board, events = _recording_dashboard()
    board.reset_auto_catch(3)
    board.set_auto_catch(1, True)
    assert board.auto_catch == [False, True, False]
    assert events["auto"][-1] == [False, True, False]
    board.reset_use_neck(2)
    board.set_use_neck(0, True)
    assert events["neck"][-1] == [True, False]
    board.reset_neck_direction(2)
    board.set_neck_direction(1, True)
    assert board.neck_direction == [False, True]


def test_reset_clears_previous_checks():
    board, _ = _recording_dashboard()
    board.reset_auto_catch(2)
    board.set_auto_catch(0, True)
    board.reset_auto_catch(2)
    assert board.auto_catch == [False, False]


def test_check_box_errors():
    board, _ = _recording_dashboard()
    board.reset_use_neck(1)
    with pytest.raises(IndexError):
        board.set_use_neck(1, True)
    with pytest.raises(ValueError):
        board.reset_neck_direction(-1)


def test_dashboard_without_callbacks():
    board = Dashboard()
    board.reset_inlets(INFO)
    board.set_inlet(0, 5)
    board.reset_auto_catch(1)
    board.set_auto_catch(0, True)
    assert board.inlet_values == [5.0, 0.0]
    assert board.auto_catch == [True]