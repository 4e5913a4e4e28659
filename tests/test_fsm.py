from pathfinder.app.fsm import RunState, RunStateMachine


def test_starts_idle():
    fsm = RunStateMachine()
    assert fsm.is_idle()
    assert fsm.get_state_description() == "Ready to edit"


def test_run_cycle():
    fsm = RunStateMachine()
    assert fsm.start() is True
    assert fsm.is_running()
    assert fsm.get_state_description() == "Search running"
    assert fsm.start() is False
    assert fsm.finish() is True
    assert fsm.is_idle()
    assert fsm.finish() is False


def test_entry_callbacks_receive_context():
    fsm = RunStateMachine()
    entered = []
    fsm.on_state_enter(RunState.RUNNING, lambda context: entered.append((RunState.RUNNING, context)))
    fsm.on_state_enter(RunState.IDLE, lambda context: entered.append((RunState.IDLE, context)))

    fsm.start({"run": 1})
    fsm.start({"run": 2})
    fsm.finish({"result": None})

    assert entered == [(RunState.RUNNING, {"run": 1}), (RunState.IDLE, {"result": None})]
