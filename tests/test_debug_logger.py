import json

from minebot.lib.s7_debug import DebugLogger, get_logger, log_action, log_cycle, log_termination


def test_debug_logger_writes_jsonl_and_session(tmp_path):
    logger = DebugLogger(log_dir=str(tmp_path))
    logger.log_cycle(
        iteration=1,
        duration=0.01,
        cell_count=9,
        eligible_count=8,
        clued_count=1,
        decision="reveal",
        position=(0, 0),
        risk=0.0,
    )
    logger.log_action(1, (0, 0), 0.0)
    logger.log_action(2, (1, 0), 0.5, success=False, error="ActionRejected")
    logger.log_termination({"reason": "surface_error"})

    actions_file = tmp_path / f"actions_{logger.session_id}.jsonl"
    rows = [json.loads(line) for line in actions_file.read_text(encoding="utf-8").splitlines()]
    assert [r["success"] for r in rows] == [True, False]
    assert rows[1]["error"] == "ActionRejected"

    session_path = logger.save_session()
    with open(session_path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["total_cycles"] == 1
    assert data["total_actions"] == 2
    assert data["termination"]["reason"] == "surface_error"

    summary = logger.get_summary()
    assert summary["failed_actions"] == 1
    assert summary["zero_risk_actions"] == 1
    assert summary["mean_risk"] == 0.25
    assert summary["reason"] == "surface_error"


def test_get_logger_reuses_instance_per_directory(tmp_path):
    first = get_logger(str(tmp_path / "a"))
    assert get_logger() is first
    assert get_logger(str(tmp_path / "a")) is first
    assert get_logger(str(tmp_path / "b")) is not first


def test_reset_clears_history(tmp_path):
    logger = DebugLogger(log_dir=str(tmp_path))
    logger.log_action(1, (0, 0), 0.5)
    logger.log_termination({"reason": "exhausted"})
    old_id = logger.session_id

    logger.reset()

    assert logger.session_id != old_id
    assert logger.get_summary()["actions"] == 0
    assert logger.termination is None


def test_functional_api_goes_through_global_logger(tmp_path):
    logger = get_logger(str(tmp_path / "global"))
    logger.reset()

    log_cycle(1, 0.01, 4, 3, 1, "reveal", position=(1, 0), risk=0.5)
    log_action(1, (1, 0), 0.5)
    log_termination({"reason": "exhausted"})

    summary = logger.get_summary()
    assert summary["cycles"] == 1
    assert summary["actions"] == 1
    assert summary["reason"] == "exhausted"
    assert (tmp_path / "global" / f"cycles_{logger.session_id}.jsonl").exists()
