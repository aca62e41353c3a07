import json

from shared.logger import ShieldLogger


def test_json_log_file(tmp_path):
    log_path = tmp_path / "logs" / "passshield.log"
    log = ShieldLogger("test", log_file=log_path, json_logs=True, console_output=False)

    with log.operation("analyze"):
        log.info("Analysis finished", score=72.5, strength="good")

    for handler in log.underlying.handlers:
        handler.flush()

    entry = json.loads(log_path.read_text(encoding="utf-8").splitlines()[-1])
    assert entry["level"] == "INFO"
    assert entry["logger"] == "passshield.test"
    assert entry["message"] == "Analysis finished"
    assert entry["tool_name"] == "test"
    assert entry["operation"] == "analyze"
    assert entry["extra"] == {"score": 72.5, "strength": "good"}

    for handler in log.underlying.handlers:
        handler.close()


def test_level_filtering(tmp_path):
    log_path = tmp_path / "plain.log"
    log = ShieldLogger("filtered", log_level="WARNING", log_file=log_path, console_output=False)
    log.info("hidden")
    log.warning("shown")
    for handler in log.underlying.handlers:
        handler.flush()

    text = log_path.read_text(encoding="utf-8")
    assert "shown" in text
    assert "hidden" not in text

    for handler in log.underlying.handlers:
        handler.close()
