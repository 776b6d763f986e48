import json
import logging

from task_manager.utils.logger import StructuredFormatter, setup_logging


def test_structured_formatter_renders_json_with_extras() -> None:
    record = logging.makeLogRecord({
        "name": "task_manager.mcp",
        "levelno": logging.INFO,
        "levelname": "INFO",
        "msg": "Invoked %s",
        "args": ("add-task",),
        "tool": "add-task",
    })
    data = json.loads(StructuredFormatter().format(record))
    assert data["message"] == "Invoked add-task"
    assert data["level"] == "INFO"
    assert data["service"] == "task_manager.mcp"
    assert data["tool"] == "add-task"


def test_setup_logging_installs_one_handler() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        ours = [h for h in root.handlers if getattr(h, "_task_manager", False)]
        assert len(ours) == 1
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(level)
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
