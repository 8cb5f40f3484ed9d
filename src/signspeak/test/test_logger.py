import logging

from signspeak.utils.logger import get_logger, set_level


def test_debug_level_reaches_loggers_created_later():
    early = get_logger("signspeak.early")
    try:
        set_level(logging.DEBUG)
        late = get_logger("signspeak.late")
        assert early.isEnabledFor(logging.DEBUG)
        assert late.isEnabledFor(logging.DEBUG)
    finally:
        set_level(logging.INFO)
    assert not get_logger("signspeak.late").isEnabledFor(logging.DEBUG)


def test_module_loggers_share_parent_handlers():
    get_logger("signspeak.a")
    get_logger("signspeak.b")
    assert logging.getLogger("signspeak.a").handlers == []
    assert len(logging.getLogger("signspeak").handlers) == 2
