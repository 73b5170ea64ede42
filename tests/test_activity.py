import logging

from webex_poster.activity import ActivityLog


def test_entries_are_newest_first_and_formatted():
    ticks = iter(["09:00:00", "09:00:05"])
    log = ActivityLog(clock=lambda: next(ticks))

    log.info("first")
    log.failure("second")

    assert [entry.message for entry in log] == ["❌ second", "ℹ️ first"]
    assert log.lines() == ["09:00:05  ❌ second", "09:00:00  ℹ️ first"]
    assert log.latest.timestamp == "09:00:05"


def test_entries_mirror_to_logger(caplog):
    log = ActivityLog(clock=lambda: "10:00:00")

    with caplog.at_level(logging.INFO, logger="webex_poster.activity"):
        log.success("sent")
        log.failure("broken")

    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.WARNING]


def test_entries_copy_is_detached():
    log = ActivityLog()
    log.append("one")

    snapshot = log.entries
    log.append("two")

    assert len(snapshot) == 1
    assert len(log) == 2
