import logging

from studio.infrastructure.notify.logging import LoggingNotifier


class TestLoggingNotifier:
    def test_records_level_and_message(self, caplog) -> None:
        notifier = LoggingNotifier()
        with caplog.at_level(logging.INFO, logger="studio.infrastructure.notify.logging"):
            notifier.success("Saved")
            notifier.error("Failed")

        assert [(n.level, n.message) for n in notifier.history] == [("success", "Saved"), ("error", "Failed")]
        assert "Failed" in caplog.text

    def test_history_is_bounded(self) -> None:
        notifier = LoggingNotifier(max_history=3)
        for i in range(10):
            notifier.info(f"message {i}")

        assert [n.message for n in notifier.history] == ["message 7", "message 8", "message 9"]

    def test_drain_empties_history(self) -> None:
        notifier = LoggingNotifier()
        notifier.info("one")

        assert [n.message for n in notifier.drain()] == ["one"]
        assert len(notifier.history) == 0
        assert notifier.drain() == []
