"""Tests for logger setup."""

from structlog.testing import capture_logs

from jobboard.core.logging import configure_logging, get_logger


class TestGetLogger:
    """Tests for per-module loggers."""

    def test_emits_with_module_name(self) -> None:
        logger = get_logger("jobboard.example")

        with capture_logs() as logs:
            logger.info("Job created", job_id="j-1")

        [entry] = logs
        assert entry["event"] == "Job created"
        assert entry["job_id"] == "j-1"
        assert entry["logger_name"] == "jobboard.example"
        assert entry["log_level"] == "info"

    def test_created_before_configuration(self) -> None:
        logger = get_logger("jobboard.early")
        configure_logging()

        with capture_logs() as logs:
            logger.warning("Cross-tenant write blocked")

        assert logs[0]["logger_name"] == "jobboard.early"
