"""
Tests for techmatch.utils.logger.
"""

import json

import pytest
from loguru import logger

from techmatch.utils.config import AppSettings, LoggingSettings
from techmatch.utils.constants import AuditAction
from techmatch.utils.logger import audit_log, get_logger, redact, setup_logging


class TestRedact:
    def test_masks_credential_keys(self):
        data = {"apikey": "abc", "Authorization": "Bearer x", "job_id": "job-1"}
        assert redact(data) == {"apikey": "***", "Authorization": "***", "job_id": "job-1"}

    def test_nested(self):
        data = {"request": {"db_password": "hunter2", "skills": ["Go"]}}
        assert redact(data) == {"request": {"db_password": "***", "skills": ["Go"]}}

    def test_scalars_unchanged(self):
        assert redact("plain") == "plain"


class TestAuditSink:
    @pytest.fixture
    def file_logging(self, tmp_path):
        settings = AppSettings(
            logging=LoggingSettings(
                file_path=tmp_path / "techmatch.log",
                console_output=False,
                file_output=True,
            )
        )
        setup_logging(settings)
        yield tmp_path
        setup_logging()

    def test_audit_entries_are_json_lines(self, file_logging):
        audit_log(
            AuditAction.CANDIDATES_MATCHED,
            {"job_id": "job-1", "matches": [("p-1", 75)], "apikey": "secret"},
        )
        logger.complete()

        lines = (file_logging / "audit.log").read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["action"] == "candidates_matched"
        assert entry["details"] == {"job_id": "job-1", "matches": [["p-1", 75]], "apikey": "***"}

    def test_audit_entries_kept_out_of_application_log(self, file_logging):
        get_logger("tests").info("application message")
        audit_log("jobs_recommended", {"candidate_id": "p-1"})
        logger.complete()

        app_log = (file_logging / "techmatch.log").read_text(encoding="utf-8")
        assert "application message" in app_log
        assert "jobs_recommended" not in app_log
