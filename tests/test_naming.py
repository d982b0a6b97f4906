# ABOUTME: Tests for the chat log file naming policy
# ABOUTME: Validates the file name layout and collision handling

from datetime import datetime, timedelta, timezone
from pathlib import Path

from chatter.chat.naming import log_file_path, next_free_log_file_path

STAMP = datetime(2023, 5, 9, 17, 0, 5, tzinfo=timezone.utc)


class TestLogFilePath:
    """Tests for log_file_path."""

    def test_layout(self):
        path = log_file_path("test", Path("/var/chat"), STAMP)
        assert path == Path("/var/chat/chatter-test-20230509-170005.log")

    def test_directory_used_unmodified(self, tmp_path):
        directory = tmp_path / "some dir"
        path = log_file_path("all", directory, STAMP)
        assert path.parent == directory
        assert not directory.exists()

    def test_single_digit_fields_are_padded(self):
        stamp = datetime(2024, 1, 2, 3, 4, 5)
        assert log_file_path("fc", Path("."), stamp).name == "chatter-fc-20240102-030405.log"

    def test_one_second_apart_differ(self):
        first = log_file_path("test", Path("."), STAMP)
        second = log_file_path("test", Path("."), STAMP + timedelta(seconds=1))
        assert first != second


class TestNextFreeLogFilePath:
    """Tests for next_free_log_file_path."""

    def test_unused_name(self, tmp_path):
        path, start = next_free_log_file_path("test", tmp_path, STAMP)

        assert path == tmp_path / "chatter-test-20230509-170005.log"
        assert start == STAMP

    def test_skips_existing_files(self, tmp_path):
        (tmp_path / "chatter-test-20230509-170005.log").touch()
        (tmp_path / "chatter-test-20230509-170006.log").touch()

        path, start = next_free_log_file_path("test", tmp_path, STAMP)

        assert path == tmp_path / "chatter-test-20230509-170007.log"
        assert start == STAMP + timedelta(seconds=2)

    def test_other_base_names_do_not_collide(self, tmp_path):
        (tmp_path / "chatter-other-20230509-170005.log").touch()

        path, _ = next_free_log_file_path("test", tmp_path, STAMP)

        assert path.name == "chatter-test-20230509-170005.log"
