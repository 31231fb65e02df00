"""Unit tests for FileVoteStateRepository."""

from freemap.persistence.repository import FileVoteStateRepository


class TestFileVoteStateRepository:
    """Tests for file-backed vote state storage."""

    def test_load_missing_key_returns_none(self, tmp_path):
        repo = FileVoteStateRepository(tmp_path / "state")

        assert repo.load("freemap.placeVotes") is None

    def test_save_then_load_returns_blob(self, tmp_path):
        """Saved blob is read back verbatim, creating the directory on demand."""
        # Arrange
        directory = tmp_path / "nested" / "state"
        repo = FileVoteStateRepository(directory)

        # Act
        repo.save("freemap.placeVotes", '{"1":"like"}')

        # Assert
        assert directory.is_dir()
        assert repo.load("freemap.placeVotes") == '{"1":"like"}'
        assert (directory / "freemap.placeVotes.json").exists()

    def test_save_overwrites_previous_blob(self, tmp_path):
        repo = FileVoteStateRepository(tmp_path)

        repo.save("votes", '{"1":"like"}')
        repo.save("votes", "{}")

        assert repo.load("votes") == "{}"
        assert not list(tmp_path.glob("*.tmp"))

    def test_unsafe_key_characters_stay_inside_directory(self, tmp_path):
        directory = tmp_path / "state"
        repo = FileVoteStateRepository(directory)

        repo.save("../escape/votes", "{}")

        assert repo.load("../escape/votes") == "{}"
        assert [p.parent for p in directory.iterdir()] == [directory]

    def test_undecodable_file_reads_as_missing(self, tmp_path):
        repo = FileVoteStateRepository(tmp_path)
        (tmp_path / "votes.json").write_bytes(b"\xff\xfe\xfa")

        assert repo.load("votes") is None

    def test_failed_write_is_not_raised(self, tmp_path):
        """A directory that cannot be created leaves the key unset."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        repo = FileVoteStateRepository(blocker / "state")

        repo.save("votes", '{"1":"like"}')

        assert repo.load("votes") is None
        assert blocker.read_text() == "not a directory"

    def test_failed_write_keeps_previous_blob(self, tmp_path):
        repo = FileVoteStateRepository(tmp_path)
        repo.save("votes", '{"1":"like"}')
        # The temp file path is taken by a directory, so the write fails
        (tmp_path / "votes.json.tmp").mkdir()

        repo.save("votes", "{}")

        assert repo.load("votes") == '{"1":"like"}'
