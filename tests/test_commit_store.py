"""Tests for commit storage and the working-directory comparator."""

import pytest

from svcs.config.types import CommitIdScheme, VcsPaths
from svcs.core.commit_id import legacy_commit_id
from svcs.core.commit_log import CommitLog
from svcs.core.commit_store import CommitStore, snapshot_relpath
from svcs.core.config_store import ConfigStore
from svcs.core.index_store import IndexStore


def make_store(project, scheme=CommitIdScheme.DIGEST):
    paths = VcsPaths.for_project(project)
    return CommitStore(
        paths=paths,
        index=IndexStore(paths.index_file, project),
        log=CommitLog(paths.log_file),
        config_store=ConfigStore(paths.config_file),
        commit_id_scheme=scheme,
    )


@pytest.fixture
def store(project):
    """CommitStore with a.txt and b.txt tracked and user Max configured."""
    store = make_store(project)
    store.config_store.set_username("Max")
    store.index.track("a.txt")
    store.index.track("b.txt")
    return store


class TestCommit:
    def test_blank_message_writes_nothing(self, store, project):
        for message in ("", "   ", "\n"):
            result = store.commit(message)
            
            assert not result.success
            assert result.message == "Message was not passed."
        
        assert not (project / "vcs" / "commits").exists()
        assert store.log.read() == ""
    
    def test_first_commit(self, store, project):
        result = store.commit("Test message")
        
        assert result.success
        assert result.message == "Changes are committed."
        assert result.commit_id
        
        snapshot = project / "vcs" / "commits" / result.commit_id
        assert (snapshot / "a.txt").read_text() == "alpha"
        assert (snapshot / "b.txt").read_text() == "beta"
        assert store.log.read() == f"commit {result.commit_id}\nAuthor: Max\nTest message\n"
    
    def test_snapshot_holds_exactly_tracked_files(self, store, project):
        (project / "untracked.txt").write_text("ignore me")
        
        result = store.commit("Snapshot")
        
        snapshot = project / "vcs" / "commits" / result.commit_id
        assert sorted(p.name for p in snapshot.iterdir()) == ["a.txt", "b.txt"]
    
    def test_second_commit_without_changes_is_noop(self, store):
        first = store.commit("First")
        second = store.commit("Second")
        
        assert second.success
        assert second.message == "Nothing to commit."
        assert second.commit_id is None
        assert store.log.list_commit_ids() == [first.commit_id]
    
    def test_commit_after_change(self, store, project):
        first = store.commit("First")
        (project / "b.txt").write_text("beta, edited")
        second = store.commit("Second")
        
        assert second.message == "Changes are committed."
        assert first.commit_id != second.commit_id
        assert store.log.list_commit_ids() == [second.commit_id, first.commit_id]
        
        commits = project / "vcs" / "commits"
        assert (commits / first.commit_id / "b.txt").read_text() == "beta"
        assert (commits / second.commit_id / "b.txt").read_text() == "beta, edited"
    
    def test_same_message_twice_gives_distinct_commits(self, store, project):
        first = store.commit("Same")
        (project / "a.txt").write_text("alpha 2")
        second = store.commit("Same")
        
        assert first.commit_id != second.commit_id
        assert len(list((project / "vcs" / "commits").iterdir())) == 2
    
    def test_author_is_empty_when_unconfigured(self, project):
        store = make_store(project)
        store.index.track("a.txt")
        
        result = store.commit("Anonymous")
        
        assert store.log.entries()[0].author == ""
        assert result.success
    
    def test_commit_with_nothing_tracked(self, project):
        store = make_store(project)
        
        first = store.commit("Empty")
        second = store.commit("Still empty")
        
        assert first.message == "Changes are committed."
        assert (project / "vcs" / "commits" / first.commit_id).is_dir()
        assert second.message == "Nothing to commit."
    
    def test_nested_tracked_path(self, store, project):
        (project / "docs").mkdir()
        (project / "docs" / "guide.md").write_text("# Guide")
        store.index.track("docs/guide.md")
        
        result = store.commit("With docs")
        
        snapshot = project / "vcs" / "commits" / result.commit_id
        assert (snapshot / "docs" / "guide.md").read_text() == "# Guide"
    
    def test_tracked_file_deleted_after_add_raises(self, store, project):
        store.commit("First")
        (project / "a.txt").unlink()
        
        with pytest.raises(FileNotFoundError):
            store.commit("Second")


class TestLegacyScheme:
    def test_id_from_index_and_message(self, project):
        store = make_store(project, CommitIdScheme.LEGACY)
        store.index.track("a.txt")
        
        result = store.commit("First")
        
        assert result.commit_id == legacy_commit_id(b"a.txt\n", "First")
    
    def test_collision_keeps_existing_snapshot(self, project, capsys):
        store = make_store(project, CommitIdScheme.LEGACY)
        store.index.track("a.txt")
        first = store.commit("Same")
        (project / "a.txt").write_text("changed")
        store.commit("Other")
        (project / "a.txt").write_text("v3")
        
        third = store.commit("Same")
        
        assert not third.success
        assert third.message == f"Commit {first.commit_id} already exists."
        assert third.commit_id is None
        assert store.log.list_commit_ids()[1] == first.commit_id
        assert len(store.log.list_commit_ids()) == 2
        snapshot = project / "vcs" / "commits" / first.commit_id
        assert (snapshot / "a.txt").read_text() == "alpha"
        assert "already exists" in capsys.readouterr().err


class TestIsClean:
    def test_clean_after_commit(self, store):
        result = store.commit("First")
        
        assert store.is_clean(result.commit_id)
    
    def test_content_change_is_dirty(self, store, project):
        result = store.commit("First")
        (project / "a.txt").write_text("alpha!")
        
        assert not store.is_clean(result.commit_id)
    
    def test_newly_tracked_file_is_dirty(self, store, project):
        result = store.commit("First")
        (project / "c.txt").write_text("gamma")
        store.index.track("c.txt")
        
        assert not store.is_clean(result.commit_id)
    
    def test_untracked_changes_are_ignored(self, store, project):
        (project / "notes.txt").write_text("v1")
        result = store.commit("First")
        (project / "notes.txt").write_text("v2")
        
        assert store.is_clean(result.commit_id)
    
    def test_file_dropped_from_index_is_ignored(self, store, project):
        result = store.commit("First")
        store.index.index_file.write_text("a.txt\n")
        (project / "b.txt").write_text("beta!")
        
        assert store.is_clean(result.commit_id)
    
    def test_missing_working_file_is_dirty(self, store, project):
        result = store.commit("First")
        (project / "b.txt").unlink()
        
        assert not store.is_clean(result.commit_id)
    
    def test_unknown_commit_is_dirty(self, store):
        assert not store.is_clean("nope")


class TestSnapshotRelpath:
    @pytest.mark.parametrize("tracked,expected", [
        ("a.txt", "a.txt"),
        ("./a.txt", "a.txt"),
        ("docs/guide.md", "docs/guide.md"),
        ("../outside.txt", "outside.txt"),
        ("/abs/file.txt", "abs/file.txt"),
    ])
    def test_stays_under_snapshot(self, tracked, expected):
        assert snapshot_relpath(tracked).as_posix() == expected
