# tests/test_profile.py
import pytest

from talentx.models.profile import User
from talentx.services.profile import (
    EmptyResumeError,
    NEW_PROFILE_SUMMARY,
    ProfileDirectory,
    ProfileStore,
    ResumeNotFoundError,
)


def _primary_ids(store):
    return [r.id for r in store.resumes if r.is_primary]


def test_seeded_profile():
    store = ProfileStore()
    profile = store.get_profile(User(id="mockId", email="a@b.com"))
    assert profile.user.email == "a@b.com"
    assert [r.id for r in profile.resumes] == ["r1", "r2"]
    assert [p.platform for p in profile.coding_profiles] == ["GitHub", "LeetCode"]
    assert len(profile.application_history) == 2
    assert _primary_ids(store) == ["r1"]


def test_first_upload_becomes_primary():
    store = ProfileStore(seed=False)
    first = store.add_resume("a.txt", "A")
    second = store.add_resume("b.txt", "B")
    assert first.is_primary and not second.is_primary
    assert store.primary_content() == "A"


def test_set_primary_demotes_the_others():
    store = ProfileStore()
    store.set_primary("r2")
    assert _primary_ids(store) == ["r2"]
    with pytest.raises(ResumeNotFoundError):
        store.set_primary("nope")


def test_deleting_primary_promotes_first_remaining():
    store = ProfileStore()
    extra = store.add_resume("c.txt", "C")
    store.delete_resume("r1")
    assert _primary_ids(store) == ["r2"]
    store.delete_resume("r2")
    assert _primary_ids(store) == [extra.id]
    store.delete_resume(extra.id)
    assert store.resumes == []
    assert store.primary_content() == ""


def test_deleting_non_primary_keeps_primary():
    store = ProfileStore()
    store.delete_resume("r2")
    assert _primary_ids(store) == ["r1"]
    with pytest.raises(ResumeNotFoundError):
        store.delete_resume("r2")


def test_preview_truncates_and_requires_content():
    store = ProfileStore(seed=False)
    long = store.add_resume("long.txt", "x" * 800)
    assert store.preview(long.id) == "x" * 500
    empty = store.add_resume("empty.pdf", "")
    with pytest.raises(EmptyResumeError):
        store.preview(empty.id)


def test_add_coding_profile():
    store = ProfileStore(seed=False)
    profile = store.add_coding_profile("HackerRank", "  jdoe ")
    assert profile.url == "https://example.com/hackerrank/jdoe"
    assert profile.summary == NEW_PROFILE_SUMMARY
    with pytest.raises(ValueError):
        store.add_coding_profile("GitHub", "   ")
    assert len(store.coding_profiles) == 1


def test_update_info_overrides_session_identity():
    store = ProfileStore()
    store.update_info(name="Jane", email="jane@new.com")
    profile = store.get_profile(User(id="mockId", email="a@b.com"))
    assert profile.user.name == "Jane"
    assert profile.user.email == "jane@new.com"


def test_directory_keeps_one_store_per_account():
    directory = ProfileDirectory()
    alice = directory.for_user(User(id="mockId", email="alice@example.com"))
    alice.update_info(name="Alice")
    alice.add_coding_profile("GitHub", "alice-gh")

    bob = directory.for_user(User(id="mockId", email="bob@example.com"))
    assert bob is not alice
    bob_profile = bob.get_profile(User(id="mockId", email="bob@example.com"))
    assert bob_profile.user.name is None
    assert [p.username for p in bob_profile.coding_profiles] == ["johndoe", "johndoe_lc"]

    assert directory.for_user(User(id="mockId", email=" Alice@Example.com ")) is alice
