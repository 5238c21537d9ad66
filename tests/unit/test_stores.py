from __future__ import annotations

import pytest

from applicant_tracker.core.errors import NotFoundError
from applicant_tracker.schemas.schemas import ApplicantCreate, ApplicantUpdate, Comment


@pytest.fixture(params=["file_store", "mongo_store"])
def store(request: pytest.FixtureRequest):
    return request.getfixturevalue(request.param)


def test_insert_then_list_returns_record(store) -> None:
    created = store.insert(ApplicantCreate(full_name="Grace Hopper", expected_salary="120k", notes="navy"))

    rows = store.list_applicants()
    assert len(rows) == 1
    assert rows[0].id == created.id
    assert rows[0].date_added
    assert rows[0].full_name == "Grace Hopper"
    assert rows[0].expected_salary == "120k"
    assert rows[0].notes == "navy"
    assert rows[0].comments == []


def test_list_keeps_insertion_order(store) -> None:
    first = store.insert(ApplicantCreate(full_name="A"))
    second = store.insert(ApplicantCreate(full_name="B"))

    assert [a.id for a in store.list_applicants()] == [first.id, second.id]


def test_update_changes_only_supplied_fields(store) -> None:
    created = store.insert(ApplicantCreate(full_name="Linus", linkedin_url="https://in/linus", notes="old"))

    updated = store.update_by_id(created.id, ApplicantUpdate(notes="x"))

    assert updated.notes == "x"
    assert updated.model_dump(exclude={"notes"}) == created.model_dump(exclude={"notes"})
    assert store.list_applicants()[0].notes == "x"


def test_update_with_no_fields_returns_record(store) -> None:
    created = store.insert(ApplicantCreate(full_name="Same"))

    assert store.update_by_id(created.id, ApplicantUpdate()) == created


def test_update_missing_id_raises_not_found(store) -> None:
    with pytest.raises(NotFoundError):
        store.update_by_id(404, ApplicantUpdate(notes="x"))


def test_comments_replace_by_author(store) -> None:
    created = store.insert(ApplicantCreate(full_name="Candidate"))

    store.add_comment(created.id, Comment(person="Alice", text="first", date="1/1/2025"))
    store.add_comment(created.id, Comment(person="Bob", text="hello", date="1/2/2025"))
    assert [c.person for c in store.list_applicants()[0].comments] == ["Alice", "Bob"]

    store.add_comment(created.id, Comment(person="Alice", text="second", date="1/3/2025"))
    comments = store.list_applicants()[0].comments
    assert [c.person for c in comments] == ["Bob", "Alice"]
    assert [c.text for c in comments if c.person == "Alice"] == ["second"]


def test_comment_on_missing_id_raises_not_found(store) -> None:
    with pytest.raises(NotFoundError):
        store.add_comment(1, Comment(person="Alice", text="hi"))


def test_update_does_not_touch_comments(store) -> None:
    created = store.insert(ApplicantCreate(full_name="Candidate"))
    store.add_comment(created.id, Comment(person="Alice", text="keep me"))

    updated = store.update_by_id(created.id, ApplicantUpdate(full_name="Renamed"))

    assert updated.full_name == "Renamed"
    assert [c.text for c in updated.comments] == ["keep me"]


def test_delete_by_id(store) -> None:
    keep = store.insert(ApplicantCreate(full_name="Keep"))
    drop = store.insert(ApplicantCreate(full_name="Drop"))

    store.delete_by_id(drop.id)

    assert [a.id for a in store.list_applicants()] == [keep.id]
    with pytest.raises(NotFoundError):
        store.delete_by_id(drop.id)


def test_delete_all(store) -> None:
    store.insert(ApplicantCreate(full_name="A"))
    store.insert(ApplicantCreate(full_name="B"))

    store.delete_all()

    assert store.list_applicants() == []


def test_mongo_store_treats_out_of_range_id_as_missing(mongo_store) -> None:
    mongo_store.insert(ApplicantCreate(full_name="Ada"))
    huge = 2 ** 64

    with pytest.raises(NotFoundError):
        mongo_store.update_by_id(huge, ApplicantUpdate(notes="x"))
    with pytest.raises(NotFoundError):
        mongo_store.add_comment(huge, Comment(person="Alice", text="hi"))
    with pytest.raises(NotFoundError):
        mongo_store.delete_by_id(-huge)
