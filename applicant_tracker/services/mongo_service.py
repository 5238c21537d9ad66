"""
MongoDB Service - applicant records in a single document collection.

Each operation is one atomic call against the collection. The one
exception is add_comment, which is a $pull followed by a $push: a reader
running between the two calls can see the applicant without either the
old or the new comment from that person.
"""

import logging
from typing import List, Optional

from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from applicant_tracker.core.errors import NOT_FOUND_MESSAGE, NotFoundError, PersistenceError
from applicant_tracker.db.mongodb import get_collection, init_mongo_indexes, test_mongo_connection
from applicant_tracker.schemas.schemas import (
    INT64_MAX,
    INT64_MIN,
    Applicant,
    ApplicantCreate,
    ApplicantUpdate,
    Comment,
)
from applicant_tracker.services.store import ApplicantStore, new_applicant

logger = logging.getLogger(__name__)

# Never leak Mongo's ObjectId to clients
NO_OBJECT_ID = {"_id": False}


def _check_id(applicant_id: int) -> None:
    """BSON cannot encode ids outside int64, so no stored applicant has one."""
    if not INT64_MIN <= applicant_id <= INT64_MAX:
        raise NotFoundError(NOT_FOUND_MESSAGE)


def to_applicant(doc: Optional[dict]) -> Optional[Applicant]:
    """Convert MongoDB document to an Applicant."""
    if doc is None:
        return None
    doc.pop("_id", None)
    return Applicant.model_validate(doc)


class MongoApplicantService(ApplicantStore):
    """
    Handles applicant storage in MongoDB.
    """

    backend_name = "mongo"

    def __init__(self, collection: Collection = None):
        self.collection: Collection = collection if collection is not None else get_collection()

    def initialize(self) -> None:
        try:
            init_mongo_indexes(self.collection)
        except PyMongoError as e:
            raise PersistenceError(f"MongoDB unavailable: {e}")
        logger.info("Connected to MongoDB collection %s", self.collection.full_name)

    def ping(self) -> bool:
        return test_mongo_connection(self.collection.database.client)

    def list_applicants(self) -> List[Applicant]:
        try:
            cursor = self.collection.find({}, NO_OBJECT_ID)
            return [to_applicant(doc) for doc in cursor]
        except PyMongoError as e:
            raise PersistenceError(f"Failed to fetch applicants: {e}")

    def insert(self, payload: ApplicantCreate) -> Applicant:
        applicant = new_applicant(payload)
        try:
            # insert_one mutates its argument with _id, so hand it a copy
            self.collection.insert_one(applicant.to_document())
        except PyMongoError as e:
            raise PersistenceError(str(e))
        logger.info("Inserted applicant %s", applicant.id)
        return applicant

    def update_by_id(self, applicant_id: int, payload: ApplicantUpdate) -> Applicant:
        _check_id(applicant_id)
        fields = payload.model_dump(exclude_unset=True, by_alias=True)
        try:
            if fields:
                doc = self.collection.find_one_and_update(
                    {"id": applicant_id},
                    {"$set": fields},
                    projection=NO_OBJECT_ID,
                    return_document=ReturnDocument.AFTER
                )
            else:
                # $set with an empty document is rejected by the server
                doc = self.collection.find_one({"id": applicant_id}, NO_OBJECT_ID)
        except PyMongoError as e:
            raise PersistenceError(str(e))

        if doc is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Updated applicant %s (%s)", applicant_id, ", ".join(fields) or "no fields")
        return to_applicant(doc)

    def add_comment(self, applicant_id: int, comment: Comment) -> Comment:
        _check_id(applicant_id)
        comment_doc = comment.model_dump(by_alias=True)
        try:
            # First remove any existing comment from the same person
            self.collection.update_one(
                {"id": applicant_id},
                {"$pull": {"comments": {"person": comment.person}}}
            )
            # Then add the new comment at the end
            doc = self.collection.find_one_and_update(
                {"id": applicant_id},
                {"$push": {"comments": comment_doc}},
                projection=NO_OBJECT_ID,
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise PersistenceError(str(e))

        if doc is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Comment by %s saved on applicant %s", comment.person, applicant_id)
        return comment

    def delete_by_id(self, applicant_id: int) -> None:
        _check_id(applicant_id)
        try:
            result = self.collection.delete_one({"id": applicant_id})
        except PyMongoError as e:
            raise PersistenceError(str(e))

        if result.deleted_count == 0:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Deleted applicant %s", applicant_id)

    def delete_all(self) -> None:
        try:
            result = self.collection.delete_many({})
        except PyMongoError as e:
            raise PersistenceError(str(e))
        logger.info("Cleared %d applicants", result.deleted_count)
