# rental_api/repositories/base.py
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Mapping, Type, TypeVar
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel, ValidationError as PydanticValidationError
from pymongo import DESCENDING, ReturnDocument
from rental_api.errors import NotFound, ValidationError, describe_validation_errors
from rental_api.logger import get_logger
from rental_api.schemas.common import PartialUpdate
from rental_api.utils.object_id import parse_object_id, serialize_document

logger = get_logger("repositories")

OutT = TypeVar("OutT", bound=BaseModel)


class MongoRepository(Generic[OutT]):
    """CRUD over one collection of the injected database handle.

    Payloads are validated here against the pydantic schemas before anything
    reaches MongoDB, so the field contract does not depend on the storage
    backend enforcing it.
    """

    collection_name: str
    label: str
    create_schema: Type[BaseModel]
    update_schema: Type[PartialUpdate]
    out_schema: Type[OutT]

    # newest first; _id breaks ties between records created in the same millisecond
    sort_order = [("createdAt", DESCENDING), ("_id", DESCENDING)]

    def __init__(self, database: AsyncIOMotorDatabase):
        self.collection = database[self.collection_name]

    def _not_found(self, record_id: str) -> NotFound:
        return NotFound(
            f"{self.label.capitalize()} not found",
            f"No {self.label} found with ID: {record_id}",
        )

    def _object_id(self, record_id: str) -> ObjectId:
        oid = parse_object_id(record_id)
        if oid is None:
            raise self._not_found(record_id)
        return oid

    def _validate(self, schema: Type[BaseModel], fields: Mapping[str, Any], action: str) -> BaseModel:
        try:
            return schema.model_validate(fields)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Error {action} {self.label}",
                describe_validation_errors(e.errors()),
            )

    def _to_document(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for converting validated fields to their stored form."""
        return data

    def _to_out(self, document: Mapping[str, Any]) -> OutT:
        return self.out_schema.model_validate(serialize_document(dict(document)))

    async def list(self) -> List[OutT]:
        documents = await self.collection.find().sort(self.sort_order).to_list(length=None)
        return [self._to_out(document) for document in documents]

    async def get(self, record_id: str) -> OutT:
        document = await self.collection.find_one({"_id": self._object_id(record_id)})
        if not document:
            raise self._not_found(record_id)
        return self._to_out(document)

    async def create(self, fields: Mapping[str, Any]) -> OutT:
        record = self._validate(self.create_schema, fields, "creating")
        document = self._to_document(record.model_dump())
        document["createdAt"] = datetime.now(timezone.utc)

        result = await self.collection.insert_one(document)
        created = await self.collection.find_one({"_id": result.inserted_id})
        logger.info(f"Created {self.label} {result.inserted_id}")
        return self._to_out(created)

    async def update(self, record_id: str, fields: Mapping[str, Any]) -> OutT:
        changes = self._validate(self.update_schema, fields, "updating").changes()
        oid = self._object_id(record_id)

        if changes:
            updated = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": self._to_document(changes)},
                return_document=ReturnDocument.AFTER,
            )
        else:
            updated = await self.collection.find_one({"_id": oid})

        if not updated:
            raise self._not_found(record_id)
        return self._to_out(updated)

    async def delete(self, record_id: str) -> Dict[str, str]:
        result = await self.collection.delete_one({"_id": self._object_id(record_id)})
        if result.deleted_count == 0:
            raise self._not_found(record_id)
        logger.info(f"Deleted {self.label} {record_id}")
        return {"message": f"{self.label.capitalize()} deleted successfully"}
