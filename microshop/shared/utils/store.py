"""
In-memory entity store

An insertion-ordered mapping of integer id to record with monotonically
increasing id assignment. One instance is owned by each resource service and
built at startup from its seed data.

Mutating methods never await, so on a single event loop every create,
update and delete completes without interleaving with another request.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
import structlog

from .errors import ConflictError, NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

Record = Dict[str, Any]


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EntityStore:
    """Ordered in-memory collection of records for one domain"""

    def __init__(
        self,
        entity: str,
        id_key: str,
        create_schema: Type[BaseModel],
        update_schema: Type[BaseModel],
        required_message: str,
        unique_fields: Sequence[str] = (),
        seed: Iterable[Record] = ()
    ):
        self.entity = entity
        self.id_key = id_key
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.required_message = required_message
        self.unique_fields = tuple(unique_fields)

        self._records: Dict[int, Record] = {}
        for record in seed:
            self._records[record["id"]] = dict(record)
        self._next_id = max(self._records, default=0) + 1

    def __len__(self) -> int:
        return len(self._records)

    @property
    def next_id(self) -> int:
        return self._next_id

    def list(self) -> List[Record]:
        """All records in insertion order"""
        return [dict(record) for record in self._records.values()]

    def get(self, record_id: int) -> Record:
        return dict(self._require(record_id))

    def create(self, fields: Dict[str, Any]) -> Record:
        """
        Validate and insert a new record

        Raises:
            ValidationError: required fields missing or invalid
            ConflictError: a unique field collides with an existing record
        """
        missing = [
            name for name, field in self.create_schema.model_fields.items()
            if field.is_required() and fields.get(name) in (None, "")
        ]
        if missing:
            raise ValidationError(self.required_message, missing=missing)

        data = self._validate(self.create_schema, fields).model_dump()
        self._check_unique(data)

        record_id = self._next_id
        self._next_id += 1

        record = {"id": record_id, **data, "createdAt": utc_timestamp()}
        self._records[record_id] = record

        logger.info("Record created", entity=self.entity, record_id=record_id)
        return dict(record)

    def update(self, record_id: int, fields: Dict[str, Any]) -> Record:
        """
        Overwrite the supplied fields of an existing record

        Only keys present in ``fields`` are applied; presence, not truthiness,
        decides whether a field is updated.

        Raises:
            NotFoundError: no record with this id
            ValidationError: a supplied field is invalid
            ConflictError: a unique field collides with another record
        """
        record = self._require(record_id)

        changes = self._validate(self.update_schema, fields).model_dump(exclude_unset=True)
        self._check_unique(changes, exclude_id=record_id)

        record.update(changes)
        record["updatedAt"] = utc_timestamp()

        logger.info(
            "Record updated",
            entity=self.entity,
            record_id=record_id,
            fields=sorted(changes)
        )
        return dict(record)

    def delete(self, record_id: int) -> Record:
        """Remove a record; its id is never handed out again"""
        self._require(record_id)
        record = self._records.pop(record_id)

        logger.info("Record deleted", entity=self.entity, record_id=record_id)
        return record

    def _require(self, record_id: int) -> Record:
        record = self._records.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.entity} not found", **{self.id_key: record_id})
        return record

    def _validate(self, schema: Type[BaseModel], fields: Dict[str, Any]) -> BaseModel:
        try:
            return schema.model_validate(fields)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ValidationError(f"Invalid value for '{field}': {error['msg']}") from e

    def _check_unique(self, data: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        for field in self.unique_fields:
            if field not in data:
                continue
            for other_id, other in self._records.items():
                if other_id != exclude_id and other.get(field) == data[field]:
                    raise ConflictError(f"{self.entity} with this {field} already exists")
