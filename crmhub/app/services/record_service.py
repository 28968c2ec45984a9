"""
CRMHub Record Service
Generic list/get/create/update/soft-delete/restore over the module tables
"""

from datetime import datetime
from functools import lru_cache
from typing import Annotated, Any, Dict, List, Mapping, Optional

from pydantic import ConfigDict, Field, TypeAdapter, ValidationError
from sqlalchemy import Column, Table, and_, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from ..core.database import storage_guard
from ..core.exceptions import InvalidFieldValue, InvalidModule, NotFound, UnknownField
from ..models import RECORD_MODULES
from ..models.mixins import as_utc, utcnow

logger = structlog.get_logger()

# Maintained by the service itself, never accepted from a payload
READ_ONLY_COLUMNS = frozenset({"id", "created_at", "updated_at", "is_deleted", "deleted_at"})

# Columns matched by the free-text filter, when the module has them
SEARCH_COLUMNS = ("name", "contact_person")

LIKE_ESCAPE = "\\"

# Signed 64-bit range of an SQL INTEGER column
INTEGER_MIN = -(2 ** 63)
INTEGER_MAX = 2 ** 63 - 1


def resolve_table(module: str) -> Table:
    """Map a module name from the allow-list to its table"""
    model = RECORD_MODULES.get(module)
    if model is None:
        raise InvalidModule(f"Invalid module: {module}", module=module)
    return model.__table__


@lru_cache(maxsize=None)
def _adapter_for(python_type: type) -> TypeAdapter:
    if python_type is str:
        return TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True))
    if python_type is int:
        return TypeAdapter(Annotated[int, Field(ge=INTEGER_MIN, le=INTEGER_MAX)])
    if python_type is float:
        return TypeAdapter(float, config=ConfigDict(allow_inf_nan=False))
    return TypeAdapter(python_type)


def _coerce(module: str, column: Column, value: Any) -> Any:
    if value is None:
        return None
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return value

    try:
        coerced = _adapter_for(python_type).validate_python(value)
    except ValidationError as e:
        raise InvalidFieldValue(
            f"Invalid value for field '{column.name}'",
            module=module,
            field=column.name,
            expected=python_type.__name__,
            errors=[err["msg"] for err in e.errors()],
        ) from e

    if isinstance(coerced, datetime):
        return as_utc(coerced)
    return coerced


def _escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class RecordService:
    """Service for the generic record operations

    Every operation resolves the module before building a statement, so an
    unknown module never reaches the database. Identifiers always come from
    the model tables; caller values are bound as parameters.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    def validate_fields(self, module: str, table: Table, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Check payload keys against the module's writable columns and coerce values"""
        unknown = sorted(
            key for key in fields
            if key not in table.c or key in READ_ONLY_COLUMNS
        )
        if unknown:
            raise UnknownField(
                f"Unknown field(s) for {module}: {', '.join(unknown)}",
                module=module,
                fields=unknown,
            )

        return {key: _coerce(module, table.c[key], value) for key, value in fields.items()}

    async def list_records(
        self,
        module: str,
        q: Optional[str] = None,
        status: Optional[str] = None,
        owner_id: Optional[int] = None,
        is_deleted: bool = False,
    ) -> List[Dict[str, Any]]:
        """List records newest first; deleted rows only when is_deleted is set"""
        table = resolve_table(module)

        filters = [table.c.is_deleted == bool(is_deleted)]
        if q:
            pattern = f"%{_escape_like(q)}%"
            search = [
                table.c[name].ilike(pattern, escape=LIKE_ESCAPE)
                for name in SEARCH_COLUMNS
                if name in table.c
            ]
            filters.append(or_(*search))
        if status:
            filters.append(table.c.status == status)
        if owner_id is not None:
            filters.append(table.c.owner_id == owner_id)

        query = (
            select(table)
            .where(and_(*filters))
            .order_by(table.c.created_at.desc(), table.c.id.asc())
        )

        async with storage_guard(self.db, f"list {module}"):
            result = await self.db.execute(query)
            rows = result.mappings().all()

        return [dict(row) for row in rows]

    async def get_record(self, module: str, record_id: int) -> Dict[str, Any]:
        """Get one record, deleted or not"""
        table = resolve_table(module)

        async with storage_guard(self.db, f"get {module}"):
            result = await self.db.execute(select(table).where(table.c.id == record_id))
            row = result.mappings().one_or_none()

        if row is None:
            raise NotFound(f"{module} record {record_id} not found", module=module, id=record_id)
        return dict(row)

    async def create_record(self, module: str, fields: Mapping[str, Any]) -> int:
        """Insert a record; unspecified columns take their defaults"""
        table = resolve_table(module)
        values = self.validate_fields(module, table, fields)

        async with storage_guard(self.db, f"create {module}"):
            result = await self.db.execute(insert(table).values(**values))
            await self.db.commit()

        record_id = result.inserted_primary_key[0]
        logger.info("Record created", module=module, record_id=record_id, fields=sorted(values))
        return record_id

    async def update_record(self, module: str, record_id: int, fields: Mapping[str, Any]) -> bool:
        """Update exactly the supplied fields and refresh updated_at"""
        table = resolve_table(module)
        values = self.validate_fields(module, table, fields)
        values["updated_at"] = utcnow()

        await self._execute_update(module, table, record_id, values, "update")

        logger.info("Record updated", module=module, record_id=record_id, fields=sorted(fields))
        return True

    async def soft_delete_record(self, module: str, record_id: int) -> bool:
        """Mark a record deleted; repeating it re-stamps deleted_at"""
        table = resolve_table(module)

        await self._execute_update(
            module, table, record_id,
            {"is_deleted": True, "deleted_at": utcnow()},
            "soft_delete",
        )

        logger.info("Record soft-deleted", module=module, record_id=record_id)
        return True

    async def restore_record(self, module: str, record_id: int) -> bool:
        """Clear the deletion flag and timestamp"""
        table = resolve_table(module)

        await self._execute_update(
            module, table, record_id,
            {"is_deleted": False, "deleted_at": None},
            "restore",
        )

        logger.info("Record restored", module=module, record_id=record_id)
        return True

    async def _execute_update(
        self,
        module: str,
        table: Table,
        record_id: int,
        values: Dict[str, Any],
        operation: str,
    ) -> None:
        stmt = update(table).where(table.c.id == record_id).values(**values)

        async with storage_guard(self.db, f"{operation} {module}"):
            result = await self.db.execute(stmt)
            await self.db.commit()

        if result.rowcount == 0:
            raise NotFound(f"{module} record {record_id} not found", module=module, id=record_id)
