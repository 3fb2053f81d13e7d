"""Queries over the companies table."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.database import execute
from jobly.errors import DuplicateError, NotFoundError, ValidationError
from jobly.services.job_service import job_record
from jobly.utils.sql import LIKE_ESCAPE, contains_pattern, placeholder, sql_for_partial_update

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "num_employees", "logo_url")

_COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"


def _handle_taken(db: Session, handle: str) -> bool:
    row = execute(db, "SELECT handle FROM companies WHERE handle = $1", [handle]).first()
    return row is not None


def _name_taken(db: Session, name: str, exclude_handle: str | None = None) -> bool:
    if exclude_handle is None:
        row = execute(db, "SELECT handle FROM companies WHERE name = $1", [name]).first()
    else:
        row = execute(
            db,
            "SELECT handle FROM companies WHERE name = $1 AND handle <> $2",
            [name, exclude_handle],
        ).first()
    return row is not None


def create(db: Session, data: dict) -> dict:
    """Raises DuplicateError if the handle or the name is already in use."""
    handle = data["handle"]
    name = data["name"]

    try:
        if _handle_taken(db, handle):
            raise DuplicateError(f"Duplicate company: {handle}")
        if _name_taken(db, name):
            raise DuplicateError(f"Duplicate company name: {name}")

        row = execute(
            db,
            f"""
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {_COMPANY_COLUMNS}
            """,
            [
                handle,
                name,
                data["description"],
                data.get("num_employees"),
                data.get("logo_url"),
            ],
        ).mappings().first()
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if _handle_taken(db, handle):
            raise DuplicateError(f"Duplicate company: {handle}") from exc
        if _name_taken(db, name):
            raise DuplicateError(f"Duplicate company name: {name}") from exc
        raise

    logger.info("Created company %s", handle)
    return dict(row)


def find_all(
    db: Session,
    name: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> list[dict]:
    """Find companies ordered by name.

    name matches case-insensitively anywhere in the company name; the
    employee bounds are inclusive.
    """
    if (
        min_employees is not None
        and max_employees is not None
        and min_employees > max_employees
    ):
        raise ValidationError("Min employees cannot be greater than max")

    query = f"SELECT {_COMPANY_COLUMNS} FROM companies"
    values = []
    where = []

    if name is not None:
        values.append(contains_pattern(name))
        where.append(f"lower(name) LIKE lower({placeholder(len(values))}) {LIKE_ESCAPE}")

    if min_employees is not None:
        values.append(min_employees)
        where.append(f"num_employees >= {placeholder(len(values))}")

    if max_employees is not None:
        values.append(max_employees)
        where.append(f"num_employees <= {placeholder(len(values))}")

    if where:
        query += " WHERE " + " AND ".join(where)
    query += " ORDER BY name"

    rows = execute(db, query, values).mappings().all()
    return [dict(r) for r in rows]


def get(db: Session, handle: str) -> dict:
    row = execute(
        db, f"SELECT {_COMPANY_COLUMNS} FROM companies WHERE handle = $1", [handle]
    ).mappings().first()
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    company = dict(row)
    jobs = execute(
        db,
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        [handle],
    ).mappings().all()
    company["jobs"] = [job_record(j) for j in jobs]
    return company


def update(db: Session, handle: str, data: dict) -> dict:
    """Partially update a company. The handle itself cannot change."""
    rejected = sorted(set(data) - set(UPDATABLE_FIELDS))
    if rejected:
        raise ValidationError(f"Cannot update field(s): {', '.join(rejected)}")

    set_cols, values = sql_for_partial_update(data, {})
    handle_idx = placeholder(len(values) + 1)

    try:
        row = execute(
            db,
            f"""
            UPDATE companies
            SET {set_cols}
            WHERE handle = {handle_idx}
            RETURNING {_COMPANY_COLUMNS}
            """,
            [*values, handle],
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No company: {handle}")
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if "name" in data and _name_taken(db, data["name"], exclude_handle=handle):
            raise DuplicateError(f"Duplicate company name: {data['name']}") from exc
        raise

    logger.info("Updated company %s: %s", handle, ", ".join(data))
    return dict(row)


def remove(db: Session, handle: str) -> None:
    row = execute(
        db, "DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle]
    ).first()
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    db.commit()
    logger.info("Removed company %s", handle)
