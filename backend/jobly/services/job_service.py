import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.database import execute
from jobly.errors import DuplicateError, NotFoundError, ValidationError
from jobly.utils.sql import LIKE_ESCAPE, contains_pattern, placeholder, sql_for_partial_update

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "salary", "equity")

_JOB_COLUMNS = "id, title, salary, equity, company_handle"


def _equity(value) -> str | None:
    # NUMERIC comes back as Decimal from PostgreSQL and int/float from SQLite,
    # so SQLite normalizes the text ("0.50" reads back as "0.5")
    return None if value is None else str(value)


def job_record(row) -> dict:
    job = dict(row)
    if "equity" in job:
        job["equity"] = _equity(job["equity"])
    return job


def _title_taken(db: Session, title: str, exclude_id: int | None = None) -> bool:
    if exclude_id is None:
        row = execute(db, "SELECT id FROM jobs WHERE title = $1", [title]).first()
    else:
        row = execute(
            db, "SELECT id FROM jobs WHERE title = $1 AND id <> $2", [title, exclude_id]
        ).first()
    return row is not None


def create(db: Session, data: dict) -> dict:
    title = data["title"]
    company_handle = data["company_handle"]

    try:
        if _title_taken(db, title):
            raise DuplicateError(f"Duplicate job: {title}")

        company = execute(
            db, "SELECT handle FROM companies WHERE handle = $1", [company_handle]
        ).first()
        if company is None:
            raise ValidationError(
                f"Cannot make a request for a non-existing company: {company_handle}"
            )

        row = execute(
            db,
            f"""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {_JOB_COLUMNS}
            """,
            [title, data.get("salary"), data.get("equity"), company_handle],
        ).mappings().first()
        db.commit()
    except IntegrityError as exc:
        # Lost a race against another insert of the same title
        db.rollback()
        if _title_taken(db, title):
            raise DuplicateError(f"Duplicate job: {title}") from exc
        raise

    job = job_record(row)
    logger.info("Created job %s (%s) at %s", job["id"], title, company_handle)
    return job


def find_all(
    db: Session,
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool | None = None,
) -> list[dict]:
    """Find jobs, optionally filtered, ordered by title.

    - title: case-insensitive substring of the job title
    - min_salary: salary at least this much
    - has_equity: when True, only jobs with equity above zero

    Returns [{id, title, salary, equity, company_handle, company_name}, ...].
    Jobs whose company is gone are still listed, with company_name None.
    """
    query = """
        SELECT j.id,
               j.title,
               j.salary,
               j.equity,
               j.company_handle,
               c.name AS company_name
        FROM jobs AS j
        LEFT JOIN companies AS c ON c.handle = j.company_handle"""
    values = []
    where = []

    if title is not None:
        values.append(contains_pattern(title))
        where.append(f"lower(j.title) LIKE lower({placeholder(len(values))}) {LIKE_ESCAPE}")

    if min_salary is not None:
        values.append(min_salary)
        where.append(f"j.salary >= {placeholder(len(values))}")

    if has_equity is True:
        where.append("j.equity > 0")

    if where:
        query += " WHERE " + " AND ".join(where)
    query += " ORDER BY j.title"

    logger.debug("Listing jobs with %d filter(s)", len(where))
    rows = execute(db, query, values).mappings().all()
    return [job_record(r) for r in rows]


def get(db: Session, job_id: int) -> dict:
    """company is None when the job's company no longer exists."""
    row = execute(
        db, f"SELECT {_JOB_COLUMNS} FROM jobs WHERE id = $1", [job_id]
    ).mappings().first()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    job = job_record(row)
    company = execute(
        db,
        """
        SELECT handle, name, description, num_employees, logo_url
        FROM companies
        WHERE handle = $1
        """,
        [job.pop("company_handle")],
    ).mappings().first()
    job["company"] = dict(company) if company is not None else None
    return job


def update(db: Session, job_id: int, data: dict) -> dict:
    """Apply a partial update to a job and return the whole row.

    Only title, salary and equity may change; a key set to None sets the
    column to NULL. Returns {id, title, salary, equity, company_handle}.

    Raises ValidationError for empty data or any other key, NotFoundError if
    there is no such job, DuplicateError if the new title is taken.
    """
    rejected = sorted(set(data) - set(UPDATABLE_FIELDS))
    if rejected:
        raise ValidationError(f"Cannot update field(s): {', '.join(rejected)}")

    set_cols, values = sql_for_partial_update(data, {})
    id_idx = placeholder(len(values) + 1)

    try:
        row = execute(
            db,
            f"""
            UPDATE jobs
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING {_JOB_COLUMNS}
            """,
            [*values, job_id],
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No job: {job_id}")
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if "title" in data and _title_taken(db, data["title"], exclude_id=job_id):
            raise DuplicateError(f"Duplicate job: {data['title']}") from exc
        raise

    logger.info("Updated job %s: %s", job_id, ", ".join(data))
    return job_record(row)


def remove(db: Session, job_id: int) -> None:
    row = execute(
        db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id]
    ).first()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    db.commit()
    logger.info("Removed job %s", job_id)
