"""
CRUD operations for jobs.

Every statement is parameterized SQL with $n placeholders executed through
run_query. Rows come back with application field names (companyHandle), and
equity is always returned as a string.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.engine import Row
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from app.core.database import run_query
from app.core.exceptions import BadRequestError, NotFoundError
from app.helpers.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# id and companyHandle never change after creation
UPDATABLE_FIELDS = ("title", "salary", "equity")


def _to_job(row: Row) -> Dict[str, Any]:
    job = dict(row._mapping)
    if job["equity"] is not None:
        job["equity"] = str(job["equity"])
    return job


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def create(db: Session, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Create a job.

    Args:
        db: Database session
        data: {title, salary, equity, companyHandle}; salary and equity optional

    Returns:
        Created job {id, title, salary, equity, companyHandle}

    Raises:
        BadRequestError: If the job duplicates an existing title for the
            company, references an unknown company, or breaks a constraint
    """
    try:
        result = run_query(
            db,
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            [data["title"], data.get("salary"), data.get("equity"), data["companyHandle"]],
        )
        job = _to_job(result.one())
        db.commit()
    except (IntegrityError, DataError) as e:
        db.rollback()
        logger.info(f"Rejected job {data['title']!r} for {data['companyHandle']!r}: {e.orig}")
        raise BadRequestError(
            f"Invalid job or duplicate of an existing one: {data['title']} ({data['companyHandle']})"
        ) from e

    logger.info(f"Created job {job['id']}: {job['title']} ({job['companyHandle']})")
    return job


def find_all(db: Session, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    Find all jobs, optionally filtered.

    Filters (all optional, combined with AND):
        title: case-insensitive substring of the job title
        minSalary: salary >= minSalary
        hasEquity: when true, only jobs with equity > 0

    Returns:
        Jobs ordered by title
    """
    filters = filters or {}
    where_expressions: List[str] = []
    values: List[Any] = []

    title = filters.get("title")
    if title is not None:
        values.append(f"%{_escape_like(title)}%")
        where_expressions.append(f"LOWER(title) LIKE LOWER(${len(values)}) ESCAPE '\\'")

    min_salary = filters.get("minSalary")
    if min_salary is not None:
        values.append(min_salary)
        where_expressions.append(f"salary >= ${len(values)}")

    if filters.get("hasEquity"):
        where_expressions.append("equity > 0")

    query = f"SELECT {JOB_COLUMNS} FROM jobs"
    if where_expressions:
        query += " WHERE " + " AND ".join(where_expressions)
    query += " ORDER BY title, id"

    result = run_query(db, query, values)
    return [_to_job(row) for row in result]


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no job has this id
    """
    row = run_query(
        db,
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        [job_id],
    ).first()

    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    return _to_job(row)


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job.

    Only the keys present in data are written; a None value clears the
    column.

    Args:
        db: Database session
        job_id: Job ID to update
        data: Any subset of {title, salary, equity}

    Returns:
        Updated job

    Raises:
        BadRequestError: If data is empty, names a field other than
            title/salary/equity, or breaks a constraint
        NotFoundError: If no job has this id
    """
    immutable = [key for key in data if key not in UPDATABLE_FIELDS]
    if immutable:
        raise BadRequestError(f"Cannot update fields: {', '.join(immutable)}")

    partial = sql_for_partial_update(data, {})
    id_index = len(partial["values"]) + 1

    query = f"""UPDATE jobs
                SET {partial['setCols']}
                WHERE id = ${id_index}
                RETURNING {JOB_COLUMNS}"""

    try:
        row = run_query(db, query, [*partial["values"], job_id]).first()
        if row is None:
            raise NotFoundError(f"No job: {job_id}")
        job = _to_job(row)
        db.commit()
    except (IntegrityError, DataError) as e:
        db.rollback()
        raise BadRequestError(f"Invalid update for job {job_id}") from e

    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this id
    """
    row = run_query(
        db,
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        [job_id],
    ).first()

    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
