import logging
from typing import Any, Mapping

from sqlalchemy.orm import Session

from jobly.core.exceptions import BadRequestError, NotFoundError
from jobly.helpers.sql import SqlParams, execute, sql_for_partial_update
from jobly.repos import company_repo

logger = logging.getLogger(__name__)


def _to_job(row) -> dict:
    """Row mapping -> plain dict; NUMERIC equity is exposed as a decimal string."""
    job = dict(row)
    if job.get("equity") is not None:
        job["equity"] = str(job["equity"])
    return job


def _min_salary(params: SqlParams, value: int) -> str:
    return f"j.salary >= {params.add(value)}"


def _has_equity(params: SqlParams, value: bool) -> str | None:
    # Only an explicit True filters. False keeps rows with null equity.
    if value is not True:
        return None
    return f"j.equity > {params.add(0)}"


def _title(params: SqlParams, value: str) -> str:
    # Case-insensitive substring match.
    return f"lower(j.title) LIKE lower({params.add(f'%{value}%')})"


# Placeholder positions follow this order.
_FILTERS = (
    ("min_salary", _min_salary),
    ("has_equity", _has_equity),
    ("title", _title),
)


def job_filter_clause(
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool | None = None,
) -> tuple[str, list[Any]]:
    """
    Build the WHERE clause for find_all from the optional filters.

    Returns (clause, values); clause is "" when no filter applies, otherwise
    "WHERE <p1> AND <p2> ..." using $n placeholders numbered in the order
    min_salary, has_equity, title.
    """
    given = {"title": title, "min_salary": min_salary, "has_equity": has_equity}
    params = SqlParams()
    predicates = []
    for name, build in _FILTERS:
        value = given[name]
        if value is None:
            continue
        predicate = build(params, value)
        if predicate:
            predicates.append(predicate)
    if not predicates:
        return "", []
    return "WHERE " + " AND ".join(predicates), params.values


def create(
    db: Session,
    title: str,
    company_handle: str,
    salary: int | None = None,
    equity: str | None = None,
) -> dict:
    """
    Insert a job and return {id, title, salary, equity, company_handle}.

    Raises BadRequestError (and writes nothing) if the company does not exist.
    """
    if not company_repo.exists(db, company_handle):
        logger.info("Job create rejected: unknown company %s", company_handle)
        raise BadRequestError(f"Company not found: {company_handle}")

    row = execute(
        db,
        """INSERT INTO jobs (title, salary, equity, company_handle)
           VALUES ($1, $2, $3, $4)
           RETURNING id, title, salary, equity, company_handle""",
        [title, salary, equity, company_handle],
    ).mappings().first()
    db.commit()
    logger.info("Job created: id=%s company=%s", row["id"], company_handle)
    return _to_job(row)


def find_all(
    db: Session,
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool | None = None,
) -> list[dict]:
    """List jobs joined with their company name, ordered by id."""
    where, values = job_filter_clause(title=title, min_salary=min_salary, has_equity=has_equity)
    sql = f"""SELECT j.id,
                     j.title,
                     j.salary,
                     j.equity,
                     j.company_handle,
                     c.name AS company_name
              FROM jobs j
              JOIN companies c ON c.handle = j.company_handle
              {where}
              ORDER BY j.id"""
    rows = execute(db, sql, values).mappings().all()
    return [_to_job(r) for r in rows]


def get(db: Session, job_id: int) -> dict:
    """
    Return {id, title, salary, equity, company} where company is
    {handle, name, description, num_employees, logo_url}.

    Raises NotFoundError if there is no such job.
    """
    row = execute(
        db,
        """SELECT id,
                  title,
                  salary,
                  equity,
                  company_handle
           FROM jobs
           WHERE id = $1""",
        [job_id],
    ).mappings().first()
    if not row:
        raise NotFoundError(f"No job: {job_id}")

    job = _to_job(row)
    job["company"] = company_repo.get(db, job.pop("company_handle"))
    return job


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> dict:
    """
    Partial update: only the fields present in ``data`` (title, salary,
    equity) change. id and company_handle must already be stripped by the
    caller.

    Returns {id, title, salary, equity, company_handle}.
    Raises BadRequestError on empty data, NotFoundError if there is no such job.
    """
    set_cols, values = sql_for_partial_update(data, {})
    params = SqlParams(values)
    id_idx = params.add(job_id)

    row = execute(
        db,
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING id, title, salary, equity, company_handle""",
        params.values,
    ).mappings().first()
    if not row:
        raise NotFoundError(f"No job: {job_id}")
    db.commit()
    logger.info("Job updated: id=%s fields=%s", job_id, ", ".join(data))
    return _to_job(row)


def remove(db: Session, job_id: int) -> None:
    """Delete a job. Raises NotFoundError if there is no such job."""
    row = execute(
        db,
        """DELETE
           FROM jobs
           WHERE id = $1
           RETURNING id""",
        [job_id],
    ).first()
    if not row:
        raise NotFoundError(f"No job: {job_id}")
    db.commit()
    logger.info("Job deleted: id=%s", job_id)
