from sqlalchemy.orm import Session

from jobly.helpers.sql import execute


def exists(db: Session, handle: str) -> bool:
    row = execute(
        db,
        """SELECT handle
           FROM companies
           WHERE handle = $1""",
        [handle],
    ).first()
    return row is not None


def get(db: Session, handle: str) -> dict | None:
    """Return {handle, name, description, num_employees, logo_url} or None."""
    row = execute(
        db,
        """SELECT handle,
                  name,
                  description,
                  num_employees,
                  logo_url
           FROM companies
           WHERE handle = $1""",
        [handle],
    ).mappings().first()
    return dict(row) if row else None
