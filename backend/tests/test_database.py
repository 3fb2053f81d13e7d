import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from jobly.database import execute


class TestExecute:
    def test_binds_positional_values(self, db):
        rows = execute(
            db,
            "SELECT title FROM jobs WHERE salary >= $1 AND company_handle = $2 ORDER BY title",
            [150, "c1"],
        ).all()
        assert [r.title for r in rows] == ["Job2"]

    def test_repeated_and_double_digit_positions(self, db):
        values = list(range(1, 11))
        row = execute(db, "SELECT $10 AS ten, $1 AS one, $1 AS again", values).one()
        assert (row.ten, row.one, row.again) == (10, 1, 1)

    def test_missing_value_fails(self, db):
        with pytest.raises(SQLAlchemyError):
            execute(db, "SELECT $1, $2", [1])


class TestSchema:
    def test_title_is_unique(self, db):
        with pytest.raises(IntegrityError):
            db.execute(text(
                "INSERT INTO jobs (title, company_handle) VALUES ('Job1', 'c1')"
            ))
        db.rollback()

    def test_company_must_exist(self, db):
        with pytest.raises(IntegrityError):
            db.execute(text(
                "INSERT INTO jobs (title, company_handle) VALUES ('x', 'nope')"
            ))
        db.rollback()

    def test_equity_range(self, db):
        with pytest.raises(IntegrityError):
            db.execute(text(
                "INSERT INTO jobs (title, equity, company_handle) VALUES ('x', 1.5, 'c1')"
            ))
        db.rollback()
