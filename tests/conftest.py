"""
Pytest configuration and fixtures for testing.

Tests run against in-memory SQLite with the cheapest bcrypt work factor.
common_setup/common_teardown take the session explicitly so the seed data
never lives in module state.
"""

import os

# Must be set before jobly.core.config is imported
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite:///:memory:"
os.environ["BCRYPT_WORK_FACTOR"] = "4"

import pytest

from jobly.core.database import SessionLocal, init_db, drop_db
from jobly.core.security import get_password_hash
from jobly.models import Application, Company, Job, User


def common_setup(db):
    """
    Create the schema and seed companies, jobs, users and applications.

    Returns:
        Ids of the seeded jobs j1, j2, j3 in that order
    """
    init_db(db.get_bind())

    db.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
    ])

    jobs = [
        Job(title="j1", salary=100, equity=0.1, company_handle="c1"),
        Job(title="j2", salary=200, equity=0.2, company_handle="c2"),
        Job(title="j3", salary=300, equity=0.3, company_handle="c2"),
    ]
    db.add_all(jobs)

    db.add_all([
        User(
            username="u1",
            password=get_password_hash("password1"),
            first_name="U1F",
            last_name="U1L",
            email="u1@email.com",
        ),
        User(
            username="u2",
            password=get_password_hash("password2"),
            first_name="U2F",
            last_name="U2L",
            email="u2@email.com",
        ),
    ])
    db.flush()

    job_ids = [job.id for job in jobs]

    db.add_all([
        Application(username="u1", job_id=job_ids[0]),
        Application(username="u1", job_id=job_ids[1]),
    ])
    db.commit()

    # Tests should see the database, not objects cached while seeding
    db.expunge_all()

    return job_ids


def common_teardown(db):
    """Discard the session and drop every table."""
    bind = db.get_bind()
    db.rollback()
    db.close()
    drop_db(bind)


@pytest.fixture
def db_session():
    """
    Seeded database session, torn down after each test.
    """
    db = SessionLocal()
    db.info["job_ids"] = common_setup(db)
    try:
        yield db
    finally:
        common_teardown(db)


@pytest.fixture
def job_ids(db_session):
    """Ids of the seeded jobs j1, j2, j3"""
    return db_session.info["job_ids"]
