"""
CRUD operations for the User model.

Implements the Repository pattern for users and their job applications.
Every function takes the database session as its first argument and
commits (or rolls back) its own transaction. Failures are raised as
JoblyError subclasses, which carry the status code the API layer returns.
"""

import logging
from contextlib import contextmanager
from typing import List, Union

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from jobly.core.exceptions import JoblyError, BadRequestError, NotFoundError, UnauthorizedError
from jobly.core.security import get_password_hash, verify_password
from jobly.crud.utils import build_update_values
from jobly.models.application import Application, ApplicationState
from jobly.models.job import Job
from jobly.models.user import User
from jobly.schemas.user import (
    UserRegisterRequest,
    UserUpdateRequest,
    UserResponse,
    UserWithJobsResponse,
)

logger = logging.getLogger(__name__)


@contextmanager
def _transaction(db: Session, conflict_message: str = "Conflicting data"):
    """
    Run a block of writes as one transaction.

    Commits on success. Uniqueness violations reported by the database
    become BadRequestError; everything else is re-raised after rolling
    back. Callers check that referenced rows exist before writing.
    """
    try:
        yield
        db.commit()
    except JoblyError:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"{conflict_message}: {e.orig}")
        raise BadRequestError(conflict_message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error: {e}")
        raise


def _to_response_with_jobs(user: User) -> UserWithJobsResponse:
    return UserWithJobsResponse(
        **UserResponse.model_validate(user).model_dump(),
        jobs=user.job_ids
    )


def _get_user_or_404(db: Session, username: str) -> User:
    user = db.query(User).filter(User.username == username).first()
    if not user:
        raise NotFoundError(f"No user: {username}")
    return user


def _get_job_or_404(db: Session, job_id: int) -> Job:
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError(f"No job: {job_id}")
    return job


def authenticate(db: Session, username: str, password: str) -> UserResponse:
    """
    Authenticate a user with username and password.

    Args:
        db: Database session
        username: Username to look up
        password: Plain text password

    Returns:
        Public profile of the user (no password hash)

    Raises:
        UnauthorizedError: If the user does not exist or the password is wrong
    """
    user = db.query(User).filter(User.username == username).first()

    if not user or not verify_password(password, user.password):
        logger.warning(f"Failed authentication for username '{username}'")
        raise UnauthorizedError("Invalid username/password")

    return UserResponse.model_validate(user)


def register(db: Session, user_data: UserRegisterRequest) -> UserResponse:
    """
    Register a new user with a hashed password.

    Args:
        db: Database session
        user_data: Validated registration data

    Returns:
        Public profile of the created user

    Raises:
        BadRequestError: If the username (or email) is already taken
    """
    existing_user = db.query(User).filter(User.username == user_data.username).first()
    if existing_user:
        logger.warning(f"Registration rejected, duplicate username '{user_data.username}'")
        raise BadRequestError(f"Duplicate username: {user_data.username}")

    new_user = User(
        username=user_data.username,
        password=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        is_admin=user_data.is_admin,
    )

    # The primary key and the unique email column settle concurrent registrations
    with _transaction(db, f"Duplicate username or email: {user_data.username}"):
        db.add(new_user)

    db.refresh(new_user)
    logger.info(f"New user registered: {new_user.username} (admin: {new_user.is_admin})")

    return UserResponse.model_validate(new_user)


def find_all(db: Session) -> List[UserWithJobsResponse]:
    """
    Retrieve all users with the ids of the jobs they applied for.

    Returns:
        Users ordered by username
    """
    users = (
        db.query(User)
        .options(selectinload(User.applications))
        .order_by(User.username)
        .all()
    )
    return [_to_response_with_jobs(user) for user in users]


def get(db: Session, username: str) -> UserWithJobsResponse:
    """
    Retrieve a user by username, with the ids of the jobs they applied for.

    Raises:
        NotFoundError: If no such user exists
    """
    user = (
        db.query(User)
        .options(selectinload(User.applications))
        .filter(User.username == username)
        .first()
    )
    if not user:
        raise NotFoundError(f"No user: {username}")

    return _to_response_with_jobs(user)


def update(db: Session, username: str, user_data: UserUpdateRequest) -> UserResponse:
    """
    Partially update a user.

    Only the fields set on ``user_data`` are written. A new password is
    hashed before storage.

    Args:
        db: Database session
        username: User to update
        user_data: Fields to change

    Returns:
        Updated public profile

    Raises:
        BadRequestError: If no fields are supplied, or the new email is taken
        NotFoundError: If no such user exists
    """
    values = dict(build_update_values(user_data.model_dump(exclude_unset=True)))

    if "password" in values:
        values["password"] = get_password_hash(values["password"])

    with _transaction(db, f"Duplicate email: {values.get('email')}"):
        updated = (
            db.query(User)
            .filter(User.username == username)
            .update(values, synchronize_session=False)
        )
        if not updated:
            raise NotFoundError(f"No user: {username}")

    logger.info(f"Updated user {username}: {sorted(values)}")

    return UserResponse.model_validate(_get_user_or_404(db, username))


def remove(db: Session, username: str) -> None:
    """
    Delete a user. Their applications are removed by the foreign key cascade.

    Raises:
        NotFoundError: If no such user exists
    """
    with _transaction(db):
        deleted = (
            db.query(User)
            .filter(User.username == username)
            .delete(synchronize_session=False)
        )
        if not deleted:
            raise NotFoundError(f"No user: {username}")

    logger.info(f"Deleted user {username}")


def apply_for_job(db: Session, username: str, job_id: int) -> None:
    """
    Record that a user applied for a job.

    Raises:
        NotFoundError: If the user or the job does not exist
        BadRequestError: If the user already applied for this job
    """
    _get_user_or_404(db, username)
    _get_job_or_404(db, job_id)

    # The (username, job_id) primary key rejects duplicates, including concurrent ones
    with _transaction(db, f"Already applied: {username} for job {job_id}"):
        db.execute(
            insert(Application).values(username=username, job_id=job_id)
        )

    logger.info(f"User {username} applied for job {job_id}")


def update_app_status(
    db: Session,
    username: str,
    job_id: int,
    state: Union[ApplicationState, str]
) -> None:
    """
    Change the state of an existing application.

    Args:
        db: Database session
        username: Applicant
        job_id: Job applied for
        state: One of 'interested', 'applied', 'accepted', 'rejected'

    Raises:
        BadRequestError: If ``state`` is not a valid application state
        NotFoundError: If the user, the job or the application does not exist
    """
    if state not in ApplicationState.values():
        raise BadRequestError(
            f"Invalid state '{state}', expected one of {', '.join(ApplicationState.values())}"
        )

    _get_user_or_404(db, username)
    _get_job_or_404(db, job_id)

    with _transaction(db):
        updated = (
            db.query(Application)
            .filter(Application.username == username, Application.job_id == job_id)
            .update({"state": ApplicationState(state)}, synchronize_session=False)
        )
        if not updated:
            raise NotFoundError(f"No application: {username} for job {job_id}")

    logger.info(f"Application {username} -> job {job_id} is now '{ApplicationState(state).value}'")
