import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, get_db, init_db, make_engine
from dependencies.security import CurrentUser, get_optional_user
from main import app
from models.courses import Course as CourseModel
from models.professor_pages import ProfessorPage as ProfessorPageModel
from models.users import User as UserModel, UserType


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def users(db):
    """Three students, two professors and one admin."""
    rows = {
        "alice": UserModel(name="Alice", user_type=UserType.STUDENT),
        "bob": UserModel(name="Bob", user_type=UserType.STUDENT),
        "carol": UserModel(name="Carol", user_type=UserType.STUDENT),
        "mary": UserModel(name="Mary Johnson", user_type=UserType.PROFESSOR),
        "john": UserModel(name="John Smith", user_type=UserType.PROFESSOR),
        "admin": UserModel(name="Admin", user_type=UserType.ADMIN),
    }
    db.add_all(rows.values())
    db.commit()
    return {key: user.id for key, user in rows.items()}


@pytest.fixture
def course(db, users):
    row = CourseModel(id=10, code="CS 3340", name="Analysis of Algorithms", professor_id=users["john"])
    db.add(row)
    db.commit()
    return row.id


@pytest.fixture
def professor_page(db, users):
    row = ProfessorPageModel(
        id=7, professor_id=users["mary"], bio="PhD in Mathematics",
        office_hours="TR 1-3PM", office_location="HC3020",
    )
    db.add(row)
    db.commit()
    return row.id


class SessionUser:
    """Swaps the user the API sees as logged in."""

    def __init__(self):
        self.current = None

    def login(self, user_id: int, user_type: UserType = UserType.STUDENT):
        self.current = CurrentUser(id=user_id, user_type=user_type)

    def logout(self):
        self.current = None


@pytest.fixture
def session_user():
    return SessionUser()


@pytest.fixture
def client(db, session_user):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_optional_user] = lambda: session_user.current
    yield TestClient(app)
    app.dependency_overrides.clear()
