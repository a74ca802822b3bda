"""Shared harness for API tests: in-memory SQLite database and a TestClient."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.security import create_access_token, hash_password
from app.main import app
from app.models import Address, Base, Institution, InstitutionType, User, UserRole

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


class ApiTestCase(unittest.TestCase):
    """Fresh schema per test; requests go through the real app with get_db overridden."""

    def setUp(self) -> None:
        Base.metadata.create_all(engine)
        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(engine)

    def make_user(
        self,
        username: str,
        password: str = "secret123",
        role: UserRole = UserRole.USER,
        name: str | None = None,
    ) -> int:
        """Insert a user and return its id."""
        with TestingSessionLocal() as db:
            user = User(
                name=name or username.title(),
                username=username,
                password_hash=hash_password(password),
                role=role,
            )
            db.add(user)
            db.commit()
            return user.id

    def make_address(self, city: str = "New York", state: str = "New York", country: str = "United States") -> int:
        with TestingSessionLocal() as db:
            address = Address(city=city, state=state, country=country)
            db.add(address)
            db.commit()
            return address.id

    def make_institution(self, name: str = "New York University") -> int:
        address_id = self.make_address(city=f"{name} City")
        with TestingSessionLocal() as db:
            institution = Institution(name=name, type=InstitutionType.TERTIARY, address_id=address_id)
            db.add(institution)
            db.commit()
            return institution.id

    def auth_headers(self, user_id: int, username: str = "someone") -> dict[str, str]:
        with TestingSessionLocal() as db:
            user = db.get(User, user_id)
            username = user.username if user is not None else username
        return {"Authorization": f"Bearer {create_access_token(user_id, username)}"}

    def count(self, model: type[Base]) -> int:
        with TestingSessionLocal() as db:
            return db.query(model).count()
