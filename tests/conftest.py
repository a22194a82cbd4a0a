# tests/conftest.py
import sys
import pytest
from pathlib import Path
from sqlalchemy.sql import text
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from nuggetbook.identity import Identity
from nuggetbook.sa.database import Database, set_database
from nuggetbook.sa.models import Base, User, Book, Nugget

@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return f"sqlite:///{test_dir / 'test_nuggets.db'}"

@pytest.fixture(scope="session")
def database(test_db_url):
    """Create a test database instance"""
    db = Database(test_db_url)
    
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)
    
    yield db
    
    db.engine.dispose()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(database):
    """Clean up database tables before each test"""
    with database.engine.begin() as conn:
        # Reverse order of dependencies
        for table in ("shared_nugget", "nugget", "book", "user_session", '"user"'):
            conn.execute(text(f"DELETE FROM {table}"))
    set_database(database)
    yield
    set_database(None)

def make_user(session, email, password="secret123", display_name=None):
    user = User(email=email, password_hash=generate_password_hash(password), display_name=display_name)
    session.add(user)
    session.commit()
    return user

@pytest.fixture
def alice(db_session):
    """Create a sample user for testing."""
    return make_user(db_session, "alice@example.com", display_name="Alice")

@pytest.fixture
def bob(db_session):
    return make_user(db_session, "bob@example.com", display_name="Bob")

@pytest.fixture
def alice_identity(alice):
    return Identity(user_id=alice.id, email=alice.email)

@pytest.fixture
def bob_identity(bob):
    return Identity(user_id=bob.id, email=bob.email)

@pytest.fixture
def sample_book(db_session, alice):
    """Create a sample book owned by alice."""
    book = Book(
        user_id=alice.id,
        title="Deep Work",
        author="Cal Newport",
        publisher="Grand Central Publishing",
        published_date="2016-01-05",
        isbn="9781455586691",
        total_pages=304,
        cover_url="https://example.com/deep-work.jpg"
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_nugget(db_session, alice, sample_book):
    """Create a sample nugget in alice's copy of Deep Work."""
    nugget = Nugget(
        user_id=alice.id,
        book_id=sample_book.id,
        content="Clarity about what matters provides clarity about what does not.",
        page_number=42,
        note="Re-read before planning the week",
        tags=["focus", "planning"]
    )
    db_session.add(nugget)
    db_session.commit()
    return nugget
