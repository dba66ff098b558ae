"""Shared pytest fixtures for salesmaster tests."""

import tempfile
import os
import pytest

from salesmaster.clients.identity import AnonymousIdentityProvider
from salesmaster.config import load_settings
from salesmaster.database.factories import create_sqlite_store
from salesmaster.domain.account_import import AccountImportService
from salesmaster.domain.bulk_replace import BulkReplaceService
from salesmaster.domain.session import SessionService

SAMPLE_CSV = (
    "Cliente,Vendedor,Monto,Estatus,Telefono,Notas\n"
    "Ana Lopez,Juan Perez,100,Pendiente,(55) 1234-5678,llamar\n"
    "Luis Diaz,Maria Ruiz,250.50,Vencido,,\n"
    "\"Ferreteria \"\"El Clavo\"\"\",juan perez lopez,\"1,200\",Al corriente,5598765432,\n"
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("SALESMASTER_"):
            monkeypatch.delenv(name)


@pytest.fixture
def temp_store():
    """Create a temporary document store for testing."""
    # Create a temporary file for the store
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def settings():
    """Default settings with no environment overrides."""
    return load_settings(environ={})


@pytest.fixture
def collection(settings):
    return settings.collection


@pytest.fixture
def identity():
    return AnonymousIdentityProvider()


@pytest.fixture
def session_service(identity, settings):
    return SessionService(identity, settings.admin_passwords)


@pytest.fixture
def admin_session(session_service):
    return session_service.login_admin("admin")


@pytest.fixture
def vendor_session(session_service):
    return session_service.login_vendor("Juan")


@pytest.fixture
def replacer(temp_store, collection):
    """Bulk replace service without the inter-batch pause."""
    return BulkReplaceService(temp_store, collection, pause=0)


@pytest.fixture
def import_service(temp_store, collection, replacer):
    return AccountImportService(temp_store, collection, replacer=replacer)


@pytest.fixture
def sample_csv(tmp_path):
    """Write the sample account spreadsheet and return its path."""
    path = tmp_path / "cartera.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def imported_accounts(import_service, admin_session, sample_csv):
    """Import the sample spreadsheet with the default mapping."""
    draft = import_service.load_file(str(sample_csv))
    return import_service.commit(admin_session, draft)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
