"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Keep the module-level engine away from a real server
os.environ["DATABASE_URL"] = "sqlite://"

from exofinder.database import Base, get_db  # noqa: E402


CSV_COLUMNS = [
    "pl_name", "hostname", "st_spectype", "st_teff", "sy_dist", "ra", "dec",
    "sy_vmag", "pl_bmassj", "pl_radj", "pl_orbper", "pl_eqt",
]


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_row():
    """Factory for raw CSV rows; every cell is text like the CSV reader yields."""

    def _make_row(**overrides):
        row = {column: "" for column in CSV_COLUMNS}
        row.update(overrides)
        return row

    return _make_row


@pytest.fixture
def kepler_22_row(make_row):
    return make_row(
        hostname="Kepler-22",
        pl_name="Kepler-22 b",
        st_spectype="G5",
        st_teff="5518",
        sy_dist="190",
        ra="289.2175",
        dec="47.884",
        sy_vmag="11.664",
        pl_radj="0.2",
        pl_orbper="289.8623",
        pl_eqt="262",
    )


@pytest.fixture
def write_csv(tmp_path):
    """Write rows to a CSV file preceded by archive-style comment lines."""

    def _write_csv(rows, name="exoplanets.csv"):
        lines = [
            "# This file was produced by the NASA Exoplanet Archive",
            "# COLUMN pl_name: Planet Name",
            ",".join(CSV_COLUMNS),
        ]
        for row in rows:
            lines.append(",".join(row.get(column, "") for column in CSV_COLUMNS))
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write_csv


@pytest.fixture
def ragged_csv(write_csv, kepler_22_row, make_row):
    """Two good rows around a line with two extra fields."""
    path = write_csv([
        kepler_22_row,
        make_row(hostname="TRAPPIST-1", pl_name="TRAPPIST-1 e", pl_radj="0.0818", pl_eqt="250"),
    ])
    lines = path.read_text(encoding="utf-8").splitlines()
    ragged = ",".join(["Broken b", "Broken"] + [""] * (len(CSV_COLUMNS) - 2) + ["x", "y"])
    lines.insert(4, ragged)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def client(session_factory):
    """FastAPI test client bound to the in-memory database."""
    from fastapi.testclient import TestClient
    from api import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo configure_logging() side effects so log capture stays per-test."""
    import logging

    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
