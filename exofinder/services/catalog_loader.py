"""
Catalog loader: extract rows from the exoplanet CSV, transform them into
CatalogRecords and load them into the stars/planets tables.

Loading is idempotent. Stars are looked up by name and reused (the first
row seen for a star wins), planets are looked up by name and skipped when
already present. Every record is committed before the next one starts.
The loader must be the only writer while it runs.
"""
import io
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import pandas as pd
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from exofinder.database.models import Star, Planet
from exofinder.schemas import CatalogRecord, LoadSummary, RecordOutcome
from .exceptions import CatalogError, MalformedRowError, StoreUnavailableError
from .transform import parse_catalog_row

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def read_catalog_csv(
    path: Union[str, Path],
    on_bad_line: Callable[[List[str]], None] = None
) -> List[Dict[str, str]]:
    """
    Read the source CSV into a list of row dicts.

    Lines starting with '#' are dropped before parsing. Every cell is kept
    as text (empty cells become ''), numeric parsing happens per field in
    the transform step. Lines with more fields than the header are logged,
    passed to ``on_bad_line`` and left out of the result.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8-sig") as f:
        lines = [line for line in f if not line.startswith(COMMENT_PREFIX)]

    if not any(line.strip() for line in lines):
        return []

    def skip_bad_line(fields: List[str]) -> None:
        logger.warning("⚠️ Skipped malformed CSV line with %d fields: %s", len(fields), fields[:2])
        if on_bad_line is not None:
            on_bad_line(fields)
        return None

    df = pd.read_csv(
        io.StringIO("".join(lines)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
        on_bad_lines=skip_bad_line,
    )
    return df.to_dict(orient="records")


class CatalogLoader:
    """Loads catalog rows into the database through an explicit session"""

    def __init__(self, db: Session):
        self.db = db
        self.summary = LoadSummary()

    # Lookups
    def find_star_id(self, name: str) -> Optional[int]:
        return self.db.query(Star.id).filter(Star.name == name).scalar()

    def find_planet_id(self, name: str) -> Optional[int]:
        return self.db.query(Planet.id).filter(Planet.name == name).scalar()

    def _insert(self, row: Union[Star, Planet]) -> Optional[int]:
        """
        Insert and commit one row. Returns the new id, or None when the
        unique constraint on name rejected it. Values the column types
        reject (e.g. an over-long name) raise MalformedRowError.
        """
        self.db.add(row)
        try:
            self.db.flush()
            row_id = row.id
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return None
        except DataError as exc:
            self.db.rollback()
            raise MalformedRowError(f"Rejected by the store: {exc.orig}") from exc
        return row_id

    # Upserts
    def get_or_create_star(self, record: CatalogRecord) -> Tuple[int, bool]:
        """Return (star_id, created). An existing star is never modified."""
        star_id = self.find_star_id(record.host_name)
        if star_id is not None:
            logger.debug("Star already in catalog: %s (id=%s)", record.host_name, star_id)
            return star_id, False

        star_id = self._insert(Star(
            name=record.host_name,
            spectral_type=record.spectral_type,
            temperature_k=record.temperature_k,
            distance_ly=record.distance_ly,
            ra=record.ra,
            dec_deg=record.dec_deg,
            v_mag=record.v_mag
        ))
        if star_id is not None:
            logger.info("⭐ Created star: %s", record.host_name)
            return star_id, True

        # Another writer inserted the same name after our lookup
        star_id = self.find_star_id(record.host_name)
        if star_id is None:
            raise CatalogError(f"Could not insert star {record.host_name!r}")
        return star_id, False

    def create_planet_if_absent(self, record: CatalogRecord, star_id: int) -> bool:
        """Insert the planet unless one with the same name exists"""
        if self.find_planet_id(record.planet_name) is not None:
            logger.info("⏩ Skipped duplicate planet: %s", record.planet_name)
            return False

        planet_id = self._insert(Planet(
            name=record.planet_name,
            star_id=star_id,
            mass_jup=record.mass_jup,
            radius_jup=record.radius_jup,
            orbital_period_days=record.orbital_period_days,
            is_habitable=record.is_habitable
        ))
        if planet_id is None:
            if self.find_planet_id(record.planet_name) is None:
                raise CatalogError(f"Could not insert planet {record.planet_name!r}")
            logger.info("⏩ Skipped duplicate planet: %s", record.planet_name)
            return False

        logger.info("🪐 Created planet: %s (star_id=%s)", record.planet_name, star_id)
        return True

    # Records
    def load_record(self, row: Mapping[str, Any], row_number: int = None) -> RecordOutcome:
        """
        Process one raw source row.

        Malformed rows are logged and skipped. Store failures raise
        StoreUnavailableError.
        """
        try:
            record = parse_catalog_row(row, row_number=row_number)
            star_id, star_created = self.get_or_create_star(record)
            planet_created = self.create_planet_if_absent(record, star_id)
        except SQLAlchemyError as exc:
            logger.error("❌ Catalog store failed at row %s: %s", row_number, exc)
            raise StoreUnavailableError(f"Catalog store failed at row {row_number}: {exc}") from exc
        except CatalogError as exc:
            logger.warning("⚠️ Skipped row %s: %s", row_number, exc)
            self.summary.rows_skipped += 1
            return RecordOutcome.ROW_SKIPPED

        if star_created:
            self.summary.stars_created += 1
        else:
            self.summary.stars_reused += 1

        if planet_created:
            self.summary.planets_created += 1
            return RecordOutcome.PLANET_INSERTED

        self.summary.planets_skipped += 1
        return RecordOutcome.PLANET_SKIPPED

    def load_records(self, rows: Iterable[Mapping[str, Any]], unreadable_rows: int = 0) -> LoadSummary:
        """
        Load rows in order and return the run summary. ``unreadable_rows``
        counts source lines the reader already dropped.
        """
        self.summary = LoadSummary(rows_total=unreadable_rows, rows_skipped=unreadable_rows)

        for row_number, row in enumerate(rows, start=1):
            self.summary.rows_total += 1
            self.load_record(row, row_number=row_number)

        logger.info(
            "✅ Catalog load complete: %d rows, %d stars created, %d stars reused, "
            "%d planets created, %d planets skipped, %d rows skipped",
            self.summary.rows_total,
            self.summary.stars_created,
            self.summary.stars_reused,
            self.summary.planets_created,
            self.summary.planets_skipped,
            self.summary.rows_skipped,
        )
        return self.summary

    def load_csv(self, path: Union[str, Path]) -> LoadSummary:
        bad_lines = []
        rows = read_catalog_csv(path, on_bad_line=bad_lines.append)
        logger.info("📦 Extracted %d rows from %s", len(rows), path)
        return self.load_records(rows, unreadable_rows=len(bad_lines))
