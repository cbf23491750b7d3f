from sqlalchemy.orm import Session
from exofinder.database.models import Star, Planet
from typing import Optional, List, Dict, Any, Tuple

DEFAULT_PAGE_SIZE = 50


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CatalogService:
    """Read-only queries over the star/planet catalog"""

    def __init__(self, db: Session):
        self.db = db

    # Star operations
    def list_stars(
        self,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        all: bool = False
    ) -> List[Star]:
        """
        List stars ordered by id.

        ``search`` is a case-insensitive substring match on the name.
        Results are paged (``page`` starts at 1) unless ``all`` is set.
        """
        query = self.db.query(Star)

        if search:
            pattern = f"%{_escape_like(search.strip())}%"
            query = query.filter(Star.name.ilike(pattern, escape="\\"))

        query = query.order_by(Star.id)

        if not all:
            page = max(page, 1)
            query = query.offset((page - 1) * page_size).limit(page_size)

        return query.all()

    def get_star(self, star_id: int) -> Optional[Star]:
        return self.db.query(Star).filter(Star.id == star_id).first()

    def get_star_with_planets(self, star_id: int) -> Optional[Tuple[Star, List[Planet]]]:
        """Get a star and all of its planets, or None if the star is unknown"""
        star = self.get_star(star_id)
        if not star:
            return None

        planets = self.db.query(Planet).filter(
            Planet.star_id == star_id
        ).order_by(Planet.id).all()
        return star, planets

    # Planet operations
    def list_planets(self) -> List[Tuple[Planet, str]]:
        """All planets with the name of their host star"""
        return self.db.query(Planet, Star.name).join(
            Star, Planet.star_id == Star.id
        ).order_by(Planet.id).all()

    # Statistics
    def get_catalog_stats(self) -> Dict[str, Any]:
        return {
            "total_stars": self.db.query(Star).count(),
            "total_planets": self.db.query(Planet).count(),
            "habitable_planets": self.db.query(Planet).filter(Planet.is_habitable == True).count()
        }
