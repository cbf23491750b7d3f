from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey, Boolean
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime

Base = declarative_base()

class Star(Base):
    """Host stars, unique by name"""
    __tablename__ = "stars"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    spectral_type = Column(String(50), nullable=False, default="Unknown")
    temperature_k = Column(Float, nullable=True)
    distance_ly = Column(Float, nullable=True)

    # Telescope coordinates
    ra = Column(Float, nullable=True)
    dec_deg = Column(Float, nullable=True)
    v_mag = Column(Float, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    planets = relationship("Planet", back_populates="star", order_by="Planet.id")

class Planet(Base):
    """Planets, unique by name and owned by exactly one star"""
    __tablename__ = "planets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    star_id = Column(Integer, ForeignKey("stars.id"), nullable=False, index=True)

    # Physical properties
    mass_jup = Column(Float, nullable=True)
    radius_jup = Column(Float, nullable=True)
    orbital_period_days = Column(Float, nullable=True)
    is_habitable = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    star = relationship("Star", back_populates="planets")
