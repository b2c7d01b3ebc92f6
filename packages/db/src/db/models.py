# This project was developed with assistance from AI tools.
"""
Pet clinic -- domain models

Owners (clinic customers), their pets, pet types, and visits, plus the
demo-data seeding manifest.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base


class Owner(Base):
    """Clinic customer, searchable by last name."""

    __tablename__ = "owners"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False, index=True)
    address = Column(String(255), nullable=False)
    city = Column(String(80), nullable=False)
    telephone = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    pets = relationship(
        "Pet", back_populates="owner", cascade="all, delete-orphan", order_by="Pet.name",
    )

    def __repr__(self):
        return f"<Owner(id={self.id}, name='{self.first_name} {self.last_name}')>"


class PetType(Base):
    """Species lookup (cat, dog, ...)."""

    __tablename__ = "types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(80), nullable=False, unique=True)

    def __repr__(self):
        return f"<PetType(id={self.id}, name='{self.name}')>"


class Pet(Base):
    __tablename__ = "pets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(30), nullable=False)
    birth_date = Column(Date, nullable=True)
    type_id = Column(Integer, ForeignKey("types.id"), nullable=False)
    owner_id = Column(Integer, ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True)

    owner = relationship("Owner", back_populates="pets")
    type = relationship("PetType")
    visits = relationship(
        "Visit", back_populates="pet", cascade="all, delete-orphan", order_by="Visit.visit_date",
    )

    def __repr__(self):
        return f"<Pet(id={self.id}, name='{self.name}')>"


class Visit(Base):
    """A single clinic visit for a pet."""

    __tablename__ = "visits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True)
    visit_date = Column(Date, nullable=True)
    description = Column(String(255), nullable=True)

    pet = relationship("Pet", back_populates="visits")

    def __repr__(self):
        return f"<Visit(id={self.id}, pet_id={self.pet_id}, date='{self.visit_date}')>"


class DemoDataManifest(Base):
    """Tracks demo data seeding for idempotency."""

    __tablename__ = "demo_data_manifest"

    id = Column(Integer, primary_key=True, autoincrement=True)
    seeded_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    config_hash = Column(String(64), nullable=False)
    summary = Column(Text, nullable=True)

    def __repr__(self):
        return f"<DemoDataManifest(id={self.id}, seeded_at='{self.seeded_at}')>"
