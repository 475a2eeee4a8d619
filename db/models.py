"""
db.models - SQLAlchemy ORM declarations.

Tables
------
eav_attribute              - one row per catalog attribute (type, input,
                             validation hint, source model, search config).
eav_attribute_label        - store-scoped label overrides.
eav_attribute_option       - coded options of select / multiselect attributes.
eav_attribute_option_value - store-scoped option labels.  Store 0 is the
                             admin scope every other store falls back to.
"""

from __future__ import annotations

from sqlalchemy import (
    Column, String, Integer, Float, Boolean, Text, ForeignKey, Index,
)
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class EavAttribute(Base):
    __tablename__ = "eav_attribute"

    attribute_id   = Column(Integer, primary_key=True, autoincrement=True)
    attribute_code = Column(String(255), unique=True, nullable=False, index=True)

    # ── Storage / input ────────────────────────────────────────────────
    backend_type   = Column(String(8), nullable=False, default="static")
    frontend_input = Column(String(50), default="text")
    frontend_class = Column(String(255), nullable=True)
    source_model   = Column(String(255), nullable=True)
    frontend_label = Column(String(255), default="")

    # ── Search configuration ───────────────────────────────────────────
    is_searchable = Column(Boolean, nullable=False, default=False)
    is_filterable = Column(Boolean, nullable=False, default=False)
    search_weight = Column(Float, nullable=False, default=1.0)

    labels = relationship(
        "EavAttributeLabel", back_populates="attribute",
        cascade="all, delete-orphan", lazy="selectin",
    )
    options = relationship(
        "EavAttributeOption", back_populates="attribute",
        cascade="all, delete-orphan", order_by="EavAttributeOption.sort_order",
    )


class EavAttributeLabel(Base):
    __tablename__ = "eav_attribute_label"

    id           = Column(Integer, primary_key=True, autoincrement=True)
    attribute_id = Column(Integer,
                          ForeignKey("eav_attribute.attribute_id", ondelete="CASCADE"),
                          nullable=False)
    store_id     = Column(Integer, nullable=False, default=0)
    value        = Column(String(255), nullable=False, default="")

    attribute = relationship("EavAttribute", back_populates="labels")

    __table_args__ = (
        Index("ix_attribute_label_store", "attribute_id", "store_id", unique=True),
    )


class EavAttributeOption(Base):
    __tablename__ = "eav_attribute_option"

    option_id    = Column(Integer, primary_key=True, autoincrement=True)
    attribute_id = Column(Integer,
                          ForeignKey("eav_attribute.attribute_id", ondelete="CASCADE"),
                          nullable=False, index=True)
    sort_order   = Column(Integer, nullable=False, default=0)

    attribute = relationship("EavAttribute", back_populates="options")
    values = relationship(
        "EavAttributeOptionValue", back_populates="option",
        cascade="all, delete-orphan", lazy="selectin",
    )


class EavAttributeOptionValue(Base):
    __tablename__ = "eav_attribute_option_value"

    value_id  = Column(Integer, primary_key=True, autoincrement=True)
    option_id = Column(Integer,
                       ForeignKey("eav_attribute_option.option_id", ondelete="CASCADE"),
                       nullable=False)
    store_id  = Column(Integer, nullable=False, default=0)
    value     = Column(Text, nullable=False, default="")

    option = relationship("EavAttributeOption", back_populates="values")

    __table_args__ = (
        Index("ix_option_value_store", "option_id", "store_id", unique=True),
    )
