from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric, String, Uuid

from examples_api.db.base import Base


class Example(Base):
    __tablename__ = "examples"
    __table_args__ = (
        CheckConstraint("version >= 0", name="ck_examples_version_non_negative"),
        CheckConstraint("created_at <= updated_at", name="ck_examples_created_before_updated"),
    )

    id = Column(Uuid, primary_key=True)
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    country = Column(String(64), nullable=False)
    salary = Column(Numeric(14, 2), nullable=True)

    # The application sets the version; SQLAlchemy adds "AND version = <old>"
    # to every UPDATE and raises StaleDataError when no row matches.
    __mapper_args__ = {"version_id_col": version, "version_id_generator": False}
