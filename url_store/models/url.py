from sqlalchemy import CheckConstraint, Column, Index, Integer, Text
from url_store.database.connection import Base


class URL(Base):
    """
    One alias -> URL mapping.
    
    Records are created and deleted, never updated in place.
    Lookups always go through `alias`; `id` is a surrogate key only.
    """
    __tablename__ = "url"

    # AUTOINCREMENT on SQLite keeps ids strictly increasing, even after the
    # newest row is deleted
    id = Column(Integer, primary_key=True, autoincrement=True)
    # Uniqueness is enforced by the database, not by application checks
    alias = Column(Text, nullable=False, unique=True)
    # Several aliases may point at the same URL
    url = Column(Text, nullable=False)

    __table_args__ = (
        CheckConstraint("length(alias) > 0", name="ck_url_alias_not_empty"),
        CheckConstraint("length(url) > 0", name="ck_url_url_not_empty"),
        # Redundant with the UNIQUE constraint, kept so point lookups are
        # indexed whatever the backend does for constraints
        Index("idx_alias", "alias"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"URL(id={self.id!r}, alias={self.alias!r}, url={self.url!r})"
