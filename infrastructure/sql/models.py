import uuid
from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from infrastructure.config import Settings, settings


class Base(DeclarativeBase):
    pass


class PageRow(Base):
    __tablename__ = settings.pages_table

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    layout: Mapped[str] = mapped_column(String(256), nullable=False)
    data: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    translations: Mapped[List["PageTranslationRow"]] = relationship(
        back_populates="page",
        order_by="PageTranslationRow.id",
        cascade="all, delete-orphan",
    )


class PageTranslationRow(Base):
    __tablename__ = settings.page_translations_table
    __table_args__ = (
        UniqueConstraint(settings.page_translation_foreign_key, "locale", name="uq_page_translation_locale"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    page_id: Mapped[uuid.UUID] = mapped_column(
        settings.page_translation_foreign_key,
        Uuid,
        ForeignKey(f"{settings.pages_table}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    locale: Mapped[str] = mapped_column(String(16), nullable=False)
    title: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    route: Mapped[str] = mapped_column(String(256), nullable=False, index=True)

    page: Mapped[PageRow] = relationship(back_populates="translations")


def check_schema_names(app_settings: Settings) -> None:
    """Table and key names are bound when this module is imported.

    A ``Settings`` object that names a different schema cannot take effect
    afterwards, so it is rejected instead of silently ignored.
    """
    expected = {
        "PAGES_TABLE": (app_settings.pages_table, PageRow.__table__.name),
        "PAGE_TRANSLATIONS_TABLE": (
            app_settings.page_translations_table,
            PageTranslationRow.__table__.name,
        ),
        "PAGE_TRANSLATION_FOREIGN_KEY": (
            app_settings.page_translation_foreign_key,
            PageTranslationRow.__table__.c[settings.page_translation_foreign_key].name,
        ),
    }
    mismatched = [name for name, (wanted, mapped) in expected.items() if wanted != mapped]
    if mismatched:
        msg = (
            f"{', '.join(mismatched)} differ from the mapped schema; "
            "set them in the environment before importing infrastructure.sql.models"
        )
        raise ValueError(msg)
