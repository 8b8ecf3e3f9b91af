"""Configuration default model."""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from template_config.models.base import Base, IntegerIDMixin


class ConfigDefault(Base, IntegerIDMixin):
    """Fallback value for a key within a section."""

    __tablename__ = "config_defaults"
    __table_args__ = {"sqlite_autoincrement": True}

    section_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("config_sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cfg_key: Mapped[str] = mapped_column(Text, nullable=False)
    cfg_value: Mapped[str] = mapped_column(Text, nullable=False)
    value_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("config_value_types.id"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<ConfigDefault {self.id}: {self.cfg_key}>"
