"""Domain layer for salesmaster application."""

from salesmaster.domain.entities import AccountRecord, ColumnMapping, Field, Role, Session

__all__ = ["AccountRecord", "ColumnMapping", "Field", "Role", "Session"]
