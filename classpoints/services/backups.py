"""Backup and restore capability.

Durable backups are not provided yet. The façade depends on
:class:`BackupCapability` so that callers get an explicit ``not_implemented``
error instead of placeholder data, and a working implementation can be
plugged in through :func:`get_backup_capability` without touching routes.
"""

from typing import Protocol

from sqlalchemy.orm import Session

from classpoints.core.exceptions import CapabilityNotImplemented, require_text


class BackupCapability(Protocol):
    def backup(self, db: Session) -> str:
        """Write a backup and return its path."""

    def restore(self, db: Session, backup_path: str) -> None:
        """Replace the current data with the backup at ``backup_path``."""


class UnavailableBackups:
    def backup(self, db: Session) -> str:
        raise CapabilityNotImplemented("backupData")

    def restore(self, db: Session, backup_path: str) -> None:
        require_text(backup_path, "backup_path")
        raise CapabilityNotImplemented("restoreData")


def get_backup_capability() -> BackupCapability:
    return UnavailableBackups()
