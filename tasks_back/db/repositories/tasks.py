"""
➡️ But : Encapsuler toutes les opérations de base de données sur les tâches.

TaskRepository : CRUD hérité de BaseRepository + la recherche filtrée/paginée.

Les mêmes filtres servent au comptage et à la page : total et données
sont donc toujours calculés sur le même prédicat.

🔹 Avantages :

Les services n’ont pas à savoir comment la requête SQL est construite.

Testable indépendamment avec une base SQLite en mémoire.
"""

# tasks_back/db/repositories/tasks.py
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence
from sqlmodel import select, func

from tasks_back.db.repositories.base import BaseRepository
from tasks_back.db.models.tasks import Task, TaskPriority, TaskStatus
from tasks_back.db.session import SQLITE_LOWER_FN


def escape_like(value: str, escape: str = "\\") -> str:
    """Échappe les jokers SQL (% et _) pour une recherche littérale."""
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


class TaskRepository(BaseRepository[Task]):
    """CRUD Tasks + recherche filtrée."""
    model = Task

    # ---------- HELPERS ----------

    def _apply_filters(
        self,
        stmt,
        *,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        status: Optional[TaskStatus] = None,
        text: Optional[str] = None,
        priorities: Optional[Iterable[TaskPriority]] = None,
    ):
        """
        Ajoute les filtres actifs (ET logique) :
        - date_from / date_to : bornes inclusives sur due_date, chacune optionnelle
        - status              : égalité stricte
        - text                : sous-chaîne insensible à la casse sur name
        - priorities          : appartenance à l'ensemble fourni
        """
        if date_from is not None:
            stmt = stmt.where(self.model.due_date >= date_from)
        if date_to is not None:
            stmt = stmt.where(self.model.due_date <= date_to)
        if status is not None:
            stmt = stmt.where(self.model.status == status)
        if text:
            like = f"%{escape_like(text.lower())}%"
            if self.session.get_bind().dialect.name == "sqlite":
                # lower() natif de SQLite : ASCII seulement, on passe par la fonction Unicode
                lowered = getattr(func, SQLITE_LOWER_FN)(self.model.name)
                stmt = stmt.where(lowered.like(like, escape="\\"))
            else:
                stmt = stmt.where(self.model.name.ilike(like, escape="\\"))
        if priorities:
            stmt = stmt.where(self.model.priority.in_(list(priorities)))
        return stmt

    # ---------- LISTES / RECHERCHE ----------

    def search(
        self,
        *,
        offset: int = 0,
        limit: int = 10,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        status: Optional[TaskStatus] = None,
        text: Optional[str] = None,
        priorities: Optional[Iterable[TaskPriority]] = None,
    ) -> Sequence[Task]:
        """Page de tâches filtrées, triées par échéance puis par id (ordre stable)."""
        stmt = self._apply_filters(
            select(self.model),
            date_from=date_from,
            date_to=date_to,
            status=status,
            text=text,
            priorities=priorities,
        )
        stmt = (
            stmt.order_by(self.model.due_date.asc(), self.model.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return self.session.exec(stmt).all()

    # ---------- COMPTEURS ----------

    def count_matching(
        self,
        *,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        status: Optional[TaskStatus] = None,
        text: Optional[str] = None,
        priorities: Optional[Iterable[TaskPriority]] = None,
    ) -> int:
        """Nombre de tâches qui passent les filtres, sans pagination."""
        stmt = self._apply_filters(
            select(func.count(self.model.id)),
            date_from=date_from,
            date_to=date_to,
            status=status,
            text=text,
            priorities=priorities,
        )
        return self.session.exec(stmt).one()

    # ---------- EXISTENCE ----------

    def exists(self, name: str, due_date: date) -> bool:
        """Vérifie si une tâche de même nom existe déjà pour cette échéance."""
        stmt = select(self.model.id).where(
            self.model.name == name, self.model.due_date == due_date
        ).limit(1)
        return self.session.exec(stmt).first() is not None
