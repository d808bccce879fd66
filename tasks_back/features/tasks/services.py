"""
➡️ But : Contenir la logique métier des tâches : orchestrer le repo, paginer, gérer les erreurs.

TaskService :
- traduit un TaskFilter en une requête filtrée (comptage + page),
- calcule les métadonnées de pagination,
- signale les id inexistants (TaskNotFoundError) et les pannes de stockage (StorageError).

Les exceptions restent métier : c'est la route qui les traduit en codes HTTP.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
import math
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from tasks_back.db.models.tasks import Task
from tasks_back.db.repositories.tasks import TaskRepository
from tasks_back.features.tasks.schemas import (
    PaginationMeta,
    TaskCreate,
    TaskFilter,
    TaskOut,
    TaskPageOut,
    TaskUpdate,
)

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: int):
        super().__init__(f"Task with id {task_id} not found")
        self.task_id = task_id


class StorageError(Exception):
    """La base est injoignable ou a refusé l'opération. Pas de retry automatique."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


def build_pagination_meta(*, page: int, limit: int, total_items: int) -> PaginationMeta:
    total_pages = math.ceil(total_items / limit) if limit > 0 else 0
    has_next = page < total_pages
    has_previous = page > 1
    return PaginationMeta(
        current_page=page,
        total_pages=total_pages,
        total_items=total_items,
        items_per_page=limit,
        has_next=has_next,
        has_previous=has_previous,
        next_page=page + 1 if has_next else None,
        previous_page=page - 1 if has_previous else None,
    )


class TaskService:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    # -------- Helpers --------

    @contextmanager
    def _storage(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.repo.session.rollback()
            logger.exception("Storage failure during %s", action)
            raise StorageError(f"Storage failure during {action}", cause=exc) from exc

    def _get_or_raise(self, task_id: int) -> Task:
        task = self.repo.get(task_id)
        if not task:
            raise TaskNotFoundError(task_id)
        return task

    # -------- Reads --------

    def list(self, filters: TaskFilter) -> TaskPageOut:
        criteria = dict(
            date_from=filters.date_from,
            date_to=filters.date_to,
            status=filters.status,
            text=filters.text,
            priorities=filters.priority,
        )
        # comptage puis page, sans snapshot : une écriture concurrente peut
        # décaler légèrement meta par rapport à data
        with self._storage("task listing"):
            total_items = self.repo.count_matching(**criteria)
            items = self.repo.search(offset=filters.offset, limit=filters.limit, **criteria)

        meta = build_pagination_meta(page=filters.page, limit=filters.limit, total_items=total_items)
        logger.debug(
            "Listed %d/%d tasks (page=%d, limit=%d)",
            len(items), total_items, filters.page, filters.limit,
        )
        return TaskPageOut(data=[TaskOut.model_validate(t) for t in items], meta=meta)

    def get(self, task_id: int) -> Task:
        with self._storage("task lookup"):
            return self._get_or_raise(task_id)

    # -------- Writes --------

    def create(self, payload: TaskCreate) -> Task:
        with self._storage("task creation"):
            task = self.repo.create(**payload.model_dump())
        logger.info("Created task id=%s", task.id)
        return task

    def update(self, task_id: int, payload: TaskUpdate) -> Task:
        changes = payload.model_dump(exclude_unset=True)
        with self._storage("task update"):
            task = self._get_or_raise(task_id)
            if not changes:
                return task
            task = self.repo.update(task, **changes)
        logger.info("Updated task id=%s fields=%s", task_id, sorted(changes))
        return task

    def delete(self, task_id: int) -> None:
        with self._storage("task deletion"):
            task = self._get_or_raise(task_id)
            self.repo.delete(task)
        logger.info("Deleted task id=%s", task_id)
