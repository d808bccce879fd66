"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_task_service() : crée un TaskService à partir d’une session DB.

task_filters() : lit les query params de la liste (filtres + page / limit).

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from datetime import date
from typing import List, Optional

from fastapi import Depends, Query
from sqlmodel import Session

from tasks_back.core.config import settings
from tasks_back.db.session import get_session
from tasks_back.db.models.tasks import TaskPriority, TaskStatus
from tasks_back.db.repositories.tasks import TaskRepository
from tasks_back.features.tasks.schemas import TaskFilter
from tasks_back.features.tasks.services import TaskService


def task_filters(
    date_from: Optional[date] = Query(
        None, alias="from", description="Date de début (incluse) - Format: YYYY-MM-DD", examples=["2024-01-01"]
    ),
    date_to: Optional[date] = Query(
        None, alias="to", description="Date de fin (incluse) - Format: YYYY-MM-DD", examples=["2024-01-31"]
    ),
    status: Optional[TaskStatus] = Query(None, description="Filtre statut : Pending, Done, In Progress, Paused"),
    text: Optional[str] = Query(None, description="Recherche insensible à la casse dans le nom"),
    priority: Optional[List[TaskPriority]] = Query(
        None, description="Filtre priorité : Red, Yellow, Blue. Répétable (priority=Red&priority=Blue)"
    ),
    page: int = Query(1, ge=1, description="Numéro de page", examples=[1]),
    limit: int = Query(
        settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT, description="Taille de page", examples=[10]
    ),
) -> TaskFilter:
    return TaskFilter(
        date_from=date_from,
        date_to=date_to,
        status=status,
        text=text,
        priority=priority,
        page=page,
        limit=limit,
    )


# -----------------------------
# Repositories
# -----------------------------
def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return TaskRepository(session)


# -----------------------------
# Task service
# -----------------------------
def get_task_service(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    return TaskService(repo=task_repo)
