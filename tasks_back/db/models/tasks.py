from datetime import date
from enum import Enum

from sqlmodel import Field
from sqlalchemy import Column, Enum as SAEnum

from .base import BaseModelDB


class TaskStatus(str, Enum):
    PENDING = "Pending"
    DONE = "Done"
    IN_PROGRESS = "In Progress"
    PAUSED = "Paused"


class TaskPriority(str, Enum):
    RED = "Red"        # haute
    YELLOW = "Yellow"  # moyenne
    BLUE = "Blue"      # normale


def _enum_values(enum_cls):
    # on persiste les valeurs ("In Progress"), pas les noms (IN_PROGRESS)
    return [member.value for member in enum_cls]


class Task(BaseModelDB, table=True):
    """Tâche planifiable : un enregistrement à plat, sans relation."""

    __tablename__ = "tasks"

    name: str = Field(index=True, description="Nom de la tâche")
    due_date: date = Field(index=True, description="Échéance (date seule, sans heure)")

    status: TaskStatus = Field(
        default=TaskStatus.PENDING,
        sa_column=Column(
            SAEnum(TaskStatus, name="task_status", values_callable=_enum_values, create_constraint=True),
            nullable=False,
            default=TaskStatus.PENDING,
        ),
        description="Statut de la tâche",
    )
    priority: TaskPriority = Field(
        default=TaskPriority.BLUE,
        sa_column=Column(
            SAEnum(TaskPriority, name="task_priority", values_callable=_enum_values, create_constraint=True),
            nullable=False,
            default=TaskPriority.BLUE,
        ),
        description="Priorité de la tâche",
    )

    # Purement informatif : jamais géré automatiquement (pas de soft-delete)
    is_active: bool = Field(default=True)
