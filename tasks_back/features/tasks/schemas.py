from datetime import date, datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from tasks_back.db.models.tasks import TaskPriority, TaskStatus


# Champs JSON en camelCase (dueDate, isActive...), snake_case accepté en entrée
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- IN / UPDATE ----------

class TaskCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Rédiger le rapport"])
    due_date: date = Field(..., description="Échéance au format YYYY-MM-DD", examples=["2024-01-15"])
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.BLUE
    is_active: bool = True


class TaskUpdate(CamelModel):
    """Mise à jour partielle : seuls les champs envoyés sont modifiés."""

    name: Optional[str] = Field(None, min_length=1, examples=["Relire le rapport"])
    due_date: Optional[date] = None
    status: Optional[TaskStatus] = Field(None, examples=["Done"])
    priority: Optional[TaskPriority] = None
    is_active: Optional[bool] = None

    # null explicite refusé : les colonnes ne sont pas nullables
    @field_validator("name", "due_date", "status", "priority", "is_active", mode="before")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("null is not allowed, omit the field instead")
        return value


# ---------- FILTRES ----------

class TaskFilter(BaseModel):
    """Filtres normalisés de la liste. Tous optionnels, combinés en ET."""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[TaskStatus] = None
    text: Optional[str] = None
    priority: Optional[List[TaskPriority]] = None
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)

    @field_validator("priority")
    @classmethod
    def dedupe_priorities(cls, value: Optional[List[TaskPriority]]):
        if not value:
            return None
        # dédoublonnage en gardant l'ordre de première apparition
        return list(dict.fromkeys(value))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


# ---------- OUT ----------

class TaskOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    due_date: date
    status: TaskStatus
    priority: TaskPriority
    created_at: datetime
    is_active: bool

    # SQLite rend des datetimes naïfs : ils ont été écrits en UTC
    @field_validator("created_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class PaginationMeta(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next: bool
    has_previous: bool
    next_page: Optional[int] = None
    previous_page: Optional[int] = None


class TaskPageOut(BaseModel):
    data: List[TaskOut]
    meta: PaginationMeta
