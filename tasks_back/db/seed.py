import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError
from sqlmodel import Session

from tasks_back.db.repositories.tasks import TaskRepository
from tasks_back.features.tasks.schemas import TaskCreate

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed Tasks
# -----------------------------
def seed_tasks(session: Session, data: Dict[str, Any]) -> int:
    """
    Insère les tâches de la clé 'tasks'.
    Une tâche déjà présente (même nom, même échéance) est ignorée : le seed peut être rejoué.
    Retourne le nombre de tâches insérées.
    """
    tasks: List[Dict[str, Any]] = data.get("tasks") or []
    if not tasks:
        logger.warning("⚠️ Aucune tâche dans le YAML (clé 'tasks').")
        return 0

    repo = TaskRepository(session)
    inserted = 0
    for i, raw in enumerate(tasks):
        try:
            payload = TaskCreate.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Tâche invalide à l'index {i} dans le YAML: {e}") from e

        if repo.exists(payload.name, payload.due_date):
            continue
        repo.create(commit=False, **payload.model_dump())
        inserted += 1

    session.commit()
    logger.info("✅ %d tâche(s) insérée(s), %d déjà présente(s).", inserted, len(tasks) - inserted)
    return inserted


def seed_all(session: Session, seed_path: str | Path) -> int:
    data = load_seed_yaml(seed_path)
    return seed_tasks(session, data)
