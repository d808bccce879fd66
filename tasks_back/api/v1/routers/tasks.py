"""
➡️ But : Définir les endpoints de l’API des tâches.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PATCH, DELETE…)

Appelle le service correspondant

Traduit les erreurs métier en codes HTTP (404, 503)

🔹 Avantages :

Automatiquement documentée dans Swagger.

Isolation totale du reste du code : les routes ne contiennent ni SQL ni logique métier.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from tasks_back.api.v1.dependencies import get_task_service, task_filters
from tasks_back.features.tasks.schemas import TaskCreate, TaskFilter, TaskOut, TaskPageOut, TaskUpdate
from tasks_back.features.tasks.services import StorageError, TaskNotFoundError, TaskService

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={
        404: {"description": "Not Found"},
        503: {"description": "Storage unavailable"},
    },
)


def _storage_unavailable() -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Storage unavailable")


@router.post(
    "",
    summary="Créer une tâche",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskOut,
)
def create_task(payload: TaskCreate, svc: TaskService = Depends(get_task_service)):
    try:
        return svc.create(payload)
    except StorageError:
        raise _storage_unavailable()


@router.get(
    "",
    summary="Lister les tâches",
    description="Retourne une page de tâches triées par échéance, avec les métadonnées de pagination.",
    response_model=TaskPageOut,
    responses={
        200: {
            "description": "Liste paginée",
            "content": {
                "application/json": {
                    "example": {
                        "data": [{"id": 1, "name": "Rédiger le rapport", "dueDate": "2024-01-15",
                                  "status": "Pending", "priority": "Red",
                                  "createdAt": "2024-01-01T10:00:00Z", "isActive": True}],
                        "meta": {"currentPage": 1, "totalPages": 1, "totalItems": 1, "itemsPerPage": 10,
                                 "hasNext": False, "hasPrevious": False, "nextPage": None, "previousPage": None},
                    }
                }
            },
        }
    },
)
def list_tasks(filters: TaskFilter = Depends(task_filters), svc: TaskService = Depends(get_task_service)):
    try:
        return svc.list(filters)
    except StorageError:
        raise _storage_unavailable()


@router.get(
    "/{task_id}",
    summary="Récupérer une tâche",
    response_model=TaskOut,
)
def get_task(task_id: int = Path(..., ge=1), svc: TaskService = Depends(get_task_service)):
    try:
        return svc.get(task_id)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except StorageError:
        raise _storage_unavailable()


@router.patch(
    "/{task_id}",
    summary="Mettre à jour une tâche",
    response_model=TaskOut,
)
def update_task(
    payload: TaskUpdate,
    task_id: int = Path(..., ge=1),
    svc: TaskService = Depends(get_task_service),
):
    try:
        return svc.update(task_id, payload)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except StorageError:
        raise _storage_unavailable()


@router.delete(
    "/{task_id}",
    summary="Supprimer une tâche",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_task(task_id: int = Path(..., ge=1), svc: TaskService = Depends(get_task_service)):
    try:
        svc.delete(task_id)
        return None
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except StorageError:
        raise _storage_unavailable()
