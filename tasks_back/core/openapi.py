"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter un titre, une description détaillée,

documenter les conventions de l'API (dates, pagination, filtres).

🔹 Avantages :

La doc est toujours complète et cohérente.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de tâches FastAPI + SQLModel.\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Les dates (`dueDate`, `from`, `to`) sont au format `YYYY-MM-DD`.\n"
            "- Pagination: query params `page` & `limit`, réponse `{data, meta}`.\n"
            "- Filtre priorité multiple: `priority=Red&priority=Blue`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
