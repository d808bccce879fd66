"""
➡️ But : Configurer la base et gérer les sessions de base de données.

engine : connexion à la base (par défaut SQLite, sqlite:///tasks.db).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)).
"""

from typing import Dict, Any, Optional
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

# Import all models for creating all tables
from tasks_back.db.models.tasks import Task

from tasks_back.core.config import settings

# Fonction SQL enregistrée sur chaque connexion SQLite : le lower() natif ne replie que l'ASCII
SQLITE_LOWER_FN = "unicode_lower"


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def build_engine(url: Optional[str] = None) -> Engine:
    url = url or settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")
    is_memory = url in ("sqlite://", "sqlite:///:memory:")

    connect_args: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False
    if is_memory:
        # une seule connexion partagée, sinon chaque thread voit une base vide
        extra["poolclass"] = StaticPool

    # echo seulement en dev pour ne pas polluer les logs en prod
    engine = create_engine(
        url,
        echo=(settings.ENV == "dev"),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **extra,
    )

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _register_functions(dbapi_conn, _record):
            dbapi_conn.create_function(SQLITE_LOWER_FN, 1, _unicode_lower)

    return engine

engine: Engine = build_engine()

def init_db(bind: Optional[Engine] = None) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    Pas de migrations : le schéma est créé tel quel au démarrage.
    """
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
