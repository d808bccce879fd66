import sys

from tasks_back.core.logging_config import configure_logging
from tasks_back.db.session import engine, Session, init_db
from tasks_back.db.seed import seed_all

DEFAULT_SEED_PATH = "tasks_back/db/seed_data.yaml"

def run_seed(seed_path: str = DEFAULT_SEED_PATH) -> None:
    configure_logging()
    init_db()
    with Session(engine) as session:
        seed_all(session=session, seed_path=seed_path)

if __name__ == "__main__":
    run_seed(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SEED_PATH)
