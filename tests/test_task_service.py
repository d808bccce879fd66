from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from tasks_back.db.models.tasks import TaskPriority, TaskStatus
from tasks_back.features.tasks.schemas import TaskCreate, TaskFilter, TaskUpdate
from tasks_back.features.tasks.services import StorageError, TaskNotFoundError


@pytest.fixture()
def fifteen_tasks(make_task):
    # créées dans le désordre pour vérifier le tri par échéance
    for day in [15, 3, 9, 1, 12, 7, 5, 14, 2, 11, 4, 13, 8, 6, 10]:
        make_task(f"Task {day:02d}", date(2024, 1, day))


def test_create_applies_defaults(service):
    task = service.create(TaskCreate(name="Write report", due_date=date(2024, 1, 15)))

    assert task.id is not None
    assert task.created_at is not None
    assert task.status == TaskStatus.PENDING
    assert task.priority == TaskPriority.BLUE
    assert task.is_active is True


def test_second_page_of_fifteen(service, fifteen_tasks):
    page = service.list(TaskFilter(page=2, limit=10))

    assert len(page.data) == 5
    assert [t.due_date.day for t in page.data] == [11, 12, 13, 14, 15]
    assert page.meta.model_dump(by_alias=True) == {
        "currentPage": 2,
        "totalPages": 2,
        "totalItems": 15,
        "itemsPerPage": 10,
        "hasNext": False,
        "hasPrevious": True,
        "nextPage": None,
        "previousPage": 1,
    }


def test_default_filter_returns_first_page_of_ten(service, fifteen_tasks):
    page = service.list(TaskFilter())

    assert len(page.data) == 10
    assert page.meta.current_page == 1
    assert page.meta.next_page == 2


def test_page_beyond_last_is_empty_with_correct_meta(service, fifteen_tasks):
    page = service.list(TaskFilter(page=4, limit=10))

    assert page.data == []
    assert page.meta.total_items == 15
    assert page.meta.total_pages == 2
    assert page.meta.has_next is False
    assert page.meta.previous_page == 3


def test_pages_are_full_except_the_last(service, fifteen_tasks):
    sizes = [len(service.list(TaskFilter(page=p, limit=4)).data) for p in range(1, 5)]
    assert sizes == [4, 4, 4, 3]


def test_listing_is_idempotent(service, fifteen_tasks):
    filters = TaskFilter(text="task", date_from=date(2024, 1, 3), page=2, limit=3)

    assert service.list(filters) == service.list(filters)


def test_meta_counts_only_matching_tasks(service, make_task):
    make_task("Report A", date(2024, 1, 1))
    make_task("Report B", date(2024, 1, 2))
    make_task("Shopping", date(2024, 1, 3))

    page = service.list(TaskFilter(text="REPORT", limit=1))
    assert page.meta.total_items == 2
    assert page.meta.total_pages == 2
    assert [t.name for t in page.data] == ["Report A"]


def test_get_missing_task_raises_not_found(service):
    with pytest.raises(TaskNotFoundError):
        service.get(404)


def test_get_after_delete_raises_not_found(service, make_task):
    task = make_task("to delete")
    service.delete(task.id)

    with pytest.raises(TaskNotFoundError):
        service.get(task.id)


def test_delete_missing_task_raises_not_found(service):
    with pytest.raises(TaskNotFoundError) as exc_info:
        service.delete(999)
    assert exc_info.value.task_id == 999


def test_update_changes_only_supplied_fields(service, make_task):
    task = make_task(
        "Keep me", date(2024, 2, 1), priority=TaskPriority.RED, is_active=False
    )

    updated = service.update(task.id, TaskUpdate(status=TaskStatus.DONE))

    assert updated.status == TaskStatus.DONE
    assert updated.name == "Keep me"
    assert updated.due_date == date(2024, 2, 1)
    assert updated.priority == TaskPriority.RED
    assert updated.is_active is False
    assert updated.created_at == task.created_at


def test_update_with_empty_payload_is_a_no_op(service, make_task):
    task = make_task("Unchanged")

    assert service.update(task.id, TaskUpdate()).name == "Unchanged"


def test_update_missing_task_raises_not_found(service):
    with pytest.raises(TaskNotFoundError):
        service.update(12, TaskUpdate(name="ghost"))


def test_storage_failure_is_wrapped(service, monkeypatch):
    def _boom(**kwargs):
        raise OperationalError("SELECT count(tasks.id)", {}, Exception("database is locked"))

    monkeypatch.setattr(service.repo, "count_matching", _boom)

    with pytest.raises(StorageError) as exc_info:
        service.list(TaskFilter())
    assert isinstance(exc_info.value.cause, OperationalError)
