"""Task service: CRUD over task hashes and per-project task lists."""
from typing import List
import logging

from task_manager.db.store import StoreClient, translate_store_errors
from task_manager.errors import Conflict, InvalidInput, NotFound
from task_manager.models.project import project_key, project_tasks_key
from task_manager.models.task import Task, task_key
from task_manager.models.timestamps import Clock, format_timestamp, utc_now
from task_manager.utils.slug import slugify

logger = logging.getLogger(__name__)


class TaskService:
    """
    Service class for task operations against Redis.

    Task ids are the slug of the title and are not scoped by project, so two
    projects adding a task with the same title share one task:<id> hash and
    the later write wins. Writing the hash and appending to the project's
    list are separate commands; a failure in between can leave one without
    the other.
    """

    def __init__(self, store: StoreClient, clock: Clock = utc_now):
        self.store = store
        self.clock = clock

    @translate_store_errors
    async def add_task(self, project_id: str, title: str) -> Task:
        """
        Add a task to the end of a project's task list.

        Raises:
            InvalidInput: If the title is empty or has no usable characters
            NotFound: If the project does not exist (nothing is written)
        """
        if not title or not isinstance(title, str) or not title.strip():
            raise InvalidInput("Task title is required", {"field": "title"})

        task_id = slugify(title)
        if not task_id:
            raise InvalidInput(
                "Task title must contain letters or digits",
                {"field": "title", "value": title}
            )

        r = self.store.redis
        list_key = project_tasks_key(project_id)

        async with r.pipeline(transaction=False) as pipe:
            pipe.exists(project_key(project_id))
            pipe.lrange(list_key, 0, -1)
            exists, listed_ids = await pipe.execute()

        if not exists:
            raise NotFound(f"Project {project_id} not found", {"project_id": project_id})

        task = Task(
            id=task_id,
            project_id=project_id,
            title=title,
            done=False,
            created_at=self.clock(),
        )
        await r.hset(task.key, mapping=task.to_hash())
        if task.id not in listed_ids:
            await r.rpush(list_key, task.id)

        logger.info(f"Added task {task.id} to project {project_id}")
        return task

    @translate_store_errors
    async def list_tasks(self, project_id: str) -> List[Task]:
        """
        List a project's tasks in insertion order.

        Driven by the task list alone: a project without a list (existing or
        not) has no tasks. List entries whose hash is gone are skipped.
        """
        r = self.store.redis
        task_ids = await r.lrange(project_tasks_key(project_id), 0, -1)
        if not task_ids:
            return []

        async with r.pipeline(transaction=False) as pipe:
            for task_id in task_ids:
                pipe.hgetall(task_key(task_id))
            rows = await pipe.execute()

        tasks = [Task.from_hash(row) for row in rows]
        return [task for task in tasks if task is not None]

    @translate_store_errors
    async def complete_task(self, project_id: str, task_id: str) -> Task:
        """
        Mark a task done.

        Not a compare-and-swap: completing a done task again succeeds and
        moves completedAt forward; concurrent completions are last writer wins.

        Raises:
            NotFound: If task:<task_id> does not exist
            Conflict: If the task is stored under a different project
        """
        r = self.store.redis
        key = task_key(task_id)

        current = Task.from_hash(await r.hgetall(key))
        if current is None:
            raise NotFound(f"Task {task_id} not found", {"task_id": task_id})
        if current.project_id != project_id:
            raise Conflict(
                "Project mismatch",
                {
                    "task_id": task_id,
                    "project_id": project_id,
                    "task_project_id": current.project_id,
                }
            )

        completed_at = format_timestamp(self.clock())
        async with r.pipeline(transaction=False) as pipe:
            pipe.hset(key, mapping={"done": "true", "completedAt": completed_at})
            pipe.hgetall(key)
            _, stored = await pipe.execute()

        task = Task.from_hash(stored)
        if task is None:
            raise NotFound(f"Task {task_id} not found", {"task_id": task_id})

        logger.info(f"Completed task {task_id} in project {project_id}")
        return task
