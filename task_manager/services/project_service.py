"""Project service: CRUD over project hashes and the global project index."""
from typing import List
import logging

from task_manager.db.store import StoreClient, translate_store_errors
from task_manager.errors import InvalidInput, NotFound
from task_manager.models.project import PROJECT_INDEX_KEY, Project, project_key
from task_manager.models.timestamps import Clock, utc_now
from task_manager.utils.slug import slugify

logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for project operations against Redis."""

    def __init__(self, store: StoreClient, clock: Clock = utc_now):
        self.store = store
        self.clock = clock

    @translate_store_errors
    async def create_project(self, name: str) -> Project:
        """
        Create a project whose id is the slug of its name.

        There is no existence check: a name that slugs to an existing id
        overwrites that project's fields.

        Raises:
            InvalidInput: If the name is empty or has no usable characters
        """
        if not name or not isinstance(name, str) or not name.strip():
            raise InvalidInput("Project name is required", {"field": "name"})

        project_id = slugify(name)
        if not project_id:
            raise InvalidInput(
                "Project name must contain letters or digits",
                {"field": "name", "value": name}
            )

        project = Project(id=project_id, name=name, created_at=self.clock())

        r = self.store.redis
        await r.hset(project.key, mapping=project.to_hash())
        await r.sadd(PROJECT_INDEX_KEY, project.id)

        logger.info(f"Created project {project.id}")
        return project

    @translate_store_errors
    async def get_project(self, project_id: str) -> Project:
        """
        Read one project.

        Raises:
            NotFound: If project:<id> is empty or has no id field
        """
        data = await self.store.redis.hgetall(project_key(project_id))
        project = Project.from_hash(data)
        if project is None:
            raise NotFound(f"Project {project_id} not found", {"project_id": project_id})
        return project

    @translate_store_errors
    async def list_projects(self) -> List[Project]:
        """List every indexed project, in set iteration order."""
        r = self.store.redis
        project_ids = await r.smembers(PROJECT_INDEX_KEY)
        if not project_ids:
            return []

        # Pipelined, not transactional: entries changed in between may be partial
        async with r.pipeline(transaction=False) as pipe:
            for project_id in project_ids:
                pipe.hgetall(project_key(project_id))
            rows = await pipe.execute()

        projects = [Project.from_hash(row) for row in rows]
        return [project for project in projects if project is not None]
