import pytest

from task_manager.errors import InvalidInput, NotFound
from task_manager.models.timestamps import utc_now
from task_manager.services.project_service import ProjectService
from task_manager.utils.slug import slugify


async def test_create_project_derives_id_from_name(projects, redis_client) -> None:
    project = await projects.create_project("My Project")

    assert project.id == "my-project" == slugify("My Project")
    assert project.name == "My Project"
    assert await redis_client.hgetall("project:my-project") == {
        "id": "my-project",
        "name": "My Project",
        "createdAt": "2026-10-17T09:00:00.000Z",
    }
    assert await redis_client.smembers("project:index") == {"my-project"}


async def test_create_project_timestamp_is_not_before_the_call(store) -> None:
    service = ProjectService(store)
    before = utc_now()
    project = await service.create_project("Launch")
    assert project.created_at >= before
    assert (await service.get_project("launch")).created_at == project.created_at


@pytest.mark.parametrize("name", ["", "   ", "?!"])
async def test_create_project_rejects_empty_names(projects, redis_client, name) -> None:
    with pytest.raises(InvalidInput):
        await projects.create_project(name)
    assert await redis_client.keys("*") == []


async def test_recreating_a_project_overwrites_it(projects, redis_client) -> None:
    await projects.create_project("My Project")
    second = await projects.create_project("my project!")

    stored = await projects.get_project("my-project")
    assert stored == second
    assert stored.name == "my project!"
    assert await redis_client.smembers("project:index") == {"my-project"}


async def test_get_project(projects) -> None:
    created = await projects.create_project("Garden")
    assert await projects.get_project("garden") == created


async def test_get_missing_project_raises_not_found(projects, redis_client) -> None:
    with pytest.raises(NotFound):
        await projects.get_project("nonexistent")

    # A hash without an id field is not a project either
    await redis_client.hset("project:broken", mapping={"name": "Broken"})
    with pytest.raises(NotFound):
        await projects.get_project("broken")


async def test_list_projects(projects) -> None:
    assert await projects.list_projects() == []

    await projects.create_project("Alpha")
    await projects.create_project("Beta")

    listed = await projects.list_projects()
    assert {project.id for project in listed} == {"alpha", "beta"}


async def test_list_projects_drops_dangling_index_entries(projects, redis_client) -> None:
    await projects.create_project("Alpha")
    await redis_client.sadd("project:index", "ghost")

    listed = await projects.list_projects()
    assert [project.id for project in listed] == ["alpha"]


async def test_project_with_unreadable_timestamp_is_treated_as_absent(projects, redis_client) -> None:
    await projects.create_project("Beta")
    await redis_client.hset("project:alpha", mapping={"id": "alpha", "name": "Alpha", "createdAt": "yesterday"})
    await redis_client.sadd("project:index", "alpha")

    with pytest.raises(NotFound):
        await projects.get_project("alpha")
    assert [project.id for project in await projects.list_projects()] == ["beta"]
