import asyncio
import uuid

import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import StorageError
from app.db.repositories.post_repository import PostRepository
from app.domains.posts.entities import Post


async def test_acquire_serves_waiters_in_arrival_order(database):
    order = []

    async def worker(i):
        async with database.acquire():
            order.append(i)
            await asyncio.sleep(0)

    async with database.acquire():
        tasks = [asyncio.create_task(worker(i)) for i in range(10)]
        # let every worker queue up on the lock
        await asyncio.sleep(0)

    await asyncio.gather(*tasks)
    assert order == list(range(10))


async def test_acquire_admits_one_holder_at_a_time(database):
    active = 0
    peak = 0

    async def worker():
        nonlocal active, peak
        async with database.acquire():
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.001)
            active -= 1

    await asyncio.gather(*(worker() for _ in range(50)))
    assert peak == 1


async def test_acquire_released_on_error(database):
    with pytest.raises(RuntimeError):
        async with database.acquire():
            raise RuntimeError("boom")

    assert not database.locked
    async with database.acquire():
        pass


async def test_repository_create_and_get(database):
    post = Post.create_post(title="Title", content="Body")
    async with database.acquire() as session:
        repository = PostRepository(session)
        created = await repository.create(post)
        fetched = await repository.get_by_uuid(post.uuid)

    assert created == post
    assert fetched.title == "Title"
    assert fetched.content == "Body"


async def test_repository_get_missing(database):
    async with database.acquire() as session:
        assert await PostRepository(session).get_by_uuid(uuid.uuid4()) is None


async def test_repository_duplicate_uuid_raises_storage_error(database):
    post = Post.create_post(title="Title", content="Body")
    duplicate = Post(uuid=post.uuid, title="Other", content="")

    async with database.acquire() as session:
        repository = PostRepository(session)
        await repository.create(post)
        with pytest.raises(StorageError):
            await repository.create(duplicate)

        # session is usable again after the rollback
        assert await repository.count() == 1


async def test_failed_read_rolls_back_shared_session(database, monkeypatch):
    post = Post.create_post(title="Title", content="Body")

    async with database.acquire() as session:
        repository = PostRepository(session)
        await repository.create(post)

        original_execute = session.execute
        original_rollback = session.rollback
        failures = [OperationalError("SELECT", {}, Exception("connection lost"))] * 2
        rollbacks = []

        async def flaky_execute(*args, **kwargs):
            if failures:
                raise failures.pop()
            return await original_execute(*args, **kwargs)

        async def tracking_rollback():
            rollbacks.append(True)
            await original_rollback()

        monkeypatch.setattr(session, "execute", flaky_execute)
        monkeypatch.setattr(session, "rollback", tracking_rollback)

        with pytest.raises(StorageError):
            await repository.get_by_uuid(post.uuid)
        with pytest.raises(StorageError):
            await repository.count()
        assert rollbacks == [True, True]

        # the next operation on the same session succeeds
        fetched = await repository.get_by_uuid(post.uuid)
        assert fetched.title == "Title"
        assert await repository.count() == 1
