"""
Unit tests for ExecutorFactory.
"""

import pytest

from judge_sandbox.application.services import ExecutorFactory, ExecutorType
from judge_sandbox.errors import ExecutorNotAvailableError
from judge_sandbox.infrastructure.judge0 import Judge0Executor
from tests.helpers import FakeExecutor


class TestExecutorFactory:
    """Tests for executor ownership and switching."""

    @pytest.fixture
    def factory(self, fake_executor, settings):
        return ExecutorFactory(executor=fake_executor, settings=settings)

    def test_injected_executor(self, factory, fake_executor):
        assert factory.get_executor() is fake_executor
        assert factory.executor_type is ExecutorType.JUDGE0

    def test_builds_judge0_executor_from_settings(self, settings):
        factory = ExecutorFactory(settings=settings)

        assert isinstance(factory.get_executor(), Judge0Executor)
        assert factory.executor_type is ExecutorType.JUDGE0

    def test_docker_from_settings_not_available(self, settings):
        settings = settings.model_copy(update={"executor_type": "docker"})

        with pytest.raises(ExecutorNotAvailableError):
            ExecutorFactory(settings=settings)

    @pytest.mark.asyncio
    async def test_swap_closes_previous_executor(self, factory, fake_executor):
        replacement = FakeExecutor()

        await factory.swap(replacement, ExecutorType.JUDGE0)

        assert factory.get_executor() is replacement
        assert fake_executor.closed is True
        assert replacement.closed is False

    @pytest.mark.asyncio
    async def test_swap_same_executor_keeps_it_open(self, factory, fake_executor):
        await factory.swap(fake_executor, ExecutorType.JUDGE0)

        assert fake_executor.closed is False

    @pytest.mark.asyncio
    async def test_switch_to_docker_keeps_current_executor(self, factory, fake_executor):
        await factory.switch_to_docker()

        assert factory.get_executor() is fake_executor
        assert factory.executor_type is ExecutorType.JUDGE0
        assert fake_executor.closed is False

    @pytest.mark.asyncio
    async def test_switch_to_judge0_is_noop_when_active(self, factory, fake_executor):
        await factory.switch_to_judge0()

        assert factory.get_executor() is fake_executor

    @pytest.mark.asyncio
    async def test_switch_to_judge0_from_other_type(self, fake_executor, settings):
        factory = ExecutorFactory(
            executor=fake_executor, executor_type=ExecutorType.DOCKER, settings=settings
        )

        await factory.switch_to_judge0()

        assert isinstance(factory.get_executor(), Judge0Executor)
        assert factory.executor_type is ExecutorType.JUDGE0
        assert fake_executor.closed is True
        await factory.close()

    @pytest.mark.asyncio
    async def test_close(self, factory, fake_executor):
        await factory.close()

        assert fake_executor.closed is True
