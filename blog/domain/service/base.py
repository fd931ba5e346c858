"""Base service class for domain services."""

from typing import Any, Awaitable, TypeVar

import logfire

from blog.domain.error import StoreFailureError

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    async def _best_effort(
        self, step: str, operation: Awaitable[T], **attributes: Any
    ) -> T | None:
        """Run one step of a multi-document sequence without aborting it.

        A store failure is logged with the step name and swallowed so the
        remaining steps still run; earlier steps are not rolled back.

        Returns:
            The step's result, or None if it failed
        """
        try:
            result = await operation
        except StoreFailureError as e:
            logfire.error("Step failed", step=step, error=str(e), **attributes)
            return None
        logfire.debug("Step completed", step=step, **attributes)
        return result
