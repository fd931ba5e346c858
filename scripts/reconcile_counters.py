#!/usr/bin/env python3
"""Recompute every blog's like and comment counters from stored rows.

Counters are maintained with atomic increments and can drift when a
best-effort step fails; this pass resets them to the true tallies.
"""

import asyncio
import sys

import logfire
from dishka import AsyncContainer

from blog.config import Settings
from blog.domain.error import NotFoundError
from blog.domain.repository import BlogRepository
from blog.domain.service import BlogService
from blog.util.di.container import create_container
from blog.util.observability import configure_logfire


async def reconcile_blogs(container: AsyncContainer) -> int:
    """Reconcile every blog, one request scope per blog.

    Blogs deleted after the id listing are skipped.

    Returns:
        Number of blogs reconciled
    """
    async with container() as request_container:
        blog_repository = await request_container.get(BlogRepository)
        blog_ids = await blog_repository.find_all_ids()

    reconciled = 0
    for blog_id in blog_ids:
        # One request scope (and transaction) per blog
        async with container() as request_container:
            blog_service = await request_container.get(BlogService)
            try:
                await blog_service.reconcile_counters(blog_id)
            except NotFoundError:
                logfire.info("Blog vanished before reconciliation", blog_id=str(blog_id))
                continue
        reconciled += 1
    logfire.info(
        "Counter reconciliation finished", blogs=len(blog_ids), reconciled=reconciled
    )
    return reconciled


async def reconcile() -> int:
    container = create_container()
    try:
        return await reconcile_blogs(container)
    finally:
        await container.close()


def main() -> int:
    """Run reconciliation and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        asyncio.run(reconcile())
        return 0
    except Exception as e:
        logfire.error(
            "Counter reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
