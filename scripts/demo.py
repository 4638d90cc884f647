#!/usr/bin/env python3
"""
Demo script for the neologism cache.

Loads the dictionary from the configured Supabase project, runs a few
derived views, and (with DEMO_EMAIL / DEMO_PASSWORD set) creates a word to
show the newest-first ordering and the featured-word pointer.
"""

import asyncio
import os

from neologism_cache import (
    EntityCache,
    LoggingNotificationSink,
    NeologismDraft,
    NeologismStatus,
    SupabaseEntityService,
    settings,
)
from neologism_cache.logging_config import setup_logging


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_browse(cache: EntityCache) -> None:
    """Show the derived views over the loaded snapshot."""
    print_section("Browse")

    print(f"\n{len(cache.neologisms)} neologisms, {len(cache.categories)} categories")
    for category in cache.categories:
        print(f"  {category.name}: {len(cache.filter_by_category(category.id))}")

    latest = cache.get_latest_neologism()
    print(f"\nLatest: {latest.name if latest else '-'}")

    featured = cache.get_random_neologism()
    print(f"Featured: {featured.name if featured else '-'}")

    for query in ("sn", "the"):
        found = cache.search_neologisms(query)
        print(f"\nSearch {query!r}: {[n.name for n in found[:5]]}")


async def demo_create(cache: EntityCache, email: str, password: str) -> None:
    """Sign in, create a word, and show it is featured from now on."""
    print_section("Create")

    await cache.auth.sign_in(email, password)
    created = await cache.add_neologism(
        NeologismDraft(
            name="Demonstruct",
            definition="A word invented only to show off a cache",
            root_words=("demo", "construct"),
            status=NeologismStatus.READY.value,
        )
    )
    if created is None:
        print("Creation failed, see log")
        return

    print(f"\nCreated {created.name} at {created.created_at:%Y-%m-%d %H:%M}")
    print(f"Head of list: {cache.neologisms[0].name}")
    print(f"Featured: {cache.get_random_neologism().name}")

    await cache.delete_neologism(created.id)
    await cache.auth.sign_out()


async def main() -> None:
    setup_logging()
    print(f"Supabase: {settings.supabase_url}")

    service = SupabaseEntityService.create()
    cache = EntityCache.create(service=service, notifier=LoggingNotificationSink())
    try:
        if not await cache.refresh_data():
            print("Could not load data. Check SUPABASE_URL and SUPABASE_ANON_KEY.")
            return

        await demo_browse(cache)

        email, password = os.getenv("DEMO_EMAIL"), os.getenv("DEMO_PASSWORD")
        if email and password:
            await demo_create(cache, email, password)
        else:
            print("\nSet DEMO_EMAIL and DEMO_PASSWORD to try creating a word.")
    finally:
        await service.close()


if __name__ == "__main__":
    asyncio.run(main())
