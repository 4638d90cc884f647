"""Shared test fixtures for neologism-cache."""

import asyncio
import random

import pytest
from fakes import FakeEntityService, make_neologism

from neologism_cache.entities import Category
from neologism_cache.services import CollectingNotificationSink, EntityCache


@pytest.fixture
def service():
    """Empty in-memory remote store."""
    return FakeEntityService()


@pytest.fixture
def seeded_service(service):
    """Remote store with three neologisms A < B < C and two categories."""
    service.categories = [Category("c-sci", "Science"), Category("c-art", "Art")]
    service.neologisms = [
        make_neologism("A", minutes=1, name="Glimmerance", category_id="c-art", category="Art",
                       definition="The glow of an almost-forgotten memory", root_words=("glimmer", "radiance")),
        make_neologism("B", minutes=2, name="Quantoodle", category_id="c-sci", category="Science",
                       definition="A doodle drawn during physics lectures", root_words=("quantum", "doodle"),
                       status="Draft"),
        make_neologism("C", minutes=3, name="Snackrifice", category_id="c-art", category="Art",
                       definition="Giving up the last snack", root_words=("snack", "sacrifice")),
    ]
    return service


@pytest.fixture
def sink():
    return CollectingNotificationSink(maxlen=100)


@pytest.fixture
def cache(seeded_service, sink):
    """Cache wired to the seeded store, not yet loaded or signed in."""
    return EntityCache.create(service=seeded_service, notifier=sink, rng=random.Random(7))


@pytest.fixture
def signed_in_cache(cache, seeded_service, sink):
    """Cache signed in (which loads it); call log and notifications cleared."""
    asyncio.run(cache.auth.sign_in("ada@example.com", FakeEntityService.PASSWORD))
    seeded_service.calls.clear()
    sink.drain()
    return cache
