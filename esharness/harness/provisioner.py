"""Create the fixture indices and seed them with the fixed document corpus.

Every step is a blocking request issued in order. The comment is written
after its parent tweet and the flush after the last write; the first failure
is reported through ``t.fatal`` and nothing after it runs.
"""

from __future__ import annotations

from typing import Any, Optional

from esharness.client.client import ESClient
from esharness.client.errors import DecodeError, ElasticError
from esharness.fixtures.documents import (
    COMMENT,
    COMMENT_ID,
    COMMENT_PARENT,
    NOSOURCE_TWEETS,
    ORDERS,
    TWEET_ROUTING,
    TWEETS,
)
from esharness.fixtures.mapping import TEST_INDEX_NAME, TEST_INDEX_NAME2, TEST_MAPPING

from .config import HarnessSettings
from .factory import setup_test_client
from .reporting import FatalReporter
from .state import FixtureRun, ProvisioningState


def _stdout_trace(line: str) -> None:
    print(line)


def create_fixture_index(t: FatalReporter, client: ESClient, name: str) -> None:
    try:
        created = client.create_index(name, TEST_MAPPING)
    except (ElasticError, DecodeError) as exc:
        t.fatal(f"cannot create index {name}: {exc}")
    if created is None or not created.acknowledged:
        t.fatal(f"expected acknowledged create-index result for {name}; got: {created!r}")


def index_fixture(
    t: FatalReporter,
    client: ESClient,
    run: FixtureRun,
    doc_type: str,
    doc_id: str,
    doc: Any,
    routing: Optional[str] = None,
    parent: Optional[str] = None,
) -> None:
    try:
        client.index_document(
            TEST_INDEX_NAME, doc_type, doc_id, doc, routing=routing, parent=parent
        )
    except (ElasticError, DecodeError) as exc:
        t.fatal(f"cannot index {doc_type}/{doc_id} ({doc}): {exc}")
    run.record(TEST_INDEX_NAME, doc_type, doc_id)


def flush_fixtures(t: FatalReporter, client: ESClient, run: FixtureRun) -> None:
    try:
        client.flush(TEST_INDEX_NAME)
    except (ElasticError, DecodeError) as exc:
        t.fatal(f"cannot flush {TEST_INDEX_NAME}: {exc}")
    run.advance(ProvisioningState.FLUSHED)


def setup_test_client_and_create_index(
    t: FatalReporter,
    settings: Optional[HarnessSettings] = None,
    run: Optional[FixtureRun] = None,
    **options: Any,
) -> ESClient:
    run = run if run is not None else FixtureRun()
    client = setup_test_client(t, settings, run=run, **options)
    create_fixture_index(t, client, TEST_INDEX_NAME)
    create_fixture_index(t, client, TEST_INDEX_NAME2)
    run.advance(ProvisioningState.INDICES_CREATED)
    return client


def setup_test_client_and_create_index_and_log(
    t: FatalReporter,
    settings: Optional[HarnessSettings] = None,
    run: Optional[FixtureRun] = None,
    **options: Any,
) -> ESClient:
    """Same as setup_test_client_and_create_index, tracing every request to stdout."""

    options.setdefault("trace_log", _stdout_trace)
    return setup_test_client_and_create_index(t, settings, run=run, **options)


def setup_test_client_and_create_index_and_add_docs(
    t: FatalReporter,
    settings: Optional[HarnessSettings] = None,
    run: Optional[FixtureRun] = None,
    **options: Any,
) -> ESClient:
    """Fixture indices plus 3 tweets, 1 comment (child of tweet 3) and 8 orders, flushed."""

    run = run if run is not None else FixtureRun()
    client = setup_test_client_and_create_index(t, settings, run=run, **options)

    for i, tweet in enumerate(TWEETS, start=1):
        doc_id = str(i)
        index_fixture(t, client, run, "tweet", doc_id, tweet, routing=TWEET_ROUTING.get(doc_id))
    index_fixture(t, client, run, "comment", COMMENT_ID, COMMENT, parent=COMMENT_PARENT)

    for i, order in enumerate(ORDERS):
        index_fixture(t, client, run, "order", str(i), order)
    run.advance(ProvisioningState.DOCUMENTS_SEEDED)

    flush_fixtures(t, client, run)
    return client


def setup_test_client_and_create_index_and_add_docs_no_source(
    t: FatalReporter,
    settings: Optional[HarnessSettings] = None,
    run: Optional[FixtureRun] = None,
    **options: Any,
) -> ESClient:
    """Fixture indices plus 2 tweets of the source-less type, flushed."""

    run = run if run is not None else FixtureRun()
    client = setup_test_client_and_create_index(t, settings, run=run, **options)

    for i, tweet in enumerate(NOSOURCE_TWEETS, start=1):
        index_fixture(t, client, run, "tweet-nosource", str(i), tweet)
    run.advance(ProvisioningState.DOCUMENTS_SEEDED)

    flush_fixtures(t, client, run)
    return client


__all__ = [
    "create_fixture_index",
    "index_fixture",
    "flush_fixtures",
    "setup_test_client_and_create_index",
    "setup_test_client_and_create_index_and_log",
    "setup_test_client_and_create_index_and_add_docs",
    "setup_test_client_and_create_index_and_add_docs_no_source",
]
