"""Fixed fixture data: index names, mapping and seed documents."""

from .documents import (
    COMMENT,
    NOSOURCE_TWEETS,
    ORDERS,
    TWEETS,
    Comment,
    Doctype,
    Order,
    Queries,
    SuggestField,
    Tweet,
    random_string,
)
from .mapping import (
    FIXTURE_INDICES,
    TEST_INDEX_NAME,
    TEST_INDEX_NAME2,
    TEST_MAPPING,
    MappingError,
    load_mapping,
)

__all__ = [
    "COMMENT",
    "NOSOURCE_TWEETS",
    "ORDERS",
    "TWEETS",
    "Comment",
    "Doctype",
    "Order",
    "Queries",
    "SuggestField",
    "Tweet",
    "random_string",
    "FIXTURE_INDICES",
    "TEST_INDEX_NAME",
    "TEST_INDEX_NAME2",
    "TEST_MAPPING",
    "MappingError",
    "load_mapping",
]
