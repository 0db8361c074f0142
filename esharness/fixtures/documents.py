"""Document records and the fixed corpus seeded into the fixture indices."""

from __future__ import annotations

import json
import random
import string
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field

from esharness.client.records import Record


class SuggestField(Record):
    omit_empty: ClassVar[Tuple[str, ...]] = ("input", "weight", "contexts")

    input: List[str] = Field(default_factory=list)
    weight: int = 0
    contexts: Optional[Dict[str, Any]] = None


class Tweet(Record):
    omit_empty: ClassVar[Tuple[str, ...]] = ("image", "created", "tags", "location", "suggest")

    user: str = ""
    message: str = ""
    retweets: int = 0
    image: str = ""
    created: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)
    location: str = ""
    suggest: Optional[SuggestField] = Field(default=None, alias="suggest_field")

    def __str__(self) -> str:
        return (
            f"tweet{{User:{json.dumps(self.user)},Message:{json.dumps(self.message)},"
            f"Retweets:{self.retweets}}}"
        )


class Comment(Record):
    omit_empty: ClassVar[Tuple[str, ...]] = ("created",)

    user: str = ""
    comment: str = ""
    created: Optional[datetime] = None

    def __str__(self) -> str:
        return f"comment{{User:{json.dumps(self.user)},Comment:{json.dumps(self.comment)}}}"


class Order(Record):
    omit_empty: ClassVar[Tuple[str, ...]] = ("time",)

    article: str = ""
    manufacturer: str = ""
    price: float = 0.0
    time: str = ""

    def __str__(self) -> str:
        return (
            f"order{{Article:{json.dumps(self.article)},Manufacturer:{json.dumps(self.manufacturer)},"
            f"Price:{self.price:g},Time:{self.time}}}"
        )


# doctype and queries back the percolator tests.
class Doctype(Record):
    message: str = ""


class Queries(Record):
    query: str = ""


TWEETS: List[Tweet] = [
    Tweet(user="olivere", message="Welcome to Golang and Elasticsearch."),
    Tweet(user="olivere", message="Another unrelated topic."),
    Tweet(user="sandrae", message="Cycling is fun."),
]
TWEET_ROUTING = {"3": "someroutingkey"}

COMMENT = Comment(user="nico", comment="You bet.")
COMMENT_ID = "1"
COMMENT_PARENT = "3"

ORDERS: List[Order] = [
    Order(article="Apple MacBook", manufacturer="Apple", price=1290, time="2015-01-18"),
    Order(article="Paper", manufacturer="Canon", price=100, time="2015-03-01"),
    Order(article="Apple iPad", manufacturer="Apple", price=499, time="2015-04-12"),
    Order(article="Dell XPS 13", manufacturer="Dell", price=1600, time="2015-04-18"),
    Order(article="Apple Watch", manufacturer="Apple", price=349, time="2015-04-29"),
    Order(article="Samsung TV", manufacturer="Samsung", price=790, time="2015-05-03"),
    Order(article="Hoodie", manufacturer="h&m", price=49, time="2015-06-03"),
    Order(article="T-Shirt", manufacturer="h&m", price=19, time="2015-06-18"),
]

NOSOURCE_TWEETS: List[Tweet] = TWEETS[:2]

_LETTERS = string.ascii_lowercase + string.ascii_uppercase


def random_string(n: int) -> str:
    return "".join(random.choice(_LETTERS) for _ in range(n))


__all__ = [
    "Record",
    "SuggestField",
    "Tweet",
    "Comment",
    "Order",
    "Doctype",
    "Queries",
    "TWEETS",
    "TWEET_ROUTING",
    "COMMENT",
    "COMMENT_ID",
    "COMMENT_PARENT",
    "ORDERS",
    "NOSOURCE_TWEETS",
    "random_string",
]
