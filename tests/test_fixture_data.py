"""Tests for esharness.fixtures covering the mapping document and seed records.

Run with coverage:
    pytest tests/test_fixture_data.py --maxfail=1 -v --cov=esharness.fixtures --cov-report=term-missing
"""

import json
from datetime import datetime

import pytest

from esharness.fixtures import documents, mapping
from esharness.fixtures.documents import Comment, Doctype, Order, Queries, SuggestField, Tweet


def test_index_names_are_fixed():
    assert mapping.FIXTURE_INDICES == ("elastic-test", "elastic-test2")


def test_mapping_declares_every_fixture_type():
    doc = mapping.mapping_document()
    assert doc["settings"] == {"number_of_shards": 1, "number_of_replicas": 0}
    for doc_type in mapping.DOC_TYPES:
        assert doc_type in doc["mappings"]

    types = doc["mappings"]
    assert types["comment"]["_parent"] == {"type": "tweet"}
    assert types["queries"]["properties"]["query"]["type"] == "percolator"
    assert types["tweet"]["properties"]["location"]["type"] == "geo_point"
    assert types["tweet"]["properties"]["suggest_field"]["contexts"] == [{"name": "user_name", "type": "category"}]
    assert types["order"]["properties"]["time"] == {"type": "date", "format": "YYYY-MM-dd"}
    assert types["tweet-nosource"]["_source"] == {"enabled": False}


def test_test_mapping_is_the_file_text_verbatim():
    assert mapping.TEST_MAPPING == mapping.MAPPING_PATH.read_text(encoding="utf-8")
    assert mapping.load_mapping() is mapping.TEST_MAPPING


@pytest.mark.parametrize(
    "doc, message",
    [
        ([], "JSON object"),
        ({"mappings": {"t": {}}}, "settings"),
        ({"settings": {"number_of_shards": "1", "number_of_replicas": 0}, "mappings": {"t": {}}}, "number_of_shards"),
        ({"settings": {"number_of_shards": 1, "number_of_replicas": True}, "mappings": {"t": {}}}, "number_of_replicas"),
        ({"settings": {"number_of_shards": 1, "number_of_replicas": 0}, "mappings": {}}, "mappings"),
        ({"settings": {"number_of_shards": 1, "number_of_replicas": 0}, "mappings": {"t": []}}, "mappings.t"),
    ],
)
def test_shape_check_rejects_malformed_mappings(doc, message):
    with pytest.raises(mapping.MappingError, match=message):
        mapping.check_mapping_shape(doc)


def test_load_mapping_rejects_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ nope", encoding="utf-8")
    with pytest.raises(mapping.MappingError, match="not valid JSON"):
        mapping.load_mapping(path)


def test_load_mapping_reads_alternate_file(tmp_path):
    path = tmp_path / "small.json"
    text = json.dumps({"settings": {"number_of_shards": 2, "number_of_replicas": 1}, "mappings": {"doc": {}}})
    path.write_text(text, encoding="utf-8")
    assert mapping.load_mapping(path) == text


def test_empty_optional_fields_are_omitted():
    assert Tweet(user="olivere", message="hi").to_body() == {"user": "olivere", "message": "hi", "retweets": 0}
    assert Order(article="Paper", manufacturer="Canon", price=100).to_body() == {
        "article": "Paper",
        "manufacturer": "Canon",
        "price": 100,
    }


def test_populated_optional_fields_are_serialized():
    tweet = Tweet(
        user="olivere",
        message="hi",
        retweets=2,
        created=datetime(2014, 1, 18, 23, 59, 58),
        tags=["golang"],
        location="48.1333,11.5667",
        suggest=SuggestField(input=["Welcome"], contexts={"user_name": ["olivere"]}),
    )
    body = tweet.to_body()
    assert body["created"] == "2014-01-18T23:59:58"
    assert body["tags"] == ["golang"]
    assert body["suggest_field"] == {"input": ["Welcome"], "contexts": {"user_name": ["olivere"]}}
    assert "image" not in body


def test_record_strings():
    assert str(documents.TWEETS[0]) == 'tweet{User:"olivere",Message:"Welcome to Golang and Elasticsearch.",Retweets:0}'
    assert str(Comment(user="nico", comment="You bet.")) == 'comment{User:"nico",Comment:"You bet."}'
    assert str(documents.ORDERS[0]) == 'order{Article:"Apple MacBook",Manufacturer:"Apple",Price:1290,Time:2015-01-18}'


def test_seed_corpus_sizes():
    assert len(documents.TWEETS) == 3
    assert len(documents.ORDERS) == 8
    assert len(documents.NOSOURCE_TWEETS) == 2
    assert documents.TWEET_ROUTING == {"3": "someroutingkey"}
    assert documents.COMMENT_PARENT == "3"


def test_random_string():
    value = documents.random_string(12)
    assert len(value) == 12
    assert value.isalpha() and value.isascii()


def test_percolator_records():
    assert Doctype(message="Welcome").to_body() == {"message": "Welcome"}
    assert Queries(query='{"match":{"message":"bonsai tree"}}').to_body() == {
        "query": '{"match":{"message":"bonsai tree"}}'
    }
