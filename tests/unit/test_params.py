"""Tests for object-valued query parameter parsing."""

from starlette.requests import Request

from city_explorer.api.params import query_object


def _request(query_string: str) -> Request:
    return Request({"type": "http", "query_string": query_string.encode(), "headers": []})


class TestQueryObject:
    def test_bracketed_keys(self):
        request = _request("data[id]=3&data[latitude]=47.6&data[longitude]=-122.3&other=1")
        assert query_object(request) == {"id": "3", "latitude": "47.6", "longitude": "-122.3"}

    def test_json_string(self):
        request = _request('data={"id": 3, "formatted_query": "Seattle, WA, USA"}')
        assert query_object(request) == {"id": 3, "formatted_query": "Seattle, WA, USA"}

    def test_url_encoded_brackets(self):
        request = _request("data%5Bid%5D=7")
        assert query_object(request) == {"id": "7"}

    def test_absent(self):
        assert query_object(_request("")) == {}
