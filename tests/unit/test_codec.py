"""
Unit tests for the codec module.

Tests cover:
- encode(): unset/empty/null distinction, aliases, plain values
- encode_query(): list option encoding
- decode(): envelope validation, unknown fields, malformed bodies
- decode_error(): provider error bodies and fallbacks
"""

from __future__ import annotations

import json

import pytest

from vultr_api.codec import decode, decode_error, encode, encode_query
from vultr_api.exceptions import APIError, DecodeError
from vultr_api.resources.database.models import (
    DatabaseAdvancedOptions,
    DatabaseEnvelope,
    DatabasesEnvelope,
    DatabaseUpdateReq,
    DBListOptions,
)
from vultr_api.types import ListOptions, MessageEnvelope


class TestEncodeFieldPresence:
    """Only explicitly assigned fields reach the wire."""

    def test_unset_fields_are_omitted(self):
        assert encode(DatabaseUpdateReq()) == b"{}"

    def test_assigned_value_is_sent(self):
        assert json.loads(encode(DatabaseUpdateReq(label="new"))) == {"label": "new"}

    def test_explicit_empty_string_is_sent(self):
        assert json.loads(encode(DatabaseUpdateReq(label=""))) == {"label": ""}

    def test_explicit_empty_list_is_sent(self):
        assert json.loads(encode(DatabaseUpdateReq(trusted_ips=[]))) == {"trusted_ips": []}

    def test_explicit_none_is_sent_as_null(self):
        assert json.loads(encode(DatabaseUpdateReq(tag=None))) == {"tag": None}

    def test_assignment_after_construction_is_sent(self):
        request = DatabaseUpdateReq()
        request.plan = "vultr-dbaas-startup-cc-1-55-2"
        assert json.loads(encode(request)) == {"plan": "vultr-dbaas-startup-cc-1-55-2"}

    def test_false_and_zero_are_sent(self):
        request = DatabaseUpdateReq(mysql_slow_query_log=False, mysql_long_query_time=0)
        assert json.loads(encode(request)) == {
            "mysql_slow_query_log": False,
            "mysql_long_query_time": 0,
        }

    def test_aliases_used_on_the_wire(self):
        options = DatabaseAdvancedOptions(pg_partman_bgw_interval=3600)
        assert json.loads(encode(options)) == {"pg_partman_bgw.interval": 3600}


class TestEncodePlainValues:
    """encode() on non-model bodies."""

    def test_dict_is_compact_json(self):
        assert encode({"label": "x", "tags": [1, 2]}) == b'{"label":"x","tags":[1,2]}'

    def test_nested_model_in_dict(self):
        body = {"update": DatabaseUpdateReq(label="x")}
        assert json.loads(encode(body)) == {"update": {"label": "x"}}

    def test_bytes_pass_through(self):
        assert encode(b'{"raw":true}') == b'{"raw":true}'

    def test_unserializable_value_raises_type_error(self):
        with pytest.raises(TypeError):
            encode({"when": object()})


class TestEncodeQuery:
    """encode_query() for list options."""

    def test_none_gives_no_params(self):
        assert encode_query(None) == {}

    def test_unset_and_none_dropped(self):
        options = DBListOptions(per_page=25, label="prod", tag=None)
        assert encode_query(options) == {"per_page": "25", "label": "prod"}

    def test_cursor_included(self):
        options = ListOptions(per_page=2).with_cursor("bmV4dA==")
        assert encode_query(options) == {"per_page": "2", "cursor": "bmV4dA=="}

    def test_mapping_values_normalized(self):
        params = encode_query({"enabled": True, "ids": ["a", "b"], "empty": "", "n": 3})
        assert params == {"enabled": "true", "ids": "a,b", "n": "3"}


class TestDecode:
    """decode() into declared envelope shapes."""

    def test_none_shape_returns_none(self):
        assert decode(b"", None) is None

    def test_none_shape_ignores_body(self):
        assert decode(b'{"unexpected": true}', None) is None

    def test_decodes_envelope(self):
        body = json.dumps({"database": {"id": "abc", "label": "prod"}}).encode()
        envelope = decode(body, DatabaseEnvelope)
        assert envelope is not None
        assert envelope.database.id == "abc"
        assert envelope.database.label == "prod"

    def test_unknown_fields_ignored(self):
        body = json.dumps(
            {
                "database": {"id": "abc", "brand_new_field": {"x": 1}},
                "another_new_key": [1, 2, 3],
            }
        ).encode()
        envelope = decode(body, DatabaseEnvelope)
        assert envelope is not None
        assert envelope.database.id == "abc"

    def test_meta_decoded(self):
        body = json.dumps(
            {
                "databases": [{"id": "a"}, {"id": "b"}],
                "meta": {"total": 4, "links": {"next": "cursor-A", "prev": ""}},
            }
        ).encode()
        envelope = decode(body, DatabasesEnvelope)
        assert envelope is not None
        assert [d.id for d in envelope.databases] == ["a", "b"]
        assert envelope.meta is not None
        assert envelope.meta.next_cursor == "cursor-A"
        assert envelope.meta.prev_cursor is None

    def test_empty_body_with_shape_raises(self):
        with pytest.raises(DecodeError) as exc_info:
            decode(b"", MessageEnvelope, status_code=204)
        assert exc_info.value.status_code == 204

    def test_malformed_json_raises(self):
        with pytest.raises(DecodeError) as exc_info:
            decode(b"<html>oops</html>", DatabaseEnvelope, status_code=200)
        assert exc_info.value.body == b"<html>oops</html>"

    def test_missing_envelope_key_raises(self):
        with pytest.raises(DecodeError, match="DatabaseEnvelope"):
            decode(b'{"databases": []}', DatabaseEnvelope)


class TestDecodeError:
    """decode_error() for non-2xx responses."""

    def test_provider_error_body(self):
        error = decode_error(b'{"error": "not found", "status": 404}', 404)
        assert isinstance(error, APIError)
        assert error.status_code == 404
        assert error.message == "not found"

    def test_message_key_accepted(self):
        error = decode_error(b'{"message": "bad request"}', 400)
        assert error.message == "bad request"

    def test_nested_error_with_code(self):
        error = decode_error(b'{"error": {"code": 7, "message": "invalid plan"}}', 422)
        assert error.message == "invalid plan"
        assert error.provider_code == "7"

    def test_non_json_body_uses_reason(self):
        error = decode_error(b"<html>Bad Gateway</html>", 502, reason="Bad Gateway")
        assert error.message == "Bad Gateway"

    def test_empty_body_without_reason(self):
        error = decode_error(b"", 500)
        assert error.message == "HTTP 500"
        assert str(error) == "500: HTTP 500"
