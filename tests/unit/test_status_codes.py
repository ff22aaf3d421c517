"""
Unit tests for the status code table, classification and entries.
"""

import pytest

from httpstatus import StatusClass, StatusCodeEntry, class_of
from httpstatus.status_codes import ALIASES, STATUS_TABLE


class TestClassOf:
    """Tests for class_of()."""

    @pytest.mark.parametrize("code,expected", [
        (100, StatusClass.INFORMATIONAL),
        (101, StatusClass.INFORMATIONAL),
        (200, StatusClass.SUCCESS),
        (226, StatusClass.SUCCESS),
        (308, StatusClass.REDIRECTION),
        (404, StatusClass.CLIENT_ERROR),
        (451, StatusClass.CLIENT_ERROR),
        (500, StatusClass.SERVER_ERROR),
        (598, StatusClass.SERVER_ERROR),
        (599, StatusClass.NONSTANDARD),
        (0, StatusClass.NONSTANDARD),
    ])
    def test_leading_digit(self, code, expected):
        """Test classification by leading digit and the two exceptions."""
        assert class_of(code) is expected

    @pytest.mark.parametrize("code", [-1, 1, 99, 600, 999, 10000])
    def test_out_of_range_is_nonstandard(self, code):
        """Test that codes outside 100-599 never fail."""
        assert class_of(code) is StatusClass.NONSTANDARD

    def test_labels(self):
        """Test display labels."""
        assert StatusClass.CLIENT_ERROR.label == "Client Error"
        assert StatusClass.SUCCESS.label == "Success"


class TestStaticTable:
    """Tests for the source table itself."""

    def test_one_row_per_code(self):
        """Test that no code appears twice."""
        codes = [row[0] for row in STATUS_TABLE]
        assert len(codes) == len(set(codes))

    def test_aliases_are_not_rows(self):
        """Test that alias names never appear as canonical names."""
        names = {row[1] for row in STATUS_TABLE}
        assert not names & set(ALIASES)

    def test_every_row_has_phrase_and_description(self):
        """Test that documentation is present for every code."""
        for code, name, phrase, description in STATUS_TABLE:
            assert phrase, name
            assert description, name

    def test_rfc9110_canonical_names(self):
        """Test the chosen canonical spelling for renamed codes."""
        names = {row[0]: row[1] for row in STATUS_TABLE}
        assert names[413] == "CONTENT_TOO_LARGE"
        assert names[416] == "RANGE_NOT_SATISFIABLE"
        assert names[422] == "UNPROCESSABLE_CONTENT"


class TestStatusCodeEntry:
    """Tests for StatusCodeEntry."""

    def test_status_line(self):
        """Test status line formatting."""
        entry = StatusCodeEntry(404, "NOT_FOUND", "Not Found")
        assert entry.status_line == "404 Not Found"
        assert str(entry) == "404 Not Found"

    def test_class_derived_from_code(self):
        """Test that the class always follows the code."""
        assert StatusCodeEntry(201, "CREATED", "Created").status_class is StatusClass.SUCCESS
        assert StatusCodeEntry(0, "UNKNOWN", "Unknown").status_class is StatusClass.NONSTANDARD

    def test_predicates(self):
        """Test the category helpers."""
        assert StatusCodeEntry(100, "CONTINUE", "Continue").is_informational
        assert StatusCodeEntry(200, "OK", "OK").is_success
        assert StatusCodeEntry(302, "FOUND", "Found").is_redirect
        assert StatusCodeEntry(404, "NOT_FOUND", "Not Found").is_client_error
        assert StatusCodeEntry(502, "BAD_GATEWAY", "Bad Gateway").is_server_error

        assert StatusCodeEntry(404, "NOT_FOUND", "Not Found").is_error
        assert StatusCodeEntry(502, "BAD_GATEWAY", "Bad Gateway").is_error
        assert not StatusCodeEntry(200, "OK", "OK").is_error
        assert not StatusCodeEntry(599, "NETWORK_CONNECT_TIMEOUT_ERROR", "Timeout").is_error

    def test_documentation_url(self):
        """Test MDN links for registered codes only."""
        entry = StatusCodeEntry(418, "IM_A_TEAPOT", "I'm a teapot")
        assert entry.documentation_url == (
            "https://developer.mozilla.org/en-US/docs/Web/HTTP/Status/418"
        )
        assert StatusCodeEntry(0, "UNKNOWN", "Unknown").documentation_url is None

    def test_to_dict(self):
        """Test dictionary form includes the derived class."""
        entry = StatusCodeEntry(503, "SERVICE_UNAVAILABLE", "Service Unavailable", "Down.")
        data = entry.to_dict()

        assert data["code"] == 503
        assert data["name"] == "SERVICE_UNAVAILABLE"
        assert data["phrase"] == "Service Unavailable"
        assert data["class"] == "Server Error"
        assert data["description"] == "Down."

    def test_equality_and_hash(self):
        """Test that equal entries compare and hash equal."""
        a = StatusCodeEntry(200, "OK", "OK")
        b = StatusCodeEntry(200, "OK", "OK")
        assert a == b
        assert len({a, b}) == 1
