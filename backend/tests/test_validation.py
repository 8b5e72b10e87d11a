"""
Astro Backend — Field Validation Tests
=======================================
"""

import pytest

from astro.validation import SERVICE_MESSAGES, is_valid_url, service_field_errors


class TestUrlRule:
    @pytest.mark.parametrize(
        "url",
        ["http://192.168.1.10:8080/", "https://example.com", "http://plex.local:32400/web"],
    )
    def test_valid(self, url):
        assert is_valid_url(url)

    @pytest.mark.parametrize("url", ["example.com", "ftp://files.local", "not a url", ""])
    def test_invalid(self, url):
        assert not is_valid_url(url)


class TestServiceFieldErrors:
    def test_empty_form_flags_every_required_field(self):
        errors = service_field_errors({"name": "", "url": "", "category": ""})

        assert errors == {
            "name": SERVICE_MESSAGES["name"],
            "url": SERVICE_MESSAGES["url"],
            "category": SERVICE_MESSAGES["category"],
        }

    def test_valid_form(self):
        values = {"name": "Router", "url": "http://192.168.1.1", "category": "1"}
        assert service_field_errors(values, known_categories=[1, 2]) == {}

    def test_unknown_category(self):
        values = {"name": "Router", "url": "http://192.168.1.1", "category": 9}
        errors = service_field_errors(values, known_categories=[1])
        assert errors == {"category": SERVICE_MESSAGES["category_missing"]}

    def test_non_numeric_category(self):
        values = {"name": "Router", "url": "http://192.168.1.1", "category": "abc"}
        assert service_field_errors(values) == {"category": SERVICE_MESSAGES["category_invalid"]}
        assert service_field_errors(values, known_categories=[1]) == {
            "category": SERVICE_MESSAGES["category_invalid"]
        }

    def test_partial_checks_only_present_fields(self):
        assert service_field_errors({"name": "Renamed"}, partial=True) == {}
        assert service_field_errors({"url": "bad"}, partial=True) == {"url": SERVICE_MESSAGES["url_invalid"]}
