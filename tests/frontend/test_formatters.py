"""
Tests for frontend/utils/formatters.py - Formatting utilities.
"""
import pytest

from frontend.utils.formatters import (
    build_access_url,
    build_update_payload,
    display_value,
    edit_form_defaults,
    format_bytes,
    format_uptime,
    page_label,
    records_to_dataframe,
)


class TestDisplayValue:

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_values_show_dash(self, value):
        assert display_value(value) == "-"

    def test_values_are_stringified(self):
        assert display_value("Asha") == "Asha"
        assert display_value(9876500001) == "9876500001"


class TestRecordsToDataframe:

    def test_columns_and_rows(self, sample_record):
        df = records_to_dataframe([sample_record, {"_id": "x", "name": "Only Name"}])

        assert list(df.columns) == ["Name", "Father/Husband Name", "Address", "Phone Number"]
        assert df.iloc[0]["Address"] == "12 Lotus Lane"
        assert df.iloc[1]["Name"] == "Only Name"
        assert df.iloc[1]["Phone Number"] == "-"

    def test_empty(self):
        df = records_to_dataframe([])

        assert df.empty
        assert "Name" in df.columns


class TestEditForm:

    def test_defaults_prefill_every_editable_field(self, sample_record):
        defaults = edit_form_defaults(sample_record)

        assert defaults == {
            "name": "Asha Devi",
            "fatherName": "Ram Prasad",
            "address": "12 Lotus Lane",
            "phoneNumber": "9876500001",
            "email": "",
        }

    def test_payload_trims_and_includes_all_fields(self):
        payload = build_update_payload({"name": "  Asha ", "email": None})

        assert payload == {
            "name": "Asha",
            "fatherName": "",
            "address": "",
            "phoneNumber": "",
            "email": "",
        }


class TestServerFormatting:

    def test_page_label(self):
        assert page_label(2, 5) == "Page 2 of 5"

    def test_access_url(self):
        url = build_access_url({"interface": "eth0", "address": "192.168.1.20"}, 3000)

        assert url == "http://192.168.1.20:3000"

    @pytest.mark.parametrize(
        "value,expected",
        [(None, "-"), (512, "512 B"), (2048, "2.0 KB"), (5 * 1024 * 1024, "5.0 MB"), ("bad", "-")],
    )
    def test_format_bytes(self, value, expected):
        assert format_bytes(value) == expected

    @pytest.mark.parametrize(
        "seconds,expected",
        [(None, "-"), (65, "1m 5s"), (3720, "1h 2m"), (90061, "1d 1h 1m")],
    )
    def test_format_uptime(self, seconds, expected):
        assert format_uptime(seconds) == expected
