"""Tests for analysis.extractor."""

from caseloom.analysis.extractor import (
    extract_actors,
    extract_constraints,
    extract_context,
    extract_features,
    extract_inputs,
    extract_outputs,
)


class TestExtractFeatures:
    def test_matches_are_title_cased(self):
        assert extract_features("Users can UPLOAD files") == ["Upload"]

    def test_order_follows_vocabulary(self):
        features = extract_features("search results, then login")
        assert features == ["Login", "Search"]

    def test_default_when_nothing_matches(self):
        assert extract_features("Show the dashboard") == ["General Functionality"]


class TestExtractActors:
    def test_multiple_roles(self):
        assert extract_actors("An admin or a guest") == ["Admin", "Guest"]

    def test_substring_match(self):
        # "users" contains "user"
        assert extract_actors("All users") == ["User"]

    def test_default_actor(self):
        assert extract_actors("Show the dashboard") == ["User"]


class TestExtractInputs:
    def test_file_types_uppercased(self):
        inputs = extract_inputs("Accepts .pdf, .Png and .csv")
        assert inputs == [".PDF", ".PNG", ".CSV"]

    def test_size_tokens_kept_as_written(self):
        assert extract_inputs("between 5 kb and 2GB") == ["5 kb", "2GB"]

    def test_known_fields(self):
        inputs = extract_inputs("Enter email, password and phone")
        assert inputs == ["Email", "Password", "Phone Number"]

    def test_empty_when_no_signal(self):
        assert extract_inputs("Show the dashboard") == []


class TestExtractOutputs:
    def test_error_and_fail_share_a_label(self):
        assert extract_outputs("If it fails") == ["Error Message"]

    def test_all_outputs_in_table_order(self):
        text = "Send an email on success, redirect on error"
        assert extract_outputs(text) == [
            "Error Message",
            "Success Message",
            "Page Redirect",
            "Email Notification",
        ]

    def test_default_output(self):
        assert extract_outputs("Show the dashboard") == ["System Response"]


class TestExtractConstraints:
    def test_size_with_and_without_space(self):
        assert extract_constraints("up to 10MB or 20 mb") == [
            "Max size: 10MB",
            "Max size: 20MB",
        ]

    def test_length_constraints(self):
        assert extract_constraints("name up to 50 characters, code 8chars") == [
            "Max length: 50 characters",
            "Max length: 8 characters",
        ]

    def test_number_inside_longer_number_does_not_match(self):
        assert extract_constraints("15mb limit, 5 files") == ["Max size: 15MB"]

    def test_repeated_number_counted_once(self):
        assert extract_constraints("10MB now, 10MB later") == ["Max size: 10MB"]

    def test_order_of_first_occurrence(self):
        text = "title of 30 characters and a 2MB avatar"
        assert extract_constraints(text) == [
            "Max length: 30 characters",
            "Max size: 2MB",
        ]

    def test_bare_numbers_ignored(self):
        assert extract_constraints("retry 3 times") == []


class TestExtractContext:
    def test_upload_description(self, upload_context, upload_description):
        assert upload_context.features == ("Upload",)
        assert upload_context.actors == ("User",)
        assert upload_context.inputs == (".PDF", ".PNG", "10MB")
        assert upload_context.outputs == ("Error Message", "Success Message")
        assert upload_context.constraints == ("Max size: 10MB",)
        assert upload_context.raw_input == upload_description

    def test_never_fails_on_empty_text(self):
        context = extract_context("")

        assert context.features == ("General Functionality",)
        assert context.actors == ("User",)
        assert context.inputs == ()
        assert context.outputs == ("System Response",)
        assert context.constraints == ()
