"""Tests for pipeline.runner."""

import json
from unittest.mock import patch

import pytest

from caseloom.pipeline.runner import TestDesignPipeline, generate_from_description
from caseloom.schema.errors import RequestValidationError
from caseloom.schema.models import GenerationRequest
from caseloom.test_generator.models import CaseType


class TestRun:
    def test_upload_scenario(self, pipeline, upload_description):
        result = pipeline.run(GenerationRequest(description=upload_description))

        assert "Upload" in result.context.features
        assert "Max size: 10MB" in result.understanding.rules
        spec = result.models.boundary_values[0]
        assert spec.max == 10
        assert spec.test_values == (0, 1, 9, 10, 11)

    def test_total_matches_cases_and_ids_unique(self, pipeline, upload_description):
        result = pipeline.run({"description": upload_description})

        assert result.coverage.total == len(result.test_cases)
        ids = [tc.id for tc in result.test_cases]
        assert len(ids) == len(set(ids))

    def test_accepts_camel_case_options(self, pipeline, upload_description):
        result = pipeline.run(
            {"description": upload_description, "options": {"includeSecurity": False}}
        )
        assert result.coverage.security == 0
        assert result.coverage.score == 80

    def test_no_boundary_specs(self, pipeline, plain_description):
        result = pipeline.run({"description": plain_description})

        assert result.models.boundary_values == ()
        assert result.coverage.boundary == 0
        assert CaseType.BOUNDARY not in {tc.type for tc in result.test_cases}

    def test_authentication_assumed(self, pipeline):
        result = pipeline.run({"description": "Members can reset passwords"})
        assert "User authentication is required" in result.understanding.assumptions

    def test_records_input_and_timestamp(self, pipeline, plain_description):
        result = pipeline.run({"description": plain_description})

        assert result.input == plain_description
        assert result.timestamp.tzinfo is not None


class TestMalformedRequests:
    @pytest.mark.parametrize("data", [{"description": ""}, {"description": "   "}, {}])
    def test_rejected_before_history(self, pipeline, history, data):
        with pytest.raises(RequestValidationError) as exc_info:
            pipeline.run(data)

        assert exc_info.value.errors[0]["loc"] == "description"
        assert len(history) == 0

    def test_stage_failure_propagates_without_history(self, pipeline, history):
        with patch(
            "caseloom.pipeline.runner.build_models", side_effect=ZeroDivisionError("boom")
        ):
            with pytest.raises(ZeroDivisionError):
                pipeline.run({"description": "Login page"})

        assert len(history) == 0


class TestExportAndHistory:
    def test_export_delegates(self, pipeline, upload_description):
        result = pipeline.run({"description": upload_description})
        data = json.loads(pipeline.export(result.test_cases, "structured-data"))

        assert [d["id"] for d in data] == [tc.id for tc in result.test_cases]

    def test_list_history(self, pipeline):
        result = pipeline.run({"description": "Login page"})
        assert pipeline.list_history() == (result,)

    def test_default_history_store(self):
        pipeline = TestDesignPipeline()
        pipeline.run({"description": "Login page"})
        assert len(pipeline.list_history()) == 1

    def test_run_file(self, pipeline, tmp_path):
        request_file = tmp_path / "request.yaml"
        request_file.write_text("description: Users can download reports\n")

        result = pipeline.run_file(str(request_file))
        assert result.understanding.feature == "Download"


class TestGenerateFromDescription:
    def test_options_as_keywords(self, upload_description):
        result = generate_from_description(upload_description, include_boundary=False)

        assert result.coverage.boundary == 0
        assert result.coverage.total == 5

    def test_result_to_dict_is_json_serializable(self, upload_description):
        data = json.loads(json.dumps(generate_from_description(upload_description).to_dict()))

        assert data["context"]["rawInput"] == upload_description
        assert data["coverage"]["total"] == len(data["testCases"])
