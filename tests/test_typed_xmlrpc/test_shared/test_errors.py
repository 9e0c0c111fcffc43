"""Tests for the exception hierarchy and logging helpers."""

import logging

import pytest

from typed_xmlrpc.shared import (
    FaultProblem,
    FaultStructureError,
    ScalarParseError,
    StructureError,
    TreeBuildError,
    XmlRpcError,
    XmlRpcParseError,
    get_logger,
)


class TestErrorHierarchy:
    """Test error classes and their context chains."""

    @pytest.mark.parametrize(
        "error",
        [
            StructureError("shape"),
            TreeBuildError("syntax"),
            ScalarParseError("double"),
            FaultStructureError("fault", problem=FaultProblem.MISSING),
            XmlRpcParseError("call"),
        ],
    )
    def test_all_errors_share_base_class(self, error):
        assert isinstance(error, XmlRpcError)

    def test_tree_build_error_is_structural(self):
        assert issubclass(TreeBuildError, StructureError)

    def test_parse_error_message_names_kind(self):
        error = XmlRpcParseError("response")

        assert str(error) == "Failed to parse XML-RPC response."
        assert error.kind == "response"

    def test_structure_error_includes_path(self):
        error = StructureError("Unknown value type 'nil'", tag="nil", path="/value/nil")

        assert str(error) == "Unknown value type 'nil' (at /value/nil)"
        assert error.message == "Unknown value type 'nil'"
        assert error.tag == "nil"

    def test_tree_build_error_includes_position(self):
        error = TreeBuildError("Malformed XML: oops", line=3, column=7)

        assert str(error) == "Malformed XML: oops (line 3, column 7)"

    def test_chain_follows_causes(self):
        try:
            try:
                raise FaultStructureError(
                    "Illegal response structure for fault case.",
                    problem=FaultProblem.NOT_A_STRUCT,
                )
            except FaultStructureError as inner:
                raise XmlRpcParseError("response") from inner
        except XmlRpcParseError as outer:
            error = outer

        assert error.chain() == [
            "Failed to parse XML-RPC response.",
            "Illegal response structure for fault case.",
        ]
        assert error.describe() == (
            "Failed to parse XML-RPC response.: "
            "Illegal response structure for fault case."
        )

    def test_chain_includes_foreign_causes(self):
        try:
            raise ScalarParseError("Failed to parse double") from ValueError("bad")
        except ScalarParseError as error:
            assert error.chain() == ["Failed to parse double", "bad"]


class TestCorrelationLogger:
    """Test correlation-aware logging."""

    def test_records_carry_correlation_info(self, caplog):
        logger = get_logger("typed_xmlrpc.test", "req-1", "tests")

        with caplog.at_level(logging.DEBUG, logger="typed_xmlrpc.test"):
            logger.debug("hello", extra={"answer": 42})

        record = caplog.records[-1]
        assert record.message == "hello"
        assert record.correlation_id == "req-1"
        assert record.component == "tests"
        assert record.answer == 42

    def test_component_defaults_to_last_name_segment(self):
        logger = get_logger("typed_xmlrpc.api.parser")

        assert logger.component == "parser"
        assert logger.correlation_id is None

    def test_instance_level_filters_only_that_instance(self, caplog):
        quiet = get_logger("typed_xmlrpc.test", "req-quiet", "tests", level="WARNING")
        loud = get_logger("typed_xmlrpc.test", "req-loud", "tests")

        with caplog.at_level(logging.DEBUG, logger="typed_xmlrpc.test"):
            quiet.debug("suppressed")
            loud.debug("emitted")

        messages = [record.message for record in caplog.records]
        assert "suppressed" not in messages
        assert "emitted" in messages
        assert logging.getLogger("typed_xmlrpc.test").level == logging.NOTSET
