from csslint_cli.converters import file_result_model_to_result, message_model_to_diagnostic
from csslint_cli.models import FileResultModel, MessageModel
from csslint_report.models import Diagnostic, FileResult, ReadFailure, RuleRef


def test_message_conversion():
    model = MessageModel.model_validate(
        {"line": 2, "col": 7, "type": "error", "message": "Expected RBRACE", "rule": {"id": "errors"}}
    )

    assert message_model_to_diagnostic(model) == Diagnostic(
        line=2,
        col=7,
        type="error",
        message="Expected RBRACE",
        rollup=False,
        rule=RuleRef(id="errors", name=None),
    )


def test_file_result_conversion():
    model = FileResultModel.model_validate(
        {"filename": "a.css", "messages": [{"line": 1, "col": 1, "type": "warning", "message": "x"}]}
    )

    result = file_result_model_to_result(model)

    assert isinstance(result, FileResult)
    assert result.filename == "a.css"
    assert result.messages[0].rule is None


def test_read_error_conversion():
    model = FileResultModel.model_validate({"filename": "a.css", "read_error": "denied"})

    assert file_result_model_to_result(model) == ReadFailure(filename="a.css", message="denied")
