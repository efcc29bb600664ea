from csslint_report.models import Diagnostic, FileResult, ReadFailure, RuleRef

from .models import FileResultModel, MessageModel, RuleModel


def rule_model_to_rule_ref(rule: RuleModel | None) -> RuleRef | None:
    if rule is None:
        return None
    return RuleRef(id=rule.id, name=rule.name)


def message_model_to_diagnostic(message: MessageModel) -> Diagnostic:
    """Convert an external Pydantic message to an internal dataclass diagnostic"""
    return Diagnostic(
        line=message.line,
        col=message.col,
        type=message.type.value,  # Pydantic holds Severity, dataclass holds 'error'
        message=message.message,
        rollup=message.rollup,
        rule=rule_model_to_rule_ref(message.rule),
    )


def file_result_model_to_result(entry: FileResultModel) -> FileResult | ReadFailure:
    """Entries carrying a read error become read failures; their messages are ignored"""
    if entry.read_error is not None:
        return ReadFailure(filename=entry.filename, message=entry.read_error)
    return FileResult(
        filename=entry.filename,
        messages=tuple(message_model_to_diagnostic(m) for m in entry.messages),
    )
