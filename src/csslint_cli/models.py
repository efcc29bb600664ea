from typing import List, Optional

from pydantic import BaseModel, Field

from csslint_report.models import Severity


class RuleModel(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class MessageModel(BaseModel):
    line: int = Field(0, ge=0)
    col: int = Field(0, ge=0)
    type: Severity
    message: str
    rollup: bool = False
    rule: Optional[RuleModel] = None


class FileResultModel(BaseModel):
    filename: str
    messages: List[MessageModel] = Field(default_factory=list)
    read_error: Optional[str] = None


class ResultsDocument(BaseModel):
    files: List[FileResultModel] = Field(default_factory=list)
