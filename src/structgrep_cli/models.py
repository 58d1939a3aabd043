from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class MatchReport(BaseModel):
    file_path: str
    line_number: int
    column: int
    end_line_number: int
    end_column: int
    text: str
    captures: Dict[str, Union[str, List[str]]] = Field(default_factory=dict)
    replacement: Optional[str] = None
    rule_id: Optional[str] = None
    message: Optional[str] = None


class FileReport(BaseModel):
    file_path: str
    language: str
    matches: List[MatchReport] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
