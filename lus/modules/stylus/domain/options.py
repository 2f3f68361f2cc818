from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormattingOptions(BaseModel):
    """Formatter settings, spelled the way ``.stylusrc`` files spell them."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    insert_colons: bool = Field(True, alias="insertColons")
    insert_semicolons: bool = Field(True, alias="insertSemicolons")
    insert_braces: bool = Field(True, alias="insertBraces")
    insert_new_line_before_else: bool = Field(False, alias="insertNewLineBeforeElse")
    # None keeps whatever the input already uses
    tab_stop_char: Optional[str] = Field(None, alias="tabStopChar")
    new_line_char: Optional[str] = Field(None, alias="newLineChar")
    selector_separator: str = Field(", ", alias="selectorSeparator")
    sort_properties: Union[bool, str, List[str]] = Field(False, alias="sortProperties")
    always_use_zero_without_unit: bool = Field(False, alias="alwaysUseZeroWithoutUnit")

    @field_validator("sort_properties")
    @classmethod
    def _check_sort_properties(cls, value: Union[bool, str, List[str]]) -> Union[bool, str, List[str]]:
        if value is True:
            return "alphabetical"
        if isinstance(value, str) and value != "alphabetical":
            raise ValueError("sortProperties must be false, 'alphabetical' or a list of property names")
        return value

    @field_validator("new_line_char")
    @classmethod
    def _check_new_line_char(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in ("\n", "\r\n"):
            raise ValueError("newLineChar must be '\\n' or '\\r\\n'")
        return value
