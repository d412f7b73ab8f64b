from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field

AIRC_HEADER = "# AI Agent Instructions\n\n"

class TemplateFound(BaseModel):
    status: Literal["found"] = "found"
    identifier: str = Field(..., description="Normalized technology identifier.")
    content: str = Field(..., description="Full text of the template.")

class TemplateNotFound(BaseModel):
    status: Literal["not_found"] = "not_found"
    identifier: str = Field(..., description="Normalized technology identifier that did not resolve.")

TemplateLookupResult = Annotated[Union[TemplateFound, TemplateNotFound], Field(discriminator="status")]

class AggregateDocument(BaseModel):
    """
    Combined .airc document: the header followed by every resolved template, in input order.
    """
    header: str = Field(AIRC_HEADER, description="Fixed header written before any template.")
    results: List[TemplateLookupResult] = Field(default_factory=list, description="One lookup result per input identifier.")

    @property
    def found(self) -> List[TemplateFound]:
        return [r for r in self.results if isinstance(r, TemplateFound)]

    @property
    def missing(self) -> List[str]:
        return [r.identifier for r in self.results if isinstance(r, TemplateNotFound)]

    @property
    def content(self) -> str:
        body = "".join(f"{r.content}\n\n" for r in self.found)
        return self.header + body
