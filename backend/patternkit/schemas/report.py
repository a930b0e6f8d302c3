from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ReportFormat(str, Enum):
    """Output formats a report can be assembled in."""
    plain = "plain"
    html = "html"
    xml = "xml"


class ReportSection(str, Enum):
    """The three parts of a report, in assembly order."""
    header = "header"
    content = "content"
    footer = "footer"


class Document(BaseModel):
    """A finished report. Each part is already formatted."""

    model_config = ConfigDict(frozen=True)

    header: Optional[str] = None
    content: Optional[str] = None
    footer: Optional[str] = None

    @property
    def text(self) -> str:
        return "".join(part for part in (self.header, self.content, self.footer) if part)
