"""Report assembly: one builder, with the output format picked by a tag."""

from typing import Dict

from patternkit.schemas.report import Document, ReportFormat, ReportSection


SECTION_TEMPLATES: Dict[ReportFormat, Dict[ReportSection, str]] = {
    ReportFormat.plain: {
        ReportSection.header: "=== {text} ===\n",
        ReportSection.content: "{text}\n",
        ReportSection.footer: "--- {text} ---\n",
    },
    ReportFormat.html: {
        ReportSection.header: "<h1>{text}</h1>\n",
        ReportSection.content: "<p>{text}</p>\n",
        ReportSection.footer: "<footer>{text}</footer>\n",
    },
    ReportFormat.xml: {
        ReportSection.header: "<header>{text}</header>\n",
        ReportSection.content: "<content>{text}</content>\n",
        ReportSection.footer: "<footer>{text}</footer>\n",
    },
}


def format_section(report_format: ReportFormat, section: ReportSection, text: str) -> str:
    """Wrap `text` in the template for the given format and section."""
    return SECTION_TEMPLATES[ReportFormat(report_format)][section].format(text=text)


class ReportBuilder:
    """Collects formatted report parts; every setter returns the builder for chaining."""

    def __init__(self, report_format: ReportFormat = ReportFormat.plain):
        self._format = ReportFormat(report_format)
        self._parts: Dict[ReportSection, str] = {}

    @property
    def report_format(self) -> ReportFormat:
        return self._format

    def _set(self, section: ReportSection, text: str) -> "ReportBuilder":
        self._parts[section] = format_section(self._format, section, text)
        return self

    def set_header(self, header: str) -> "ReportBuilder":
        return self._set(ReportSection.header, header)

    def set_content(self, content: str) -> "ReportBuilder":
        return self._set(ReportSection.content, content)

    def set_footer(self, footer: str) -> "ReportBuilder":
        return self._set(ReportSection.footer, footer)

    def build(self) -> Document:
        return Document(
            header=self._parts.get(ReportSection.header),
            content=self._parts.get(ReportSection.content),
            footer=self._parts.get(ReportSection.footer),
        )


class ReportDirector:
    @staticmethod
    def construct_report(builder: ReportBuilder, header: str, content: str, footer: str) -> Document:
        """Assemble a report: header, then content, then footer, then build."""
        return builder.set_header(header).set_content(content).set_footer(footer).build()

    @staticmethod
    def render_report(document: Document, title: str) -> str:
        """Frame a document's text with a title banner for display."""
        return f"=== {title} ===\n{document.text}================"
