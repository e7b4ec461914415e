"""
Minimal DOCX packaging.

build_docx() writes the three parts Word needs to open a document:
[Content_Types].xml, _rels/.rels and word/document.xml. Each input line
becomes one paragraph; formatting is not carried over.
"""

import io
import zipfile
from pathlib import Path
from typing import Union

CONTENT_TYPES_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">
  <Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>
  <Default Extension="xml" ContentType="application/xml"/>
  <Override PartName="/word/document.xml" ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>
</Types>"""

RELS_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
  <Relationship Id="R1" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" Target="word/document.xml"/>
</Relationships>"""

DOCUMENT_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
  <w:body>
    {paragraphs}
    <w:sectPr/>
  </w:body>
</w:document>"""

EMPTY_PARAGRAPH = "<w:p/>"


def escape_xml(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _paragraph(line: str) -> str:
    line = line.rstrip()
    if not line:
        return EMPTY_PARAGRAPH
    return f'<w:p><w:r><w:t xml:space="preserve">{escape_xml(line)}</w:t></w:r></w:p>'


def document_xml(content: str) -> str:
    """Body XML with one paragraph per line of content."""
    paragraphs = "".join(_paragraph(line) for line in content.split("\n"))
    return DOCUMENT_XML.format(paragraphs=paragraphs)


def build_docx(content: str) -> bytes:
    """
    Package plain text as a .docx archive.

    Args:
        content: Text to export (typically rendered Markdown)

    Returns:
        Bytes of a ZIP archive Word can open
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("[Content_Types].xml", CONTENT_TYPES_XML)
        archive.writestr("_rels/.rels", RELS_XML)
        archive.writestr("word/document.xml", document_xml(content))
    return buffer.getvalue()


def write_export(path: Path, content: Union[str, bytes]) -> Path:
    """
    Write export content to disk, creating parent directories.

    Text is written as UTF-8; bytes are written unchanged.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path
