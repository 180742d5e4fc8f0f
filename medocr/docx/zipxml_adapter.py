import io
import zipfile
import xml.etree.ElementTree as ET

from medocr.docx.base import BaseDocxExtractor, tidy_text
from medocr.docx.exceptions import DocxExtractionError

_W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"


class ZipXmlAdapter(BaseDocxExtractor):
    """Extracts text by reading word/document.xml straight out of the archive."""

    def extract(self, docx_bytes: bytes) -> str:
        try:
            with zipfile.ZipFile(io.BytesIO(docx_bytes)) as archive:
                xml_payload = archive.read("word/document.xml")
            root = ET.fromstring(xml_payload)
        except (zipfile.BadZipFile, KeyError, ET.ParseError) as exc:
            raise DocxExtractionError(f"zipxml extraction failed: {exc}") from exc

        paragraphs = [self._paragraph_text(p) for p in root.iter(f"{_W}p")]
        return tidy_text("\n\n".join(paragraphs))

    @staticmethod
    def _paragraph_text(paragraph: ET.Element) -> str:
        parts: list[str] = []
        for node in paragraph.iter():
            if node.tag == f"{_W}t" and node.text:
                parts.append(node.text)
            elif node.tag == f"{_W}tab":
                parts.append("\t")
            elif node.tag in (f"{_W}br", f"{_W}cr"):
                parts.append("\n")
        return "".join(parts)
