from medocr.config.settings import Settings
from medocr.docx.base import BaseDocxExtractor
from medocr.docx.mammoth_adapter import MammothAdapter
from medocr.docx.zipxml_adapter import ZipXmlAdapter


class DocxExtractorFactory:
    """Creates the correct DOCX extractor based on settings."""

    ADAPTERS: dict[str, type[BaseDocxExtractor]] = {
        "mammoth": MammothAdapter,
        "zipxml": ZipXmlAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDocxExtractor:
        engine = settings.docx_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown DOCX engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
