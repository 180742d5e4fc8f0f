from medocr.extraction.base import BaseExtractor
from medocr.extraction.extractor import Extractor
from medocr.extraction.factory import ExtractorFactory

__all__ = ["BaseExtractor", "Extractor", "ExtractorFactory"]
