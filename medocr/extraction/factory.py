from medocr.config.settings import Settings
from medocr.extraction.base import BaseExtractor
from medocr.extraction.client_base import BaseExtractionClient
from medocr.extraction.example_client_adapter import ExampleClientAdapter
from medocr.extraction.extractor import Extractor
from medocr.extraction.gemini_client_adapter import GeminiClientAdapter


class ExtractorFactory:
    """Creates the configured extractor."""

    PROVIDERS = ("gemini", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        client = cls._create_client(settings)
        default_api_key = settings.gemini_api_key
        if isinstance(client, ExampleClientAdapter) and not default_api_key:
            default_api_key = "example"
        return Extractor(
            client=client,
            api_base_url=settings.gemini_api_base_url,
            default_model=settings.gemini_model_name,
            default_api_key=default_api_key,
            default_api_url=settings.gemini_api_url,
            temperature=settings.gemini_temperature,
            max_output_tokens=settings.gemini_max_output_tokens,
        )

    @classmethod
    def _create_client(cls, settings: Settings) -> BaseExtractionClient:
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            return GeminiClientAdapter(timeout_seconds=settings.gemini_timeout_seconds)
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
