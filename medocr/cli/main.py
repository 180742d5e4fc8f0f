"""
Command-line interface: run the OCR pipeline on a local file.
"""

import argparse
import json
import mimetypes
import sys
from pathlib import Path

from medocr.config.settings import Settings
from medocr.extraction.exceptions import ExtractionError
from medocr.ingest.exceptions import IngestError, PayloadTooLargeError
from medocr.ingest.models import RequestContext
from medocr.logging.logger import Log
from medocr.processor.processor import build_processor
from medocr.render.markdown import render_markdown

mimetypes.add_type(
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document", ".docx"
)
mimetypes.add_type("image/webp", ".webp")
mimetypes.add_type("image/heic", ".heic")
mimetypes.add_type("image/heif", ".heif")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="medocr-extract",
        description="Extract structured data from a medical document",
    )
    parser.add_argument("file", type=Path, help="Image, PDF, DOCX or plain text file")
    parser.add_argument("--mime-type", help="Override the MIME type guessed from the extension")
    parser.add_argument("--model", help="Gemini model to use instead of the configured default")
    parser.add_argument("--api-key", help="Gemini API key to use instead of the configured default")
    parser.add_argument(
        "--format",
        choices=["json", "markdown"],
        default="json",
        help="Output format (default: json)",
    )
    return parser


def guess_mime_type(path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or ""


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        raw_bytes = args.file.read_bytes()
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    context = RequestContext(
        file_bytes=raw_bytes,
        file_content_type=args.mime_type or guess_mime_type(args.file),
        file_name=args.file.name,
        api_key=args.api_key,
        model=args.model,
    )

    try:
        if len(raw_bytes) > settings.max_upload_bytes:
            raise PayloadTooLargeError(
                f"File too large: {len(raw_bytes)} bytes exceeds the "
                f"{settings.max_upload_bytes} byte limit"
            )
        processor = build_processor(settings)
        try:
            envelope = processor.process(context)
        finally:
            processor.close()
    except (IngestError, ExtractionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "markdown":
        print(render_markdown(envelope["data"]), end="")
    else:
        print(json.dumps(envelope, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
