"""Analyze a transcript file from the command line and print the result as JSON."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from insightboard.analysis.errors import ValidationError
from insightboard.analysis.service import analyze_transcript
from insightboard.config import get_settings


def main() -> int:
    parser = argparse.ArgumentParser(description="Extract action items from a meeting transcript")
    parser.add_argument("path", help="Transcript file, or '-' to read stdin")
    parser.add_argument(
        "--providers",
        help="Comma-separated provider order (overrides PROVIDER_ORDER), e.g. 'openai,anthropic'",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log provider attempts")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    transcript = sys.stdin.read() if args.path == "-" else Path(args.path).read_text(encoding="utf-8")

    settings = get_settings()
    if args.providers:
        settings = settings.model_copy(update={"provider_order": args.providers})

    try:
        result = asyncio.run(analyze_transcript(transcript, settings=settings))
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = {
        "provider": result.provider,
        "actionItems": [
            {"text": i.text, "priority": i.priority.value, "tags": list(i.tags)} for i in result.action_items
        ],
        "sentiment": result.sentiment.value if result.sentiment else None,
        "summary": result.summary,
    }
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
