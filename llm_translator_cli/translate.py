"""
Translation command‑line interface.

Reads text from the command line (or standard input), sends it to the
configured completion endpoint and writes the translation to a file (or
standard output).  Connection settings come from the ``LLM_TRANSLATOR_*``
environment variables and can be overridden with flags; the API key is
only ever read from the environment.

>>> export LLM_TRANSLATOR_API_KEY=sk-...
>>> export LLM_TRANSLATOR_API_URL=https://api.openai.com/v1/chat/completions
>>> export LLM_TRANSLATOR_MODEL=gpt-4o-mini
>>> export LLM_TRANSLATOR_TEMPERATURE=0.3
>>> export LLM_TRANSLATOR_MAX_TOKENS=1000
>>> llm-translator -s en -t ar "Hello"

or

>>> echo "Hello" | llm-translator -s en -t ar -o out.txt
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from llm_translator_lib import TranslationClient, TranslationConfig
from llm_translator_lib.exceptions import LLMTranslatorError, TranslationFailed
from llm_translator_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate text with a remote LLM completion endpoint."
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to translate (defaults to STDIN).",
    )
    parser.add_argument(
        "-s", "--source", required=True, help="Source language code, e.g. en."
    )
    parser.add_argument(
        "-t", "--target", required=True, help="Target language code, e.g. ar."
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file, written only on success (defaults to STDOUT).",
    )
    parser.add_argument("--api-url", help="Override LLM_TRANSLATOR_API_URL.")
    parser.add_argument("--model", help="Override LLM_TRANSLATOR_MODEL.")
    parser.add_argument(
        "--temperature", type=float, help="Override LLM_TRANSLATOR_TEMPERATURE."
    )
    parser.add_argument(
        "--max-tokens", type=int, help="Override LLM_TRANSLATOR_MAX_TOKENS."
    )
    parser.add_argument(
        "--log-level",
        default="ERROR",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: ERROR).",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> TranslationConfig:
    config = TranslationConfig.from_env()
    overrides = {
        "api_url": args.api_url,
        "model": args.model,
        "temperature": args.temperature,
        "max_tokens": args.max_tokens,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = TranslationConfig.from_mapping({**config.model_dump(), **overrides})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = prepare_logger("llm_translator", level=getattr(logging, args.log_level))

    if args.text is not None:
        text = args.text
    else:
        # Piped input ends with a newline that is not part of the text
        text = sys.stdin.read()
        if text.endswith("\n"):
            text = text[:-1]

    try:
        client = TranslationClient(config_from_args(args), logger=logger)
        result = client.translate(text, args.source, args.target)
    except TranslationFailed as exc:
        print(json.dumps(exc.as_dict(), ensure_ascii=False), file=sys.stderr)
        return 1
    except (LLMTranslatorError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(result + "\n")
    else:
        with open(args.output, "w", encoding="utf-8") as out:
            out.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
