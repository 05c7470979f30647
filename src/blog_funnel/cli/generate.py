"""Quick one-off generation call."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict

from blog_funnel.config.settings import get_settings
from blog_funnel.errors import GenerationError
from blog_funnel.providers.generator import GeneratorClient
from blog_funnel.services.generation_service import GenerationService
from blog_funnel.utils.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run one generation request and print JSON")
    parser.add_argument("--title", required=True, help="Blog title, search text or web result title")
    parser.add_argument("--category", default=None, help="Category name")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--image-only", action="store_true", help="Only generate a featured image")
    mode.add_argument("--web-results", action="store_true", help="Treat --title as search text")
    mode.add_argument("--pre-landing", action="store_true", help="Treat --title as a web result title")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    service = GenerationService(GeneratorClient(settings))

    try:
        if args.image_only:
            payload = {"imageUrl": service.generate_image(args.title, args.category)}
        elif args.web_results:
            payload = {"webResults": service.generate_web_results(args.title, args.category)}
        elif args.pre_landing:
            payload = {"preLanding": service.generate_pre_landing(args.title, args.category)}
        else:
            payload = asdict(service.generate_content(args.title, args.category))
    except GenerationError as exc:
        raise SystemExit(f"Generation failed: {exc}") from exc
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
