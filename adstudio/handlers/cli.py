"""Command-line handler for ad generation, editing, lifestyle images and copy."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from ..assets import download_asset, load_asset, save_asset
from ..clients.gemini import GeminiClient
from ..config import ASPECT_RATIOS, COPY_LIMITS, DEFAULT_ASPECT_RATIO
from ..engine import AdStudio, EditHistorySession, OperationGate, ResultSet
from ..errors import GenerationError, InvalidRequestError
from ..models import AdCopy, AdRequest
from ..services import CopyService, EditService, LifestyleService


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(prog="adstudio", description="Generate and edit AI image ads.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log provider attempts.")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate one ad per creative direction.")
    gen.add_argument("--product", required=True, help="Product or lifestyle photo.")
    gen.add_argument("--style", required=True, help="Brand style guide / ad template.")
    gen.add_argument("--logo", required=True, help="Brand logo.")
    gen.add_argument("--headline", default="")
    gen.add_argument("--description", default="")
    gen.add_argument("--cta", default="")
    gen.add_argument("--skip-copy", action="store_true", help="Leave space for copy instead of rendering it.")
    gen.add_argument("--aspect-ratio", default=DEFAULT_ASPECT_RATIO, choices=ASPECT_RATIOS)
    gen.add_argument("--out", default="outputs")

    edit = sub.add_parser("edit", help="Apply edits to an image, one after another.")
    edit.add_argument("image", help="Image to edit.")
    edit.add_argument("prompts", nargs="+", help="Edit instructions, applied in order.")
    edit.add_argument("--out", default="outputs")

    life = sub.add_parser("lifestyle", help="Place a product into a lifestyle scene.")
    life.add_argument("--product", required=True)
    life.add_argument("--prompt", required=True)
    life.add_argument("--reference", help="Optional base photo to place the product into.")
    life.add_argument("--out", default="outputs")

    suggest = sub.add_parser("suggest", help="Refine one ad copy field.")
    suggest.add_argument("field", choices=list(COPY_LIMITS))
    suggest.add_argument("text")

    return parser.parse_args(argv)


def _read_asset(source: str):
    """Local path or http(s) URL."""
    if source.startswith(("http://", "https://")):
        return download_asset(source)
    return load_asset(source)


async def _generate(client: GeminiClient, args: argparse.Namespace) -> None:
    request = AdRequest(
        product=_read_asset(args.product),
        style=_read_asset(args.style),
        logo=_read_asset(args.logo),
        copy=AdCopy(args.headline, args.description, args.cta),
        aspect_ratio=args.aspect_ratio,
        skip_copy=args.skip_copy,
    )
    studio = AdStudio(client)
    print(f"Generating {studio.results.size} ads...", flush=True)
    ads = await studio.generate(request)
    for i, ad in enumerate(ads or [], start=1):
        path = save_asset(ad, Path(args.out) / f"ad_{i}")
        print(f"  Saved {path}", flush=True)


async def _edit(client: GeminiClient, args: argparse.Namespace) -> None:
    results = ResultSet(1)
    results.fill([_read_asset(args.image)])
    session = EditHistorySession(0, results, OperationGate(), EditService(client))

    for step, prompt in enumerate(args.prompts, start=1):
        print(f"Applying edit {step}/{len(args.prompts)}: {prompt}", flush=True)
        await session.apply(prompt)
        path = save_asset(session.live, Path(args.out) / f"edit_{step}")
        print(f"  Saved {path}", flush=True)
    session.close()


async def _lifestyle(client: GeminiClient, args: argparse.Namespace) -> None:
    service = LifestyleService(client)
    reference = _read_asset(args.reference) if args.reference else None
    print("Generating lifestyle image...", flush=True)
    image = await service.generate(_read_asset(args.product), args.prompt, reference)
    path = save_asset(image, Path(args.out) / "lifestyle-image")
    print(f"  Saved {path}", flush=True)


async def _suggest(client: GeminiClient, args: argparse.Namespace) -> None:
    suggestion = await CopyService(client).suggest(args.field, args.text)
    print(suggestion, flush=True)


COMMANDS = {
    "generate": _generate,
    "edit": _edit,
    "lifestyle": _lifestyle,
    "suggest": _suggest,
}


def main(argv: list[str] | None = None) -> int:
    """Entry point used by ``python -m adstudio``."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        client = GeminiClient.from_env()
        asyncio.run(COMMANDS[args.command](client, args))
    except (GenerationError, InvalidRequestError, ValueError, RuntimeError) as e:
        print(f"ERROR: {e}", file=sys.stderr, flush=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
