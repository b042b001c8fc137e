"""CLI entry point: build a landing page from a LinkedIn URL, pasted text or JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path

from linkedcv.analysis import build_landing_context
from linkedcv.config import AppConfig, load_config_or_default, validate_config
from linkedcv.errors import LinkedCVError
from linkedcv.profile.models import ProfileRecord
from linkedcv.render.landing import render_landing_page
from linkedcv.utils.logging_config import setup_logging
from linkedcv.web.sources import lookup_profile, parse_pasted_profile

logger = logging.getLogger("linkedcv")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="LinkedCV - turn a LinkedIn profile into a personal landing page",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--url",
        help="LinkedIn profile URL or username (uses the profile-lookup API)",
    )
    source.add_argument(
        "--text-file",
        help="File containing pasted LinkedIn profile text (uses the language model)",
    )
    source.add_argument(
        "--json-file",
        help="File containing an already-structured profile record",
    )
    parser.add_argument(
        "--output", default="landing.html",
        help="Where to write the rendered page (default: landing.html)",
    )
    parser.add_argument(
        "--analysis", action="store_true",
        help="Print the extracted about segments, traits and stats as JSON instead of rendering",
    )
    parser.add_argument(
        "--serve", action="store_true",
        help="Start the web app",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def load_profile(args: argparse.Namespace, config: AppConfig) -> ProfileRecord:
    """Load a profile from whichever source was given on the command line."""
    if args.url:
        logger.info("Looking up LinkedIn profile: %s", args.url)
        return lookup_profile(config, args.url)

    if args.text_file:
        logger.info("Parsing pasted profile text from: %s", args.text_file)
        text = Path(args.text_file).read_text(encoding="utf-8")
        return parse_pasted_profile(config, text)

    if args.json_file:
        logger.info("Loading profile record from: %s", args.json_file)
        with open(args.json_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict) and "data" in data:
            data = data["data"]
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {args.json_file}")
        return ProfileRecord.from_dict(data)

    raise ValueError("No profile source given. Use --url, --text-file or --json-file.")


def serve(config: AppConfig) -> None:
    import uvicorn

    from linkedcv.web.app import create_app

    uvicorn.run(create_app(config), host=config.web.host, port=config.web.port)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = load_config_or_default(args.config)
    except Exception as e:
        print(f"Failed to load config: {e}", file=sys.stderr)
        return 1

    setup_logging(log_dir=config.log_dir, level=logging.DEBUG if args.verbose else logging.INFO)

    for warning in validate_config(config):
        logger.warning("Config: %s", warning)

    if args.serve:
        serve(config)
        return 0

    try:
        profile = load_profile(args, config)
    except (LinkedCVError, ValueError, OSError) as e:
        logger.error("Could not load profile: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.analysis:
        print(json.dumps(build_landing_context(profile), indent=2, ensure_ascii=False))
        return 0

    output = Path(args.output)
    output.write_text(render_landing_page(profile), encoding="utf-8")
    logger.info("Wrote landing page for %s to %s", profile.name or "Unknown", output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
