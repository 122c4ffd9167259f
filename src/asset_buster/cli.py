from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from typing import List, Optional, Sequence, Tuple

from asset_buster.config import Settings, build_resolver
from asset_buster.errors import InvalidRuleError, RuleFileError


def _parse_pair(raw: str) -> Tuple[str, str]:
    handle, sep, url = raw.partition("=")
    if not sep or not handle:
        raise argparse.ArgumentTypeError(f"expected HANDLE=URL, got {raw!r}")
    return handle, url


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Set the ver query parameter on asset URLs.")
    parser.add_argument("--root", type=str, default=os.getenv("ASSET_BUSTER_ROOT_DIR", "."))
    parser.add_argument("--rules", type=str, default=os.getenv("ASSET_BUSTER_RULES_FILE", ""))
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--explain", action="store_true", help="print JSON resolutions")
    parser.add_argument("assets", nargs="+", type=_parse_pair, metavar="HANDLE=URL")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = Settings(root_dir=args.root, rules_file=args.rules or None, debug=args.debug)
    try:
        resolver = build_resolver(settings)
    except (RuleFileError, InvalidRuleError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    lines: List[str] = []
    for handle, url in args.assets:
        if args.explain:
            lines.append(json.dumps(asdict(resolver.explain(url, handle)), ensure_ascii=False))
        else:
            lines.append(resolver.resolve(url, handle))
    print("\n".join(lines))
    return 0
