#!/usr/bin/env python3

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from algotrace import config
from algotrace.features import extract_trace_features
from algotrace.playback import PlaybackController, PlaybackState
from algotrace.registry import REGISTRY, trace_document
from algotrace.validation import check_trace

# Project paths
ROOT = Path(__file__).resolve().parent


def parse_data(raw: Optional[str]) -> Optional[List[float]]:
    """Parse "3,1,2" into numbers; anything unparsable yields None (default array)."""
    if not raw:
        return None
    values = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            values.append(int(part))
        except ValueError:
            try:
                values.append(float(part))
            except ValueError:
                print(f"[warn] Ignoring --data, '{part}' is not a number", file=sys.stderr)
                return None
    return values


def case_name(concept: str) -> str:
    return "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in concept.lower()) or "concept"


def generate_trace(concept: str, data, title: str, case_dir: Optional[Path]) -> dict:
    """Build, validate and (optionally) write trace.json for one concept."""

    document = trace_document(concept, data, title)
    ok, err = check_trace(document["steps"])
    if not ok:
        raise RuntimeError(f"trace validation failed: {err}")

    if case_dir is not None:
        case_dir.mkdir(parents=True, exist_ok=True)
        trace_path = case_dir / "trace.json"
        with trace_path.open("w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False, indent=2)
        print(f"[trace] Wrote {trace_path}")

    return document


async def play_trace(concept: str, data, title: str, speed: int) -> None:
    """Replay a trace on the terminal through the playback controller."""

    done = asyncio.get_running_loop().create_future()
    shown = {0}

    def on_change(step, controller):
        if step is not None and controller.index not in shown:
            shown.add(controller.index)
            print(f"  [{controller.index + 1}/{len(controller.steps)}] {step['action']:<12} {step['description']}")
        if controller.state == PlaybackState.PAUSED and not done.done():
            done.set_result(None)

    controller = PlaybackController.for_concept(concept, data, title, speed=speed, on_change=on_change)
    first = controller.current_step
    if first is not None:
        print(f"  [1/{len(controller.steps)}] {first['action']:<12} {first['description']}")
    controller.play()
    try:
        await done
    finally:
        controller.close()


def main() -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Algotrace pipeline: resolve each concept to a generator, build its step trace, "
            "validate it and write trace.json per concept under the case root."
        )
    )
    parser.add_argument(
        "concepts",
        nargs="*",
        help="Concept keys or slugs (e.g. bubble-sort, bfs, tree-insert). Default: every registered kind.",
    )
    parser.add_argument("--data", type=str, default=None,
                        help="Comma separated input numbers for array algorithms (default: built-in array)")
    parser.add_argument("--title", type=str, default="", help="Optional concept title used for matching")
    parser.add_argument(
        "--case-root",
        type=str,
        default="outputs/CASE",
        help="Root directory for per-concept trace.json files (default: outputs/CASE)",
    )
    parser.add_argument("--no-write", action="store_true", help="Validate and summarize only")
    parser.add_argument("--play", action="store_true", help="Replay each trace in the terminal")
    parser.add_argument("--speed", type=int, default=config.DEFAULT_SPEED, help="Playback speed 1-10")

    args = parser.parse_args()
    logging.basicConfig(level=config.log_level(), format="%(levelname)s %(name)s: %(message)s")

    concepts = args.concepts or [kind.value for kind in REGISTRY]
    data = parse_data(args.data)
    case_root = (ROOT / args.case_root).resolve()
    if not args.no_write:
        os.makedirs(case_root, exist_ok=True)

    print("Algotrace pipeline starting...")
    print(f"  Case root:    {case_root if not args.no_write else '(not writing)'}")
    print(f"  Concepts:     {len(concepts)}")

    failures = 0
    for concept in concepts:
        print("\n" + "=" * 80)
        print(f"[CASE] {concept}")
        print("=" * 80)

        try:
            case_dir = None if args.no_write else case_root / case_name(concept)
            document = generate_trace(concept, data, args.title, case_dir)
            features = extract_trace_features(document)
            print(f"  Algorithm:  {features['algorithm']['name']} ({features['algorithm']['family']})")
            print(f"  Data type:  {features['data_type']}  scale: {features['data_scale']}")
            print(f"  Frames:     {features['frame_count']}  ({features['complexity']})")
            print(f"  Actions:    {', '.join(features['actions_used'])}")
            if args.play:
                asyncio.run(play_trace(concept, data, args.title, args.speed))
            print(f"[DONE] {concept}")
        except Exception as e:
            failures += 1
            print(f"[ERROR] Case {concept} failed: {e}", file=sys.stderr)

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
