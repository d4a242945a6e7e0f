#!/usr/bin/env python3
"""Simple performance baseline for normal_text."""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Dict, List

from normal_text import consolidate, fold, normalize, strip

_PLAIN_SENTENCES = [
    "Netflix Top 10: Die beliebtesten Serien und Filme am 16. September 2022.",
    "Lorem ipsum dolor sit amet, pri at cetero eripuit inermis.",
    "Kunstraub bei GZSZ? John will 1,5 Millionen Euro teures Bild stehlen.",
    "お早うございます 🤧😇",
]

_STYLED_SNIPPETS = [
    "Straße Fußball Kopfhörer Pokémon",
    "𝔞𝔟𝔠𝔡𝔢 𝓪𝓫𝓬𝓭𝓮 ⓐⓑⓒⓓⓔ ａｂｃｄｅ",
    "ЁЙЦУКЕНГШЩЗХЪ ёйцукенгшщзхъ",
    "ᗩᗷᑕᗪᗴ ꍏꌃꉓꀸꍟ ᎯᏰᏨᎠᎬ",
    "a̶b̶c̶ a̲̅b̲̅c̲̅ ɑƶ߀ԉ ᴎᴑᴅᴇȷʂ",
]

_STAGES = {
    "fold": fold,
    "consolidate": consolidate,
    "strip": strip,
    "normalize": normalize,
}


def _build_text(target_chars: int, styled_every: int) -> str:
    chunks: List[str] = []
    i = 0
    total = 0
    while total < target_chars:
        if styled_every and i % styled_every == 0:
            chunk = random.choice(_STYLED_SNIPPETS)
        else:
            chunk = random.choice(_PLAIN_SENTENCES)
        chunks.append(chunk)
        total += len(chunk) + 1
        i += 1
    return " ".join(chunks)


def _run_case(text: str, stage: str, runs: int) -> Dict[str, float]:
    func = _STAGES[stage]
    durations: List[float] = []
    for _ in range(runs):
        start = time.perf_counter()
        func(text)
        durations.append(time.perf_counter() - start)
    durations.sort()
    return {
        "min_ms": durations[0] * 1000.0,
        "p50_ms": durations[len(durations) // 2] * 1000.0,
        "max_ms": durations[-1] * 1000.0,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="normal_text perf baseline.")
    parser.add_argument("--sizes", nargs="+", type=int, default=[100_000, 500_000, 1_000_000])
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--styled-every", type=int, default=3)
    parser.add_argument(
        "--output",
        type=str,
        default="",
        help="Optional path to write results as JSON.",
    )
    args = parser.parse_args()

    print("normal_text perf baseline")
    print(f"sizes={args.sizes} chars, runs={args.runs}, styled_every={args.styled_every}")

    results: Dict[str, Dict[str, Dict[str, float]]] = {}
    for size in args.sizes:
        text = _build_text(size, args.styled_every)
        print(f"\nsize={size} chars")
        size_key = str(size)
        results[size_key] = {}
        for stage in _STAGES:
            stats = _run_case(text, stage, args.runs)
            results[size_key][stage] = stats
            print(
                f"  stage={stage} min={stats['min_ms']:.2f}ms "
                f"p50={stats['p50_ms']:.2f}ms max={stats['max_ms']:.2f}ms"
            )
    if args.output:
        output_path = args.output
        with open(output_path, "w", encoding="utf-8") as handle:
            json.dump(
                {
                    "sizes": args.sizes,
                    "runs": args.runs,
                    "styled_every": args.styled_every,
                    "results": results,
                },
                handle,
                indent=2,
                sort_keys=True,
            )
        print(f"\nWrote results to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
