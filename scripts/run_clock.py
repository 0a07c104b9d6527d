from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from gumshoe.clock.clock import Clock, DEFAULT_SECONDS_PER_MINUTE


def main() -> None:
    parser = argparse.ArgumentParser(description="Drive the game clock with synthetic frames.")
    parser.add_argument("--sleep-minutes", type=int, default=60)
    parser.add_argument("--sleep-seconds", type=float, default=5.0)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--seconds-per-minute", type=float, default=DEFAULT_SECONDS_PER_MINUTE)
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    clock = Clock(args.seconds_per_minute)
    clock.fast_forward_started.connect(lambda: print(f"Sleeping from {clock.time_string()}"))
    clock.fast_forward_completed.connect(lambda: print(f"Woke at {clock.time_string()}"))
    clock.start_fast_forward_offset(args.sleep_minutes, args.sleep_seconds)

    frame = 1.0 / max(1, args.fps)
    frames = 0
    while clock.is_fast_forwarding:
        clock.tick(frame)
        frames += 1
    print(f"{frames} frames, multiplier back to {clock.multiplier}")


if __name__ == "__main__":
    main()
