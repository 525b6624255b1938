"""Headless run -- the whole presentation against recording stand-ins.

Demonstrates:
- Wiring an Orchestrator to a RecordingSurface and RecordingGlobe
- Clicking the begin control and driving the engine on virtual time
- Reading back the surface event log as a transcript
- Accepting at the end and watching the celebration bursts

Run: python -m examples.headless [--fast]
"""

import logging
import random
import sys

from cue import Engine
from transmission import Orchestrator, RecordingGlobe, RecordingSurface, Timings
from transmission import surface as ids

# Operations too chatty for the transcript (typewriter characters, counter frames).
QUIET = {"append_text", "set_style"}


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    timings = Timings().scaled(0.1) if "--fast" in sys.argv else Timings()

    engine = Engine(fps=30)
    surface = RecordingSurface()
    globe = RecordingGlobe()
    bursts = []

    orch = Orchestrator(
        engine.scheduler,
        surface,
        globe_loader=lambda: globe,
        burst=bursts.append,
        timings=timings,
        rng=random.Random(14),
    )
    orch.start()
    engine.advance(3000)

    print("=== Landing ===")
    print(f"  begin control ready: {surface.has_class(ids.BEGIN, 'show')}")
    surface.click(ids.BEGIN)
    mark = len(surface.events)

    engine.run_until(orch.letter_shown, limit=60_000)
    print(f"\n=== Letter shown at {engine.clock.now:.0f}ms ===")
    for op, element, arg in surface.events[mark:]:
        if op in QUIET:
            continue
        detail = "" if arg is None else f" {arg!r}"
        print(f"  {op:<18} {element}{detail}")
    print(f"  latency counter settled on {surface.text(ids.LATENCY)} mi")

    if orch.letter_typed is not None:
        engine.run_until(orch.letter_typed, limit=120_000)
    print(f"\n=== Letter typed at {engine.clock.now:.0f}ms ===")
    print(f"  {surface.text(ids.COUNTDOWN)}")

    surface.click(ids.RETRY)
    print(f"\n  retry says: {surface.text(ids.RETRY_ERROR)}")
    surface.click(ids.ACCEPT)
    engine.advance(timings.accept_fade)
    print(f"  accepted visible: {surface.is_visible(ids.ACCEPTED)}, bursts fired: {len(bursts)}")
    print(f"\nDone. Globe calls recorded: {len(globe.calls)}")


if __name__ == "__main__":
    main()
