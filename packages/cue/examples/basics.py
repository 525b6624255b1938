"""Hello World -- timers, frames, and a timeline on virtual time.

Demonstrates:
- Creating an engine with a fixed frame rate
- One-shot and repeating timers on the scheduler
- A per-frame callback that stops itself
- A Timeline whose cues share one anchor
- Waiting on a Completion with run_until

Run: python -m examples.basics
"""

from cue import Completion, Engine, Timeline


def main() -> None:
    print("=== Hello World ===\n")

    # 10 frames per second: each step moves the clock 100ms.
    engine = Engine(fps=10)
    sched = engine.scheduler

    sched.after(250, lambda: print(f"  [{sched.now:6.0f}ms] one-shot timer"))

    ticks = 0

    def tick() -> None:
        nonlocal ticks
        ticks += 1
        print(f"  [{sched.now:6.0f}ms] heartbeat {ticks}")
        if ticks == 3:
            stop_heartbeat()

    stop_heartbeat = sched.every(300, tick, label="heartbeat")

    # A frame callback is handed the clock time of the frame it runs in.
    def frame(now: float) -> None:
        if engine.frame_number % 5 == 0:
            print(f"  [{now:6.0f}ms] frame {engine.frame_number}")

    stop_frames = sched.on_frame(frame, label="frames")

    done = Completion("timeline")
    (
        Timeline(sched)
        .add(500, lambda: print(f"  [{sched.now:6.0f}ms] cue: halfway"), "halfway")
        .add(1000, lambda: print(f"  [{sched.now:6.0f}ms] cue: end"), "end")
        .add(1000, done.resolve, "done")
        .play()
    )

    finished = engine.run_until(done, limit=5000)
    stop_frames()

    print(f"\nDone ({finished}). Clock stopped at {engine.clock.now:.0f}ms, "
          f"frame {engine.frame_number}.")


if __name__ == "__main__":
    main()
