"""Hello Tween -- one tween on the wall clock.

Demonstrates:
- Creating a Tweenable with a frame rate and default duration
- Watching every frame through a step callback
- Pausing and resuming without losing animated time
- Handing control to the scheduler until the tween completes

Run: python -m examples.basics
"""
import logging

from tick_glide import RealtimeScheduler, Tweenable


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    print("=== Hello Tween ===\n")

    scheduler = RealtimeScheduler()
    tweenable = Tweenable(fps=10, duration=1000, scheduler=scheduler)

    def step(current: dict[str, float]) -> None:
        print(f"  x={current['x']:7.2f}  y={current['y']:7.2f}")

    def done(current: dict[str, float]) -> None:
        print(f"\nDone at {current}")

    ctrl = tweenable.tween({
        "from": {"x": 0, "y": 0},
        "to": {"x": 100, "y": -50},
        "easing": "ease_in_out",
        "step": step,
        "callback": done,
    })

    # Pause after roughly a third of the run, sit still for half a second.
    scheduler.schedule(ctrl.pause, 300)
    scheduler.schedule(ctrl.resume, 800)

    scheduler.run_until_idle()


if __name__ == "__main__":
    main()
