import time

from algorithms.dijkstra import dijkstra
from algorithms.step import StepKind
from engine.stepper import SPEED_PRESETS, Stepper, StepperState


def _steps(chain):
    vs, es = chain
    return dijkstra(vs, es, "A").steps


def test_start_shows_first_step(chain):
    s = Stepper()
    assert s.state is StepperState.IDLE
    s.start(_steps(chain))
    assert s.state is StepperState.PAUSED
    assert s.current_idx == 0
    assert s.current_step.kind is StepKind.INIT
    assert s.total_steps == 9


def test_forward_and_backward(chain):
    s = Stepper()
    s.start(_steps(chain))
    assert s.next_step()
    assert s.next_step()
    assert s.current_idx == 2
    assert s.prev_step()
    assert s.current_idx == 1
    assert s.prev_step()
    assert not s.prev_step()
    assert s.current_idx == 0


def test_end_of_trace(chain):
    s = Stepper()
    s.start(_steps(chain))
    s.jump_to_end()
    assert s.is_finished
    assert s.current_step.kind is StepKind.FINISH
    assert not s.next_step()
    assert s.prev_step()
    assert s.state is StepperState.PAUSED


def test_goto_bounds(chain):
    s = Stepper()
    s.start(_steps(chain))
    assert s.goto_step(4)
    assert s.current_idx == 4
    assert not s.goto_step(99)
    assert not s.goto_step(-1)
    assert s.current_idx == 4
    s.rewind()
    assert s.current_idx == 0


def test_start_at_saved_index_is_clamped(chain):
    s = Stepper()
    s.start(_steps(chain), index=50)
    assert s.current_idx == 8
    assert s.is_finished


def test_empty_trace():
    s = Stepper()
    s.start(())
    assert s.current_step is None
    assert s.is_finished
    assert not s.next_step()


def test_on_step_callback_sees_every_move(chain):
    seen = []
    s = Stepper(on_step=lambda step: seen.append(step.kind))
    s.start(_steps(chain))
    s.next_step()
    s.prev_step()
    assert seen == [StepKind.INIT, StepKind.VISIT, StepKind.INIT]


def test_play_and_tick(chain):
    s = Stepper()
    s.start(_steps(chain))
    s.set_speed_value(0.0)
    assert s.speed == 0.02
    s.play()
    assert s.is_playing
    later = time.monotonic() + 1.0
    assert s.tick(now=later)
    assert s.current_idx == 1
    # not enough time elapsed since the last tick
    assert not s.tick(now=later)
    s.toggle_play()
    assert s.state is StepperState.PAUSED
    assert not s.tick(now=later + 5)


def test_play_runs_to_finished(chain):
    s = Stepper()
    s.start(_steps(chain))
    s.set_speed("turbo")
    s.play()
    now = time.monotonic()
    while s.is_playing:
        now += 1.0
        s.tick(now=now)
    assert s.is_finished
    assert s.current_idx == s.total_steps - 1


def test_speed_presets():
    s = Stepper(speed="slow")
    assert s.speed == SPEED_PRESETS["slow"]
    s.set_speed("bogus")
    assert s.speed == SPEED_PRESETS["medium"]


def test_reset(chain):
    s = Stepper()
    s.start(_steps(chain))
    s.reset()
    assert s.state is StepperState.IDLE
    assert s.current_step is None
    s.play()
    assert not s.is_playing


def test_play_resumes_from_earlier_tick(chain):
    s = Stepper(speed="slow")
    s.start(_steps(chain))
    s.play(now=100.0)
    assert s.last_tick == 100.0
    assert not s.tick(now=100.5)
    assert s.tick(now=101.0)
    assert s.last_tick == 101.0
