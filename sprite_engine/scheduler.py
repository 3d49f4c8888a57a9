"""
Cooperative per-frame scheduling of sprite scripts and processes.

A step is resumed once per frame and reports whether it has completed.
Scripts form a FIFO queue where only the head runs; processes all run every
frame. Generators are the usual way to author a step: every ``yield`` ends
the frame, returning completes the step.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Generator, Iterable, List, Union

if TYPE_CHECKING:
    from .sprite import Sprite


class Step:
    """Base class for cooperative steps."""

    def resume(self) -> bool:
        """Run until the next suspension point; return True once completed."""
        raise NotImplementedError("Step.resume must be implemented by subclasses")


class GeneratorStep(Step):
    """Adapts a generator: each ``next()`` is one resumption."""

    def __init__(self, generator: Generator) -> None:
        self.generator = generator
        self.done = False

    def __repr__(self) -> str:
        return f"<GeneratorStep {self.generator!r} done={self.done}>"

    def resume(self) -> bool:
        if self.done:
            return True
        try:
            next(self.generator)
        except StopIteration:
            self.done = True
        return self.done


StepLike = Union[Step, Generator]


def as_step(obj: StepLike) -> Step:
    """Return ``obj`` as a Step, wrapping generators."""
    if isinstance(obj, Step):
        return obj
    if hasattr(obj, "__next__"):
        return GeneratorStep(obj)
    raise TypeError(f"Expected a Step or generator, got {type(obj).__name__}")


def resume_all(steps: List[Step]) -> None:
    """
    Resume every step in ``steps`` once, then drop the completed ones.
    Removal happens after the full pass, by identity, so steps later in the
    list are still resumed this pass even if earlier ones finished. A step
    taken out of ``steps`` by an earlier step in the same pass is skipped.
    """
    finished = []
    for step in list(steps):
        if not any(candidate is step for candidate in steps):
            continue
        if step.resume():
            finished.append(step)
    for step in finished:
        for i, candidate in enumerate(steps):
            if candidate is step:
                del steps[i]
                break


class Sequential(Step):
    """Runs children one after another, handing off within one resumption."""

    def __init__(self, steps: Iterable[StepLike]) -> None:
        self.steps = [as_step(step) for step in steps]

    def resume(self) -> bool:
        while self.steps:
            if not self.steps[0].resume():
                return False
            self.steps.pop(0)
        return True


class Parallel(Step):
    """Runs all children every resumption until each has completed."""

    def __init__(self, steps: Iterable[StepLike]) -> None:
        self.steps = [as_step(step) for step in steps]

    def resume(self) -> bool:
        resume_all(self.steps)
        return not self.steps


class SkipFrames(Step):
    """Idles for ``frames - 1`` resumptions and completes on the next one."""

    def __init__(self, frames: int) -> None:
        self.remaining = frames

    def resume(self) -> bool:
        self.remaining -= 1
        return self.remaining <= 0


def run_sequential(*steps: StepLike) -> Step:
    return Sequential(steps)


def run_parallel(*steps: StepLike) -> Step:
    return Parallel(steps)


def skip_frames(frames: int) -> Step:
    return SkipFrames(frames)


def advance_scripts(sprite: Sprite) -> None:
    """Resume the head of the sprite's script queue, popping it when done."""
    if sprite.scripts:
        head = sprite.scripts[0]
        # The script may have reshaped the queue while it ran
        if head.resume() and sprite.scripts and sprite.scripts[0] is head:
            sprite.scripts.popleft()


def advance_processes(sprite: Sprite) -> None:
    """Resume every process of the sprite once and drop finished ones."""
    resume_all(sprite.processes)
