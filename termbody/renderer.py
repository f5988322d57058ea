"""
This module implements the renderer sinks a finished frame is pushed into.

The simulation core never writes to an output device; it hands an H x W grid of single
characters to whatever object implements RendererSink.consume. TerminalSink is the
console implementation: it homes the cursor with the ESC[H control sequence and
overwrites the previous frame row by row, which avoids the flicker of clearing the
screen. RecordingSink keeps frames in memory as lists of strings for headless runs and
tests.
"""

from __future__ import annotations
import sys
from typing import List, Optional, Protocol, Sequence, TextIO


CURSOR_HOME = "\x1b[H"

Grid = Sequence[Sequence[str]]


class RendererSink(Protocol):
	def consume(self, grid: Grid) -> None:
		...


class TerminalSink:
	def __init__(self, stream: Optional[TextIO] = None) -> None:
		self.stream = stream if stream is not None else sys.stdout
		self.frames_written = 0

	def consume(self, grid: Grid) -> None:
		out = [CURSOR_HOME]
		for row in grid:
			out.append("".join(row))
			out.append("\n")
		self.stream.write("".join(out))
		self.stream.flush()
		self.frames_written += 1


class RecordingSink:
	def __init__(self, keep: Optional[int] = None) -> None:
		self.keep = keep
		self.frames: List[List[str]] = []

	def consume(self, grid: Grid) -> None:
		self.frames.append(["".join(row) for row in grid])
		if self.keep is not None and len(self.frames) > self.keep:
			del self.frames[0]

	@property
	def last(self) -> List[str]:
		return self.frames[-1]
