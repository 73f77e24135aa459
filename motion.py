"""
Machine moves produced by the toolpath generator.

The set of commands is closed: RapidMove, FeedMove, AxisIndex and Dwell.
Positions are absolute, in mm, with X along the rotary axis, Y the plunge
axis and A the rotary axis in degrees.
"""

from typing import NamedTuple, Union


class RapidMove(NamedTuple):
    """High-speed positioning move"""
    x: float
    y: float
    z: float


class FeedMove(NamedTuple):
    """Cutting speed linear move, feed in mm/min"""
    x: float
    y: float
    z: float
    feed: float


class AxisIndex(NamedTuple):
    """Rotate the work to an absolute A position"""
    a: float


class Dwell(NamedTuple):
    seconds: float


MotionCommand = Union[RapidMove, FeedMove, AxisIndex, Dwell]
MOTION_COMMANDS = (RapidMove, FeedMove, AxisIndex, Dwell)
