"""
Plot the moves for one tooth over the outline of the stock, looking down Z.
"""

import os
from typing import List, Optional

import matplotlib.pyplot as plt

from gear_geometry import GearGeometry
from motion import AxisIndex, FeedMove, MotionCommand, RapidMove
from tool import Tool

# setenv SHOW_INTERACTIVE to 1 or true to display interactive plots
SHOW_INTERACTIVE = os.environ.get('SHOW_INTERACTIVE', 'false').lower() in {'1', 'true'}

MOVE_STYLE = {
    RapidMove: dict(color='red', linestyle='--', linewidth=0.8),
    FeedMove: dict(color='blue', linestyle='-', linewidth=1.5),
}


def first_tooth(commands: List[MotionCommand]) -> List[MotionCommand]:
    """Commands up to the first index move"""
    for idx, cmd in enumerate(commands):
        if isinstance(cmd, AxisIndex):
            return commands[:idx]
    return list(commands)


def stock_outline(geometry: GearGeometry, stock_length, right_rotary=False):
    """Rectangle of the stock in X-Y, free face at X=0"""
    direction = 1 if right_rotary else -1
    far = direction * stock_length
    r = geometry.outside_radius
    return [(0, -r), (far, -r), (far, r), (0, r), (0, -r)]


def plot_toolpath(commands: List[MotionCommand], geometry: GearGeometry, stock_length,
                  tool: Optional[Tool] = None, right_rotary=False, title='', do_show=True):
    """Plot the first tooth's moves, the stock, the root line and optionally the cutter at full depth"""
    plt.plot(*zip(*stock_outline(geometry, stock_length, right_rotary)), color='gray')
    direction = 1 if right_rotary else -1
    root = geometry.root_radius
    plt.plot([0, direction * stock_length], [root, root], color='yellow')

    last = None
    deepest = None
    for cmd in first_tooth(commands):
        if not isinstance(cmd, (RapidMove, FeedMove)):
            continue
        if last is not None:
            plt.plot([last[0], cmd.x], [last[1], cmd.y], **MOVE_STYLE[type(cmd)])
        last = (cmd.x, cmd.y)
        if isinstance(cmd, FeedMove) and (deepest is None or cmd.y < deepest[1]):
            deepest = (cmd.x, cmd.y)

    if tool and deepest:
        plt.plot(*zip(*tool.cutter_poly(center=deepest)), color='green')
        plt.plot(*zip(*tool.hub_poly(center=deepest)), color='green', linestyle=':')

    plt.axis('equal')
    plt.title(title or 'Toolpath for %s' % (geometry,))
    if do_show:
        plt.show()
