from typing import Iterable, Optional

from motion import AxisIndex, Dwell, FeedMove, MotionCommand, RapidMove
from tool import Tool


class Gcode():
    """Simple class to make gcode file creation easier."""

    def __init__(self, tool: Tool, name: Optional[str] = None):
        self.tool = tool
        self.name = name
        self.gcode = []
        self.feed = None

    def header(self):
        """Record the gcode for the top of the file."""
        if self.name:
            self.comment(self.name)
        self.append(
"""\
%
G90 G54 G17 G40 G80 G94 G91.1 G49
G21 (Millimeters)
G30

T{number} G43 H{number} M6
S{rpm:g} M3{mist}{flood}""".format(number=self.tool.number,
                                  rpm=self.tool.rpm,
                                  mist=' M07' if self.tool.mist else '',
                                  flood=' M08' if self.tool.flood else ''))

    def footer(self):
        """Record the gcode for the bottom of the file."""
        self.append(
"""\
M5 M9
G30
M30
%""")

    def move(self, a=None, x=None, y=None, z=None):
        """Record a high-speed move operation"""
        self.gcode.append("G0" +
                          (' A%.4f' % a if a is not None else '') +
                          (' X%.4f' % x if x is not None else '') +
                          (' Y%.4f' % y if y is not None else '') +
                          (' Z%.4f' % z if z is not None else ''))

    def cut(self, x=None, y=None, z=None, feed=None):
        """Record a cutting speed linear operation, feed is only output when it changes"""
        f_word = ''
        if feed is not None and feed != self.feed:
            f_word = ' F%g' % feed
            self.feed = feed
        self.gcode.append("G1" +
                          (' X%.4f' % x if x is not None else '') +
                          (' Y%.4f' % y if y is not None else '') +
                          (' Z%.4f' % z if z is not None else '') +
                          f_word)

    def dwell(self, seconds):
        self.gcode.append('G4 P%g' % seconds)

    def comment(self, line=None):
        """Record comments"""
        self.gcode.append("(%s)" % line if line else '')

    def append(self, line):
        """Add to the end."""
        self.gcode.append(line)

    def command(self, cmd: MotionCommand):
        """Record a single motion command"""
        if isinstance(cmd, RapidMove):
            self.move(x=cmd.x, y=cmd.y, z=cmd.z)
        elif isinstance(cmd, FeedMove):
            self.cut(x=cmd.x, y=cmd.y, z=cmd.z, feed=cmd.feed)
        elif isinstance(cmd, AxisIndex):
            self.move(a=cmd.a)
        elif isinstance(cmd, Dwell):
            self.dwell(cmd.seconds)
        else:
            raise TypeError('Gcode: unknown motion command %r' % (cmd,))

    def commands(self, commands: Iterable[MotionCommand], start_angle=0.0, teeth=0):
        """
            Record all of the moves for a gear.

            The first move is split so Y reaches the safe position before
            X, Z and A move.  Each index move starts a new tooth comment.
        """
        tooth = 1
        first = True
        self.comment()
        self.comment('Tooth: %d%s' % (tooth, ' of %d' % teeth if teeth else ''))
        for cmd in commands:
            if first and isinstance(cmd, RapidMove):
                self.move(y=cmd.y)
                self.move(a=start_angle)
                self.move(x=cmd.x, z=cmd.z)
                first = False
                continue
            if isinstance(cmd, AxisIndex):
                tooth += 1
                self.comment()
                self.comment('Tooth: %d%s' % (tooth, ' of %d' % teeth if teeth else ''))
            self.command(cmd)

    def program(self, commands: Iterable[MotionCommand], start_angle=0.0, teeth=0) -> str:
        """Create the complete program: header, moves and footer."""
        self.gcode = []
        self.feed = None
        self.header()
        self.commands(commands, start_angle, teeth)
        self.footer()
        return self.output()

    def output(self):
        """Create a new-line separated string of the gcode."""
        return '\n'.join(self.gcode)
