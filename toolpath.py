"""
Toolpath generation for cutting spur gears with a disc form cutter on a 4th axis.

The stock is held in a rotary chuck with its axis along X.  Home is the center
of the free face of the stock (X=0, Y=0, Z=0), the stock extends away from
the free face towards the chuck.  The cutter is a disc in the X-Y plane,
plunged from +Y and fed along X across the whole stock.  Every pass uses
the same feed direction, from the free face towards the chuck, so the cut is
always conventional.

All units are specified in millimeters or degrees.
"""

from enum import Enum
from math import sqrt
from typing import List, NamedTuple, Tuple

from gear_geometry import GearGeometry, GearSpec, InvalidGearSpec, geometry_for
from indexing import index_angles
from motion import AxisIndex, Dwell, FeedMove, MotionCommand, RapidMove
from pass_plan import PASS_POLICIES, plan_passes

LEAD_IN_MODES = ['rapid', 'feed']


class CutterInterference(ValueError):
    """The cutter would hit something other than the tooth space"""
    pass


class CuttingParams(NamedTuple):
    """
        How to cut the gear.

        :param max_depth:     Maximum depth of cut per pass in mm
        :param feed:          Feed rate in mm/min
        :param clearance:     Distance kept between cutter and stock during rapids in mm
        :param start_angle:   A axis position of the first tooth in degrees
        :param lead_in:       'rapid' or 'feed' for the move from the approach point to the start of cut
        :param teeth_to_make: Number of teeth to actually cut (0 == all)
        :param right_rotary:  True if the rotary axis is on the right side of the machine
        :param pass_policy:   'equal' or 'finish', see pass_plan.plan_passes()
        :param chuck_gap:     Distance from the end of the stock to the chuck in mm (0 == don't check)
        :param chuck_radius:  Outside radius of the chuck in mm (0 == same as the gear blank)
        :param index_dwell:   Seconds to wait after each index move (0 == no dwell)
    """
    max_depth: float = 0.5
    feed: float = 60.0
    clearance: float = 4.0
    start_angle: float = 0.0
    lead_in: str = 'rapid'
    teeth_to_make: int = 0
    right_rotary: bool = False
    pass_policy: str = 'equal'
    chuck_gap: float = 0.0
    chuck_radius: float = 0.0
    index_dwell: float = 0.0


class ToolpathContext(NamedTuple):
    """Everything computed up front, read-only while commands are generated"""
    geometry: GearGeometry
    passes: Tuple[float, ...]
    angles: Tuple[float, ...]
    cutter_radius: float
    x_start: float
    x_end: float
    y_safe: float
    feed: float
    lead_in: str
    index_dwell: float

    def y_cut(self, depth) -> float:
        """Y of the cutter center when cutting depth below the outside diameter"""
        return self.geometry.outside_radius + self.cutter_radius - depth


def check_cutting_params(cutting: CuttingParams):
    if cutting.feed <= 0:
        raise ValueError('Cutting: Feed must be greater than 0')
    if cutting.clearance <= 0:
        raise ValueError('Cutting: Clearance must be greater than 0')
    if cutting.lead_in not in LEAD_IN_MODES:
        raise ValueError('Cutting: lead_in must be "rapid" or "feed", not %r' % cutting.lead_in)
    if cutting.pass_policy not in PASS_POLICIES:
        raise ValueError('Cutting: pass_policy must be "equal" or "finish", not %r' % cutting.pass_policy)
    if cutting.teeth_to_make < 0:
        raise ValueError('Cutting: teeth_to_make must be greater than or equal to 0')
    if cutting.chuck_gap < 0:
        raise ValueError('Cutting: chuck_gap must be greater than or equal to 0')
    if cutting.chuck_radius < 0:
        raise ValueError('Cutting: chuck_radius must be greater than or equal to 0')
    if cutting.index_dwell < 0:
        raise ValueError('Cutting: index_dwell must be greater than or equal to 0')


def engagement(cutter_radius, depth) -> float:
    """Half the chord the cutter rim cuts through the outside diameter at depth"""
    return sqrt(cutter_radius ** 2 - (cutter_radius - depth) ** 2)


def rim_reach(cutter_radius, cutter_y, height) -> float:
    """
        Horizontal distance from the cutter center to the furthest point of the
        rim at or below height.  Anything at or above the cutter center sees the
        full radius, anything below the rim sees nothing.
    """
    below = cutter_y - height
    if below <= 0:
        return cutter_radius
    if below >= cutter_radius:
        return 0.0
    return sqrt(cutter_radius ** 2 - below ** 2)


def prepare(spec: GearSpec, cutting: CuttingParams) -> ToolpathContext:
    """Validate everything and compute the context for generating the toolpath."""

    if spec.cutter_diameter <= 0:
        raise InvalidGearSpec('Gear: Cutter diameter must be greater than 0.')
    if spec.stock_length <= 0:
        raise InvalidGearSpec('Gear: Stock length must be greater than 0.')
    check_cutting_params(cutting)

    geometry = geometry_for(spec)
    passes = plan_passes(geometry.whole_depth, cutting.max_depth, cutting.pass_policy)
    angles = index_angles(spec.teeth, cutting.start_angle)
    if 0 < cutting.teeth_to_make < spec.teeth:
        angles = angles[:cutting.teeth_to_make]

    # Make sure the cutter is big enough
    cutter_radius = spec.cutter_diameter / 2.
    h_total = geometry.whole_depth
    if cutter_radius <= h_total:
        raise CutterInterference('Cutter radius %g mm is too small for tooth height %g mm' %
                                 (cutter_radius, h_total))
    if spec.cutter_depth and spec.cutter_depth < h_total:
        raise CutterInterference('Cutter depth %g mm is too shallow for tooth height %g mm' %
                                 (spec.cutter_depth, h_total))

    # The cutter starts and ends clear of the stock by clearance at full depth
    x_offset = engagement(cutter_radius, h_total) + cutting.clearance
    if cutting.chuck_gap:
        # Cutter at full depth over a chuck face as tall as chuck_radius
        chuck_radius = cutting.chuck_radius or geometry.outside_radius
        cutter_y = geometry.outside_radius + cutter_radius - h_total
        overrun = x_offset + rim_reach(cutter_radius, cutter_y, chuck_radius)
        if overrun > cutting.chuck_gap:
            raise CutterInterference('Cutter hits chuck by %g mm' % (overrun - cutting.chuck_gap))

    # The free face is at X=0, conventional cutting moves towards the chuck
    direction = 1 if cutting.right_rotary else -1
    x_start = -direction * x_offset
    x_end = direction * (spec.stock_length + x_offset)

    return ToolpathContext(
        geometry=geometry,
        passes=passes,
        angles=angles,
        cutter_radius=cutter_radius,
        x_start=x_start,
        x_end=x_end,
        y_safe=geometry.outside_radius + cutter_radius + cutting.clearance,
        feed=cutting.feed,
        lead_in=cutting.lead_in,
        index_dwell=cutting.index_dwell,
    )


class CutState(Enum):
    APPROACH_PENDING = 'approach_pending'
    CUTTING = 'cutting'
    RETRACT_PENDING = 'retract_pending'
    INDEXING = 'indexing'
    DONE = 'done'


class ToolpathSynthesizer():
    """
        Generates the moves for every tooth and every pass.

        Each pass is the same four moves: rapid to the approach point above
        the start of cut, lead in to the cutting depth, feed across the stock,
        rapid retract.  All passes of a tooth are cut before indexing to the
        next tooth, so resuming an interrupted job only needs the last
        completed tooth.
    """

    def __init__(self, context: ToolpathContext):
        self.context = context
        self.state = CutState.APPROACH_PENDING
        self.tooth = 0
        self.pass_num = 0
        self.commands: List[MotionCommand] = []

    @property
    def depth(self) -> float:
        return self.context.passes[self.pass_num]

    def run(self) -> List[MotionCommand]:
        """Step the state machine until done and return the commands"""
        steps = {
            CutState.APPROACH_PENDING: self.approach,
            CutState.CUTTING: self.cut,
            CutState.RETRACT_PENDING: self.retract,
            CutState.INDEXING: self.index,
        }
        while self.state != CutState.DONE:
            self.state = steps[self.state]()
        return self.commands

    def _approach_moves(self):
        ctx = self.context
        y_cut = ctx.y_cut(self.depth)
        self.commands.append(RapidMove(ctx.x_start, ctx.y_safe, 0.))
        if ctx.lead_in == 'feed':
            self.commands.append(FeedMove(ctx.x_start, y_cut, 0., ctx.feed))
        else:
            self.commands.append(RapidMove(ctx.x_start, y_cut, 0.))

    def approach(self) -> CutState:
        self._approach_moves()
        return CutState.CUTTING

    def cut(self) -> CutState:
        ctx = self.context
        self.commands.append(FeedMove(ctx.x_end, ctx.y_cut(self.depth), 0., ctx.feed))
        return CutState.RETRACT_PENDING

    def retract(self) -> CutState:
        ctx = self.context
        self.commands.append(RapidMove(ctx.x_end, ctx.y_safe, 0.))
        if self.pass_num + 1 < len(ctx.passes):
            self.pass_num += 1
            self._approach_moves()
            return CutState.CUTTING
        elif self.tooth + 1 < len(ctx.angles):
            return CutState.INDEXING
        else:
            return CutState.DONE

    def index(self) -> CutState:
        ctx = self.context
        self.tooth += 1
        self.pass_num = 0
        self.commands.append(AxisIndex(ctx.angles[self.tooth]))
        if ctx.index_dwell:
            self.commands.append(Dwell(ctx.index_dwell))
        return CutState.APPROACH_PENDING


def generate(spec: GearSpec, cutting=CuttingParams()) -> List[MotionCommand]:
    """
        Generate the moves to cut the gear described by spec.

        The rotary axis is expected to be at cutting.start_angle and the
        cutter clear of the stock before the first move.  Raises
        InvalidGearSpec, InvalidDepthPlan or CutterInterference before
        any move is generated.
    """
    return ToolpathSynthesizer(prepare(spec, cutting)).run()
