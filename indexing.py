"""Rotary axis positions for each tooth of a gear"""

from typing import Tuple

from gear_geometry import angular_pitch


def index_angles(teeth, start_angle=0.0) -> Tuple[float, ...]:
    """
        Absolute A axis angle (degrees) for every tooth, starting at start_angle.

        Each angle is computed from the tooth number rather than accumulated
        so rounding doesn't drift across a large number of teeth.
    """
    pitch = angular_pitch(teeth)
    return tuple(start_angle + tooth * pitch for tooth in range(teeth))
