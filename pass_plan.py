"""
Depth planning for multi-pass cuts.

A plan is a tuple of absolute depths (measured from the outside diameter),
strictly increasing and ending exactly at the whole depth.
"""

from math import ceil
from typing import Tuple

PASS_POLICIES = ['equal', 'finish']
RATIO_TOLERANCE = 1e-9


class InvalidDepthPlan(ValueError):
    pass


def plan_passes(whole_depth, max_depth, policy='equal') -> Tuple[float, ...]:
    """
        Return the depth of each pass needed to reach whole_depth.

        :param whole_depth: Total depth to cut in mm
        :param max_depth:   Maximum depth of cut per pass in mm
        :param policy:      'equal' for ceil(whole_depth/max_depth) equal passes,
                            'finish' for max_depth passes followed by two equal finishing passes
    """
    if whole_depth <= 0:
        raise InvalidDepthPlan('Plan: Whole depth must be greater than 0, not %g' % whole_depth)
    if max_depth <= 0:
        raise InvalidDepthPlan('Plan: Max depth of cut must be greater than 0, not %g' % max_depth)
    if policy == 'equal':
        return equal_passes(whole_depth, max_depth)
    elif policy == 'finish':
        return finishing_passes(whole_depth, max_depth)
    else:
        raise InvalidDepthPlan('Plan: policy must be one of %s, not %r' % (', '.join(PASS_POLICIES), policy))


def equal_passes(whole_depth, max_depth) -> Tuple[float, ...]:
    """Fewest passes of equal depth, none deeper than max_depth"""
    # Ratios like 2.7/0.3 come out a hair over the integer
    passes = max(1, ceil(whole_depth / max_depth - RATIO_TOLERANCE))
    depths = [whole_depth * step / passes for step in range(1, passes)]
    return tuple(depths + [whole_depth])


def finishing_passes(whole_depth, max_depth) -> Tuple[float, ...]:
    """Full max_depth passes until within 2*max_depth, then split the rest in two"""
    depths = []
    depth = 0.0
    while whole_depth - depth > 2 * max_depth + RATIO_TOLERANCE:
        depth += max_depth
        depths.append(depth)
    depths.append(depth + (whole_depth - depth) / 2)
    depths.append(whole_depth)
    return tuple(depths)
