#!/usr/bin/python3

"""
G Code generator for cutting metric involute spur gears on a 4th axis
with a disc form cutter matched to the module and tooth count.

All units are specified in millimeters or degrees.
"""

import sys

import configargparse

from gcode import Gcode
from gear_geometry import GearSpec, geometry_for
from pass_plan import PASS_POLICIES
import toolpath_plot
from tool import Tool
from toolpath import LEAD_IN_MODES, CuttingParams, generate


def help_text(spec: GearSpec, right_rotary=False) -> str:
    """Setup instructions for the operator"""
    geometry = geometry_for(spec)
    return '\n'.join([
        'Before cut:',
        '    - Create stock with OD %gmm and length %gmm' % (geometry.outside_diameter, spec.stock_length),
        '    - Set home to center of %s face of stock' % ('left' if right_rotary else 'right'),
        '    - Zero the A axis',
    ])


def parser() -> configargparse.ArgParser:
    p = configargparse.ArgParser(
        default_config_files=['gear_cutter.cfg'],
        formatter_class=configargparse.ArgumentDefaultsHelpFormatter,
        description="Generate G Code to cut involute spur gears with a form cutter.",
        epilog="""
            The gear blank is held in a rotary 4th-axis along X and a disc cutter matching the
            module and tooth count is fed across it in Y, one tooth space at a time, in as many
            passes as the maximum depth of cut requires.  The cut is always conventional.
                """)
    p.add('out', nargs='?', default='-', help='Output G Code file, - for stdout')
    p.add('--config', '-X', is_config_file=True, help='Config file path')
    p.add('--name', type=str, default='', help='Name of the job, output as the first comment')
    p.add('--plot', action='store_true', help='Plot the toolpath for the first tooth')

    Tool.add_config_args(p)

    # Gear type arguments
    p.add('--gear', '-g', is_config_file=True, help='Gear config file')
    p.add('--module', '-m', type=float, default=1., help='Module of the gear, must match cutter')
    p.add('--pressure', '-p', type=float, default=20., help='Pressure angle in degrees')
    p.add('--addendum', type=float, default=1., help='Addendum factor')
    p.add('--relief', type=float, default=1.25, help='Relief factor (for the dedendum)')

    # Cutting arguments
    p.add('--max_depth', type=float, default=0.5, help='Maximum depth of cut per pass in mm')
    p.add('--passes', default='equal', choices=PASS_POLICIES, help='Equal passes or max depth passes with two finishing passes')
    p.add('--clear', '-c', type=float, default=4., help='Cutter clearance from gear blank in mm')
    p.add('--lead_in', default='rapid', choices=LEAD_IN_MODES, help='Speed of move from clearance to depth')
    p.add('--start_angle', type=float, default=0., help='A axis angle of the first tooth in degrees')
    p.add('--chuck_gap', type=float, default=0., help='Distance from end of stock to chuck in mm (0 = no check)')
    p.add('--chuck_radius', type=float, default=0., help='Outside radius of the chuck in mm (0 = same as gear blank)')
    p.add('--dwell', type=float, default=0., help='Seconds to wait after indexing')
    p.add('--right', '-r', action='store_true', help='Rotary axis is on the right side of the machine')

    # Specific gear arguments
    p.add('--teeth', '-t', type=int, required=True, help='Number of teeth for the entire gear')
    p.add('--thick', '-k', type=float, required=True, help='Length of gear blank along the rotary axis in mm')
    p.add('--make', type=int, default=0, help='Actual number of teeth to cut.')
    return p


def main(args=None):
    """Parse the command line and generate gears."""

    args = parser().parse_args(args)

    try:
        tool = Tool.from_config_args(args)
        spec = GearSpec(teeth=args.teeth, module=args.module, cutter_diameter=tool.diameter,
                        stock_length=args.thick, pressure_angle=args.pressure, cutter_depth=tool.depth,
                        addendum_factor=args.addendum, relief_factor=args.relief)
        cutting = CuttingParams(max_depth=args.max_depth, feed=tool.feed, clearance=args.clear,
                                start_angle=args.start_angle, lead_in=args.lead_in,
                                teeth_to_make=args.make, right_rotary=args.right,
                                pass_policy=args.passes, chuck_gap=args.chuck_gap,
                                chuck_radius=args.chuck_radius,
                                index_dwell=args.dwell)

        commands = generate(spec, cutting)
        print(help_text(spec, args.right), file=sys.stderr)
        print('Generate: %s %d moves' % (geometry_for(spec), len(commands)), file=sys.stderr)

        # Only touch the output once the gear is known to be good
        program = Gcode(tool, name=args.name).program(commands, start_angle=args.start_angle, teeth=args.teeth)
        if args.out == '-':
            print(program)
        else:
            with open(args.out, 'w') as out:
                print(program, file=out)

        if args.plot or toolpath_plot.SHOW_INTERACTIVE:
            toolpath_plot.plot_toolpath(commands, geometry_for(spec), spec.stock_length, tool=tool,
                                        right_rotary=args.right, title=args.name)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
