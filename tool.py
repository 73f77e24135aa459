import json
import sys
from math import cos, sin, tau

import configargparse


class Tool:
    r"""
        The Tool class holds the specifications of the form cutter, a disc
        mounted on an arbor, seen here from the side::

                 __________
                |          |  a
                |  ______  |  b
                | |      | |
                | |  ++  | |
                | |______| |
                |          |
                |__________|

        * radius is the distance from the center to the tip of the form (a)
        * depth is the usable depth of the form, radius - hub radius (ab)
        * number, rpm and feed are used for the program header and moves
    """

    def __init__(self, radius=25., depth=6., number=1, rpm=650, feed=60, mist=False, flood=False):
        if radius <= 0.:
            raise ValueError('Tool: Radius must be greater than 0')
        if depth <= 0.:
            raise ValueError('Tool: Depth must be greater than 0')
        if radius <= depth:
            raise ValueError('Tool: Radius must be greater than depth')
        if rpm <= 0:
            raise ValueError('Tool: RPM must be greater than 0')
        if feed <= 0:
            raise ValueError('Tool: Feed must be greater than 0')

        self.radius = radius
        self.depth = depth
        self.number = number
        self.rpm = rpm
        self.feed = feed
        self.mist = mist
        self.flood = flood

    @property
    def diameter(self):
        return self.radius * 2

    @property
    def hub_radius(self):
        return self.radius - self.depth

    def __str__(self):
        return "(T{}: Diameter: {}, Depth: {}, RPM: {}, Feed: {})".format(
            self.number, self.diameter, self.depth, self.rpm, self.feed)

    def __repr__(self):
        fields = 'depth,number,rpm,feed,mist,flood'
        field_vals = ', '.join('%s=%s' % (f, getattr(self, f)) for f in fields.split(','))
        return 'Tool(radius=%s, %s)' % (self.radius, field_vals)

    def __eq__(self, other):
        return type(self) == type(other) and \
               self.__dict__ == other.__dict__

    @staticmethod
    def add_config_args(p: configargparse.ArgumentParser):
        """Add arguments for tool description"""
        # Tool arguments
        p.add_argument('--tool', '-T', is_config_file=True, help='Tool config file')
        p.add_argument('--diameter', '-I', type=float, default=50., help='Tool: cutter diameter in mm')
        p.add_argument('--depth', '-D', type=float, default=6., help='Tool: usable depth of the cutter form in mm')
        p.add_argument('--number', '-N', type=int, default=1, help='Tool: tool number')
        p.add_argument('--rpm', '-R', type=float, default=650., help='Tool: spindle speed')
        p.add_argument('--feed', '-F', type=float, default=60., help='Tool: feed rate in mm/min')
        p.add_argument('--mist', '-M', action='store_true', help='Tool: turn on mist coolant')
        p.add_argument('--flood', '-L', action='store_true', help='Tool: turn on flood coolant')

    @staticmethod
    def from_config_args(args: configargparse.Namespace):
        return Tool(radius=args.diameter / 2., depth=args.depth, number=args.number, rpm=args.rpm,
                    feed=args.feed, mist=args.mist, flood=args.flood)

    @staticmethod
    def from_config_file(filename):
        """Load a tool from a config file"""
        parser = configargparse.ArgParser()
        Tool.add_config_args(parser)
        return Tool.from_config_args(parser.parse_args(['--tool=%s' % filename]))

    def to_json(self, indent=None):
        return json.dumps(self.__dict__, sort_keys=True, indent=indent)

    @staticmethod
    def from_dict(d: dict):
        return Tool(**d)

    @staticmethod
    def from_json(js: str):
        return Tool.from_dict(json.loads(js))

    def cutter_poly(self, center=(0., 0.), steps=72):
        """Return a polygon of the cutter rim centered at center"""
        cx, cy = center
        return [(cx + self.radius * cos(tau * step / steps), cy + self.radius * sin(tau * step / steps))
                for step in range(steps + 1)]

    def hub_poly(self, center=(0., 0.), steps=72):
        """Return a polygon of the hub (the part that must not touch the stock)"""
        cx, cy = center
        return [(cx + self.hub_radius * cos(tau * step / steps), cy + self.hub_radius * sin(tau * step / steps))
                for step in range(steps + 1)]

    def plot(self, title='', do_show=True):
        # noinspection PyPackageRequirements
        import matplotlib.pyplot as plt
        plt.plot(*zip(*self.cutter_poly()))
        plt.plot(*zip(*self.hub_poly()))
        plt.axis('equal')
        if title:
            plt.title(title)
        if do_show:
            plt.show()


def test(args):
    for fn in args:
        t = Tool.from_config_file(fn)
        print(fn)
        print('   ', t)
        print('   ', t.to_json())
        tt = Tool.from_json(t.to_json())
        if t != tt:
            print('MISMATCH:')
            print('   ', tt.to_json())
        t.plot(title=fn)


if __name__ == '__main__':
    test(sys.argv[1:])
