import matplotlib.pyplot as plt
from x7.geom.testing import TestCaseGeomExtended
from x7.lib.annotations import tests

import toolpath_plot
from gear_geometry import GearSpec, geometry_for
from motion import AxisIndex, RapidMove
from tool import Tool
from toolpath import CuttingParams, generate


@tests(toolpath_plot)
class TestToolpathPlot(TestCaseGeomExtended):
    SAVE_MATCH = False

    def setUp(self):
        super().setUp()
        self.spec = GearSpec(teeth=20, module=2.0, cutter_diameter=50.0, stock_length=10.0)
        self.commands = generate(self.spec, CuttingParams(max_depth=1.5))

    def tearDown(self):
        plt.close('all')
        super().tearDown()

    @tests(toolpath_plot.first_tooth)
    def test_first_tooth(self):
        first = toolpath_plot.first_tooth(self.commands)
        self.assertEqual(3 * 4, len(first))
        self.assertFalse([cmd for cmd in first if isinstance(cmd, AxisIndex)])
        moves = [RapidMove(0, 0, 0), RapidMove(1, 1, 0)]
        self.assertEqual(moves, toolpath_plot.first_tooth(moves))

    @tests(toolpath_plot.stock_outline)
    def test_stock_outline(self):
        geometry = geometry_for(self.spec)
        outline = toolpath_plot.stock_outline(geometry, 10.0)
        self.assertEqual([(0, -22.0), (-10.0, -22.0), (-10.0, 22.0), (0, 22.0), (0, -22.0)], outline)
        outline = toolpath_plot.stock_outline(geometry, 10.0, right_rotary=True)
        self.assertEqual((10.0, -22.0), outline[1])

    @tests(toolpath_plot.plot_toolpath)
    def test_plot_toolpath(self):
        plt.figure()
        toolpath_plot.plot_toolpath(self.commands, geometry_for(self.spec), 10.0, do_show=False)
        # stock, root line and 11 moves between the 12 commands of the first tooth
        self.assertEqual(2 + 11, len(plt.gca().lines))
        self.assertTrue(plt.gca().get_title().startswith('Toolpath for (Teeth: 20'))

    @tests(toolpath_plot.plot_toolpath)
    def test_plot_toolpath_tool(self):
        plt.figure()
        toolpath_plot.plot_toolpath(self.commands, geometry_for(self.spec), 10.0, tool=Tool(radius=25.0),
                                    title='with tool', do_show=False)
        self.assertEqual(2 + 11 + 2, len(plt.gca().lines))
        self.assertEqual('with tool', plt.gca().get_title())

    @tests(toolpath_plot.plot_toolpath)
    def test_plot_toolpath_title(self):
        # Default title names the gear
        plt.figure()
        geometry = geometry_for(self.spec)
        toolpath_plot.plot_toolpath(self.commands, geometry, 10.0, title='', do_show=False)
        self.assertEqual('Toolpath for %s' % (geometry,), plt.gca().get_title())
