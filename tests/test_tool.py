import os
from contextlib import redirect_stdout
from io import StringIO
from typing import List, Tuple
from unittest import TestCase

import matplotlib.pyplot as plt
from x7.geom.testing import TestCaseGeomExtended
from x7.lib.annotations import tests

import tool
from tool import Tool

CUTTER_CFG = os.path.join(os.path.dirname(__file__), 'cutter_m2.cfg')


@tests(tool.Tool)
class TestTool(TestCaseGeomExtended):
    SAVE_MATCH = False

    @staticmethod
    def tools_for_tests() -> List[Tuple[str, Tool]]:
        """Return a list of tag, tool"""
        t1 = Tool(radius=25.0, depth=6.0, feed=60.0, flood=True, mist=False, number=1, rpm=650.0)
        t2 = Tool(radius=22.5, depth=9.0, feed=40.0, flood=False, mist=True, number=12, rpm=400.0)
        return [('t1', t1), ('t2', t2)]

    @tests(tool.Tool.__init__)
    def test___init__(self):
        t = Tool(radius=3.0, depth=2.0, number=6, rpm=7, feed=8, mist=True, flood=True)
        self.assertEqual(6.0, t.diameter)
        self.assertEqual(1.0, t.hub_radius)
        with self.assertRaises(ValueError):
            Tool(radius=0)
        with self.assertRaises(ValueError):
            Tool(depth=-1)
        with self.assertRaises(ValueError):
            Tool(radius=1, depth=2)
        with self.assertRaises(ValueError):
            Tool(rpm=0)
        with self.assertRaises(ValueError):
            Tool(feed=-5)

    @tests(tool.Tool.__str__)
    def test_str(self):
        t = Tool(radius=3.0, depth=2.0, number=6, rpm=7, feed=8, mist=True, flood=True)
        self.assertEqual('(T6: Diameter: 6.0, Depth: 2.0, RPM: 7, Feed: 8)', str(t))

    @tests(tool.Tool.__repr__)
    def test_repr(self):
        t = Tool(radius=3.0, depth=2.0, number=6, rpm=7, feed=8, mist=True, flood=True)
        expected = 'Tool(radius=3.0, depth=2.0, number=6, rpm=7, feed=8, mist=True, flood=True)'
        self.assertEqual(expected, repr(t))

    @tests(tool.Tool.__eq__)
    def test_eq(self):
        t = Tool(radius=3.0, depth=2.0, number=6, rpm=7, feed=8, mist=True, flood=True)
        tt = Tool(radius=3.0, depth=2.0, number=6, rpm=7, feed=8, mist=True, flood=True)
        self.assertEqual(t, tt)
        tt.radius += 1
        self.assertNotEqual(t, tt)

    @tests(tool.Tool.from_config_file)
    @tests(tool.Tool.from_config_args)
    def test_from_config_file(self):
        t = Tool.from_config_file(CUTTER_CFG)
        self.assertEqual(50.0, t.diameter)
        self.assertEqual(8.0, t.depth)
        self.assertEqual(3, t.number)
        self.assertEqual(500.0, t.rpm)
        self.assertEqual(40.0, t.feed)
        self.assertTrue(t.flood)
        self.assertFalse(t.mist)

    @tests(tool.Tool.to_json)
    @tests(tool.Tool.from_json)
    @tests(tool.Tool.from_dict)
    def test_to_json(self):
        for tag, t in self.tools_for_tests():
            with self.subTest(tag):
                js = t.to_json()
                self.assertIn('"radius": ', js)
                tt = Tool.from_json(js)
                self.assertEqual(t, tt)

    @tests(tool.Tool.cutter_poly)
    @tests(tool.Tool.hub_poly)
    def test_cutter_poly(self):
        t = Tool(radius=10.0, depth=4.0)
        poly = t.cutter_poly(center=(1.0, 2.0), steps=4)
        self.assertEqual(5, len(poly))
        self.assertAlmostEqual(11.0, poly[0][0])
        self.assertAlmostEqual(2.0, poly[0][1])
        self.assertAlmostEqual(12.0, poly[1][1])
        hub = t.hub_poly(steps=4)
        self.assertAlmostEqual(6.0, hub[0][0])
        self.assertNotEqual(t.cutter_poly(), t.hub_poly())

    @tests(tool.Tool.plot)
    def test_plot(self):
        plt.figure()
        Tool().plot(title='tool', do_show=False)
        self.assertEqual(2, len(plt.gca().lines))
        plt.close()


@tests(tool)
class TestModTool(TestCase):
    """Tests for stand-alone functions in tool module"""

    def setUp(self):
        plt.close('all')

    def tearDown(self):
        plt.close('all')

    @tests(tool.test)
    def test_test(self):
        out = StringIO()
        with redirect_stdout(out):
            tool.test([CUTTER_CFG])
        text = out.getvalue()
        self.assertIn(CUTTER_CFG, text)
        self.assertIn('(T3: Diameter: 50.0', text)
        self.assertIn('"radius": 25.0', text)
        self.assertNotIn('MISMATCH', text)
        # Cutter and hub
        self.assertEqual(2, len(plt.gca().lines))
