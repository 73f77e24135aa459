"""
Involute spur gear dimensions for cutting with a form cutter.

All units are specified in millimeters or degrees.
"""

from math import cos, pi, radians
from typing import NamedTuple


class InvalidGearSpec(ValueError):
    """Gear parameters that cannot describe a real gear"""
    pass


class GearSpec(NamedTuple):
    """
        Parameters of the gear to cut and of the cutter cutting it.

        :param teeth:           Number of teeth (>= 3)
        :param module:          Module of the gear in mm (must match the cutter)
        :param cutter_diameter: Diameter of the form cutter in mm
        :param stock_length:    Length of the stock along the rotary axis in mm
        :param pressure_angle:  Pressure angle in degrees
        :param cutter_depth:    Usable depth of the cutter form in mm (0 == don't check)
        :param addendum_factor: Addendum as a multiple of module
        :param relief_factor:   Dedendum as a multiple of module (includes root clearance)
    """
    teeth: int
    module: float
    cutter_diameter: float
    stock_length: float
    pressure_angle: float = 20.0
    cutter_depth: float = 0.0
    addendum_factor: float = 1.0
    relief_factor: float = 1.25


class GearGeometry(NamedTuple):
    """Derived dimensions of a gear.  Diameters in mm, angular_pitch in degrees."""
    teeth: int
    module: float
    pressure_angle: float
    addendum: float
    dedendum: float
    whole_depth: float
    pitch_diameter: float
    outside_diameter: float
    root_diameter: float
    base_diameter: float
    circular_pitch: float
    angular_pitch: float

    @property
    def pitch_radius(self) -> float:
        return self.pitch_diameter / 2.

    @property
    def outside_radius(self) -> float:
        return self.outside_diameter / 2.

    @property
    def root_radius(self) -> float:
        return self.root_diameter / 2.

    def __str__(self):
        return '(Teeth: %d, Module: %g, PD: %g, OD: %g, RD: %g, Depth: %g)' % (
            self.teeth, self.module, self.pitch_diameter, self.outside_diameter,
            self.root_diameter, self.whole_depth)


def angular_pitch(teeth) -> float:
    """Degrees between adjacent teeth"""
    if teeth < 3:
        raise InvalidGearSpec('Gear: Number of teeth must be at least 3, not %r' % teeth)
    return 360. / teeth


def calc_geometry(teeth, module, pressure_angle=20., addendum_factor=1.0, relief_factor=1.25) -> GearGeometry:
    """
        Calculate the dimensions of a full depth involute gear.

        :param teeth:           Number of teeth
        :param module:          Module in mm
        :param pressure_angle:  Pressure angle in degrees
        :param addendum_factor: Addendum as a multiple of module
        :param relief_factor:   Dedendum as a multiple of module (includes root clearance)
    """
    pitch = angular_pitch(teeth)
    if module <= 0:
        raise InvalidGearSpec('Gear: Module must be greater than 0.')
    if addendum_factor <= 0:
        raise InvalidGearSpec('Gear: Addendum factor must be greater than 0.')
    if relief_factor <= 0:
        raise InvalidGearSpec('Gear: Relief factor must be greater than 0.')

    h_addendum = module * addendum_factor
    h_dedendum = module * relief_factor
    pitch_diameter = module * teeth
    root_diameter = pitch_diameter - 2 * h_dedendum
    if root_diameter <= 0:
        raise InvalidGearSpec('Gear: Root diameter is %g mm, dedendum is too large for %d teeth' %
                              (root_diameter, teeth))

    return GearGeometry(
        teeth=teeth,
        module=module,
        pressure_angle=pressure_angle,
        addendum=h_addendum,
        dedendum=h_dedendum,
        whole_depth=h_addendum + h_dedendum,
        pitch_diameter=pitch_diameter,
        outside_diameter=pitch_diameter + 2 * h_addendum,
        root_diameter=root_diameter,
        base_diameter=pitch_diameter * cos(radians(pressure_angle)),
        circular_pitch=module * pi,
        angular_pitch=pitch,
    )


def geometry_for(spec: GearSpec) -> GearGeometry:
    """Geometry of the gear described by spec"""
    return calc_geometry(spec.teeth, spec.module, pressure_angle=spec.pressure_angle,
                         addendum_factor=spec.addendum_factor, relief_factor=spec.relief_factor)
