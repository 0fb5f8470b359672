import abc
import collections

import numpy

from . import angle

class RealFunction(abc.ABC):
    """A function from a real number to a real number.

    Subclasses implement evaluate(x); calling the function object is the same
    as calling evaluate()."""
    __slots__ = ()

    @abc.abstractmethod
    def evaluate(self, x):
        pass

    def __call__(self, x):
        return self.evaluate(x)


class LinearEquation(collections.namedtuple('LinearEquation', ('slope', 'y_intercept')), RealFunction):
    __slots__ = ()

    def evaluate(self, x):
        return self.slope * x + self.y_intercept


class Quadratic(collections.namedtuple('Quadratic', ('a', 'b', 'c')), RealFunction):
    __slots__ = ()

    def evaluate(self, x):
        return self.a * x**2 + self.b * x + self.c


class Cubic(collections.namedtuple('Cubic', ('a', 'b', 'c', 'd')), RealFunction):
    __slots__ = ()

    def evaluate(self, x):
        return self.a * x**3 + self.b * x**2 + self.c * x + self.d


class SineWave(collections.namedtuple('SineWave', ('amplitude', 'frequency', 'phase')), RealFunction):
    """Sine wave in which x is measured in turns, so that with frequency 1 a
    full period spans x in [0, 1].

    Note that the phase is added to the sine value before scaling by the
    amplitude, i.e. it is a vertical offset in units of amplitude:
        amplitude * (sin(frequency * x turns) + phase)
    """
    __slots__ = ()

    def evaluate(self, x):
        return self.amplitude * (angle.sin(angle.Angle.from_turns(self.frequency * x)) + self.phase)


class Parabola(collections.namedtuple('Parabola', ()), RealFunction):
    __slots__ = ()

    def evaluate(self, x):
        return x**2


def _round_nearest(x):
    # halves round away from zero, unlike numpy.round
    return numpy.sign(x) * numpy.floor(numpy.absolute(x) + 0.5)

_ROUNDING_MODES = {
    'floor': numpy.floor,
    'ceiling': numpy.ceil,
    'nearest': _round_nearest
}

def steps_scale(x, steps, rounding='floor'):
    """Quantize x onto a staircase of 'steps' equal steps per unit.

    Parameters:
        x: scalar or array of values to quantize.
        steps: number of steps per unit interval. Must be nonzero: with
            steps == 0 the result is NaN.
        rounding: 'floor', 'ceiling' or 'nearest' (halves away from zero).

    Returns: round(x * steps) / steps, with the rounding mode given.
    """
    try:
        round_mode = _ROUNDING_MODES[rounding]
    except KeyError:
        raise ValueError('rounding must be one of "floor", "ceiling", or "nearest", not "{}"'.format(rounding))
    with numpy.errstate(divide='ignore', invalid='ignore'):
        return round_mode(numpy.multiply(x, steps, dtype=float)) / numpy.float64(steps)

def staircase_floor(x, steps):
    return steps_scale(x, steps, 'floor')

def staircase_ceiling(x, steps):
    return steps_scale(x, steps, 'ceiling')

def staircase_round(x, steps):
    return steps_scale(x, steps, 'nearest')
