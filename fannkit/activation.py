"""Activation functions, their derivatives and their names."""

import math
from typing import Callable, Dict

from .enums import ActivationFunc

_NAMES = (
    "Linear",
    "Threshold",
    "ThresholdSymmetric",
    "Sigmoid",
    "SigmoidStepwise",
    "SigmoidSymmetric",
    "SigmoidSymmetricStepwise",
    "Gaussian",
    "GaussianSymmetric",
    "GaussianStepwise",
    "Elliot",
    "ElliotSymmetric",
    "LinearPiece",
    "LinearPieceSymmetric",
    "SinSymmetric",
    "CosSymmetric",
    "Sin",
    "Cos",
    "LinearPieceRect",
    "LinearPieceRectLeaky",
)


def _exp(x: float) -> float:
    """Exponential that saturates to infinity instead of raising."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _div(a: float, b: float) -> float:
    """Floating-point division following IEEE rules for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _sigmoid_stepwise(s: float, x: float) -> float:
    v = 2.0 * s * x
    if v <= -500:
        return 0.0
    if v >= 500:
        return 1.0
    return 1.0 / (1.0 + _exp(-v))


def _sigmoid_symmetric_stepwise(s: float, x: float) -> float:
    v = 2.0 * s * x
    if v <= -500:
        return -1.0
    if v >= 500:
        return 1.0
    return 2.0 / (1.0 + _exp(-v)) - 1.0


def _gaussian_stepwise(s: float, x: float) -> float:
    v = x * s
    v_sq = v * v
    if v_sq > 150:
        return 0.0 if x > 0 else 1.0
    return math.exp(-v_sq)


def _linear_piece(s: float, x: float) -> float:
    if x < -s:
        return 0.0
    if x > s:
        return 1.0
    return _div(_div(x, s), 2.0) + 0.5


def _linear_piece_symmetric(s: float, x: float) -> float:
    if x < -s:
        return -1.0
    if x > s:
        return 1.0
    return _div(x, s)


def _linear_piece_rect(s: float, x: float) -> float:
    if x < 0:
        return 0.0
    if x > _div(1.0, s):
        return 1.0
    return x * s


def _linear_piece_rect_leaky(s: float, x: float) -> float:
    if x < 0:
        return x * s * 0.01
    if x > _div(1.0, s):
        return 1.0
    return x * s


_ACTIVATIONS: Dict[ActivationFunc, Callable[[float, float], float]] = {
    ActivationFunc.LINEAR: lambda s, x: x,
    ActivationFunc.THRESHOLD: lambda s, x: 1.0 if x > 0 else 0.0,
    ActivationFunc.THRESHOLD_SYMMETRIC: lambda s, x: 1.0 if x > 0 else -1.0,
    ActivationFunc.SIGMOID: lambda s, x: 1.0 / (1.0 + _exp(-2.0 * s * x)),
    ActivationFunc.SIGMOID_STEPWISE: _sigmoid_stepwise,
    ActivationFunc.SIGMOID_SYMMETRIC: lambda s, x: 2.0 / (1.0 + _exp(-2.0 * s * x)) - 1.0,
    ActivationFunc.SIGMOID_SYMMETRIC_STEPWISE: _sigmoid_symmetric_stepwise,
    ActivationFunc.GAUSSIAN: lambda s, x: math.exp(-(x * s) ** 2),
    ActivationFunc.GAUSSIAN_SYMMETRIC: lambda s, x: math.exp(-(x * s) ** 2) * 2.0 - 1.0,
    ActivationFunc.GAUSSIAN_STEPWISE: _gaussian_stepwise,
    ActivationFunc.ELLIOT: lambda s, x: (x * s) / (1.0 + abs(x * s)) * 0.5 + 0.5,
    ActivationFunc.ELLIOT_SYMMETRIC: lambda s, x: (x * s) / (1.0 + abs(x * s)),
    ActivationFunc.LINEAR_PIECE: _linear_piece,
    ActivationFunc.LINEAR_PIECE_SYMMETRIC: _linear_piece_symmetric,
    ActivationFunc.SIN: lambda s, x: math.sin(x * s),
    ActivationFunc.COS: lambda s, x: math.cos(x * s),
    ActivationFunc.SIN_SYMMETRIC: lambda s, x: math.sin(x * s) * 2.0 - 1.0,
    ActivationFunc.COS_SYMMETRIC: lambda s, x: math.cos(x * s) * 2.0 - 1.0,
    ActivationFunc.LINEAR_PIECE_RECT: _linear_piece_rect,
    ActivationFunc.LINEAR_PIECE_RECT_LEAKY: _linear_piece_rect_leaky,
}


def _d_sigmoid_stepwise(s: float, v: float, t: float) -> float:
    if v <= 0 or v >= 1:
        return 0.0
    return 2.0 * s * v * (1.0 - v)


def _d_sigmoid_symmetric_stepwise(s: float, v: float, t: float) -> float:
    if v <= -1 or v >= 1:
        return 0.0
    return s * (1.0 - v * v)


def _d_gaussian_stepwise(s: float, v: float, t: float) -> float:
    if v <= 0 or v >= 1:
        return 0.0
    return -2.0 * t * s * s * v


def _d_elliot(s: float, v: float, t: float) -> float:
    d = 1.0 + abs(t * s)
    return s * 0.5 / (d * d)


def _d_elliot_symmetric(s: float, v: float, t: float) -> float:
    d = 1.0 + abs(t * s)
    return s / (d * d)


def _d_linear_piece(s: float, v: float, t: float) -> float:
    if t < -s or t > s:
        return 0.0
    return _div(1.0, s * 2.0)


def _d_linear_piece_symmetric(s: float, v: float, t: float) -> float:
    if t < -s or t > s:
        return 0.0
    return _div(1.0, s)


def _d_linear_piece_rect(s: float, v: float, t: float) -> float:
    if t < 0 or t > _div(1.0, s):
        return 0.0
    return s


def _d_linear_piece_rect_leaky(s: float, v: float, t: float) -> float:
    if t < 0:
        return s * 0.01
    if t > _div(1.0, s):
        return 0.0
    return s


_DERIVATIVES: Dict[ActivationFunc, Callable[[float, float, float], float]] = {
    ActivationFunc.LINEAR: lambda s, v, t: 1.0,
    ActivationFunc.THRESHOLD: lambda s, v, t: 0.0,
    ActivationFunc.THRESHOLD_SYMMETRIC: lambda s, v, t: 0.0,
    ActivationFunc.SIGMOID: lambda s, v, t: 2.0 * s * v * (1.0 - v),
    ActivationFunc.SIGMOID_STEPWISE: _d_sigmoid_stepwise,
    ActivationFunc.SIGMOID_SYMMETRIC: lambda s, v, t: s * (1.0 - v * v),
    ActivationFunc.SIGMOID_SYMMETRIC_STEPWISE: _d_sigmoid_symmetric_stepwise,
    ActivationFunc.GAUSSIAN: lambda s, v, t: -2.0 * t * s * s * v,
    ActivationFunc.GAUSSIAN_SYMMETRIC: lambda s, v, t: -2.0 * t * s * s * (v + 1.0),
    ActivationFunc.GAUSSIAN_STEPWISE: _d_gaussian_stepwise,
    ActivationFunc.ELLIOT: _d_elliot,
    ActivationFunc.ELLIOT_SYMMETRIC: _d_elliot_symmetric,
    ActivationFunc.LINEAR_PIECE: _d_linear_piece,
    ActivationFunc.LINEAR_PIECE_SYMMETRIC: _d_linear_piece_symmetric,
    ActivationFunc.SIN: lambda s, v, t: math.cos(t * s) * s,
    ActivationFunc.COS: lambda s, v, t: -math.sin(t * s) * s,
    ActivationFunc.SIN_SYMMETRIC: lambda s, v, t: math.cos(t * s) * s * 2.0,
    ActivationFunc.COS_SYMMETRIC: lambda s, v, t: -math.sin(t * s) * s * 2.0,
    ActivationFunc.LINEAR_PIECE_RECT: _d_linear_piece_rect,
    ActivationFunc.LINEAR_PIECE_RECT_LEAKY: _d_linear_piece_rect_leaky,
}


def _lookup(fn, table):
    try:
        return table.get(ActivationFunc(fn))
    except ValueError:
        return None


def activation(fn, steepness: float, value: float) -> float:
    """Apply activation function ``fn`` with ``steepness`` to ``value``.

    An unknown function leaves the value unchanged.
    """
    func = _lookup(fn, _ACTIVATIONS)
    if func is None:
        return value
    return func(steepness, value)


def activation_derivative(fn, steepness: float, value: float, total: float) -> float:
    """Derivative of ``fn`` given its output ``value`` and its input ``total``.

    An unknown function has a derivative of zero.
    """
    func = _lookup(fn, _DERIVATIVES)
    if func is None:
        return 0.0
    return func(steepness, value, total)


def activation_name(fn) -> str:
    """Name of an activation function, or "Unknown" when out of range."""
    index = int(fn)
    if 0 <= index < len(_NAMES):
        return _NAMES[index]
    return "Unknown"