import math

import pytest

from fannkit.activation import activation, activation_derivative, activation_name
from fannkit.enums import ActivationFunc


def test_every_index_up_to_count_has_a_name():
    count = len(ActivationFunc)
    assert [activation_name(i) for i in range(count)] == [
        activation_name(f) for f in ActivationFunc
    ]
    assert all(activation_name(i) != "Unknown" for i in range(count))
    assert activation_name(count) == "Unknown"


def test_names_are_unique_and_cover_every_function():
    names = [activation_name(f) for f in ActivationFunc]
    assert len(set(names)) == len(ActivationFunc)
    assert "Unknown" not in names


@pytest.mark.parametrize(
    "fn, name",
    [
        (ActivationFunc.LINEAR, "Linear"),
        (ActivationFunc.SIN_SYMMETRIC, "SinSymmetric"),
        (ActivationFunc.LINEAR_PIECE_RECT_LEAKY, "LinearPieceRectLeaky"),
        (ActivationFunc.SIGMOID, "Sigmoid"),
    ],
)
def test_pinned_names(fn, name):
    assert activation_name(fn) == name


@pytest.mark.parametrize("index", [-1, 20, 99])
def test_unknown_name(index):
    assert activation_name(index) == "Unknown"


def test_linear_returns_value():
    assert activation(ActivationFunc.LINEAR, 0.5, 3.25) == 3.25


def test_unknown_function_passes_value_through():
    assert activation(42, 0.5, 1.75) == 1.75
    assert activation_derivative(42, 0.5, 1.75, 1.75) == 0


@pytest.mark.parametrize("x", [-2.0, 0.0])
def test_threshold_non_positive(x):
    assert activation(ActivationFunc.THRESHOLD, 0.5, x) == 0.0
    assert activation(ActivationFunc.THRESHOLD_SYMMETRIC, 0.5, x) == -1.0


def test_threshold_positive():
    assert activation(ActivationFunc.THRESHOLD, 0.5, 2.0) == 1.0
    assert activation(ActivationFunc.THRESHOLD_SYMMETRIC, 0.5, 2.0) == 1.0


@pytest.mark.parametrize("fn", [ActivationFunc.THRESHOLD, ActivationFunc.THRESHOLD_SYMMETRIC])
def test_threshold_derivative_is_zero(fn):
    assert activation_derivative(fn, 0.5, 1.0, 3.0) == 0


@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 0.7, 4.0])
def test_sigmoid_symmetric_is_rescaled_sigmoid(x):
    sig = activation(ActivationFunc.SIGMOID, 0.5, x)
    sym = activation(ActivationFunc.SIGMOID_SYMMETRIC, 0.5, x)
    assert 0.0 < sig < 1.0
    assert sym == pytest.approx(2.0 * sig - 1.0)


def test_sigmoid_is_monotone():
    xs = [-4.0, -1.0, 0.0, 1.0, 4.0]
    ys = [activation(ActivationFunc.SIGMOID, 0.5, x) for x in xs]
    assert ys == sorted(ys)
    assert len(set(ys)) == len(ys)


def test_sigmoid_does_not_overflow():
    assert activation(ActivationFunc.SIGMOID, 0.5, -1e6) == pytest.approx(0.0)
    assert activation(ActivationFunc.SIGMOID_SYMMETRIC, 0.5, -1e6) == pytest.approx(-1.0)


def test_stepwise_saturation():
    assert activation(ActivationFunc.SIGMOID_STEPWISE, 0.5, 1000.0) == 1.0
    assert activation(ActivationFunc.SIGMOID_STEPWISE, 0.5, -1000.0) == 0.0
    assert activation(ActivationFunc.SIGMOID_SYMMETRIC_STEPWISE, 0.5, 1000.0) == 1.0
    assert activation(ActivationFunc.SIGMOID_SYMMETRIC_STEPWISE, 0.5, -1000.0) == -1.0


def test_stepwise_derivative_zero_at_saturation():
    assert activation_derivative(ActivationFunc.SIGMOID_STEPWISE, 0.5, 1.0, 1000.0) == 0
    assert activation_derivative(ActivationFunc.SIGMOID_SYMMETRIC_STEPWISE, 0.5, -1.0, -1000.0) == 0


def test_gaussian_peak_and_symmetry():
    assert activation(ActivationFunc.GAUSSIAN, 0.5, 0.0) == 1.0
    for x in (0.3, 1.2, 2.5):
        g = activation(ActivationFunc.GAUSSIAN, 0.5, x)
        assert g == activation(ActivationFunc.GAUSSIAN, 0.5, -x)
        assert activation(ActivationFunc.GAUSSIAN_SYMMETRIC, 0.5, x) == pytest.approx(2.0 * g - 1.0)


def test_gaussian_stepwise_cutoff():
    assert activation(ActivationFunc.GAUSSIAN_STEPWISE, 1.0, 100.0) == 0.0
    assert activation(ActivationFunc.GAUSSIAN_STEPWISE, 1.0, -100.0) == 1.0


@pytest.mark.parametrize("x", [-0.8, 0.0, 0.4])
def test_gaussian_stepwise_matches_gaussian_inside(x):
    assert activation(ActivationFunc.GAUSSIAN_STEPWISE, 0.5, x) == pytest.approx(
        activation(ActivationFunc.GAUSSIAN, 0.5, x)
    )


def test_linear_piece_clamps():
    assert activation(ActivationFunc.LINEAR_PIECE, 0.5, 2.0) == 1.0
    assert activation(ActivationFunc.LINEAR_PIECE, 0.5, -2.0) == 0.0
    assert activation(ActivationFunc.LINEAR_PIECE_SYMMETRIC, 0.5, 2.0) == 1.0
    assert activation(ActivationFunc.LINEAR_PIECE_SYMMETRIC, 0.5, -2.0) == -1.0


def test_linear_piece_rect_clamps():
    assert activation(ActivationFunc.LINEAR_PIECE_RECT, 0.5, -1.0) == 0.0
    assert activation(ActivationFunc.LINEAR_PIECE_RECT, 0.5, 10.0) == 1.0
    assert activation(ActivationFunc.LINEAR_PIECE_RECT_LEAKY, 0.5, 10.0) == 1.0


def test_leaky_rect_is_negative_and_small_for_negative_input():
    y = activation(ActivationFunc.LINEAR_PIECE_RECT_LEAKY, 0.5, -2.0)
    assert -2.0 * 0.5 < y < 0.0


@pytest.mark.parametrize("x", [-1.0, 0.0, 0.6, 2.0])
def test_sin_cos_symmetric_relation(x):
    s = activation(ActivationFunc.SIN, 0.5, x)
    c = activation(ActivationFunc.COS, 0.5, x)
    assert activation(ActivationFunc.SIN_SYMMETRIC, 0.5, x) == pytest.approx(2.0 * s - 1.0)
    assert activation(ActivationFunc.COS_SYMMETRIC, 0.5, x) == pytest.approx(2.0 * c - 1.0)
    assert s * s + c * c == pytest.approx(1.0)


@pytest.mark.parametrize("x", [-0.9, 0.3, 1.1])
def test_elliot_symmetric_relation(x):
    e = activation(ActivationFunc.ELLIOT, 0.5, x)
    es = activation(ActivationFunc.ELLIOT_SYMMETRIC, 0.5, x)
    assert e == pytest.approx(es * 0.5 + 0.5)
    assert -1.0 < es < 1.0


@pytest.mark.parametrize(
    "fn, steepness, x",
    [
        (ActivationFunc.LINEAR, 0.5, 0.4),
        (ActivationFunc.SIGMOID, 0.5, 0.3),
        (ActivationFunc.SIGMOID, 1.0, -1.2),
        (ActivationFunc.SIGMOID_STEPWISE, 0.5, 0.7),
        (ActivationFunc.SIGMOID_SYMMETRIC, 0.5, 0.3),
        (ActivationFunc.SIGMOID_SYMMETRIC_STEPWISE, 0.75, -0.4),
        (ActivationFunc.GAUSSIAN, 0.5, 0.8),
        (ActivationFunc.GAUSSIAN_SYMMETRIC, 0.5, -0.6),
        (ActivationFunc.GAUSSIAN_STEPWISE, 0.5, 0.9),
        (ActivationFunc.ELLIOT, 0.5, 0.6),
        (ActivationFunc.ELLIOT_SYMMETRIC, 0.5, -0.6),
        (ActivationFunc.LINEAR_PIECE, 0.5, 0.2),
        (ActivationFunc.LINEAR_PIECE_SYMMETRIC, 0.5, -0.2),
        (ActivationFunc.SIN, 0.5, 0.7),
        (ActivationFunc.COS, 0.5, 0.7),
        (ActivationFunc.SIN_SYMMETRIC, 0.5, -1.3),
        (ActivationFunc.COS_SYMMETRIC, 0.5, -1.3),
        (ActivationFunc.LINEAR_PIECE_RECT, 0.5, 1.0),
        (ActivationFunc.LINEAR_PIECE_RECT_LEAKY, 0.5, 1.0),
        (ActivationFunc.LINEAR_PIECE_RECT_LEAKY, 0.5, -1.0),
    ],
)
def test_derivative_matches_finite_difference(fn, steepness, x):
    h = 1e-6
    numeric = (activation(fn, steepness, x + h) - activation(fn, steepness, x - h)) / (2 * h)
    value = activation(fn, steepness, x)
    analytic = activation_derivative(fn, steepness, value, x)
    assert analytic == pytest.approx(numeric, rel=1e-4, abs=1e-6)


def test_linear_piece_derivative_zero_outside():
    assert activation_derivative(ActivationFunc.LINEAR_PIECE, 0.5, 1.0, 3.0) == 0
    assert activation_derivative(ActivationFunc.LINEAR_PIECE_SYMMETRIC, 0.5, -1.0, -3.0) == 0
    assert activation_derivative(ActivationFunc.LINEAR_PIECE_RECT, 0.5, 0.0, -3.0) == 0


def test_zero_steepness_does_not_raise_division_error():
    y = activation(ActivationFunc.LINEAR_PIECE_SYMMETRIC, 0.0, 0.0)
    assert y == pytest.approx(math.nan, nan_ok=True)
    d = activation_derivative(ActivationFunc.LINEAR_PIECE, 0.0, 0.0, 0.0)
    assert abs(d) == math.inf