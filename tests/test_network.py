import pytest

from fannkit.enums import ActivationFunc, ErrorCode, NetworkType, TrainAlgorithm
from fannkit.network import (
    Connection,
    FannError,
    Network,
    create_cascade,
    create_shortcut,
    create_sparse,
    create_standard,
)

XOR_INPUTS = [[0, 0], [0, 1], [1, 0], [1, 1]]


def test_connection_setup_counts_and_ranges():
    net = create_standard(2, 3, 1)
    assert net.total_neurons == 8
    assert net.total_connections == 13
    assert len(net.connections) == 13
    assert len(net.weights) == 13
    for neuron in net.neurons:
        assert neuron.last_con <= len(net.connections)


def test_run_network_returns_output():
    net = create_standard(2, 3, 1)
    output = net.run([0.5, 0.5])
    assert len(output) == 1
    assert 0.0 < output[0] < 1.0


def test_structure_queries():
    net = create_standard(2, 3, 1)
    assert net.num_input == 2
    assert net.num_output == 1
    assert net.num_layers == 3
    assert net.layer_sizes == [2, 3, 1]
    assert net.network_type == NetworkType.LAYER


def test_defaults():
    net = create_standard(2, 3, 1)
    assert net.training_algorithm == TrainAlgorithm.RPROP
    assert net.learning_rate == pytest.approx(0.7)
    assert net.bit_fail_limit == pytest.approx(0.35)


def test_too_few_layers_raises():
    with pytest.raises(ValueError):
        create_standard(2)
    with pytest.raises(ValueError):
        create_shortcut(3)


@pytest.mark.parametrize("rate", [0.0, -0.5, 1.5])
def test_sparse_rejects_bad_rate(rate):
    with pytest.raises(ValueError):
        create_sparse(rate, 2, 3, 1)


def test_sparse_has_fewer_connections():
    sparse = create_sparse(0.5, 2, 3, 1)
    full = create_standard(2, 3, 1)
    assert sparse.total_connections < full.total_connections
    assert sparse.connection_rate == 0.5


def test_shortcut_connection_count():
    net = create_shortcut(2, 3, 1)
    assert net.network_type == NetworkType.SHORTCUT
    assert net.total_connections == 16
    assert len(net.run([1.0, 0.0])) == 1


def test_run_input_mismatch():
    net = create_standard(2, 3, 1)
    with pytest.raises(FannError) as info:
        net.run([1.0])
    assert info.value.code == ErrorCode.INPUT_MISMATCH


def test_zero_weights_give_half_for_sigmoid():
    net = create_standard(2, 3, 1)
    net.weights = [0.0] * net.total_connections
    assert net.run([1.0, 1.0]) == [pytest.approx(0.5)]


def test_bias_array_after_run():
    net = create_standard(2, 3, 2)
    assert net.bias_array == [0.0, 0.0]
    net.run([0.1, 0.2])
    assert net.bias_array == [1.0, 1.0]


def test_randomize_weights_in_range():
    net = create_standard(3, 5, 2)
    net.randomize_weights(-1.0, 1.0)
    assert all(-1.0 <= w < 1.0 for w in net.weights)
    net.randomize_weights(1000.0, 10000.0)
    assert all(1000.0 <= w < 10000.0 for w in net.weights)


def test_weights_setter_checks_length():
    net = create_standard(2, 3, 1)
    before = net.weights
    with pytest.raises(FannError):
        net.weights = [0.0]
    assert net.weights == before
    assert len(net.weights) == 13


def test_weights_returns_copy():
    net = create_standard(2, 3, 1)
    original = net.weights
    weights = net.weights
    weights[0] = 123.0
    assert net.weights == original


def test_get_and_set_weight():
    net = create_standard(2, 3, 1)
    net.set_weight(0, 3, 0.25)
    assert net.get_weight(0, 3) == 0.25


def test_get_weight_errors():
    net = create_standard(2, 3, 1)
    with pytest.raises(FannError) as info:
        net.get_weight(-1, 3)
    assert info.value.code == ErrorCode.INDEX_OUT_OF_BOUND
    with pytest.raises(FannError):
        net.set_weight(0, 99, 1.0)
    with pytest.raises(FannError):
        net.get_weight(3, 0)


def test_connection_array_round_trip():
    net = create_standard(2, 3, 1)
    connections = net.connection_array()
    assert len(connections) == net.total_connections
    changed = [Connection(c.from_neuron, c.to_neuron, 0.5) for c in connections]
    net.set_weight_array(changed)
    assert net.weights == [0.5] * net.total_connections


def test_set_weight_array_with_no_match_raises():
    net = create_standard(2, 3, 1)
    with pytest.raises(FannError):
        net.set_weight_array([Connection(7, 0, 1.0)])


def test_activation_function_per_neuron():
    net = create_standard(2, 3, 1)
    net.set_activation_function(ActivationFunc.LINEAR, 1, 2)
    assert net.activation_function(1, 2) == ActivationFunc.LINEAR
    assert net.activation_function(1, 0) == ActivationFunc.SIGMOID


def test_activation_function_errors():
    net = create_standard(2, 3, 1)
    with pytest.raises(FannError):
        net.set_activation_function(ActivationFunc.LINEAR, 0, 0)
    with pytest.raises(FannError):
        net.activation_function(5, 0)
    with pytest.raises(FannError):
        net.activation_function(1, 3)


def test_activation_function_hidden_and_output():
    net = create_standard(2, 3, 4, 1)
    net.set_activation_function_hidden(ActivationFunc.SIGMOID_SYMMETRIC)
    net.set_activation_function_output(ActivationFunc.LINEAR)
    assert all(net.activation_function(1, i) == ActivationFunc.SIGMOID_SYMMETRIC for i in range(3))
    assert all(net.activation_function(2, i) == ActivationFunc.SIGMOID_SYMMETRIC for i in range(4))
    assert net.activation_function(3, 0) == ActivationFunc.LINEAR


def test_activation_steepness():
    net = create_standard(2, 3, 1)
    net.set_activation_steepness(0.9, 1, 1)
    assert net.activation_steepness(1, 1) == 0.9
    net.set_activation_steepness_hidden(0.2)
    net.set_activation_steepness_output(0.3)
    assert net.activation_steepness(1, 1) == 0.2
    assert net.activation_steepness(2, 0) == 0.3
    with pytest.raises(FannError):
        net.activation_steepness(0, 0)


def test_linear_output_with_known_weights():
    net = create_standard(1, 1)
    net.set_activation_function_output(ActivationFunc.LINEAR)
    net.set_weight(0, 2, 2.0)
    net.set_weight(1, 2, 0.5)
    assert net.run([3.0]) == [pytest.approx(6.5)]


def test_copy_preserves_parameters_and_outputs():
    net = create_standard(2, 3, 1)
    net.learning_rate = 0.5
    net.learning_momentum = 0.1
    net.training_algorithm = TrainAlgorithm.QUICKPROP
    net.rprop_delta_max = 100.0
    duplicate = net.copy()
    assert duplicate is not net
    assert duplicate.learning_rate == net.learning_rate
    assert duplicate.learning_momentum == net.learning_momentum
    assert duplicate.training_algorithm == net.training_algorithm
    assert duplicate.rprop_delta_max == net.rprop_delta_max
    assert duplicate.num_input == net.num_input
    assert duplicate.num_output == net.num_output
    assert duplicate.total_neurons == net.total_neurons
    assert duplicate.total_connections == net.total_connections
    assert duplicate.weights == net.weights
    for inputs in XOR_INPUTS:
        assert duplicate.run(inputs) == net.run(inputs)


def test_copy_is_independent():
    net = create_standard(2, 3, 1)
    duplicate = net.copy()
    duplicate.learning_rate = 0.9
    assert net.learning_rate != 0.9
    original_output = net.run([0, 1])
    duplicate.weights = [0.0] * duplicate.total_connections
    duplicate.set_activation_function_output(ActivationFunc.LINEAR)
    assert net.run([0, 1]) == original_output
    assert net.activation_function(2, 0) == ActivationFunc.SIGMOID


def test_copy_drops_callback():
    net = create_standard(2, 3, 1)
    net.callback = lambda ann, epochs, mse: True
    duplicate = net.copy()
    assert duplicate.callback is None
    assert net.callback is not None


def test_cascade_defaults():
    net = create_cascade(2, 1)
    assert net.layer_sizes == [2, 1]
    assert net.total_neurons == 4
    assert net.training_algorithm == TrainAlgorithm.BATCH
    assert net.cascade_max_out_epochs == 150
    assert net.cascade_candidate_limit == 1000
    assert len(net.cascade_activation_functions) == 10
    assert net.cascade_activation_steepnesses == [0.25, 0.5, 0.75, 1.0]
    assert net.rprop_delta_zero == 0.01


def test_copy_cascade():
    net = create_cascade(2, 1)
    net.cascade_output_change_fraction = 0.02
    net.cascade_weight_multiplier = 0.5
    duplicate = net.copy()
    assert duplicate.cascade_output_change_fraction == 0.02
    assert duplicate.cascade_weight_multiplier == 0.5
    assert len(duplicate.cascade_activation_functions) == len(net.cascade_activation_functions)
    duplicate.cascade_activation_functions.clear()
    assert len(net.cascade_activation_functions) == 10


def test_network_constructor_directly():
    net = Network([3, 2], NetworkType.LAYER, 1.0)
    assert net.total_connections == 8
    assert net.layer_sizes == [3, 2]