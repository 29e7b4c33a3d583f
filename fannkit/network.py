"""Feed-forward neural networks: construction, evaluation and inspection."""

import copy as _copy
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .activation import activation as _activate
from .constants import (
    DEFAULT_BIT_FAIL_LIMIT,
    DEFAULT_CASCADE_CANDIDATE_CHANGE_FRACTION,
    DEFAULT_CASCADE_CANDIDATE_LIMIT,
    DEFAULT_CASCADE_CANDIDATE_STAGNATION_EPOCHS,
    DEFAULT_CASCADE_MAX_CAND_EPOCHS,
    DEFAULT_CASCADE_MAX_OUT_EPOCHS,
    DEFAULT_CASCADE_MIN_CAND_EPOCHS,
    DEFAULT_CASCADE_MIN_OUT_EPOCHS,
    DEFAULT_CASCADE_NUM_CANDIDATE_GROUPS,
    DEFAULT_CASCADE_OUTPUT_CHANGE_FRACTION,
    DEFAULT_CASCADE_OUTPUT_STAGNATION_EPOCHS,
    DEFAULT_CASCADE_WEIGHT_MULTIPLIER,
    DEFAULT_LEARNING_MOMENTUM,
    DEFAULT_LEARNING_RATE,
    DEFAULT_QUICKPROP_DECAY,
    DEFAULT_QUICKPROP_MU,
    DEFAULT_RPROP_DECREASE_FACTOR,
    DEFAULT_RPROP_DELTA_MAX,
    DEFAULT_RPROP_DELTA_MIN,
    DEFAULT_RPROP_DELTA_ZERO,
    DEFAULT_RPROP_INCREASE_FACTOR,
    DEFAULT_SARPROP_STEP_ERROR_SHIFT,
    DEFAULT_SARPROP_STEP_ERROR_THRESHOLD_FACTOR,
    DEFAULT_SARPROP_TEMPERATURE,
    DEFAULT_SARPROP_WEIGHT_DECAY_SHIFT,
)
from .enums import ActivationFunc, ErrorCode, ErrorFunc, NetworkType, TrainAlgorithm
from .topology import Layer, Neuron, build_connections, build_layers, shared_generator


class FannError(Exception):
    """An error raised by a network, carrying an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class Connection:
    """A weighted connection from one neuron to another."""

    from_neuron: int
    to_neuron: int
    weight: float


class Network:
    """A neural network whose neurons and weights are held in flat lists."""

    def __init__(
        self,
        layer_sizes: Sequence[int],
        network_type: NetworkType = NetworkType.LAYER,
        connection_rate: float = 1.0,
    ):
        self.layers: List[Layer] = build_layers(layer_sizes)
        self.network_type = NetworkType(network_type)
        self.connection_rate = float(connection_rate)
        self.neurons: List[Neuron] = [Neuron() for _ in range(self.layers[-1].last_neuron)]
        self.connections: List[int] = build_connections(
            self.layers, self.neurons, self.network_type, self.connection_rate
        )
        self._weights: List[float] = [0.0] * len(self.connections)

        self.training_algorithm = TrainAlgorithm.RPROP
        self.learning_rate = DEFAULT_LEARNING_RATE
        self.learning_momentum = DEFAULT_LEARNING_MOMENTUM
        self.train_error_function = ErrorFunc.TANH
        self.train_stop_function = 0
        self.bit_fail_limit = DEFAULT_BIT_FAIL_LIMIT

        self.rprop_increase_factor = DEFAULT_RPROP_INCREASE_FACTOR
        self.rprop_decrease_factor = DEFAULT_RPROP_DECREASE_FACTOR
        self.rprop_delta_min = DEFAULT_RPROP_DELTA_MIN
        self.rprop_delta_max = DEFAULT_RPROP_DELTA_MAX
        self.rprop_delta_zero = DEFAULT_RPROP_DELTA_ZERO

        self.quickprop_decay = DEFAULT_QUICKPROP_DECAY
        self.quickprop_mu = DEFAULT_QUICKPROP_MU

        self.sarprop_weight_decay_shift = DEFAULT_SARPROP_WEIGHT_DECAY_SHIFT
        self.sarprop_step_error_threshold_factor = DEFAULT_SARPROP_STEP_ERROR_THRESHOLD_FACTOR
        self.sarprop_step_error_shift = DEFAULT_SARPROP_STEP_ERROR_SHIFT
        self.sarprop_temperature = DEFAULT_SARPROP_TEMPERATURE
        self.sarprop_epoch = 0

        self.cascade_output_change_fraction = 0.0
        self.cascade_output_stagnation_epochs = 0
        self.cascade_candidate_change_fraction = 0.0
        self.cascade_candidate_stagnation_epochs = 0
        self.cascade_candidate_limit = 0
        self.cascade_max_out_epochs = 0
        self.cascade_max_cand_epochs = 0
        self.cascade_min_out_epochs = 0
        self.cascade_min_cand_epochs = 0
        self.cascade_num_candidate_groups = 0
        self.cascade_activation_functions: List[ActivationFunc] = []
        self.cascade_activation_steepnesses: List[float] = []
        self.cascade_weight_multiplier = 0.0

        self.mse = 0.0
        self.num_mse = 0
        self.bit_fail = 0

        self.callback: Optional[Callable[["Network", int, float], bool]] = None

        self.randomize_weights(-0.1, 0.1)

    # Structure

    @property
    def num_input(self) -> int:
        """Number of input neurons, bias excluded."""
        return self.layers[0].size - 1

    @property
    def num_output(self) -> int:
        """Number of output neurons."""
        return self.layers[-1].size

    @property
    def total_neurons(self) -> int:
        """Number of neurons, bias neurons included."""
        return len(self.neurons)

    @property
    def total_connections(self) -> int:
        """Number of connection slots."""
        return len(self.connections)

    @property
    def num_layers(self) -> int:
        """Number of layers, input and output included."""
        return len(self.layers)

    @property
    def layer_sizes(self) -> List[int]:
        """Neurons in each layer, bias neurons excluded."""
        last = len(self.layers) - 1
        return [layer.size if i == last else layer.size - 1 for i, layer in enumerate(self.layers)]

    @property
    def bias_array(self) -> List[float]:
        """Current value of the bias neuron of every non-output layer."""
        return [self.neurons[layer.bias_index].value for layer in self.layers[:-1]]

    @property
    def weights(self) -> List[float]:
        """A copy of all connection weights."""
        return list(self._weights)

    @weights.setter
    def weights(self, values: Iterable[float]) -> None:
        values = [float(v) for v in values]
        if len(values) != len(self.connections):
            raise FannError(
                ErrorCode.WRONG_PARAMETERS,
                f"weight count mismatch: expected {len(self.connections)}, got {len(values)}",
            )
        self._weights = values

    def randomize_weights(self, min_weight: float, max_weight: float) -> None:
        """Give every connection a random weight in ``[min_weight, max_weight)``."""
        self._weights = [
            shared_generator.uniform(min_weight, max_weight) for _ in self.connections
        ]

    # Evaluation

    def _is_bias(self, layer_index: int, neuron_index: int) -> bool:
        return (
            layer_index < len(self.layers) - 1
            and neuron_index == self.layers[layer_index].bias_index
        )

    def run(self, inputs: Sequence[float]) -> List[float]:
        """Propagate ``inputs`` through the network and return the outputs."""
        inputs = list(inputs)
        if len(inputs) != self.num_input:
            raise FannError(
                ErrorCode.INPUT_MISMATCH,
                f"expected {self.num_input} inputs, got {len(inputs)}",
            )
        first = self.layers[0].first_neuron
        for offset, value in enumerate(inputs):
            self.neurons[first + offset].value = value
        for layer in self.layers[:-1]:
            self.neurons[layer.bias_index].value = 1.0

        for layer_index, layer in enumerate(self.layers[1:], start=1):
            for index in layer.neuron_indices:
                if self._is_bias(layer_index, index):
                    continue
                neuron = self.neurons[index]
                total = sum(
                    self._weights[k] * self.neurons[self.connections[k]].value
                    for k in range(neuron.first_con, neuron.last_con)
                )
                neuron.total = total
                neuron.value = _activate(
                    neuron.activation_function, neuron.activation_steepness, total
                )

        return [self.neurons[i].value for i in self.layers[-1].neuron_indices]

    # Connections and weights

    def _incoming(self) -> Iterable[Tuple[int, int]]:
        """Yield ``(to_neuron, slot)`` for every connection slot in neuron order."""
        for to_neuron, neuron in enumerate(self.neurons):
            for slot in range(neuron.first_con, neuron.last_con):
                yield to_neuron, slot

    def connection_array(self) -> List[Connection]:
        """Every connection with its source, destination and weight."""
        return [
            Connection(self.connections[slot], to_neuron, self._weights[slot])
            for to_neuron, slot in self._incoming()
        ]

    def set_weight_array(self, connections: Iterable[Connection]) -> None:
        """Set the weights of the existing connections that appear in ``connections``."""
        lookup: Dict[Tuple[int, int], float] = {
            (c.from_neuron, c.to_neuron): c.weight for c in connections
        }
        modified = 0
        for to_neuron, slot in self._incoming():
            key = (self.connections[slot], to_neuron)
            if key in lookup:
                self._weights[slot] = lookup[key]
                modified += 1
        if modified == 0:
            raise FannError(ErrorCode.WRONG_PARAMETERS, "no connections were modified")

    def _find_slot(self, from_neuron: int, to_neuron: int) -> int:
        if not 0 <= from_neuron < self.total_neurons:
            raise FannError(ErrorCode.INDEX_OUT_OF_BOUND, f"invalid from_neuron index: {from_neuron}")
        if not 0 <= to_neuron < self.total_neurons:
            raise FannError(ErrorCode.INDEX_OUT_OF_BOUND, f"invalid to_neuron index: {to_neuron}")
        neuron = self.neurons[to_neuron]
        for slot in range(neuron.first_con, neuron.last_con):
            if self.connections[slot] == from_neuron:
                return slot
        raise FannError(
            ErrorCode.WRONG_PARAMETERS,
            f"no connection from neuron {from_neuron} to neuron {to_neuron}",
        )

    def get_weight(self, from_neuron: int, to_neuron: int) -> float:
        """Weight of the connection from ``from_neuron`` to ``to_neuron``."""
        return self._weights[self._find_slot(from_neuron, to_neuron)]

    def set_weight(self, from_neuron: int, to_neuron: int, weight: float) -> None:
        """Set the weight of the connection from ``from_neuron`` to ``to_neuron``."""
        self._weights[self._find_slot(from_neuron, to_neuron)] = weight

    # Activation functions and steepness

    def _check_layer(self, layer: int, what: str) -> Layer:
        if not 0 <= layer < len(self.layers):
            raise FannError(ErrorCode.INDEX_OUT_OF_BOUND, f"invalid layer index: {layer}")
        if layer == 0:
            raise FannError(ErrorCode.WRONG_PARAMETERS, f"cannot use {what} for input layer")
        return self.layers[layer]

    def _neuron_at(self, layer: int, neuron: int, what: str) -> Neuron:
        layer_struct = self._check_layer(layer, what)
        count = self.layer_sizes[layer]
        if not 0 <= neuron < count:
            raise FannError(ErrorCode.INDEX_OUT_OF_BOUND, f"invalid neuron index: {neuron}")
        return self.neurons[layer_struct.first_neuron + neuron]

    def _layer_neurons(self, layer: int, what: str) -> List[Neuron]:
        layer_struct = self._check_layer(layer, what)
        return [
            self.neurons[i] for i in layer_struct.neuron_indices if not self._is_bias(layer, i)
        ]

    def set_activation_function(self, activation: ActivationFunc, layer: int, neuron: int) -> None:
        """Set the activation function of one neuron."""
        self._neuron_at(layer, neuron, "activation function").activation_function = ActivationFunc(
            activation
        )

    def activation_function(self, layer: int, neuron: int) -> ActivationFunc:
        """Activation function of one neuron."""
        return self._neuron_at(layer, neuron, "activation function").activation_function

    def set_activation_function_layer(self, activation: ActivationFunc, layer: int) -> None:
        """Set the activation function of every neuron in a layer."""
        activation = ActivationFunc(activation)
        for neuron in self._layer_neurons(layer, "activation function"):
            neuron.activation_function = activation

    def set_activation_function_hidden(self, activation: ActivationFunc) -> None:
        """Set the activation function of every hidden neuron."""
        for layer in range(1, len(self.layers) - 1):
            self.set_activation_function_layer(activation, layer)

    def set_activation_function_output(self, activation: ActivationFunc) -> None:
        """Set the activation function of every output neuron."""
        self.set_activation_function_layer(activation, len(self.layers) - 1)

    def set_activation_steepness(self, steepness: float, layer: int, neuron: int) -> None:
        """Set the activation steepness of one neuron."""
        self._neuron_at(layer, neuron, "activation steepness").activation_steepness = steepness

    def activation_steepness(self, layer: int, neuron: int) -> float:
        """Activation steepness of one neuron."""
        return self._neuron_at(layer, neuron, "activation steepness").activation_steepness

    def set_activation_steepness_layer(self, steepness: float, layer: int) -> None:
        """Set the activation steepness of every neuron in a layer."""
        for neuron in self._layer_neurons(layer, "activation steepness"):
            neuron.activation_steepness = steepness

    def set_activation_steepness_hidden(self, steepness: float) -> None:
        """Set the activation steepness of every hidden neuron."""
        for layer in range(1, len(self.layers) - 1):
            self.set_activation_steepness_layer(steepness, layer)

    def set_activation_steepness_output(self, steepness: float) -> None:
        """Set the activation steepness of every output neuron."""
        self.set_activation_steepness_layer(steepness, len(self.layers) - 1)

    # Copying

    def copy(self) -> "Network":
        """A deep copy of the network; the training callback is not carried over."""
        return _copy.deepcopy(self, {id(self.callback): None})


def _check_sizes(sizes: Sequence[int]) -> List[int]:
    sizes = [int(s) for s in sizes]
    if len(sizes) < 2:
        raise ValueError("a network needs at least an input and an output layer")
    return sizes


def create_standard(*args: int) -> Network:
    """A fully connected layered network with the given layer sizes."""
    return Network(_check_sizes(args), NetworkType.LAYER, 1.0)


def create_sparse(connection_rate: float, *args: int) -> Network:
    """A layered network in which only a fraction of the connections exist."""
    sizes = _check_sizes(args)
    if connection_rate <= 0 or connection_rate > 1:
        raise ValueError(f"connection rate must be in (0, 1], got {connection_rate}")
    return Network(sizes, NetworkType.LAYER, connection_rate)


def create_shortcut(*args: int) -> Network:
    """A network in which every layer connects to all following layers."""
    return Network(_check_sizes(args), NetworkType.SHORTCUT, 1.0)


def create_cascade(num_input: int, num_output: int) -> Network:
    """A network without hidden layers, set up for cascade training."""
    network = create_standard(num_input, num_output)
    network.cascade_output_change_fraction = DEFAULT_CASCADE_OUTPUT_CHANGE_FRACTION
    network.cascade_output_stagnation_epochs = DEFAULT_CASCADE_OUTPUT_STAGNATION_EPOCHS
    network.cascade_candidate_change_fraction = DEFAULT_CASCADE_CANDIDATE_CHANGE_FRACTION
    network.cascade_candidate_stagnation_epochs = DEFAULT_CASCADE_CANDIDATE_STAGNATION_EPOCHS
    network.cascade_max_out_epochs = DEFAULT_CASCADE_MAX_OUT_EPOCHS
    network.cascade_max_cand_epochs = DEFAULT_CASCADE_MAX_CAND_EPOCHS
    network.cascade_min_out_epochs = DEFAULT_CASCADE_MIN_OUT_EPOCHS
    network.cascade_min_cand_epochs = DEFAULT_CASCADE_MIN_CAND_EPOCHS
    network.cascade_candidate_limit = int(DEFAULT_CASCADE_CANDIDATE_LIMIT)
    network.cascade_num_candidate_groups = DEFAULT_CASCADE_NUM_CANDIDATE_GROUPS
    network.cascade_activation_functions = [
        ActivationFunc.SIGMOID,
        ActivationFunc.SIGMOID_SYMMETRIC,
        ActivationFunc.GAUSSIAN,
        ActivationFunc.GAUSSIAN_SYMMETRIC,
        ActivationFunc.ELLIOT,
        ActivationFunc.ELLIOT_SYMMETRIC,
        ActivationFunc.SIN_SYMMETRIC,
        ActivationFunc.COS_SYMMETRIC,
        ActivationFunc.SIN,
        ActivationFunc.COS,
    ]
    network.cascade_activation_steepnesses = [0.25, 0.5, 0.75, 1.0]
    network.cascade_weight_multiplier = DEFAULT_CASCADE_WEIGHT_MULTIPLIER
    # More conservative steps; batch training avoids output collapse.
    network.rprop_delta_zero = 0.01
    network.rprop_delta_max = 5.0
    network.training_algorithm = TrainAlgorithm.BATCH
    network.learning_rate = DEFAULT_LEARNING_RATE
    return network