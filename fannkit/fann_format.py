"""Reading and writing networks in the FANN configuration file format."""

import os
import struct
from typing import Dict, Iterator, List, Union

from .enums import ActivationFunc, ErrorCode, ErrorFunc, NetworkType, TrainAlgorithm
from .network import FannError, Network

FILE_VERSION = "FANN_FLO_2.1"

PathLike = Union[str, "os.PathLike[str]"]


def _f32(x: float) -> float:
    """Round ``x`` to single precision."""
    return struct.unpack("f", struct.pack("f", float(x)))[0]


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _enum_or_int(enum_type, value: int):
    try:
        return enum_type(value)
    except ValueError:
        return value


def _is_bias(network: Network, layer_index: int, neuron_index: int) -> bool:
    return (
        layer_index < len(network.layers) - 1
        and neuron_index == network.layers[layer_index].bias_index
    )


def save(network: Network, path: PathLike) -> None:
    """Write ``network`` to ``path`` in the floating-point FANN format."""
    n = network
    out: List[str] = [
        f"{FILE_VERSION}\n",
        f"num_layers={n.num_layers}\n",
        f"learning_rate={_f32(n.learning_rate):f}\n",
        f"connection_rate={_f32(n.connection_rate):f}\n",
        f"network_type={int(n.network_type)}\n",
        f"learning_momentum={_f32(n.learning_momentum):f}\n",
        f"training_algorithm={int(n.training_algorithm)}\n",
        f"train_error_function={int(n.train_error_function)}\n",
        f"train_stop_function={int(n.train_stop_function)}\n",
        f"cascade_output_change_fraction={_f32(n.cascade_output_change_fraction):f}\n",
        f"quickprop_decay={_f32(n.quickprop_decay):f}\n",
        f"quickprop_mu={_f32(n.quickprop_mu):f}\n",
        f"rprop_increase_factor={_f32(n.rprop_increase_factor):f}\n",
        f"rprop_decrease_factor={_f32(n.rprop_decrease_factor):f}\n",
        f"rprop_delta_min={_f32(n.rprop_delta_min):f}\n",
        f"rprop_delta_max={_f32(n.rprop_delta_max):f}\n",
        f"rprop_delta_zero={_f32(n.rprop_delta_zero):f}\n",
        f"cascade_output_stagnation_epochs={int(n.cascade_output_stagnation_epochs)}\n",
        f"cascade_candidate_change_fraction={_f32(n.cascade_candidate_change_fraction):f}\n",
        f"cascade_candidate_stagnation_epochs={int(n.cascade_candidate_stagnation_epochs)}\n",
        f"cascade_max_out_epochs={int(n.cascade_max_out_epochs)}\n",
        f"cascade_min_out_epochs={int(n.cascade_min_out_epochs)}\n",
        f"cascade_max_cand_epochs={int(n.cascade_max_cand_epochs)}\n",
        f"cascade_min_cand_epochs={int(n.cascade_min_cand_epochs)}\n",
        f"cascade_num_candidate_groups={int(n.cascade_num_candidate_groups)}\n",
        f"bit_fail_limit={_f32(n.bit_fail_limit):f}\n",
        f"cascade_candidate_limit={_f32(n.cascade_candidate_limit):f}\n",
        f"cascade_weight_multiplier={_f32(n.cascade_weight_multiplier):f}\n",
        f"cascade_activation_functions_count={len(n.cascade_activation_functions)}\n",
        "cascade_activation_functions="
        + " ".join(str(int(fn)) for fn in n.cascade_activation_functions)
        + "\n",
        f"cascade_activation_steepnesses_count={len(n.cascade_activation_steepnesses)}\n",
        "cascade_activation_steepnesses="
        + " ".join(f"{_f32(s):f}" for s in n.cascade_activation_steepnesses)
        + "\n",
        "layer_sizes=" + " ".join(str(size) for size in n.layer_sizes) + "\n",
        "scale_included=0\n",
        "neurons (num_inputs, activation_function, activation_steepness)=\n",
    ]

    for layer_index, layer in enumerate(n.layers):
        for index in layer.neuron_indices:
            if _is_bias(n, layer_index, index):
                out.append("(1, 0, 0.000000) ")
            else:
                neuron = n.neurons[index]
                out.append(
                    f"({neuron.last_con - neuron.first_con}, "
                    f"{int(neuron.activation_function)}, "
                    f"{_f32(neuron.activation_steepness):f}) "
                )
        out.append("\n")

    out.append("connections (connected_to_neuron, weight)=\n")
    weights = n.weights
    for layer_index in range(1, len(n.layers)):
        for index in n.layers[layer_index].neuron_indices:
            if _is_bias(n, layer_index, index):
                out.append("(0, 0.000000) \n")
                continue
            out.append("\n")
            neuron = n.neurons[index]
            for slot in range(neuron.first_con, neuron.last_con):
                out.append(f"({n.connections[slot]}, {_f32(weights[slot]):f}) ")

    with open(path, "w", encoding="utf-8") as handle:
        handle.write("".join(out))


def save_fixed(network: Network, path: PathLike, decimal_point: int) -> None:
    """Write ``network`` to ``path`` with values scaled to fixed point.

    Every real value is multiplied by ``2 ** decimal_point`` and truncated.
    """
    if decimal_point < 0:
        raise ValueError(f"decimal point must not be negative, got {decimal_point}")
    n = network
    scale = 1 << decimal_point
    multiplier = float(scale)

    def fx32(value: float) -> int:
        return int(_f32(value) * multiplier)

    def fx(value: float) -> int:
        return int(float(value) * multiplier)

    out: List[str] = [
        f"FANN_FIX_{scale}.0\n",
        f"num_layers={n.num_layers}\n",
        f"learning_rate={fx32(n.learning_rate)}\n",
        f"connection_rate={fx32(n.connection_rate)}\n",
        f"network_type={int(n.network_type)}\n",
        f"learning_momentum={fx32(n.learning_momentum)}\n",
        f"training_algorithm={int(n.training_algorithm)}\n",
        f"train_error_function={int(n.train_error_function)}\n",
        f"train_stop_function={int(n.train_stop_function)}\n",
        f"cascade_output_change_fraction={fx32(n.cascade_output_change_fraction)}\n",
        f"quickprop_decay={fx32(n.quickprop_decay)}\n",
        f"quickprop_mu={fx32(n.quickprop_mu)}\n",
        f"rprop_increase_factor={fx32(n.rprop_increase_factor)}\n",
        f"rprop_decrease_factor={fx32(n.rprop_decrease_factor)}\n",
        f"rprop_delta_min={fx32(n.rprop_delta_min)}\n",
        f"rprop_delta_max={fx32(n.rprop_delta_max)}\n",
        f"rprop_delta_zero={fx32(n.rprop_delta_zero)}\n",
        f"cascade_output_stagnation_epochs={int(n.cascade_output_stagnation_epochs)}\n",
        f"cascade_candidate_change_fraction={fx32(n.cascade_candidate_change_fraction)}\n",
        f"cascade_candidate_stagnation_epochs={int(n.cascade_candidate_stagnation_epochs)}\n",
        f"cascade_max_out_epochs={int(n.cascade_max_out_epochs)}\n",
        f"cascade_min_out_epochs={int(n.cascade_min_out_epochs)}\n",
        f"cascade_max_cand_epochs={int(n.cascade_max_cand_epochs)}\n",
        f"cascade_min_cand_epochs={int(n.cascade_min_cand_epochs)}\n",
        f"cascade_num_candidate_groups={int(n.cascade_num_candidate_groups)}\n",
        f"bit_fail_limit={fx(n.bit_fail_limit)}\n",
        f"cascade_candidate_limit={fx(n.cascade_candidate_limit)}\n",
        f"cascade_weight_multiplier={fx(n.cascade_weight_multiplier)}\n",
        f"cascade_activation_functions_count={len(n.cascade_activation_functions)}\n",
        "".join(f"{int(fn)} " for fn in n.cascade_activation_functions) + "\n",
        f"cascade_activation_steepnesses_count={len(n.cascade_activation_steepnesses)}\n",
        "".join(f"{fx(s)} " for s in n.cascade_activation_steepnesses) + "\n",
        "layer_sizes:" + "".join(f"{layer.size} " for layer in n.layers) + "\n",
        "scale_included=0\n",
        "neurons (num_inputs, activation_function, activation_steepness):\n",
    ]
    for neuron in n.neurons:
        out.append(
            f"({neuron.last_con - neuron.first_con}, "
            f"{int(neuron.activation_function)}, "
            f"{fx(neuron.activation_steepness)})\n"
        )
    out.append("connections (connected_to_neuron, weight):\n")
    weights = n.weights
    for neuron in n.neurons:
        for slot in range(neuron.first_con, neuron.last_con):
            out.append(f"({n.connections[slot]}, {fx(weights[slot])})\n")

    with open(path, "w", encoding="utf-8") as handle:
        handle.write("".join(out))


def _entries(line: str) -> Iterator[List[str]]:
    """Split a line of ``(a, b, ...)`` groups into their comma-separated fields."""
    for chunk in line.split(") "):
        chunk = chunk.strip()
        if chunk:
            yield chunk.strip("()").split(", ")


_FLOAT_PARAMS = (
    "learning_rate",
    "learning_momentum",
    "rprop_increase_factor",
    "rprop_decrease_factor",
    "rprop_delta_min",
    "rprop_delta_max",
    "rprop_delta_zero",
    "quickprop_decay",
    "quickprop_mu",
    "cascade_output_change_fraction",
    "cascade_candidate_change_fraction",
    "bit_fail_limit",
    "cascade_weight_multiplier",
)

_INT_PARAMS = (
    "cascade_output_stagnation_epochs",
    "cascade_candidate_stagnation_epochs",
    "cascade_max_out_epochs",
    "cascade_min_out_epochs",
    "cascade_max_cand_epochs",
    "cascade_min_cand_epochs",
    "cascade_num_candidate_groups",
)


def load(path: PathLike) -> Network:
    """Read a network written by :func:`save`."""
    with open(path, encoding="utf-8") as handle:
        lines = iter(handle.read().splitlines())

    version = next(lines, None)
    if version is None:
        raise FannError(ErrorCode.CANT_READ_CONFIG, "can't read config file header")
    if not version.startswith("FANN"):
        raise FannError(ErrorCode.WRONG_CONFIG_VERSION, "wrong config file format")

    config: Dict[str, str] = {}
    layer_sizes: List[int] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line.startswith("neurons"):
            break
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key, value = key.strip(), value.strip()
        config[key] = value
        if key == "layer_sizes":
            for size in value.split():
                try:
                    layer_sizes.append(int(size))
                except ValueError:
                    raise FannError(
                        ErrorCode.CANT_READ_CONFIG, f"invalid layer size: {size}"
                    ) from None

    if len(layer_sizes) < 2:
        raise FannError(ErrorCode.CANT_READ_CONFIG, "invalid layer configuration")

    network_type = NetworkType.LAYER
    if "network_type" in config:
        network_type = NetworkType(_to_int(config["network_type"]))
    connection_rate = 1.0
    if "connection_rate" in config:
        connection_rate = _to_float(config["connection_rate"])

    network = Network(layer_sizes, network_type, connection_rate)

    for name in _FLOAT_PARAMS:
        if name in config:
            setattr(network, name, _to_float(config[name]))
    for name in _INT_PARAMS:
        if name in config:
            setattr(network, name, _to_int(config[name]))
    if "training_algorithm" in config:
        network.training_algorithm = _enum_or_int(
            TrainAlgorithm, _to_int(config["training_algorithm"])
        )
    if "train_error_function" in config:
        network.train_error_function = _enum_or_int(
            ErrorFunc, _to_int(config["train_error_function"])
        )
    if "cascade_candidate_limit" in config:
        network.cascade_candidate_limit = int(_to_float(config["cascade_candidate_limit"]))

    for neuron in network.neurons:
        neuron.first_con = neuron.last_con = 0
        neuron.activation_function = ActivationFunc.SIGMOID
        neuron.activation_steepness = 0.5

    # Input neurons receive no connections; the count written for the input
    # bias has no matching entry in the connection section.
    input_end = network.layers[0].last_neuron
    total = 0
    index = 0
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line.startswith("connections"):
            break
        for parts in _entries(line):
            if len(parts) < 3 or index >= len(network.neurons):
                continue
            neuron = network.neurons[index]
            count = _to_int(parts[0]) if index >= input_end else 0
            neuron.first_con = total
            total += count
            neuron.last_con = total
            neuron.activation_function = _enum_or_int(ActivationFunc, _to_int(parts[1]))
            neuron.activation_steepness = _to_float(parts[2])
            index += 1

    connections = [0] * total
    weights = [0.0] * total
    slot = 0
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        for parts in _entries(line):
            if len(parts) < 2 or slot >= total:
                continue
            connections[slot] = _to_int(parts[0])
            weights[slot] = _to_float(parts[1])
            slot += 1

    network.connections = connections
    network.weights = weights
    return network