"""A plain, line-oriented network file format that is easy to inspect."""

import os
from typing import Dict, List, Union

from .enums import ActivationFunc, ErrorCode, NetworkType, TrainAlgorithm
from .network import FannError, Network

_HEADER = "GOFANN_V1"

PathLike = Union[str, "os.PathLike[str]"]


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


def save_simple(network: Network, path: PathLike) -> None:
    """Write ``network`` to ``path`` in the simple format."""
    lines: List[str] = [_HEADER, f"layers={network.num_layers}"]
    for i, size in enumerate(network.layer_sizes):
        lines.append(f"layer_{i}_size={size}")
    lines += [
        f"num_input={network.num_input}",
        f"num_output={network.num_output}",
        f"total_neurons={network.total_neurons}",
        f"total_connections={network.total_connections}",
        f"learning_rate={network.learning_rate:f}",
        f"learning_momentum={network.learning_momentum:f}",
        f"training_algorithm={int(network.training_algorithm)}",
        f"network_type={int(network.network_type)}",
        f"connection_rate={network.connection_rate:f}",
        "NEURONS",
    ]
    for i, neuron in enumerate(network.neurons):
        lines.append(
            f"{i} {neuron.first_con} {neuron.last_con} "
            f"{int(neuron.activation_function)} {neuron.activation_steepness:f}"
        )
    lines.append("CONNECTIONS")
    lines += [f"{i} {source}" for i, source in enumerate(network.connections)]
    lines.append("WEIGHTS")
    lines += [f"{i} {weight:f}" for i, weight in enumerate(network.weights)]

    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def load_simple(path: PathLike) -> Network:
    """Read a network written by :func:`save_simple`."""
    with open(path, encoding="utf-8") as handle:
        lines = iter(handle.read().splitlines())

    if next(lines, None) != _HEADER:
        raise FannError(ErrorCode.WRONG_CONFIG_VERSION, "invalid file format")

    params: Dict[str, str] = {}
    layer_sizes: List[int] = []
    for line in lines:
        if line == "NEURONS":
            break
        key, sep, value = line.partition("=")
        if not sep:
            continue
        params[key] = value
        if key.startswith("layer_") and key.endswith("_size"):
            layer_sizes.append(_to_int(value))

    network_type = NetworkType.LAYER
    if "network_type" in params:
        network_type = NetworkType(_to_int(params["network_type"]))
    connection_rate = 1.0
    if "connection_rate" in params:
        connection_rate = _to_float(params["connection_rate"])

    network = Network(layer_sizes, network_type, connection_rate)

    if "learning_rate" in params:
        network.learning_rate = _to_float(params["learning_rate"])
    if "learning_momentum" in params:
        network.learning_momentum = _to_float(params["learning_momentum"])
    if "training_algorithm" in params:
        network.training_algorithm = _enum_or_int(
            TrainAlgorithm, _to_int(params["training_algorithm"])
        )

    for line in lines:
        if line == "CONNECTIONS":
            break
        fields = line.split()
        if len(fields) < 5:
            continue
        index = _to_int(fields[0])
        if 0 <= index < len(network.neurons):
            neuron = network.neurons[index]
            neuron.first_con = _to_int(fields[1])
            neuron.last_con = _to_int(fields[2])
            neuron.activation_function = _enum_or_int(ActivationFunc, _to_int(fields[3]))
            neuron.activation_steepness = _to_float(fields[4])

    for line in lines:
        if line == "WEIGHTS":
            break
        fields = line.split()
        if len(fields) < 2:
            continue
        index = _to_int(fields[0])
        if 0 <= index < len(network.connections):
            network.connections[index] = _to_int(fields[1])

    weights = network.weights
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            continue
        index = _to_int(fields[0])
        if 0 <= index < len(weights):
            weights[index] = _to_float(fields[1])
    network.weights = weights

    return network