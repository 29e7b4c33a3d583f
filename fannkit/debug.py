"""Human-readable dumps of a network's connections and parameters."""

import sys
from typing import List, Optional, TextIO

from .enums import ErrorFunc, NetworkType, TrainAlgorithm
from .network import Network

_NETWORK_TYPE_NAMES = {
    NetworkType.LAYER: "LAYER",
    NetworkType.SHORTCUT: "SHORTCUT",
}

_TRAINING_ALGORITHM_NAMES = {
    TrainAlgorithm.INCREMENTAL: "INCREMENTAL",
    TrainAlgorithm.BATCH: "BATCH",
    TrainAlgorithm.RPROP: "RPROP",
    TrainAlgorithm.QUICKPROP: "QUICKPROP",
    TrainAlgorithm.SARPROP: "SARPROP",
}

_ERROR_FUNCTION_NAMES = {
    ErrorFunc.LINEAR: "LINEAR",
    ErrorFunc.TANH: "TANH",
}


def _name(table, value) -> str:
    try:
        return table.get(int(value), "UNKNOWN")
    except (TypeError, ValueError):
        return "UNKNOWN"


def network_type_name(network_type) -> str:
    """Upper-case name of a network type, or "UNKNOWN"."""
    return _name(_NETWORK_TYPE_NAMES, network_type)


def training_algorithm_name(algorithm) -> str:
    """Upper-case name of a training algorithm, or "UNKNOWN"."""
    return _name(_TRAINING_ALGORITHM_NAMES, algorithm)


def error_function_name(error_function) -> str:
    """Upper-case name of an error function, or "UNKNOWN"."""
    return _name(_ERROR_FUNCTION_NAMES, error_function)


def _layer_of(network: Network, neuron_index: int) -> int:
    return next(
        (i for i, layer in enumerate(network.layers) if neuron_index in layer.neuron_indices),
        -1,
    )


def format_connections(network: Network) -> str:
    """Describe the layers and every neuron's incoming connections."""
    lines: List[str] = [
        "Network connections:",
        f"Total neurons: {network.total_neurons}",
        f"Total connections: {network.total_connections}",
        "",
    ]
    for i, (layer, size) in enumerate(zip(network.layers, network.layer_sizes)):
        lines.append(
            f"Layer {i}: {size} neurons (indices {layer.first_neuron}-{layer.last_neuron - 1})"
        )
    lines.append("")

    weights = network.weights
    last_layer = len(network.layers) - 1
    for index, neuron in enumerate(network.neurons):
        count = neuron.last_con - neuron.first_con
        if count <= 0:
            continue
        header = f"Neuron {index} ("
        layer_index = _layer_of(network, index)
        if layer_index >= 0:
            header += f"layer {layer_index}"
            if layer_index < last_layer and index == network.layers[layer_index].bias_index:
                header += ", bias"
        header += f") has {count} connections:"
        lines.append(header)
        for slot in range(neuron.first_con, neuron.last_con):
            lines.append(
                f"  <- Neuron {network.connections[slot]} (weight: {weights[slot]:f})"
            )
    return "\n".join(lines) + "\n"


def print_connections(network: Network, file: Optional[TextIO] = None) -> None:
    """Write :func:`format_connections` to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_connections(network))


def format_parameters(network: Network) -> str:
    """Describe the structure, training and cascade parameters of a network."""
    n = network
    lines: List[str] = [
        "Network parameters:",
        "===================",
        "",
        "Structure:",
        f"  Network type: {network_type_name(n.network_type)}",
        f"  Input neurons: {n.num_input}",
        f"  Output neurons: {n.num_output}",
        f"  Total neurons: {n.total_neurons}",
        f"  Total connections: {n.total_connections}",
        f"  Connection rate: {n.connection_rate:.2f}",
        "",
        "Training parameters:",
        f"  Training algorithm: {training_algorithm_name(n.training_algorithm)}",
        f"  Learning rate: {n.learning_rate:f}",
        f"  Learning momentum: {n.learning_momentum:f}",
        f"  Error function: {error_function_name(n.train_error_function)}",
        f"  Bit fail limit: {n.bit_fail_limit:f}",
    ]

    algorithm = n.training_algorithm
    if algorithm == TrainAlgorithm.RPROP:
        lines += [
            "",
            "RPROP parameters:",
            f"  Increase factor: {n.rprop_increase_factor:f}",
            f"  Decrease factor: {n.rprop_decrease_factor:f}",
            f"  Delta min: {n.rprop_delta_min:f}",
            f"  Delta max: {n.rprop_delta_max:f}",
            f"  Delta zero: {n.rprop_delta_zero:f}",
        ]
    elif algorithm == TrainAlgorithm.QUICKPROP:
        lines += [
            "",
            "Quickprop parameters:",
            f"  Decay: {n.quickprop_decay:f}",
            f"  Mu: {n.quickprop_mu:f}",
        ]
    elif algorithm == TrainAlgorithm.SARPROP:
        lines += [
            "",
            "SARPROP parameters:",
            f"  Weight decay shift: {n.sarprop_weight_decay_shift:f}",
            f"  Step error threshold factor: {n.sarprop_step_error_threshold_factor:f}",
            f"  Step error shift: {n.sarprop_step_error_shift:f}",
            f"  Temperature: {n.sarprop_temperature:f}",
        ]

    lines += [
        "",
        "Cascade parameters:",
        f"  Output change fraction: {n.cascade_output_change_fraction:f}",
        f"  Output stagnation epochs: {int(n.cascade_output_stagnation_epochs)}",
        f"  Candidate change fraction: {n.cascade_candidate_change_fraction:f}",
        f"  Candidate stagnation epochs: {int(n.cascade_candidate_stagnation_epochs)}",
        f"  Max output epochs: {int(n.cascade_max_out_epochs)}",
        f"  Min output epochs: {int(n.cascade_min_out_epochs)}",
        f"  Max candidate epochs: {int(n.cascade_max_cand_epochs)}",
        f"  Min candidate epochs: {int(n.cascade_min_cand_epochs)}",
        f"  Candidate groups: {int(n.cascade_num_candidate_groups)}",
        f"  Candidate limit: {int(n.cascade_candidate_limit)}",
        f"  Weight multiplier: {n.cascade_weight_multiplier:f}",
        "",
        "Current state:",
        f"  MSE: {n.mse:f}",
        f"  Bit fail: {int(n.bit_fail)}",
    ]
    return "\n".join(lines) + "\n"


def print_parameters(network: Network, file: Optional[TextIO] = None) -> None:
    """Write :func:`format_parameters` to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_parameters(network))