"""Neurons, layers, connection topology and the weight-initialisation generator."""

import struct
from dataclasses import dataclass
from typing import List, Sequence

from .constants import DEFAULT_ACTIVATION_STEEPNESS_HIDDEN
from .enums import ActivationFunc, NetworkType

_UINT64_MASK = (1 << 64) - 1
_MANTISSA_MASK = 0x1FFFFFFFFFFFFF
_TWO_POW_53 = float(1 << 53)


def _f32(x: float) -> float:
    """Round ``x`` to single precision."""
    return struct.unpack("f", struct.pack("f", x))[0]


@dataclass
class Neuron:
    """A neuron and the range of its incoming connections."""

    first_con: int = 0
    last_con: int = 0
    total: float = 0.0
    value: float = 0.0
    activation_steepness: float = DEFAULT_ACTIVATION_STEEPNESS_HIDDEN
    activation_function: ActivationFunc = ActivationFunc.SIGMOID

    @property
    def num_connections(self) -> int:
        """Number of incoming connections."""
        return self.last_con - self.first_con


@dataclass(frozen=True)
class Layer:
    """A contiguous run of neurons; ``last_neuron`` is exclusive."""

    first_neuron: int
    last_neuron: int

    @property
    def size(self) -> int:
        """Number of neurons in the layer, bias neuron included."""
        return self.last_neuron - self.first_neuron

    @property
    def neuron_indices(self) -> range:
        """Indices of the neurons in the layer."""
        return range(self.first_neuron, self.last_neuron)

    @property
    def bias_index(self) -> int:
        """Index of the last neuron, which is the bias in non-output layers."""
        return self.last_neuron - 1


@dataclass
class LinearCongruential:
    """Small 64-bit linear congruential generator used for weight initialisation."""

    state: int = 1

    def next(self) -> int:
        """Advance the generator and return the new 64-bit state."""
        self.state = (self.state * 1664525 + 1013904223) & _UINT64_MASK
        return self.state

    def uniform(self, low: float, high: float) -> float:
        """Return a value in ``[low, high)`` drawn from the next state."""
        fraction = (self.next() & _MANTISSA_MASK) / _TWO_POW_53
        return low + fraction * (high - low)


shared_generator = LinearCongruential()


def build_layers(sizes: Sequence[int]) -> List[Layer]:
    """Lay out layers of the given sizes, adding a bias neuron to all but the last."""
    sizes = list(sizes)
    if len(sizes) < 2:
        raise ValueError("a network needs at least an input and an output layer")
    layers = []
    index = 0
    last = len(sizes) - 1
    for position, size in enumerate(sizes):
        first = index
        index += size
        if position != last:
            index += 1
        layers.append(Layer(first, index))
    return layers


def _destination_count(layer: Layer, is_output: bool) -> int:
    return layer.size if is_output else layer.size - 1


def count_connections(
    layers: Sequence[Layer], network_type: NetworkType, connection_rate: float
) -> int:
    """Number of connection slots the topology reserves."""
    rate = _f32(connection_rate)
    last = len(layers) - 1
    total = 0
    if network_type == NetworkType.LAYER:
        for src, dst in zip(layers, layers[1:]):
            dst_index = layers.index(dst) if False else None  # noqa: F841
        for i in range(last):
            sources = layers[i].size
            targets = _destination_count(layers[i + 1], i + 1 == last)
            total += int(_f32(_f32(float(sources * targets)) * rate))
    elif network_type == NetworkType.SHORTCUT:
        for i in range(last):
            sources = layers[i].size
            for j in range(i + 1, len(layers)):
                targets = _destination_count(layers[j], j == last)
                total += int(_f32(_f32(float(sources * targets)) * rate))
    return total


def build_connections(
    layers: Sequence[Layer],
    neurons: List[Neuron],
    network_type: NetworkType,
    connection_rate: float,
) -> List[int]:
    """Wire the neurons and return the source neuron of every connection slot.

    Each receiving neuron's ``first_con``/``last_con`` are set in place.
    Slots the topology reserves but does not fill hold neuron 0.
    """
    rate = _f32(connection_rate)
    sparse = rate < 1.0
    connections = [0] * count_connections(layers, network_type, connection_rate)
    last = len(layers) - 1
    index = 0

    if network_type == NetworkType.LAYER:
        for i in range(last):
            src_layer, dst_layer = layers[i], layers[i + 1]
            limit = int(_f32(float(src_layer.size) * rate))
            for dst in dst_layer.neuron_indices:
                if i + 1 < last and dst == dst_layer.bias_index:
                    continue
                neuron = neurons[dst]
                neuron.first_con = index
                for src in src_layer.neuron_indices:
                    if sparse and index - neuron.first_con >= limit:
                        break
                    connections[index] = src
                    index += 1
                neuron.last_con = index
    elif network_type == NetworkType.SHORTCUT:
        for i in range(last):
            src_layer = layers[i]
            limit = int(_f32(float(src_layer.size) * rate))
            for j in range(i + 1, len(layers)):
                dst_layer = layers[j]
                for dst in dst_layer.neuron_indices:
                    if j < last and dst == dst_layer.bias_index:
                        continue
                    neuron = neurons[dst]
                    if neuron.first_con == 0 and index > 0:
                        neuron.first_con = index
                    for src in src_layer.neuron_indices:
                        if sparse and index - neuron.first_con >= limit:
                            break
                        connections[index] = src
                        index += 1
                    neuron.last_con = index
    return connections