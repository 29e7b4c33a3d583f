# fannkit

fannkit builds and runs feed-forward neural networks. A network is laid out in
layers. Every layer except the output layer ends in a bias neuron. Each neuron has
an activation function and a steepness, and all connection weights are kept in one
flat list. The package needs nothing outside the standard library.

## Modules

- `fannkit.network`: the `Network` class and the constructors `create_standard`,
  `create_sparse`, `create_shortcut` and `create_cascade`. `create_cascade` builds a
  network with no hidden layer and sets the cascade parameters and batch training.
  The module also defines `Connection`, a from/to/weight record, and `FannError`,
  an exception that carries an `ErrorCode` in its `code` attribute.
- `fannkit.activation`: `activation`, `activation_derivative` and
  `activation_name` for the twenty activation functions.
- `fannkit.enums`: `ActivationFunc`, `TrainAlgorithm`, `ErrorFunc`, `NetworkType`
  and `ErrorCode`.
- `fannkit.topology`: `Neuron`, `Layer`, `build_layers`, `count_connections`,
  `build_connections`, and `LinearCongruential`, the generator used to draw initial
  weights.
- `fannkit.constants`: default parameter values.
- `fannkit.fann_format`: `save`, `save_fixed` and `load` for the FANN text format.
- `fannkit.simple_format`: `save_simple` and `load_simple` for a plain,
  line-oriented format.
- `fannkit.batch`: `BatchProcessor`, which runs a network over many inputs.
  Batches larger than ten times the worker count are split across threads, and
  each thread works on its own copy of the network.
- `fannkit.debug`: `format_connections`, `format_parameters`, and
  `print_connections` and `print_parameters`, which write these dumps to a file
  or to standard output.

## Working with a network

- `run(inputs)` propagates the inputs and returns the outputs.
- `randomize_weights(low, high)` gives every connection a new random weight.
- The `weights` property returns a copy of every weight. Assigning a list of the
  same length replaces them.
- `get_weight` and `set_weight` read and change a single connection.
  `connection_array` and `set_weight_array` do the same for many connections at once.
- Activation functions and steepnesses can be set for one neuron, for a layer, for
  all hidden layers or for the output layer. `activation_function` and
  `activation_steepness` read them back.
- `num_input`, `num_output`, `total_neurons`, `total_connections`, `num_layers`,
  `layer_sizes` and `bias_array` describe the structure.
- `copy()` returns a deep copy. The training callback is not copied.

## Errors

`run` raises `FannError` with `ErrorCode.INPUT_MISMATCH` when the number of inputs
is wrong. The weight and activation accessors raise `FannError` for a layer or
neuron index that is out of range, for the input layer, and for a connection that
does not exist. `create_sparse` raises `ValueError` for a connection rate outside
(0, 1]. All constructors raise `ValueError` when given fewer than two layers.

## Installation

```
pip install fannkit
```

To run the test suite:

```
pip install "fannkit[test]"
pytest
```

## Example

```python
from fannkit.network import create_standard
from fannkit.enums import ActivationFunc
from fannkit.fann_format import save, load
from fannkit.batch import BatchProcessor
from fannkit.debug import format_parameters

net = create_standard(2, 4, 1)           # 2 inputs, 4 hidden, 1 output
net.set_activation_function_hidden(ActivationFunc.SIGMOID_SYMMETRIC)
net.randomize_weights(-1.0, 1.0)

print(net.run([0.0, 1.0]))

save(net, "xor.net")
same = load("xor.net")
print(same.run([0.0, 1.0]))

outputs = BatchProcessor(net, 4).process_batch([[0, 0], [0, 1], [1, 0], [1, 1]])

print(format_parameters(net))
```

## File formats

`fannkit.fann_format.save` writes the floating-point layout that starts with
`FANN_FLO_2.1`, and `load` reads it back. It does not write or read input and
output scaling; `scale_included` is always 0. `save_fixed(network, path,
decimal_point)` writes the parameters and weights as integers scaled by
`2 ** decimal_point` under a `FANN_FIX_<scale>.0` header. There is no reader for
this fixed-point file.

`fannkit.simple_format.save_simple` writes the layer sizes, the main parameters,
the neurons, the connections and the weights as plain lines under a `GOFANN_V1`
header. `load_simple` reads that format back.

## What fannkit does not do

Networks hold training parameters: learning rate, momentum, RPROP, Quickprop,
SARPROP and cascade settings. They can be set, copied, printed and saved, but
fannkit has no training routines. It has no epoch training, no cascade growth and
no test-error measurement. It also has no training-data reader. Weights come from
`randomize_weights`, from direct assignment or from a saved file. fannkit has no
command-line program.