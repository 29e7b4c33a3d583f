"""Enumerations for activation functions, algorithms, topologies and errors."""

from enum import IntEnum


class ActivationFunc(IntEnum):
    """Activation functions a neuron may use."""

    LINEAR = 0
    THRESHOLD = 1
    THRESHOLD_SYMMETRIC = 2
    SIGMOID = 3
    SIGMOID_STEPWISE = 4
    SIGMOID_SYMMETRIC = 5
    SIGMOID_SYMMETRIC_STEPWISE = 6
    GAUSSIAN = 7
    GAUSSIAN_SYMMETRIC = 8
    GAUSSIAN_STEPWISE = 9
    ELLIOT = 10
    ELLIOT_SYMMETRIC = 11
    LINEAR_PIECE = 12
    LINEAR_PIECE_SYMMETRIC = 13
    SIN_SYMMETRIC = 14
    COS_SYMMETRIC = 15
    SIN = 16
    COS = 17
    LINEAR_PIECE_RECT = 18
    LINEAR_PIECE_RECT_LEAKY = 19


class TrainAlgorithm(IntEnum):
    """Training algorithms."""

    INCREMENTAL = 0
    BATCH = 1
    RPROP = 2
    QUICKPROP = 3
    SARPROP = 4


class ErrorFunc(IntEnum):
    """Error functions applied during training."""

    LINEAR = 0
    TANH = 1


class NetworkType(IntEnum):
    """Network topologies."""

    LAYER = 0  # each layer connects only to the next one
    SHORTCUT = 1  # each layer connects to every following layer


class ErrorCode(IntEnum):
    """Error conditions a network may report."""

    NO_ERROR = 0
    CANT_OPEN_CONFIG = 1
    CANT_OPEN_TD = 2
    CANT_READ_CONFIG = 3
    CANT_READ_TD = 4
    WRONG_CONFIG_VERSION = 5
    WRONG_TD_VERSION = 6
    CANT_READ_NEURON = 7
    CANT_READ_CONNECTION = 8
    WRONG_NUM_CONNECTIONS = 9
    CANT_OPEN_WRITER = 10
    CANT_WRITE_CONFIG = 11
    CANT_WRITE_TD = 12
    CANT_ALLOCATE_MEM = 13
    CANT_TRAIN_ACTIVATION = 14
    CANT_USE_ACTIVATION = 15
    TRAIN_DATA_MISMATCH = 16
    CANT_USE_TRAIN_ALG = 17
    TRAIN_DATA_SUBSET = 18
    INDEX_OUT_OF_BOUND = 19
    SCALE_NOT_PRESENT = 20
    INPUT_MISMATCH = 21
    OUTPUT_MISMATCH = 22
    WRONG_PARAMETERS = 23