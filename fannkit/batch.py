"""Parallel inference over many inputs."""

import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from .network import Network


class BatchProcessor:
    """Runs a network over a batch of inputs, in parallel for large batches."""

    def __init__(self, network: Network, workers: int = 0):
        if workers <= 0:
            workers = os.cpu_count() or 1
        self.network = network
        self.workers = workers

    def process_batch(self, inputs: Sequence[Sequence[float]]) -> List[List[float]]:
        """Outputs of the network for every input, in input order."""
        inputs = list(inputs)
        if len(inputs) <= self.workers * 10:
            return [self.network.run(item) for item in inputs]

        chunk_size = -(-len(inputs) // self.workers)
        chunks = [inputs[start:start + chunk_size] for start in range(0, len(inputs), chunk_size)]

        def run_chunk(chunk):
            # Each worker gets its own copy: running a network updates neuron state.
            network = self.network.copy()
            return [network.run(item) for item in chunk]

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            results = pool.map(run_chunk, chunks)
            return [output for chunk_outputs in results for output in chunk_outputs]