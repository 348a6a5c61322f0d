"""I/O handling for data points, inlier lists and JSON output."""

import json
import numpy as np
from pathlib import Path
from typing import Dict, TextIO


def read_ascii_floats(stream: TextIO) -> np.ndarray:
    """Read every whitespace separated number of a text stream, skipping other tokens."""
    values = []
    for line in stream:
        for token in line.split():
            try:
                values.append(float(token))
            except ValueError:
                continue
    return np.array(values, dtype=np.float64)


def write_inliers(stream: TextIO, data: np.ndarray, mask: np.ndarray):
    """Write each inlier point on its own line."""
    for point in np.asarray(data)[np.asarray(mask, dtype=bool)]:
        stream.write(" ".join(f"{v:g}" for v in point) + "\n")


class JSONWriter:
    """Write fitting results to JSON."""
    
    @staticmethod
    def save_results(output_dict: Dict, output_path: str, indent: int = 2):
        """Save results to JSON file."""
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(output_dict, f, indent=indent)
    
    @staticmethod
    def load_results(input_path: str) -> Dict:
        """Load results from JSON file."""
        with open(input_path, 'r') as f:
            return json.load(f)
