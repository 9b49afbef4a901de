import logging
import os
import sys
import numpy as np

# Directory for logs and run artefacts (plots, run metadata)
OUTPUT_DIR = "output"


class ShapeMismatch(ValueError):
    """Raised when a vector or matrix does not have the length/shape a layer or loss expects."""


def to_float_array(values, what="values", copy=False):
    """Converts values to a float64 array; ragged input raises ShapeMismatch."""
    try:
        if copy:
            return np.array(values, dtype=np.float64)
        return np.asarray(values, dtype=np.float64)
    except ValueError as e:
        raise ShapeMismatch(f"{what} is not a rectangular array of numbers: {e}") from e


def setup_logging(log_file_name: str = "run.log", output_dir: str = OUTPUT_DIR):
    """
    Configures logging to write to a file in output_dir and to the console.

    Args:
        log_file_name (str): The name of the log file to create (e.g. "train.log")
        output_dir (str): Directory the log file is written to
    """
    logger = logging.getLogger()
    logger.setLevel(logging.INFO)

    # Clear existing handlers (re-running in the same interpreter)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    ensure_dir(output_dir)
    log_file_path = os.path.join(output_dir, log_file_name)

    file_handler = logging.FileHandler(log_file_path, mode='w')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter('%(message)s'))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logging.info(f"Logging configured. Output will be saved to {log_file_path}")
    return log_file_path


def ensure_dir(path):
    os.makedirs(path, exist_ok=True)
