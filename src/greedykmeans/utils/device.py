"""
Device selection utilities for GPU/CPU computation.
"""

from typing import Optional, Union
import torch
import warnings


def get_default_device() -> torch.device:
    """Get the default device based on availability.

    Returns:
        Default device (cuda if available, else cpu)
    """
    # MPS is skipped: it has no float64 support
    if torch.cuda.is_available():
        return torch.device('cuda')
    return torch.device('cpu')


def parse_device(device: Optional[Union[str, torch.device]] = None) -> torch.device:
    """Parse device specification.

    Args:
        device: Device specification
            - None or 'auto': Use best available
            - 'cpu': Use CPU
            - 'cuda' / 'cuda:X': Use a CUDA device, falling back to CPU
            - torch.device: Use as-is

    Returns:
        Parsed device
    """
    if device is None or device == 'auto':
        return get_default_device()

    if isinstance(device, torch.device):
        return device

    if isinstance(device, str):
        if device == 'cpu':
            return torch.device('cpu')
        elif device.startswith('cuda'):
            if not torch.cuda.is_available():
                warnings.warn("CUDA not available, falling back to CPU")
                return torch.device('cpu')
            return torch.device(device)
        else:
            raise ValueError(f"Unknown device: {device}")

    raise TypeError(f"device must be str or torch.device, got {type(device)}")
