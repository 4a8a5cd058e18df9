"""
Minimal GPIO types shared by the handle implementations.
"""
from typing import Literal

PinMode = Literal["input", "output"]
