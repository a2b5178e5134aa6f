"""Request/response models shared by every transport."""

from .parameters import ParameterStore
from .request import Request
from .response import Response

__all__ = ["ParameterStore", "Request", "Response"]
