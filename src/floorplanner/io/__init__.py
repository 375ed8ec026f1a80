"""Reading and writing floor plan documents."""

from .document import DocumentError, decode_plan, encode_plan, load_plan, save_plan

__all__ = ["DocumentError", "decode_plan", "encode_plan", "load_plan", "save_plan"]
