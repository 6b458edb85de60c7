from .ref_resolver import resolve_ref

__all__ = ["resolve_ref"]
