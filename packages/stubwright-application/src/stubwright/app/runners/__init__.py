from .generate import GenerateRunner

__all__ = ["GenerateRunner"]
