"""archlab: domain graph validator and Clean Architecture code emitter."""

__version__ = "0.1.0"
