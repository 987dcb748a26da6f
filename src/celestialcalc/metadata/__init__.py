from .embedder import embed_metadata, extract_metadata

__all__ = ["embed_metadata", "extract_metadata"]
