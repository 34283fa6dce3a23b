from backend.engine.serializer.serializer import BoardSerializer, chunk_by_length

__all__ = ["BoardSerializer", "chunk_by_length"]
