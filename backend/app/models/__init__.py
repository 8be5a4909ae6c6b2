from .tables import Base, PropertyRooms, metadata

__all__ = ["Base", "PropertyRooms", "metadata"]
