from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Float, Integer, Text, text

from sqlalchemy.orm import declarative_base

Base = declarative_base()
metadata = Base.metadata


class PropertyRooms(Base):
    __tablename__ = 'property_rooms'

    id = Column(Integer, primary_key=True)
    user_id = Column(Text, nullable=False, index=True)
    room_type_name = Column(Text, nullable=False)
    floor_number = Column(Integer)
    total_rooms = Column(Integer)
    room_type = Column(Text)
    bed_type = Column(Text)
    room_view = Column(Text)
    smoking_allowed = Column(Boolean, nullable=False, server_default=text('0'))
    extra_bed_allowed = Column(Boolean, nullable=False, server_default=text('0'))
    amenities = Column(JSON, nullable=False, default=list)
    availability_start = Column(Date)
    availability_end = Column(Date)
    base_adult = Column(Integer)
    max_adult = Column(Integer)
    max_children = Column(Integer)
    max_occupancy = Column(Integer)
    base_rate = Column(Float)
    extra_adult_charge = Column(Float)
    child_charge = Column(Float)
    total_rooms_in_property = Column(Integer)
    room_images = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'))
