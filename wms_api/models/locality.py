# wms_api/models/locality.py
from sqlalchemy import Column, Integer, String
from wms_api.database import Base


# Geographic locality; sellers and carriers point at it through locality_id
class Locality(Base):
    __tablename__ = "localities"

    id = Column(Integer, primary_key=True, index=True)
    postal_code = Column(Integer, unique=True, nullable=False, index=True)
    locality_name = Column(String, nullable=False)
    province_name = Column(String)
    country_name = Column(String)
