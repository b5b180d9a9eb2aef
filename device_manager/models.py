from sqlalchemy import BigInteger, Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Range of the signed 64-bit id column.
MIN_DEVICE_ID = -(2**63)
MAX_DEVICE_ID = 2**63 - 1

# Fields a partial update may overwrite. `id` is assigned by the store and never merged.
DEVICE_MUTABLE_FIELDS: tuple[str, ...] = ("name", "brand")

class Device(Base):
    __tablename__ = "devices"
    # SQLite only autoincrements an INTEGER primary key, which is already 64-bit there
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    brand = Column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"Device(id={self.id!r}, name={self.name!r}, brand={self.brand!r})"
