from sqlalchemy import CheckConstraint, Column, Integer, Text
from sqlalchemy.orm import relationship
from jobly.database import Base


class Company(Base):
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle = Column(Text, primary_key=True)
    name = Column(Text, nullable=False, unique=True)
    description = Column(Text, nullable=False)
    num_employees = Column(Integer)
    logo_url = Column(Text)

    jobs = relationship("Job", back_populates="company", passive_deletes=True)
