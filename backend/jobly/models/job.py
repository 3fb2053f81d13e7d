from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import relationship
from jobly.database import Base


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity >= 0 AND equity <= 1.0", name="ck_jobs_equity"),
    )

    id = Column(Integer, primary_key=True)
    # Unique so concurrent creates of one title cannot both land
    title = Column(Text, nullable=False, unique=True)
    salary = Column(Integer)
    equity = Column(Numeric)
    company_handle = Column(
        Text, ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False
    )

    company = relationship("Company", back_populates="jobs")
