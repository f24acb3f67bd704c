from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Models import Base from here; app.db.models imports every model so that
# Base.metadata knows all tables before create_all()
