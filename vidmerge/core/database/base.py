# File: vidmerge/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. The run-history models inherit from this.
Base = declarative_base()
