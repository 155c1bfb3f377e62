# /qa_suite/db/base.py

# Central registry for all SQLAlchemy models.
# Importing them here ensures Base.metadata knows about every table, both for
# the startup `create_all` call and for Alembic's auto-generation scan.

from .base_class import Base

from .models.session_models import ClientSession, UserPreferences
from .models.generation_models import Generation
from .models.bug_report_models import BugReport
