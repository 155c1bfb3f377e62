from .session_models import ClientSession, UserPreferences
from .generation_models import Generation
from .bug_report_models import BugReport
