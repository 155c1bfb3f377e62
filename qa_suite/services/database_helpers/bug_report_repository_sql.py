# /qa_suite/services/database_helpers/bug_report_repository_sql.py

from typing import List, Dict
from sqlalchemy.orm import Session
from qa_suite.db.models.bug_report_models import BugReport

class BugReportRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_bug_report(self, record: Dict) -> BugReport:
        new_report = BugReport(**record)
        self.db.add(new_report)
        self.db.commit()
        self.db.refresh(new_report)
        return new_report

    def get_bug_reports_by_session_id(self, session_id: str) -> List[BugReport]:
        return (
            self.db.query(BugReport)
            .filter(BugReport.session_id == session_id)
            .order_by(BugReport.created_at.desc())
            .all()
        )
