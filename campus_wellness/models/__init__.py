from .user import User, UserRole
from .checkin import DailyCheckIn
from .assignment import Assignment
from .academic import AcademicRecord
from .burnout_score import BurnoutScore
from .predictive_alert import PredictiveAlertRecord
from .recommendation import RecommendationRecord
from .counselor_session import CounselorSession, SessionStatus, SessionType

__all__ = [
    "User",
    "UserRole",
    "DailyCheckIn",
    "Assignment",
    "AcademicRecord",
    "BurnoutScore",
    "PredictiveAlertRecord",
    "RecommendationRecord",
    "CounselorSession",
    "SessionStatus",
    "SessionType",
]
